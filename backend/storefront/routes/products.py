import logging

from flask import Blueprint, jsonify, request

from ..models.filter_state import FilterState
from ..services.presentation import results_label
from . import get_card_builder, get_product_service, parse_positive_int

logger = logging.getLogger(__name__)

products_bp = Blueprint('products', __name__)


@products_bp.route('/', methods=['GET'])
def list_products():
    """目录列表

    Query Parameters:
    - category: iphone / accesorio / repuesto / all
    - series: iPhone series number or all
    - condition: nuevo / certificado / all
    - q: search text (name and spec tags)
    - filter: one-shot category or condition pre-selection
    """
    try:
        service = get_product_service()
        cards = get_card_builder()
        state = FilterState.from_args(request.args)
        products = service.filter_products(state)
        return jsonify({
            'success': True,
            'data': [cards.card(p, i) for i, p in enumerate(products)],
            'count': len(products),
            'total': service.catalog.count,
            'filters': state.to_dict(),
            'message': results_label(len(products))
        })
    except Exception as e:
        logger.exception('Catalog listing failed')
        return jsonify({
            'success': False,
            'data': [],
            'message': str(e)
        }), 500


@products_bp.route('/filters', methods=['GET'])
def get_filter_options():
    """Selectable filter values"""
    options = get_product_service().get_filter_options()
    return jsonify({
        'success': True,
        'data': options,
        'message': 'Filtros disponibles'
    })


@products_bp.route('/<product_id>', methods=['GET'])
def get_product_detail(product_id):
    """产品详情"""
    try:
        product = get_product_service().find_by_id(product_id)
        if product:
            return jsonify({
                'success': True,
                'data': get_card_builder().detail(product),
                'message': 'Producto encontrado'
            })
        return jsonify({
            'success': False,
            'data': None,
            'message': 'Producto no encontrado'
        }), 404
    except Exception as e:
        logger.exception('Product detail failed for %r', product_id)
        return jsonify({
            'success': False,
            'data': None,
            'message': str(e)
        }), 500


@products_bp.route('/<product_id>/related', methods=['GET'])
def get_related_products(product_id):
    """相关产品 - same series or same category

    Query参数:
    - limit: 返回数量，默认 4 (max 16)
    """
    try:
        service = get_product_service()
        product = service.find_by_id(product_id)
        if not product:
            return jsonify({
                'success': False,
                'data': [],
                'count': 0,
                'message': 'Producto no encontrado'
            }), 404

        limit = parse_positive_int(
            request.args.get('limit'), default=service.related_limit, minimum=1, maximum=16
        )
        related = service.get_related(product, limit=limit)
        cards = get_card_builder()
        return jsonify({
            'success': True,
            'data': [cards.related_card(p, i) for i, p in enumerate(related)],
            'count': len(related),
            'message': f'{len(related)} productos relacionados'
        })
    except Exception as e:
        logger.exception('Related products failed for %r', product_id)
        return jsonify({
            'success': False,
            'data': [],
            'count': 0,
            'message': str(e)
        }), 500
