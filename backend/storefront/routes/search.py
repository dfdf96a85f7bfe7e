import logging

from flask import Blueprint, jsonify, request

from ..models.filter_state import FilterState
from . import get_card_builder, get_product_service

logger = logging.getLogger(__name__)

search_bp = Blueprint('search', __name__)


@search_bp.route('/', methods=['GET'])
def search_products():
    """
    搜索产品

    Query Parameters:
    - q: 搜索关键词 (substring of name or any spec tag, case-insensitive)
    - category / series / condition: optional narrowing, same as the catalog
    """
    try:
        state = FilterState.from_args(request.args)
        products = get_product_service().filter_products(state)
        cards = get_card_builder()

        return jsonify({
            'success': True,
            'data': [cards.card(p, i) for i, p in enumerate(products)],
            'query': state.search,
            'total': len(products),
            'message': 'Búsqueda completada'
        })
    except Exception as e:
        logger.exception('Search failed')
        return jsonify({
            'success': False,
            'data': [],
            'message': str(e)
        }), 500
