"""
Server-rendered pages.

Routes:
- GET  /             landing
- GET  /catalogo     catalog grid (?category= &series= &condition= &q= &filter=)
- GET  /producto     product detail (?id=), unknown ids go back to the catalog
- GET/POST /b2b-miami  B2B inquiry form
"""

import logging

from flask import Blueprint, current_app, redirect, render_template, request, url_for

from ..models.filter_state import ALL, FilterState
from ..models.product import Product
from ..services.b2b_inquiry import build_inquiry_url, extract_inquiry, validate_inquiry
from ..services.catalog_session import CatalogSession
from ..services.presentation import page_meta, resolve_badge, resolve_warranty, results_label
from . import get_card_builder, get_product_service

logger = logging.getLogger(__name__)

pages_bp = Blueprint('pages', __name__)


@pages_bp.route('/index.html', methods=['GET'])
@pages_bp.route('/', methods=['GET'])
def index():
    service = get_product_service()
    cards = get_card_builder()
    featured = service.filter_products(FilterState(category=Product.CATEGORY_IPHONE))
    featured = featured[:current_app.config.get('FEATURED_LIMIT', 4)]
    return render_template(
        'index.html',
        featured=[cards.card(p, i) for i, p in enumerate(featured)],
        total=service.catalog.count,
    )


@pages_bp.route('/catalogo.html', methods=['GET'])
@pages_bp.route('/catalogo', methods=['GET'])
def catalog():
    service = get_product_service()
    cards = get_card_builder()

    debounce_wait = current_app.config.get('SEARCH_DEBOUNCE_MS', 250) / 1000
    session = CatalogSession(service.catalog, debounce_wait=debounce_wait)
    products = session.restore(FilterState.from_args(request.args))
    return render_template(
        'catalogo.html',
        cards=[cards.card(p, i) for i, p in enumerate(products)],
        results_label=results_label(len(products)),
        total=service.catalog.count,
        state=session.state,
        options=service.get_filter_options(),
        series_visible=session.series_visible,
        is_filtered=not session.state.is_default(),
        all_value=ALL,
    )


@pages_bp.route('/producto.html', methods=['GET'])
@pages_bp.route('/producto', methods=['GET'])
def product_detail():
    service = get_product_service()
    product_id = (request.args.get('id') or '').strip()
    product = service.find_by_id(product_id)
    if product is None:
        logger.info('Unknown product id %r, redirecting to catalog', product_id)
        return redirect(url_for('pages.catalog'))

    cards = get_card_builder()
    related = service.get_related(product)
    return render_template(
        'producto.html',
        product=product,
        badge=resolve_badge(product, 'detail'),
        warranty=resolve_warranty(product),
        meta=page_meta(product),
        contact_url=cards.contact_url(product),
        related=[cards.related_card(p, i) for i, p in enumerate(related)],
    )


@pages_bp.route('/b2b-miami.html', methods=['GET', 'POST'])
@pages_bp.route('/b2b-miami', methods=['GET', 'POST'])
def b2b_miami():
    if request.method == 'GET':
        return render_template('b2b_miami.html', values={}, errors={})

    inquiry = extract_inquiry(request.form)
    result = validate_inquiry(inquiry)
    if not result.is_valid:
        return render_template(
            'b2b_miami.html',
            values=inquiry,
            errors=result.errors_by_field(),
        ), 400

    url = build_inquiry_url(
        inquiry,
        number=current_app.config.get('WHATSAPP_NUMBER'),
        base=current_app.config.get('WHATSAPP_BASE'),
    )
    logger.info('B2B inquiry from %r forwarded to messaging', inquiry['business'])
    return redirect(url, code=303)
