import logging

from flask import Flask, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from .services.presentation import CardBuilder
from .services.product_repository import ProductRepository
from .services.product_service import ProductService

logger = logging.getLogger(__name__)

EXTENSION_KEY = 'storefront'


def create_app(config_overrides=None):
    """Create the storefront Flask app.

    The catalog is loaded and validated once here; a CatalogDataError
    stops startup instead of surfacing on a request.
    """
    from config import Config

    app = Flask(__name__)
    app.config.from_object(Config)
    if config_overrides:
        app.config.update(config_overrides)

    # CORS: use explicit allowlist in production when provided.
    cors_origins = app.config.get('CORS_ALLOWED_ORIGINS', [])
    if cors_origins:
        CORS(app, resources={r"/api/*": {"origins": cors_origins}})
    else:
        CORS(app, resources={r"/api/*": {"origins": "*"}})

    repository = ProductRepository(app.config.get('DATA_PATH'))
    catalog = repository.load_catalog()
    app.extensions[EXTENSION_KEY] = {
        'catalog': catalog,
        'service': ProductService(catalog, related_limit=app.config.get('MAX_RELATED', 4)),
        'cards': CardBuilder(
            whatsapp_number=app.config.get('WHATSAPP_NUMBER'),
            whatsapp_base=app.config.get('WHATSAPP_BASE'),
        ),
    }

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        if not request.path.startswith('/api/'):
            return error
        return jsonify({
            'success': False,
            'data': None,
            'message': error.description,
            'error': error.name.upper().replace(' ', '_'),
        }), error.code

    # 注册蓝图
    from .routes.pages import pages_bp
    from .routes.products import products_bp
    from .routes.search import search_bp
    from .routes.b2b import b2b_bp

    api_prefix = app.config.get('API_PREFIX', '/api/v1')
    app.register_blueprint(pages_bp)
    app.register_blueprint(products_bp, url_prefix=f'{api_prefix}/products')
    app.register_blueprint(search_bp, url_prefix=f'{api_prefix}/search')
    app.register_blueprint(b2b_bp, url_prefix=f'{api_prefix}/b2b')

    logger.info('Storefront ready (%d products, env=%s)', catalog.count, app.config.get('FLASK_ENV'))
    return app
