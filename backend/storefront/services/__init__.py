# Services package
#
# This package provides the catalog services for the storefront.
#
# Module structure:
# - product_service.py: lookup, related products, filtered listing
# - product_repository.py: seeded data, JSON loading, validation
# - catalog.py: immutable product collection
# - product_filters.py: filter stages and the composed pipeline
# - presentation.py: badge / warranty / card view-models
# - contact_links.py: WhatsApp click-to-chat URLs
# - catalog_session.py: FilterState owner with debounced search
# - debounce.py: quiet-period debouncer
# - b2b_inquiry.py: B2B form validation and lead message
#
#   from storefront.services import ProductService

from .product_service import ProductService
from .product_repository import ProductRepository
from .catalog import ProductCatalog
from .catalog_session import CatalogSession
from . import product_filters
from . import presentation

__all__ = [
    'ProductService',
    'ProductRepository',
    'ProductCatalog',
    'CatalogSession',
    'product_filters',
    'presentation',
]
