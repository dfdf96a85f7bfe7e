from .product import Product, CatalogDataError
from .filter_state import FilterState, ALL

__all__ = [
    'Product',
    'CatalogDataError',
    'FilterState',
    'ALL',
]
