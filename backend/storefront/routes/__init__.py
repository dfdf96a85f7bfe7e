from flask import current_app

from ..services.presentation import CardBuilder
from ..services.product_service import ProductService


def get_product_service() -> ProductService:
    return current_app.extensions['storefront']['service']


def get_card_builder() -> CardBuilder:
    return current_app.extensions['storefront']['cards']


def parse_positive_int(raw_value, default: int, minimum: int, maximum: int) -> int:
    """Parse int query params with guard rails."""
    try:
        parsed = int(raw_value)
    except (TypeError, ValueError):
        return default
    return max(minimum, min(maximum, parsed))
