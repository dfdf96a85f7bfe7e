"""
Presentation mapper - display-only attributes derived from product data.

Nothing here builds markup. Templates and the JSON API both consume the
plain values returned by these functions.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict
from urllib.parse import urlencode

from ..models.product import Product
from .contact_links import DEFAULT_WHATSAPP_BASE, DEFAULT_WHATSAPP_NUMBER, build_contact_url

STORE_NAME = 'Phone Store Maracaibo'
FALLBACK_IMAGE = 'img/logo-img-white.png'

CARD_STAGGER_MS = 60
RELATED_STAGGER_MS = 80

CONTEXT_CATALOG = 'catalog'
CONTEXT_DETAIL = 'detail'


@dataclass(frozen=True)
class Badge:
    style_class: str
    label: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


@dataclass(frozen=True)
class Warranty:
    title: str
    subtitle: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


# Keyed by condition for iPhones and by category for everything else.
_BADGES = {
    CONTEXT_CATALOG: {
        Product.CONDITION_NEW: Badge('catalog-card__badge--new', 'Nuevo'),
        Product.CONDITION_CERTIFIED: Badge('catalog-card__badge--certified', 'Certificado'),
        Product.CATEGORY_ACCESSORY: Badge('catalog-card__badge--accessory', 'Accesorio'),
        Product.CATEGORY_PART: Badge('catalog-card__badge--accessory', 'Repuesto'),
    },
    CONTEXT_DETAIL: {
        Product.CONDITION_NEW: Badge('product-detail__badge--nuevo', 'Nuevo'),
        Product.CONDITION_CERTIFIED: Badge('product-detail__badge--certificado', 'Certificado PSM'),
        Product.CATEGORY_ACCESSORY: Badge('product-detail__badge--accesorio', 'Accesorio'),
        Product.CATEGORY_PART: Badge('product-detail__badge--repuesto', 'Repuesto'),
    },
}

IPHONE_WARRANTY = Warranty(
    title='60 días de garantía PSM',
    subtitle='Cubre defectos de fábrica y funcionamiento',
)
STANDARD_WARRANTY = Warranty(
    title='30 días de garantía PSM',
    subtitle='Garantía sobre el producto y la instalación',
)


def resolve_badge(product: Product, context: str = CONTEXT_CATALOG) -> Badge:
    """iPhones are badged by condition, everything else by category."""
    badges = _BADGES.get(context, _BADGES[CONTEXT_CATALOG])
    if product.category != Product.CATEGORY_IPHONE:
        return badges[product.category]
    return badges[product.condition]


def resolve_warranty(product: Product) -> Warranty:
    if product.category == Product.CATEGORY_IPHONE:
        return IPHONE_WARRANTY
    return STANDARD_WARRANTY


def condition_label(product: Product) -> str:
    return 'Certificado' if product.condition == Product.CONDITION_CERTIFIED else 'Nuevo'


def results_label(count: int) -> str:
    return f"{count} resultado{'' if count == 1 else 's'}"


def detail_url(product: Product) -> str:
    return f"/producto?{urlencode({'id': product.id})}"


class CardBuilder:
    """Turns products into card view-models.

    Holds the messaging settings so routes don't pass them around.
    """

    def __init__(self, whatsapp_number: str = DEFAULT_WHATSAPP_NUMBER,
                 whatsapp_base: str = DEFAULT_WHATSAPP_BASE):
        self.whatsapp_number = whatsapp_number
        self.whatsapp_base = whatsapp_base

    def contact_url(self, product: Product) -> str:
        return build_contact_url(product.contact_message, self.whatsapp_number, self.whatsapp_base)

    def card(self, product: Product, index: int = 0) -> Dict[str, Any]:
        """Catalog grid card."""
        badge = resolve_badge(product)
        return {
            'id': product.id,
            'name': product.name,
            'category': product.category,
            'series': product.series,
            'condition': product.condition,
            'image': product.hero_image,
            'specs': list(product.specs),
            'badge': badge.to_dict(),
            'url': detail_url(product),
            'contact_url': self.contact_url(product),
            'animation_delay_ms': index * CARD_STAGGER_MS,
        }

    def related_card(self, product: Product, index: int = 0) -> Dict[str, Any]:
        """Compact card for the related-products strip."""
        return {
            'id': product.id,
            'name': product.name,
            'image': product.hero_image,
            'condition_label': condition_label(product),
            'url': detail_url(product),
            'animation_delay_ms': index * RELATED_STAGGER_MS,
        }

    def detail(self, product: Product) -> Dict[str, Any]:
        """Full product view for the detail page."""
        data = product.to_dict()
        data.update({
            'image': product.hero_image,
            'badge': resolve_badge(product, CONTEXT_DETAIL).to_dict(),
            'warranty': resolve_warranty(product).to_dict(),
            'contact_url': self.contact_url(product),
            'meta': page_meta(product),
        })
        return data


def page_meta(product: Product) -> Dict[str, str]:
    """Title/description/image for the page head and social tags."""
    title = f"{product.name} | {STORE_NAME}"
    return {
        'title': title,
        'description': product.description,
        'og_title': title,
        'og_description': product.description,
        'og_image': product.gallery[0] if product.gallery else FALLBACK_IMAGE,
    }
