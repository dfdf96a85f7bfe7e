from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


class CatalogDataError(ValueError):
    """Raised when catalog records break the product data invariants."""


@dataclass(frozen=True)
class Product:
    """Phone store catalog product (immutable)."""

    CATEGORY_IPHONE = 'iphone'
    CATEGORY_ACCESSORY = 'accesorio'
    CATEGORY_PART = 'repuesto'

    CONDITION_NEW = 'nuevo'
    CONDITION_CERTIFIED = 'certificado'

    CATEGORIES = (
        CATEGORY_IPHONE,     # teléfonos, sub-clasificados por condición
        CATEGORY_ACCESSORY,  # cargadores, cables, audio
        CATEGORY_PART,       # repuestos con instalación
    )

    CONDITIONS = (
        CONDITION_NEW,
        CONDITION_CERTIFIED,
    )

    id: str
    name: str
    category: str
    condition: str
    series: Optional[int] = None
    specs: Tuple[str, ...] = ()
    gallery: Tuple[str, ...] = ()
    description: str = ''
    contact_message: str = field(default='', repr=False)

    @property
    def is_iphone(self) -> bool:
        return self.category == self.CATEGORY_IPHONE

    @property
    def hero_image(self) -> str:
        """First gallery entry, the canonical image."""
        return self.gallery[0]

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典"""
        return {
            'id': self.id,
            'name': self.name,
            'category': self.category,
            'series': self.series,
            'condition': self.condition,
            'specs': list(self.specs),
            'gallery': list(self.gallery),
            'description': self.description,
            'contact_message': self.contact_message,
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> 'Product':
        """Build a product from a raw record, checking its invariants.

        Accepts the ``contactMessage``/``waMessage`` spellings used by
        exported JSON files as well as ``contact_message``.
        """
        if not isinstance(data, dict):
            raise CatalogDataError(f'Product record must be an object, got {type(data).__name__}')

        product_id = str(data.get('id') or '').strip()
        if not product_id:
            raise CatalogDataError('Product record is missing "id"')

        name = str(data.get('name') or '').strip()
        if not name:
            raise CatalogDataError(f'Product {product_id!r} is missing "name"')

        category = data.get('category')
        if category not in Product.CATEGORIES:
            raise CatalogDataError(f'Product {product_id!r} has unknown category {category!r}')

        condition = data.get('condition')
        if condition not in Product.CONDITIONS:
            raise CatalogDataError(f'Product {product_id!r} has unknown condition {condition!r}')

        series = data.get('series')
        if category == Product.CATEGORY_IPHONE:
            if isinstance(series, bool) or not isinstance(series, int) or series <= 0:
                raise CatalogDataError(f'iPhone {product_id!r} needs a positive integer "series"')
        elif series is not None:
            raise CatalogDataError(f'Product {product_id!r} is not an iPhone and cannot have a series')

        gallery = tuple(str(src) for src in (data.get('gallery') or []))
        if not gallery:
            raise CatalogDataError(f'Product {product_id!r} needs at least one gallery image')

        contact_message = (
            data.get('contact_message')
            or data.get('contactMessage')
            or data.get('waMessage')
            or ''
        )

        return Product(
            id=product_id,
            name=name,
            category=category,
            condition=condition,
            series=series,
            specs=tuple(str(spec) for spec in (data.get('specs') or [])),
            gallery=gallery,
            description=str(data.get('description') or ''),
            contact_message=str(contact_message),
        )
