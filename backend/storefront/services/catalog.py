"""
产品目录 - immutable, ordered product collection shared by every service.
"""

from typing import Dict, Iterable, Iterator, Optional, Tuple

from ..models.product import CatalogDataError, Product


class ProductCatalog:
    """Read-only ordered sequence of products with an id index.

    Built once at startup; nothing exposes a way to add, replace or remove
    products afterwards.
    """

    __slots__ = ('_products', '_by_id')

    def __init__(self, products: Iterable[Product]):
        ordered = tuple(products)
        by_id: Dict[str, Product] = {}
        for product in ordered:
            if product.id in by_id:
                raise CatalogDataError(f'Duplicate product id {product.id!r}')
            by_id[product.id] = product
        self._products: Tuple[Product, ...] = ordered
        self._by_id = by_id

    @property
    def products(self) -> Tuple[Product, ...]:
        return self._products

    @property
    def count(self) -> int:
        return len(self._products)

    def get(self, product_id: str) -> Optional[Product]:
        return self._by_id.get(product_id)

    def __len__(self) -> int:
        return len(self._products)

    def __iter__(self) -> Iterator[Product]:
        return iter(self._products)

    def __contains__(self, product: object) -> bool:
        return isinstance(product, Product) and self._by_id.get(product.id) is product

    def __repr__(self) -> str:
        return f'ProductCatalog(count={self.count})'
