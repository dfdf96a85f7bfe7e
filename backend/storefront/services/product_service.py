"""
产品服务 - 业务逻辑层

本模块只包含业务逻辑，底层实现委托给:
- catalog: immutable product collection
- product_filters: filter stages
- presentation: badge / warranty / card view-models
"""

from typing import Any, Dict, List, Optional

from ..models.filter_state import FilterState
from ..models.product import Product
from . import product_filters as filters
from .catalog import ProductCatalog

DEFAULT_RELATED_LIMIT = 4


class ProductService:
    """Lookup, relation and filtering over one catalog instance."""

    def __init__(self, catalog: ProductCatalog, related_limit: int = DEFAULT_RELATED_LIMIT):
        self.catalog = catalog
        self.related_limit = related_limit

    def get_all_products(self) -> List[Product]:
        return list(self.catalog)

    def find_by_id(self, product_id: Optional[str]) -> Optional[Product]:
        """根据ID获取产品. Returns None when absent; callers decide the fallback."""
        if not product_id:
            return None
        return self.catalog.get(str(product_id))

    def get_related(self, product: Product, limit: Optional[int] = None) -> List[Product]:
        """相关产品 - same series or same category, catalog order, unranked.

        A series match and a category match count the same; the first
        ``limit`` matches in catalog order are returned.
        """
        limit = self.related_limit if limit is None else limit
        if limit <= 0:
            return []

        related = []
        for candidate in self.catalog:
            if candidate.id == product.id:
                continue
            same_series = candidate.series is not None and candidate.series == product.series
            if same_series or candidate.category == product.category:
                related.append(candidate)
                if len(related) >= limit:
                    break
        return related

    def filter_products(self, state: FilterState) -> List[Product]:
        return filters.apply_filters(self.catalog, state)

    def get_filter_options(self) -> Dict[str, Any]:
        """Selectable filter values, derived from the catalog contents."""
        series = sorted({p.series for p in self.catalog if p.series is not None}, reverse=True)
        return {
            'category': [c for c in Product.CATEGORIES if any(p.category == c for p in self.catalog)],
            'series': [str(s) for s in series],
            'condition': [c for c in Product.CONDITIONS if any(p.condition == c for p in self.catalog)],
        }
