"""
产品过滤器 - pure filter stages for the catalog

Every stage takes a sequence of products and returns a new list; none of
them mutate their input. Stages are conjunctive, so their order only
changes how much work is done: the cheap equality checks run before the
substring search.
"""

import math
from typing import Callable, Iterable, List, Optional, Sequence

from ..models.filter_state import ALL, FilterState
from ..models.product import Product

FilterStage = Callable[[Sequence[Product]], List[Product]]


def parse_series(value) -> Optional[float]:
    """Coerce a raw series selection to a number, or None when malformed.

    Numeric spellings such as "16.0" or "1.6e1" select series 16.
    """
    try:
        parsed = float(str(value).strip())
    except (TypeError, ValueError):
        return None
    return None if math.isnan(parsed) else parsed


def filter_by_category(products: Sequence[Product], category: str) -> List[Product]:
    """按分类筛选"""
    if category == ALL:
        return list(products)
    return [p for p in products if p.category == category]


def filter_by_series(products: Sequence[Product], series) -> List[Product]:
    """按 iPhone 系列筛选

    A malformed selection (e.g. "pro") matches nothing instead of raising.
    Products without a series never match a concrete selection.
    """
    if series == ALL:
        return list(products)
    target = parse_series(series)
    if target is None:
        return []
    return [p for p in products if p.series is not None and p.series == target]


def filter_by_condition(products: Sequence[Product], condition: str) -> List[Product]:
    """按成色筛选 (nuevo / certificado)"""
    if condition == ALL:
        return list(products)
    return [p for p in products if p.condition == condition]


def matches_search(product: Product, query: str) -> bool:
    """Case-insensitive substring match against name and spec tags."""
    needle = query.lower()
    if needle in product.name.lower():
        return True
    return any(needle in spec.lower() for spec in product.specs)


def filter_by_search(products: Sequence[Product], query: str) -> List[Product]:
    """按关键词筛选 (name OR any spec tag)"""
    if not query or not query.strip():
        return list(products)
    return [p for p in products if matches_search(p, query)]


def build_pipeline(state: FilterState) -> List[FilterStage]:
    """Filter stages bound to ``state``, in application order."""
    return [
        lambda products: filter_by_category(products, state.category),
        lambda products: filter_by_series(products, state.series),
        lambda products: filter_by_condition(products, state.condition),
        lambda products: filter_by_search(products, state.search),
    ]


def apply_filters(products: Iterable[Product], state: FilterState) -> List[Product]:
    """Run every stage left to right, each consuming the previous output."""
    results = list(products)
    for stage in build_pipeline(state):
        results = stage(results)
    return results
