"""
Catalog session - the controller that owns a FilterState.

Filter pills and the reset link recompute immediately; search input goes
through a Debouncer so a burst of keystrokes costs one recomputation.
"""

import logging
from typing import Callable, List, Optional

from ..models.filter_state import ALL, FILTER_GROUPS, FilterState
from ..models.product import Product
from . import product_filters as filters
from .catalog import ProductCatalog
from .debounce import Debouncer

logger = logging.getLogger(__name__)

ResultsCallback = Callable[[List[Product]], None]


class CatalogSession:
    """One browsing session over a catalog."""

    def __init__(self, catalog: ProductCatalog,
                 on_results: Optional[ResultsCallback] = None,
                 debounce_wait: float = 0.25,
                 timer_factory=None):
        self.catalog = catalog
        self.state = FilterState()
        self.on_results = on_results
        debounce_kwargs = {'timer_factory': timer_factory} if timer_factory else {}
        self._debounced_search = Debouncer(self._apply_search, debounce_wait, **debounce_kwargs)

    @property
    def series_visible(self) -> bool:
        """The series group only makes sense while iPhones can be listed."""
        return self.state.category in (ALL, Product.CATEGORY_IPHONE)

    def results(self) -> List[Product]:
        return filters.apply_filters(self.catalog, self.state)

    def publish(self) -> List[Product]:
        products = self.results()
        if self.on_results is not None:
            self.on_results(products)
        return products

    def seed(self, param) -> bool:
        """One-shot import of an external ``filter`` value (e.g. ?filter=)."""
        return self.state.seed_from_param(param)

    def select(self, group: str, value) -> List[Product]:
        if group not in FILTER_GROUPS:
            raise ValueError(f'Unknown filter group: {group!r}')
        setattr(self.state, group, str(value))

        # Leaving the iPhone category makes any series selection meaningless.
        if group == 'category' and self.state.category != Product.CATEGORY_IPHONE:
            self.state.series = ALL

        return self.publish()

    def restore(self, state: FilterState) -> List[Product]:
        """Adopt a full state snapshot, such as a submitted filter form.

        Unlike ``select``, nothing is being changed away from here: only a
        concrete non-iPhone category drops the series, "all" keeps it.
        """
        self._debounced_search.cancel()
        self.state = state
        if state.category not in (ALL, Product.CATEGORY_IPHONE):
            state.series = ALL
        return self.publish()

    def search(self, query: str) -> None:
        self._debounced_search(query)

    def _apply_search(self, query: str) -> None:
        self.state.search = query or ''
        logger.debug('Search applied: %r', self.state.search)
        self.publish()

    def flush(self) -> None:
        self._debounced_search.flush()

    @property
    def search_pending(self) -> bool:
        return self._debounced_search.pending

    def reset(self) -> List[Product]:
        self._debounced_search.cancel()
        self.state.reset()
        return self.publish()
