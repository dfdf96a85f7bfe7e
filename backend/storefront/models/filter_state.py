from dataclasses import dataclass
from typing import Any, Mapping

from .product import Product

ALL = 'all'
FILTER_GROUPS = ('category', 'series', 'condition')


@dataclass
class FilterState:
    """Active catalog filter selections.

    One instance per catalog session (or per request on the server).
    Mutated in place by the UI layer and never persisted.
    """

    category: str = ALL
    series: str = ALL
    condition: str = ALL
    search: str = ''

    def reset(self) -> None:
        self.category = ALL
        self.series = ALL
        self.condition = ALL
        self.search = ''

    def is_default(self) -> bool:
        return (
            self.category == ALL
            and self.series == ALL
            and self.condition == ALL
            and not self.search.strip()
        )

    def seed_from_param(self, value: Any) -> bool:
        """One-shot import of an external ``filter`` parameter.

        A category value pre-selects the category group, a condition value
        pre-selects the condition group. Anything else is ignored.
        Returns True when the state changed.
        """
        selected = str(value or '').strip().lower()
        if selected in Product.CATEGORIES:
            self.category = selected
            return True
        if selected in Product.CONDITIONS:
            self.condition = selected
            return True
        return False

    @classmethod
    def from_args(cls, args: Mapping[str, Any]) -> 'FilterState':
        """Build a state from request query args.

        Explicit ``category``/``series``/``condition`` win over the
        ``filter`` seed. Values are kept raw: an unknown value simply
        matches nothing downstream.
        """
        state = cls()
        state.seed_from_param(args.get('filter'))
        for group in FILTER_GROUPS:
            raw = str(args.get(group) or '').strip()
            if raw:
                setattr(state, group, raw.lower() if group != 'series' else raw)
        state.search = str(args.get('q') or args.get('search') or '')
        return state

    def to_dict(self) -> dict:
        return {
            'category': self.category,
            'series': self.series,
            'condition': self.condition,
            'search': self.search,
        }
