"""
Filter Evaluation

FilterState holds the user's selections; matches() decides whether one
product satisfies them. An empty selection never constrains.

FilterState is immutable: toggles and edits return a new state, so a
reader never sees a half-updated selection.
"""

from dataclasses import dataclass, replace
from typing import Collection, Iterable, Sequence

from graveyard.facets.dimensions import FACET_DIMENSIONS, Dimension
from graveyard.products import Product

# Facet dimension -> FilterState field holding its selection
_SELECTION_FIELDS: dict[Dimension, str] = {
    Dimension.LIFESPAN_CATEGORY: "lifespan_categories",
    Dimension.PRODUCT_TYPE: "product_types",
    Dimension.PRODUCT_CATEGORY: "product_categories",
    Dimension.SHUTDOWN_REASON: "shutdown_reasons",
}


@dataclass(frozen=True)
class FilterState:
    """Facet selections plus a free-text query."""

    lifespan_categories: frozenset[str] = frozenset()
    product_types: frozenset[str] = frozenset()
    product_categories: frozenset[str] = frozenset()
    shutdown_reasons: frozenset[str] = frozenset()
    query: str = ""

    def __post_init__(self):
        # Accept any iterable of values; store frozensets
        for field_name in _SELECTION_FIELDS.values():
            object.__setattr__(self, field_name, frozenset(getattr(self, field_name)))

    @property
    def has_query(self) -> bool:
        return bool(self.query.strip())

    @property
    def active_filter_count(self) -> int:
        """Number of selected facet values, plus one for a non-empty query."""
        count = sum(len(self.selection(d)) for d in FACET_DIMENSIONS)
        return count + (1 if self.has_query else 0)

    @property
    def is_active(self) -> bool:
        return self.active_filter_count > 0

    def selection(self, dimension: Dimension) -> frozenset[str]:
        """Selected values for a facet (empty for TEXT)."""
        field_name = _SELECTION_FIELDS.get(dimension)
        if field_name is None:
            return frozenset()
        return getattr(self, field_name)

    def with_selection(self, dimension: Dimension, values: Iterable[str]) -> "FilterState":
        """New state with the facet's selection replaced."""
        return replace(self, **{_SELECTION_FIELDS[dimension]: frozenset(values)})

    def toggle(self, dimension: Dimension, value: str) -> "FilterState":
        """New state with value added to, or removed from, the facet's selection."""
        selected = self.selection(dimension)
        if value in selected:
            return self.with_selection(dimension, selected - {value})
        return self.with_selection(dimension, selected | {value})

    def without(self, dimension: Dimension) -> "FilterState":
        """New state with one dimension cleared (TEXT clears the query)."""
        if dimension is Dimension.TEXT:
            return self.with_query("")
        return self.with_selection(dimension, ())

    def with_query(self, query: str) -> "FilterState":
        return replace(self, query=query)

    def cleared(self) -> "FilterState":
        """Empty state: no selections and no query."""
        return FilterState()


def text_matches(product: Product, query: str) -> bool:
    """Case-insensitive substring match on name, description or any notable feature."""
    needle = query.strip().lower()
    if not needle:
        return True
    if needle in product.name.lower() or needle in product.description.lower():
        return True
    return any(needle in feature.lower() for feature in product.notable_features)


def matches(
    product: Product,
    state: FilterState,
    ignore: Collection[Dimension] = (),
) -> bool:
    """
    Check whether a product satisfies every active filter.

    Args:
        product: Product to test
        state: Current selections and query
        ignore: Dimensions treated as unconstrained; pass Dimension.TEXT
            to skip the query substring test

    Returns:
        True if all non-ignored predicates pass
    """
    if state.has_query and Dimension.TEXT not in ignore:
        if not text_matches(product, state.query):
            return False

    for dimension in FACET_DIMENSIONS:
        if dimension in ignore:
            continue
        selected = state.selection(dimension)
        if not selected:
            continue
        if not any(value in selected for value in dimension.filter_values(product)):
            return False

    return True


def apply_filters(
    products: Sequence[Product],
    state: FilterState,
    ignore: Collection[Dimension] = (),
) -> list[Product]:
    """Products satisfying the state, in their original order."""
    return [product for product in products if matches(product, state, ignore)]
