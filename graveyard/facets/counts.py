"""
Facet Counting

For each value of a facet, count the products that would match if that
value were selected, given every other active filter. The facet's own
selection is cleared before filtering, so selecting one value never
zeroes out its siblings.
"""

from typing import Iterable, Sequence

from graveyard.configs import get_logger
from graveyard.exceptions import UnknownFacetError
from graveyard.facets.dimensions import FACET_DIMENSIONS, Dimension
from graveyard.facets.filters import FilterState, apply_filters
from graveyard.products import Product

logger = get_logger("facets.counts")


def count_facet(
    products: Sequence[Product],
    dimension: Dimension,
    values: Iterable[str],
    state: FilterState,
) -> dict[str, int]:
    """
    Count products per facet value under all other active filters.

    Args:
        products: Collection to count over
        dimension: Facet being counted
        values: Enumerated values to report; others are ignored
        state: Current filter state

    Returns:
        Mapping with every value in values, defaulting to 0

    Raises:
        UnknownFacetError: dimension is TEXT, which has no values to count
    """
    if not dimension.is_facet:
        raise UnknownFacetError(dimension.value)

    counts = {value: 0 for value in values}
    for product in apply_filters(products, state.without(dimension)):
        for value in dimension.resolve(product):
            if value in counts:
                counts[value] += 1
    return counts


def count_all_facets(
    products: Sequence[Product],
    state: FilterState,
) -> dict[Dimension, dict[str, int]]:
    """Counts for every facet dimension over its full enumeration."""
    facet_counts = {
        dimension: count_facet(products, dimension, dimension.values, state)
        for dimension in FACET_DIMENSIONS
    }
    logger.debug(f"Facet counts computed over {len(products)} products")
    return facet_counts
