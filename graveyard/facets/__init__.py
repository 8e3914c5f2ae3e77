"""
Graveyard Facets

Multi-dimensional filtering and per-value facet counts.
"""

from graveyard.facets.counts import count_all_facets, count_facet
from graveyard.facets.dimensions import FACET_DIMENSIONS, Dimension
from graveyard.facets.filters import FilterState, apply_filters, matches, text_matches

__all__ = [
    "Dimension",
    "FACET_DIMENSIONS",
    "FilterState",
    "matches",
    "apply_filters",
    "text_matches",
    "count_facet",
    "count_all_facets",
]
