"""
Graveyard

Search-and-facet engine for a catalog of discontinued products:
TF-IDF relevance search, multi-dimensional facet filtering with
per-value counts, and sorting.
"""

from graveyard.catalog import BrowseResult, Catalog, browse
from graveyard.facets import (
    FACET_DIMENSIONS,
    Dimension,
    FilterState,
    apply_filters,
    count_all_facets,
    count_facet,
    matches,
)
from graveyard.products import Product, load_products
from graveyard.search import DebouncedSearch, SearchResult, TfidfIndex, build_index, normalize, search
from graveyard.sorting import SortKey, sort_products

__all__ = [
    "Product",
    "load_products",
    "normalize",
    "TfidfIndex",
    "build_index",
    "SearchResult",
    "search",
    "DebouncedSearch",
    "Dimension",
    "FACET_DIMENSIONS",
    "FilterState",
    "matches",
    "apply_filters",
    "count_facet",
    "count_all_facets",
    "SortKey",
    "sort_products",
    "Catalog",
    "BrowseResult",
    "browse",
]
