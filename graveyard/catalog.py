"""
Catalog Browsing

Combines relevance search with facet filtering and sorting.

With a query, results follow TF-IDF rank order and facet filters only
remove products; the sort option is not applied. Without a query, the
filtered collection is ordered by the sort option.
"""

import time
from dataclasses import dataclass, field
from typing import Iterable, Optional

from graveyard.configs import get_full_config, get_logger
from graveyard.facets import Dimension, FilterState, apply_filters, count_all_facets
from graveyard.products import Product
from graveyard.search import DebouncedSearch, SearchResult, TfidfIndex, build_index, search
from graveyard.sorting import SortKey, sort_products

logger = get_logger("catalog")


@dataclass(frozen=True)
class BrowseResult:
    """One page-independent view of the catalog for a filter state."""

    products: list[Product]
    ranked: bool  # True when ordered by relevance
    scores: dict[str, float] = field(default_factory=dict)  # product_id -> score
    facet_counts: dict[Dimension, dict[str, int]] = field(default_factory=dict)

    @property
    def total(self) -> int:
        return len(self.products)


def browse(
    index: TfidfIndex,
    state: FilterState,
    sort_key: SortKey = SortKey.CLOSE_DATE_DESC,
    **search_options,
) -> list[Product]:
    """
    Products visible for a filter state.

    Args:
        index: Index over the full collection (its products are browsed)
        state: Current filter state
        sort_key: Ordering used when no query is active
        **search_options: min_score / full_boost / partial_boost for search()

    Returns:
        Ranked-and-filtered products (query) or filtered-and-sorted products
    """
    if state.has_query:
        ranked = search(state.query, index, **search_options)
        # Relevance already encodes the query; only facets narrow ranked results
        return apply_filters([r.product for r in ranked], state, ignore=(Dimension.TEXT,))
    return sort_products(apply_filters(index.products, state), sort_key)


class Catalog:
    """A fixed product collection with its relevance index."""

    def __init__(self, products: Iterable[Product], config: Optional[dict] = None):
        """
        Args:
            products: Product collection (identities must be unique)
            config: Runtime settings; defaults to get_full_config()
        """
        self.products: tuple[Product, ...] = tuple(products)
        self.config = config if config is not None else get_full_config()
        self._index: Optional[TfidfIndex] = None

    @property
    def index(self) -> TfidfIndex:
        """The relevance index, built on first use."""
        if self._index is None:
            self._index = build_index(self.products)
        return self._index

    @property
    def default_sort(self) -> SortKey:
        return SortKey.parse(self.config.get("default_sort", SortKey.CLOSE_DATE_DESC.value))

    def with_products(self, products: Iterable[Product]) -> "Catalog":
        """New catalog (and index) for a changed collection."""
        return Catalog(products, config=self.config)

    def _search_options(self) -> dict:
        return {
            "min_score": self.config["min_score"],
            "full_boost": self.config["name_match_boost"],
            "partial_boost": self.config["partial_name_boost"],
        }

    def search(self, query: str) -> list[SearchResult]:
        """Relevance-ranked results for a query over the whole collection."""
        return search(query, self.index, **self._search_options())

    def browse(self, state: FilterState, sort_key: Optional[SortKey] = None) -> list[Product]:
        """Products visible for a filter state (see module docstring)."""
        return browse(self.index, state, sort_key or self.default_sort, **self._search_options())

    def results(self, state: FilterState, sort_key: Optional[SortKey] = None) -> BrowseResult:
        """
        Products, scores and facet counts for a filter state.

        With a query, facet counts are taken over the ranked results so
        the numbers next to each option match what selecting it would show.
        """
        start_time = time.time()
        sort_key = sort_key or self.default_sort

        if state.has_query:
            ranked = self.search(state.query)
            base = [r.product for r in ranked]
            products = apply_filters(base, state, ignore=(Dimension.TEXT,))
            scores = {r.product.product_id: r.score for r in ranked}
            visible = {p.product_id for p in products}
            scores = {pid: score for pid, score in scores.items() if pid in visible}
            counts = count_all_facets(base, state.with_query(""))
            result = BrowseResult(products=products, ranked=True, scores=scores, facet_counts=counts)
        else:
            products = sort_products(apply_filters(self.products, state), sort_key)
            counts = count_all_facets(self.products, state)
            result = BrowseResult(products=products, ranked=False, facet_counts=counts)

        elapsed = time.time() - start_time
        logger.debug(
            f"Browse: {result.total}/{len(self.products)} products, "
            f"ranked={result.ranked}, {state.active_filter_count} active filters "
            f"in {elapsed*1000:.1f}ms"
        )
        return result

    def debounced(self, delay_ms: Optional[float] = None) -> DebouncedSearch:
        """Debounced scheduler running this catalog's search."""
        if delay_ms is None:
            delay_ms = self.config["debounce_ms"]
        return DebouncedSearch(self.search, delay_ms=delay_ms)
