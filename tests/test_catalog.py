"""
Tests for catalog browsing: combining search, filters and sorting.
"""

import pytest

from graveyard.catalog import BrowseResult, Catalog, browse
from graveyard.configs import DEFAULT_CONFIG
from graveyard.facets import Dimension, FilterState, apply_filters
from graveyard.products import Product
from graveyard.search import build_index, search
from graveyard.sorting import SortKey, sort_products


def names(products):
    return [p.name for p in products]


def is_subsequence(short, long) -> bool:
    iterator = iter(long)
    return all(item in iterator for item in short)


class TestBrowse:
    """Tests for the stateless browse() function."""

    def test_no_query_filters_then_sorts(self, catalog_products):
        """Test the no-query path equals sort(apply_filters(...))."""
        index = build_index(catalog_products)
        state = FilterState(product_categories={"Communication", "Gaming"})
        for key in SortKey:
            expected = sort_products(apply_filters(catalog_products, state), key)
            assert browse(index, state, key) == expected

    def test_query_preserves_rank_order(self, catalog_products):
        """Test ranked results are a filter-narrowed subsequence of search()."""
        index = build_index(catalog_products)
        state = FilterState(query="messaging", product_categories={"Communication"})
        ranked = [r.product for r in search("messaging", index)]
        result = browse(index, state, SortKey.NAME_DESC)

        assert result
        assert is_subsequence(result, ranked)

    def test_query_ignores_sort_key(self, catalog_products):
        """Test the sort option never reorders ranked results."""
        index = build_index(catalog_products)
        state = FilterState(query="reader")
        orders = {tuple(names(browse(index, state, key))) for key in SortKey}
        assert len(orders) == 1

    def test_query_path_skips_substring_predicate(self):
        """Test a stemmed match survives even though the raw query is not a substring."""
        products = [
            Product(name="Sparrow", description="mail for studies of birds"),
            Product(name="Other", description="calendar"),
            Product(name="Third", description="notes"),
        ]
        index = build_index(products)
        state = FilterState(query="study")
        assert not apply_filters(products, state)
        assert names(browse(index, state)) == ["Sparrow"]

    def test_facets_narrow_ranked_results(self, reader_example):
        index = build_index(reader_example)
        state = FilterState(query="reader", shutdown_reasons={"Competition"})
        assert names(browse(index, state)) == ["Reader Lite"]

    def test_empty_collection(self):
        index = build_index([])
        assert browse(index, FilterState()) == []
        assert browse(index, FilterState(query="reader")) == []


class TestCatalog:
    """Tests for the Catalog facade."""

    @pytest.fixture
    def catalog(self, catalog_products):
        return Catalog(catalog_products, config=dict(DEFAULT_CONFIG))

    def test_index_built_once(self, catalog):
        assert catalog.index is catalog.index

    def test_with_products_builds_new_index(self, catalog, reader_example):
        other = catalog.with_products(reader_example)
        assert other is not catalog
        assert other.index is not catalog.index
        assert other.index.total_documents == 3
        assert catalog.index.total_documents == 5

    def test_default_sort_from_config(self, catalog_products):
        config = dict(DEFAULT_CONFIG, default_sort="name-asc")
        catalog = Catalog(catalog_products, config=config)
        assert catalog.default_sort is SortKey.NAME_ASC
        assert names(catalog.browse(FilterState())) == [
            "Allo", "Google Reader", "Nexus Q", "Stadia", "Wave",
        ]

    def test_min_score_from_config(self, catalog_products):
        strict = Catalog(catalog_products, config=dict(DEFAULT_CONFIG, min_score=100.0))
        assert strict.search("reader") == []

    def test_results_no_query(self, catalog):
        state = FilterState(product_categories={"Communication"})
        result = catalog.results(state, SortKey.NAME_ASC)

        assert isinstance(result, BrowseResult)
        assert not result.ranked
        assert names(result.products) == ["Allo", "Wave"]
        assert result.total == 2
        assert result.scores == {}
        # Category counts ignore the category selection itself
        assert result.facet_counts[Dimension.PRODUCT_CATEGORY]["Gaming"] == 1
        assert result.facet_counts[Dimension.SHUTDOWN_REASON]["Competition"] == 1

    def test_results_with_query(self, reader_example):
        catalog = Catalog(reader_example, config=dict(DEFAULT_CONFIG))
        state = FilterState(query="reader", shutdown_reasons={"Competition"})
        result = catalog.results(state)

        assert result.ranked
        assert names(result.products) == ["Reader Lite"]
        assert set(result.scores) == {"reader-lite"}
        # Counts are over the ranked products, not the whole collection
        reasons = result.facet_counts[Dimension.SHUTDOWN_REASON]
        assert reasons["Competition"] == 1
        assert reasons["Bad Business Model"] == 1
        categories = result.facet_counts[Dimension.PRODUCT_CATEGORY]
        assert categories["Communication"] == 0
        assert categories["Productivity"] == 1

    def test_end_to_end_example(self, reader_example):
        """Test filter, facet count and search on the three-product example."""
        catalog = Catalog(reader_example, config=dict(DEFAULT_CONFIG))
        state = FilterState(product_categories={"Productivity"})

        assert {p.name for p in catalog.browse(state)} == {"Reader", "Reader Lite"}
        reasons = catalog.results(state).facet_counts[Dimension.SHUTDOWN_REASON]
        assert reasons["Bad Business Model"] == 1
        assert reasons["Competition"] == 1
        assert sum(reasons.values()) == 2

        ranked = catalog.search("reader")
        assert names(r.product for r in ranked) == ["Reader", "Reader Lite"]
        assert all(r.score > 2.0 for r in ranked)

    def test_config_loaded_when_not_given(self, catalog_products):
        catalog = Catalog(catalog_products)
        assert catalog.config["min_score"] == 1.0
