"""
Graveyard Exception Hierarchy

Centralized exception classes for errors raised at the package boundary.
All Graveyard-specific exceptions inherit from GraveyardError.

The core algorithms (normalize, index, score, filter, count, sort) never
raise for well-typed input; these exceptions cover loading products,
parsing user-supplied names, and the debounced search scheduler.

Usage:
    from graveyard.exceptions import GraveyardError, ProductValidationError

    try:
        products = load_products(records)
    except ProductValidationError as e:
        logger.error(f"Catalog rejected: {e}")
"""


class GraveyardError(Exception):
    """Base exception for all Graveyard errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(GraveyardError):
    """Error in Graveyard configuration."""

    pass


# =============================================================================
# Catalog Errors
# =============================================================================


class CatalogError(GraveyardError):
    """Base class for product catalog errors."""

    pass


class ProductValidationError(CatalogError):
    """A raw product record failed schema validation."""

    def __init__(self, message: str, position: int | None = None, errors: list | None = None):
        details = {}
        if position is not None:
            details["position"] = position
        if errors:
            details["errors"] = len(errors)
        super().__init__(message, details)
        self.position = position
        self.errors = errors or []


class DuplicateProductError(CatalogError):
    """Two products resolve to the same identity."""

    def __init__(self, product_id: str):
        super().__init__("Duplicate product identity", {"product_id": product_id})
        self.product_id = product_id


# =============================================================================
# Search Errors
# =============================================================================


class SearchError(GraveyardError):
    """Base class for search-related errors."""

    pass


class SearchSupersededError(SearchError):
    """A scheduled search finished after a newer query replaced it."""

    def __init__(self, query: str):
        super().__init__("Search superseded by a newer query", {"query": query})
        self.query = query


class SchedulerClosedError(SearchError):
    """The debounced search scheduler no longer accepts queries."""

    pass


# =============================================================================
# Query Errors
# =============================================================================


class QueryError(GraveyardError):
    """Base class for invalid browse parameters supplied by a caller."""

    pass


class InvalidSortKeyError(QueryError):
    """Sort option name is not recognised."""

    def __init__(self, name: str):
        super().__init__("Unknown sort option", {"name": name})
        self.name = name


class UnknownFacetError(QueryError):
    """Facet dimension name is not recognised or is not countable."""

    def __init__(self, name: str):
        super().__init__("Unknown facet dimension", {"name": name})
        self.name = name
