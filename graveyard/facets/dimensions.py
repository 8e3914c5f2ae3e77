"""
Filter Dimensions

Closed enumeration of the dimensions a FilterState constrains. Each
facet dimension carries its own accessor and value enumeration, so no
code dispatches on field-name strings.
"""

from enum import Enum
from typing import Callable

from graveyard.exceptions import UnknownFacetError
from graveyard.products import (
    LIFESPAN_CATEGORIES,
    PRODUCT_CATEGORIES,
    PRODUCT_TYPES,
    SHUTDOWN_REASONS,
    Product,
    resolve_product_type,
)


class Dimension(str, Enum):
    """Dimensions of a FilterState; every member except TEXT is a facet."""

    TEXT = "searchQuery"
    LIFESPAN_CATEGORY = "lifespanCategory"
    PRODUCT_TYPE = "productType"
    PRODUCT_CATEGORY = "productCategory"
    SHUTDOWN_REASON = "shutdownReason"

    @property
    def is_facet(self) -> bool:
        return self is not Dimension.TEXT

    @property
    def values(self) -> tuple[str, ...]:
        """Enumerated values of this facet (empty for TEXT)."""
        return _FACET_VALUES.get(self, ())

    def resolve(self, product: Product) -> tuple[str, ...]:
        """Values the product carries for this facet (empty when unset)."""
        accessor = _ACCESSORS.get(self)
        if accessor is None:
            return ()
        return tuple(value for value in accessor(product) if value)

    def filter_values(self, product: Product) -> tuple[str, ...]:
        """
        Values an active selection is tested against.

        Same as resolve() except for PRODUCT_TYPE, where only the raw
        catalog type string counts; a declared productType alone never
        satisfies a type filter.
        """
        accessor = _FILTER_ACCESSORS.get(self)
        if accessor is None:
            return self.resolve(product)
        return tuple(value for value in accessor(product) if value)

    @classmethod
    def parse(cls, name: str) -> "Dimension":
        """
        Look up a facet by catalog key ("shutdownReason") or member name
        ("SHUTDOWN_REASON", case-insensitive).

        Raises:
            UnknownFacetError: name matches no facet dimension
        """
        for dimension in FACET_DIMENSIONS:
            if name == dimension.value or name.upper() == dimension.name:
                return dimension
        raise UnknownFacetError(name)


def _single(getter: Callable[[Product], str]) -> Callable[[Product], tuple[str, ...]]:
    return lambda product: (getter(product),)


_ACCESSORS: dict[Dimension, Callable[[Product], tuple[str, ...]]] = {
    Dimension.LIFESPAN_CATEGORY: _single(lambda p: p.lifespan_category),
    Dimension.PRODUCT_TYPE: _single(lambda p: p.resolved_type),
    Dimension.PRODUCT_CATEGORY: _single(lambda p: p.product_category),
    Dimension.SHUTDOWN_REASON: _single(lambda p: p.shutdown_reason),
}

_FILTER_ACCESSORS: dict[Dimension, Callable[[Product], tuple[str, ...]]] = {
    Dimension.PRODUCT_TYPE: _single(lambda p: resolve_product_type(p.raw_type)),
}

_FACET_VALUES: dict[Dimension, tuple[str, ...]] = {
    Dimension.LIFESPAN_CATEGORY: LIFESPAN_CATEGORIES,
    Dimension.PRODUCT_TYPE: PRODUCT_TYPES,
    Dimension.PRODUCT_CATEGORY: PRODUCT_CATEGORIES,
    Dimension.SHUTDOWN_REASON: SHUTDOWN_REASONS,
}

FACET_DIMENSIONS: tuple[Dimension, ...] = tuple(d for d in Dimension if d.is_facet)
