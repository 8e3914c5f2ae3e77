"""
Product Definitions for Graveyard

Central definition of the discontinued-product record, its closed
categorical enumerations, and the boundary loader that validates raw
catalog records.

Categorical fields are stored as plain strings: a value outside its
enumeration is kept as-is and simply never matches a facet selection.
"""

from typing import Any, Iterable, Literal, Optional, get_args

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from graveyard.configs import get_logger
from graveyard.exceptions import DuplicateProductError, ProductValidationError

logger = get_logger("products")


# =============================================================================
# Closed Enumerations
# =============================================================================

LifespanCategory = Literal[
    "Less than 1 year",
    "1-2 years",
    "2-5 years",
    "5-10 years",
    "10+ years",
]

ProductType = Literal["Apps", "Services", "Hardware"]

ProductCategory = Literal[
    "Social Media",
    "Communication",
    "Productivity",
    "Developer Tools",
    "Cloud Services",
    "Physical Devices",
    "Media & Entertainment",
    "Search & Discovery",
    "Mobile Apps",
    "Infrastructure",
    "Education",
    "Gaming",
]

ShutdownReason = Literal[
    "Competition",
    "Bad Market Fit",
    "Bad Timing",
    "Strategic Misalignment",
    "Bad Business Model",
    "Acquisition Flu",
    "Legal Challenges",
]

# All valid values as tuples (for runtime enumeration and facet counting)
LIFESPAN_CATEGORIES: tuple[str, ...] = get_args(LifespanCategory)
PRODUCT_TYPES: tuple[str, ...] = get_args(ProductType)
PRODUCT_CATEGORIES: tuple[str, ...] = get_args(ProductCategory)
SHUTDOWN_REASONS: tuple[str, ...] = get_args(ShutdownReason)

# Raw catalog "type" strings (lowercased) -> ProductType
RAW_TYPE_MAP: dict[str, str] = {
    "app": "Apps",
    "apps": "Apps",
    "service": "Services",
    "services": "Services",
    "hardware": "Hardware",
}


# =============================================================================
# Product Model
# =============================================================================


class Product(BaseModel):
    """A discontinued product.

    Accepts the catalog's camelCase keys (``dateClose``, ``notableFeatures``)
    or the snake_case field names.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    # Identity
    name: str
    identifier: str = ""
    description: str = ""
    link: tuple[str, ...] = ()

    # Temporal
    date_open: str = Field(default="", alias="dateOpen")
    date_close: str = Field(default="", alias="dateClose")
    lifespan_months: float = Field(default=0, alias="lifespanMonths")
    lifespan_category: str = Field(default="", alias="lifespanCategory")

    # Classification
    raw_type: Optional[str] = Field(default=None, alias="type")
    product_type: Optional[str] = Field(default=None, alias="productType")
    product_category: str = Field(default="", alias="productCategory")

    # Discontinuation
    shutdown_reason: str = Field(default="", alias="shutdownReason")
    shutdown_reason_detail: str = Field(default="", alias="shutdownReasonDetail")
    notable_features: tuple[str, ...] = Field(default=(), alias="notableFeatures")

    @field_validator("link", "notable_features", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        if value is None:
            return ()
        if isinstance(value, str):
            return (value,)
        return value

    @field_validator(
        "identifier",
        "description",
        "date_open",
        "date_close",
        "lifespan_category",
        "product_category",
        "shutdown_reason",
        "shutdown_reason_detail",
        mode="before",
    )
    @classmethod
    def _none_as_blank(cls, value: Any) -> Any:
        return "" if value is None else value

    @property
    def product_id(self) -> str:
        """Identity: the identifier, or the name when no identifier is set."""
        return self.identifier or self.name

    @property
    def resolved_type(self) -> str:
        """ProductType for this product, or "" when the type is unrecognised."""
        if self.product_type in PRODUCT_TYPES:
            return self.product_type
        return resolve_product_type(self.raw_type)


def resolve_product_type(raw_type: Optional[str]) -> str:
    """
    Map a free-form catalog type string to a ProductType.

    Matching is case-insensitive; anything unmapped resolves to "".
    """
    if not raw_type:
        return ""
    return RAW_TYPE_MAP.get(raw_type.strip().lower(), "")


# =============================================================================
# Boundary Loading
# =============================================================================


def check_unique_ids(products: Iterable[Product]) -> None:
    """Raise DuplicateProductError if two products share an identity."""
    seen: set[str] = set()
    for product in products:
        product_id = product.product_id
        if product_id in seen:
            raise DuplicateProductError(product_id)
        seen.add(product_id)


def load_products(records: Iterable[dict]) -> tuple[Product, ...]:
    """
    Validate raw catalog records into Products.

    Args:
        records: Dicts as found in the catalog JSON

    Returns:
        Products in record order

    Raises:
        ProductValidationError: A record is missing a name or has ill-typed fields
        DuplicateProductError: Two records resolve to the same identity
    """
    products = []
    for position, record in enumerate(records):
        try:
            products.append(Product.model_validate(record))
        except PydanticValidationError as e:
            raise ProductValidationError(
                f"Invalid product record: {e.error_count()} error(s)",
                position=position,
                errors=e.errors(),
            ) from e

    check_unique_ids(products)
    logger.debug(f"Loaded {len(products)} products")
    return tuple(products)
