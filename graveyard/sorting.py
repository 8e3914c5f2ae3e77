"""
Result Sorting

Orders products by close date, lifespan or name. Sorting always works
on a copy and is stable: products with equal keys keep their relative
order in either direction.
"""

import unicodedata
from datetime import date, datetime
from enum import Enum
from typing import Iterable, Optional

from graveyard.exceptions import InvalidSortKeyError
from graveyard.products import Product


class SortKey(str, Enum):
    """Sort options, valued by their catalog option names."""

    CLOSE_DATE_DESC = "dateClose-desc"
    CLOSE_DATE_ASC = "dateClose-asc"
    LIFESPAN_DESC = "lifespan-desc"
    LIFESPAN_ASC = "lifespan-asc"
    NAME_ASC = "name-asc"
    NAME_DESC = "name-desc"

    @property
    def descending(self) -> bool:
        return self.value.endswith("-desc")

    @classmethod
    def parse(cls, name: str) -> "SortKey":
        """
        Look up a sort option by option name ("name-asc") or member name.

        Raises:
            InvalidSortKeyError: name matches no sort option
        """
        for key in cls:
            if name == key.value or name.upper() == key.name:
                return key
        raise InvalidSortKeyError(name)


def parse_close_date(value: str) -> Optional[date]:
    """
    Parse a catalog date: "YYYY", "YYYY-MM" or "YYYY-MM-DD" (a full ISO
    timestamp is also accepted). Returns None when unparseable.
    """
    value = (value or "").strip()
    if not value:
        return None
    for fmt in ("%Y-%m-%d", "%Y-%m", "%Y"):
        try:
            return datetime.strptime(value, fmt).date()
        except ValueError:
            continue
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
    except ValueError:
        return None


def name_sort_key(name: str) -> tuple[str, str]:
    """Accent- and case-insensitive collation key, original string as tiebreak."""
    decomposed = unicodedata.normalize("NFKD", name)
    folded = "".join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold()
    return (folded, name)


def sort_products(products: Iterable[Product], key: SortKey) -> list[Product]:
    """
    Return products ordered by key.

    Products whose close date cannot be parsed go last for both date
    directions.

    Args:
        products: Products to order (not modified)
        key: Sort option

    Returns:
        New list in sorted order
    """
    items = list(products)
    reverse = key.descending

    if key in (SortKey.CLOSE_DATE_DESC, SortKey.CLOSE_DATE_ASC):
        dated = []
        undated = []
        for product in items:
            closed = parse_close_date(product.date_close)
            if closed is None:
                undated.append(product)
            else:
                dated.append((closed, product))
        dated.sort(key=lambda pair: pair[0], reverse=reverse)
        return [product for _, product in dated] + undated

    if key in (SortKey.LIFESPAN_DESC, SortKey.LIFESPAN_ASC):
        return sorted(items, key=lambda p: p.lifespan_months, reverse=reverse)

    return sorted(items, key=lambda p: name_sort_key(p.name), reverse=reverse)
