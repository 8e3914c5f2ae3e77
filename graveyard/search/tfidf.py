"""
TF-IDF Index

Static relevance index built once from a product collection. The index
is a read-only value: when the collection changes, build a new one.
"""

import time
from collections import Counter
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping

from graveyard.configs import get_logger
from graveyard.products import Product, check_unique_ids
from graveyard.search.normalize import normalize

logger = get_logger("search.tfidf")


@dataclass(frozen=True)
class TfidfIndex:
    """Read-only TF-IDF index over a product collection."""

    documents: Mapping[str, tuple[str, ...]]  # product_id -> ordered terms
    document_frequency: Mapping[str, int]  # term -> products containing it
    total_documents: int
    products: tuple[Product, ...]
    term_counts: Mapping[str, Mapping[str, int]] = field(repr=False, compare=False)

    def terms_for(self, product: Product) -> tuple[str, ...]:
        """Indexed terms for a product (empty if the product is not indexed)."""
        return self.documents.get(product.product_id, ())


def product_text(product: Product) -> str:
    """Concatenate the searchable fields of a product into one string."""
    parts = [
        product.name,
        product.description,
        product.product_category,
        product.product_type or product.raw_type or "",
        product.shutdown_reason,
        product.shutdown_reason_detail,
        *product.notable_features,
    ]
    return " ".join(parts)


def build_index(products: Iterable[Product]) -> TfidfIndex:
    """
    Build a TF-IDF index from products.

    Each product contributes its distinct terms to document frequency
    exactly once. Building from the same collection always yields the
    same index.

    Args:
        products: Product collection (identities must be unique)

    Returns:
        TfidfIndex over the collection

    Raises:
        DuplicateProductError: Two products share an identity
    """
    start_time = time.time()
    products = tuple(products)
    check_unique_ids(products)

    documents: dict[str, tuple[str, ...]] = {}
    term_counts: dict[str, Mapping[str, int]] = {}
    document_frequency: Counter[str] = Counter()

    for product in products:
        terms = tuple(normalize(product_text(product)))
        product_id = product.product_id
        documents[product_id] = terms
        counts = Counter(terms)
        term_counts[product_id] = MappingProxyType(dict(counts))
        document_frequency.update(counts.keys())

    elapsed = time.time() - start_time
    logger.debug(
        f"TF-IDF index built: {len(products)} docs, "
        f"{len(document_frequency)} terms in {elapsed*1000:.1f}ms"
    )

    return TfidfIndex(
        documents=MappingProxyType(documents),
        document_frequency=MappingProxyType(dict(document_frequency)),
        total_documents=len(products),
        products=products,
        term_counts=MappingProxyType(term_counts),
    )
