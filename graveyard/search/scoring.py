"""
TF-IDF Scoring

Scores a free-text query against a TfidfIndex, adds a name-match boost,
and keeps only results at or above the inclusion threshold.
"""

import math
import time
from dataclasses import dataclass
from typing import Mapping, Sequence

from graveyard.configs import get_logger
from graveyard.configs.constants import (
    DEFAULT_MIN_SCORE,
    NAME_MATCH_BOOST,
    PARTIAL_NAME_BOOST,
)
from graveyard.products import Product
from graveyard.search.normalize import normalize
from graveyard.search.tfidf import TfidfIndex

logger = get_logger("search.scoring")


@dataclass(frozen=True)
class SearchResult:
    """A product paired with its final relevance score."""

    product: Product
    score: float


def tf(count: int) -> float:
    """Log-dampened term frequency: 1 + ln(count), or 0 when absent."""
    return 1.0 + math.log(count) if count > 0 else 0.0


def idf(term: str, index: TfidfIndex) -> float:
    """
    Smoothed inverse document frequency.

    idf = ln((N + 1) / (df + 1)) + 1, which stays positive even for
    terms missing from the index and for an empty index.
    """
    df = index.document_frequency.get(term, 0)
    return math.log((index.total_documents + 1) / (df + 1)) + 1.0


def raw_score(
    query_terms: Sequence[str],
    term_counts: Mapping[str, int],
    index: TfidfIndex,
) -> float:
    """Sum of tf * idf over query terms, divided by the number of query terms."""
    if not query_terms:
        return 0.0
    total = sum(tf(term_counts.get(term, 0)) * idf(term, index) for term in query_terms)
    return total / len(query_terms)


def name_boost(
    query: str,
    name: str,
    full_boost: float = NAME_MATCH_BOOST,
    partial_boost: float = PARTIAL_NAME_BOOST,
) -> float:
    """
    Boost for products whose name contains the query.

    The whole query as a substring of the name earns full_boost;
    otherwise any single query word found in the name earns partial_boost.
    Comparison is case-insensitive.
    """
    name_lower = name.lower()
    query_lower = query.strip().lower()
    if not query_lower:
        return 0.0
    if query_lower in name_lower:
        return full_boost
    if any(word in name_lower for word in query_lower.split()):
        return partial_boost
    return 0.0


def search(
    query: str,
    index: TfidfIndex,
    min_score: float = DEFAULT_MIN_SCORE,
    full_boost: float = NAME_MATCH_BOOST,
    partial_boost: float = PARTIAL_NAME_BOOST,
) -> list[SearchResult]:
    """
    Rank indexed products against a query.

    The name boost is added before the min_score cutoff. Results are
    sorted by descending score; equal scores keep collection order.

    Args:
        query: Raw user query
        index: Index built from the product collection
        min_score: Inclusion threshold for the final score
        full_boost: Boost when the name contains the whole query
        partial_boost: Boost when the name contains one query word

    Returns:
        SearchResults sorted by descending score (empty for a blank query
        or one that normalizes to no terms)
    """
    if not query or not query.strip():
        return []

    query_terms = normalize(query)
    if not query_terms:
        logger.debug(f"Query {query!r} has no searchable terms")
        return []

    start_time = time.time()
    results = []
    for product in index.products:
        term_counts = index.term_counts.get(product.product_id, {})
        score = raw_score(query_terms, term_counts, index)
        score += name_boost(query, product.name, full_boost, partial_boost)
        if score >= min_score:
            results.append(SearchResult(product=product, score=score))

    # Stable sort: ties keep collection order
    results.sort(key=lambda r: r.score, reverse=True)

    elapsed = time.time() - start_time
    logger.debug(
        f"Search {query!r}: {len(results)}/{index.total_documents} results "
        f"in {elapsed*1000:.1f}ms"
    )
    return results
