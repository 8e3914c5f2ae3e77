"""
Graveyard Search

TF-IDF relevance search with name boosting and debounced scheduling.
"""

from graveyard.search.debounce import DebouncedSearch
from graveyard.search.normalize import normalize, stem, tokenize
from graveyard.search.scoring import SearchResult, idf, name_boost, raw_score, search, tf
from graveyard.search.tfidf import TfidfIndex, build_index, product_text

__all__ = [
    "normalize",
    "stem",
    "tokenize",
    "TfidfIndex",
    "build_index",
    "product_text",
    "SearchResult",
    "search",
    "tf",
    "idf",
    "raw_score",
    "name_boost",
    "DebouncedSearch",
]
