"""
Graveyard Constants

Static configuration values that rarely change: the stop-word list,
relevance scoring weights and the search debounce interval.
"""

# --- Stop Words ---
# Common English function words dropped before indexing and matching

STOP_WORDS = frozenset({
    # Articles and conjunctions
    "a", "an", "the", "and", "or", "but", "nor", "so",
    # Prepositions
    "in", "on", "at", "to", "for", "of", "with", "by", "from", "as",
    # Auxiliary and modal verbs
    "is", "was", "are", "were", "been", "be", "have", "has", "had",
    "do", "does", "did", "will", "would", "could", "should", "may",
    "might", "must", "shall", "can", "need", "dare", "ought", "used",
    # Pronouns and determiners
    "it", "its", "this", "that", "these", "those", "i", "you", "he",
    "she", "we", "they", "what", "which", "who", "whom", "all", "each",
    "every", "both", "few", "more", "most", "other", "some", "such",
    "own", "same",
    # Adverbs
    "when", "where", "why", "how", "no", "not", "only", "than", "too",
    "very", "just", "also", "now", "here", "there",
})

# --- Relevance Scoring ---

DEFAULT_MIN_SCORE = 1.0  # Hard inclusion cutoff, applied after the name boost
NAME_MATCH_BOOST = 2.0  # Name contains the whole query
PARTIAL_NAME_BOOST = 0.5  # Name contains one of the query words

# --- Debounce ---

DEBOUNCE_MS = 150  # Quiet interval before a typed query is searched
