"""
Text Normalization

Tokenizes and stems raw text into comparable terms. The same pipeline
is used for product text at index time and for user queries.
"""

import re

from graveyard.configs.constants import STOP_WORDS

# Anything that is not a letter, digit or whitespace (underscore included)
_NON_WORD_RE = re.compile(r"[^\w\s]|_")

# (suffix, chars to drop, replacement); first match wins, applied once
_STEM_RULES: tuple[tuple[str, int, str], ...] = (
    ("ing", 3, ""),
    ("ed", 2, ""),
    ("ies", 3, "y"),
    ("es", 2, ""),
    ("s", 1, ""),
    ("ly", 2, ""),
    ("ment", 4, ""),
    ("tion", 4, ""),
    ("ness", 4, ""),
)


def tokenize(text: str) -> list[str]:
    """
    Lowercase, replace punctuation with spaces, split on whitespace,
    and drop single-character tokens.
    """
    if not text:
        return []
    cleaned = _NON_WORD_RE.sub(" ", text.lower())
    return [token for token in cleaned.split() if len(token) > 1]


def stem(word: str) -> str:
    """
    Strip one common English suffix.

    Examples:
        "running" -> "runn", "studies" -> "study", "boxes" -> "box",
        "glass" -> "glass"
    """
    for suffix, drop, replacement in _STEM_RULES:
        if not word.endswith(suffix):
            continue
        if suffix == "s" and word.endswith("ss"):
            continue
        return word[:-drop] + replacement
    return word


def normalize(text: str) -> list[str]:
    """
    Full normalization pipeline: tokenize, drop stop words, stem.

    Args:
        text: Raw text (product fields or a query)

    Returns:
        Ordered list of terms (repetitions preserved)
    """
    return [stem(token) for token in tokenize(text) if token not in STOP_WORDS]
