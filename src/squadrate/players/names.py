"""
Player name normalization and string distance utilities.

Player names reach us in many shapes:
- Roster entries typed by hand: "kylian mbappe", "Haaland"
- Dataset display names with accents: "Kylian Mbappé", "İlkay Gündoğan"
- Names with punctuation: "N'Golo Kanté", "Jeremiah St. Juste"

Everything is compared in normalized form so accents, case and
punctuation never decide a match.
"""

import re
import unicodedata
from typing import Optional

from rapidfuzz.distance import Levenshtein

# Apostrophe variants, periods, commas and hyphens all separate name parts
_SEPARATORS = re.compile(r"['‘’`´.,\-]")


def normalize_name(name: Optional[str]) -> str:
    """
    Normalize a player name for storage and comparison.

    Normalization steps:
    1. Convert to lowercase
    2. Remove accents (é → e, ğ → g)
    3. Replace apostrophes, periods, commas and hyphens with spaces
    4. Collapse whitespace runs and trim

    The result is idempotent: normalizing a normalized name returns it
    unchanged.

    Args:
        name: Raw player name from any source (None is treated as empty)

    Returns:
        Normalized name used as the dataset lookup key

    Examples:
        >>> normalize_name("Kylian Mbappé")
        'kylian mbappe'
        >>> normalize_name("N'Golo Kanté")
        'n golo kante'
        >>> normalize_name("  Jeremiah St.  Juste ")
        'jeremiah st juste'
    """
    if not name:
        return ""

    normalized = unicodedata.normalize("NFD", name.lower())
    normalized = "".join(
        char for char in normalized
        if not unicodedata.combining(char)
    )
    # Some precomposed letters (İ) only decompose fully after lowercasing
    normalized = normalized.lower()

    normalized = _SEPARATORS.sub(" ", normalized)

    return " ".join(normalized.split())


def slugify(name: str) -> str:
    """Convert a player name to a reference slug. e.g. 'Erling Haaland' -> 'erling-haaland'."""
    return normalize_name(name).replace(" ", "-")


def edit_distance(a: str, b: str) -> int:
    """
    Levenshtein distance between two strings.

    Insertions, deletions and substitutions each cost 1. Symmetric and
    zero for identical strings.
    """
    return Levenshtein.distance(a, b)


def term_similarity(a: str, b: str) -> float:
    """
    Normalized edit similarity: (maxLen - editDistance) / maxLen.

    Two empty strings are identical and score 1.0.
    """
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    return (longest - edit_distance(a, b)) / longest


def split_terms(normalized_name: str) -> list[str]:
    """Split a normalized name into its space-delimited terms."""
    return normalized_name.split()
