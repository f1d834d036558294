"""
Player identity module.

Turns free-text player names into canonical rating profiles from the
local dataset. Live enhancement and caching live in squadrate.enrich.

Key components:
- normalize_name: Accent/case/punctuation-insensitive name form
- SimilarityMatcher: Term-based fuzzy matching with acceptance rules
- LocalDatasetStore: Built-in players merged with the on-disk export
- CanonicalProfile / ResolutionResult: Resolved data and its provenance

The lookup strategy (in priority order):
1. Exact normalized-name match
2. Fuzzy match accepted by SimilarityMatcher
"""

from squadrate.players.names import edit_distance, normalize_name, slugify, term_similarity
from squadrate.players.profile import (
    CanonicalProfile,
    FetchTarget,
    PartialProfile,
    ProfileSource,
    Query,
    ResolutionResult,
)
from squadrate.players.matching import MatchCandidate, MatchThresholds, SimilarityMatcher
from squadrate.players.dataset import LocalDatasetStore

__all__ = [
    "edit_distance",
    "normalize_name",
    "slugify",
    "term_similarity",
    "CanonicalProfile",
    "FetchTarget",
    "PartialProfile",
    "ProfileSource",
    "Query",
    "ResolutionResult",
    "MatchCandidate",
    "MatchThresholds",
    "SimilarityMatcher",
    "LocalDatasetStore",
]
