"""
Fuzzy player name matching.

Used when a query has no exact entry in the dataset. Each query term is
scored against the best candidate term:

1. Identical terms score 1.0
2. Containment ("mbap" in "mbappe") scores the length ratio * 0.9
3. Otherwise edit similarity, if above 0.6, scaled by 0.8

A candidate is accepted when its aggregate score is high, or when most
query terms matched with a moderate score. Bare surnames get a boost so
"haaland" confidently finds "Erling Haaland".
"""

import logging
import math
from dataclasses import dataclass
from typing import Iterable, Optional

from squadrate.config import settings
from squadrate.players.names import normalize_name, split_terms, term_similarity
from squadrate.players.profile import CanonicalProfile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchThresholds:
    """Tunable constants for fuzzy matching."""
    containment_weight: float = 0.9
    edit_similarity_floor: float = 0.6
    edit_similarity_weight: float = 0.8
    term_floor: float = 0.5
    single_term_boost: float = 1.2
    accept_score: float = 0.6
    term_coverage: float = 0.7
    coverage_score: float = 0.4
    tie_margin: float = 0.1

    @classmethod
    def from_settings(cls) -> "MatchThresholds":
        return cls(
            containment_weight=settings.match_containment_weight,
            edit_similarity_floor=settings.match_edit_similarity_floor,
            edit_similarity_weight=settings.match_edit_similarity_weight,
            term_floor=settings.match_term_floor,
            single_term_boost=settings.match_single_term_boost,
            accept_score=settings.match_accept_score,
            term_coverage=settings.match_term_coverage,
            coverage_score=settings.match_coverage_score,
            tie_margin=settings.match_tie_margin,
        )


@dataclass
class MatchCandidate:
    """A dataset entry that passed the acceptance rule."""
    name: str
    profile: CanonicalProfile
    score: float
    matched_terms: int

    def __repr__(self) -> str:
        return f"<MatchCandidate('{self.name}', score={self.score:.2f}, terms={self.matched_terms})>"


def _containment_ratio(a: str, b: str) -> Optional[float]:
    """Length ratio if one term contains the other, else None."""
    if a in b or b in a:
        return min(len(a), len(b)) / max(len(a), len(b))
    return None


class SimilarityMatcher:
    """
    Scores names against each other and picks the best dataset candidate.

    Usage:
        matcher = SimilarityMatcher()
        candidate = matcher.find_best_match("haaland", store.entries())
        if candidate:
            print(candidate.name, candidate.score)
    """

    def __init__(self, thresholds: Optional[MatchThresholds] = None):
        self.thresholds = thresholds or MatchThresholds.from_settings()

    def score_term(self, query_term: str, candidate_terms: list[str]) -> float:
        """Best score of one query term against any candidate term."""
        t = self.thresholds
        best = 0.0

        for candidate_term in candidate_terms:
            if candidate_term == query_term:
                term_score = 1.0
            else:
                ratio = _containment_ratio(query_term, candidate_term)
                if ratio is not None:
                    term_score = ratio * t.containment_weight
                else:
                    similarity = term_similarity(query_term, candidate_term)
                    term_score = (
                        similarity * t.edit_similarity_weight
                        if similarity > t.edit_similarity_floor
                        else 0.0
                    )
            best = max(best, term_score)

        return best

    def score_candidate(self, query: str, candidate: str) -> tuple[float, int]:
        """
        Aggregate score of a normalized query against a normalized candidate.

        Returns:
            Tuple of (score, matched_terms)
        """
        t = self.thresholds
        query_terms = split_terms(query)
        candidate_terms = split_terms(candidate)

        if not query_terms:
            return 0.0, 0

        total = 0.0
        matched_terms = 0
        for query_term in query_terms:
            term_score = self.score_term(query_term, candidate_terms)
            if term_score > t.term_floor:
                matched_terms += 1
                total += term_score

        # Bare surname searches: favour a confident containment hit
        if len(query_terms) == 1:
            single = query_terms[0]
            for candidate_term in candidate_terms:
                ratio = _containment_ratio(single, candidate_term)
                if ratio is not None:
                    total = max(total, ratio * t.single_term_boost)
                    matched_terms = max(matched_terms, 1)

        return total / len(query_terms), matched_terms

    def similarity(self, a: str, b: str) -> float:
        """
        Similarity of two raw names.

        Identical names score exactly 1.0 (including two empty names).
        """
        na, nb = normalize_name(a), normalize_name(b)
        if na == nb:
            return 1.0
        score, _ = self.score_candidate(na, nb)
        return score

    def is_acceptable(self, score: float, matched_terms: int, query_term_count: int) -> bool:
        t = self.thresholds
        if score > t.accept_score:
            return True
        required_terms = math.ceil(query_term_count * t.term_coverage)
        return matched_terms >= required_terms and score > t.coverage_score

    def find_best_match(
        self,
        query: str,
        entries: Iterable[tuple[str, CanonicalProfile]],
    ) -> Optional[MatchCandidate]:
        """
        Search (normalized_name, profile) entries for the best accepted candidate.

        Args:
            query: Normalized query name
            entries: Dataset entries keyed by normalized name

        Returns:
            Best MatchCandidate, or None if nothing was accepted
        """
        query_term_count = len(split_terms(query))
        if query_term_count == 0:
            return None

        accepted: list[MatchCandidate] = []
        for key, profile in entries:
            score, matched_terms = self.score_candidate(query, key)
            if self.is_acceptable(score, matched_terms, query_term_count):
                accepted.append(MatchCandidate(
                    name=profile.name,
                    profile=profile,
                    score=score,
                    matched_terms=matched_terms,
                ))

        if not accepted:
            return None

        best = accepted[0]
        for candidate in accepted[1:]:
            if self._ranks_higher(candidate, best):
                best = candidate

        logger.debug(f"Fuzzy match '{query}' -> '{best.name}' (score {best.score:.2f})")
        return best

    def _ranks_higher(self, a: MatchCandidate, b: MatchCandidate) -> bool:
        """Higher score wins, unless the scores are close: then more matched terms wins."""
        if abs(a.score - b.score) < self.thresholds.tie_margin:
            if a.matched_terms != b.matched_terms:
                return a.matched_terms > b.matched_terms
            return a.score > b.score
        return a.score > b.score
