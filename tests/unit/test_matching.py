"""
Unit tests for fuzzy player matching.

Tests the term scoring, acceptance rule and candidate ranking used when
a roster name has no exact dataset entry.
"""

import pytest

from squadrate.players.matching import MatchThresholds, SimilarityMatcher
from squadrate.players.names import normalize_name
from squadrate.players.profile import CanonicalProfile


def entries(*names):
    return [(normalize_name(name), CanonicalProfile(name=name)) for name in names]


@pytest.fixture
def matcher():
    return SimilarityMatcher(MatchThresholds())


class TestScoreTerm:

    def test_exact_term(self, matcher):
        assert matcher.score_term("salah", ["mohamed", "salah"]) == 1.0

    def test_containment(self, matcher):
        # 'mbap' inside 'mbappe': 4/6 * 0.9
        assert matcher.score_term("mbap", ["kylian", "mbappe"]) == pytest.approx(0.6)

    def test_edit_similarity(self, matcher):
        # 'haland' vs 'haaland': 6/7 * 0.8
        assert matcher.score_term("haland", ["erling", "haaland"]) == pytest.approx(6 / 7 * 0.8)

    def test_dissimilar_scores_zero(self, matcher):
        assert matcher.score_term("messi", ["kyle", "walker"]) == 0.0


class TestScoreCandidate:

    def test_full_match(self, matcher):
        score, matched = matcher.score_candidate("mohamed salah", "mohamed salah")
        assert score == 1.0
        assert matched == 2

    def test_single_term_boost(self, matcher):
        score, matched = matcher.score_candidate("haaland", "erling haaland")
        assert score == pytest.approx(1.2)
        assert matched == 1

    def test_partial_terms(self, matcher):
        score, matched = matcher.score_candidate("mohamed kane", "mohamed salah")
        assert score == pytest.approx(0.5)
        assert matched == 1


class TestSimilarity:

    @pytest.mark.parametrize("name", ["Erling Haaland", "N'Golo Kanté", "Alisson"])
    def test_identical_names_score_one(self, matcher, name):
        assert matcher.similarity(name, name) == 1.0

    def test_accents_ignored(self, matcher):
        assert matcher.similarity("Kylian Mbappé", "kylian mbappe") == 1.0

    def test_empty_names(self, matcher):
        assert matcher.similarity("", "") == 1.0


class TestFindBestMatch:

    def test_typo_matches(self, matcher):
        candidate = matcher.find_best_match(
            "erling haland",
            entries("Erling Haaland", "Kylian Mbappé", "Mohamed Salah"),
        )
        assert candidate is not None
        assert candidate.name == "Erling Haaland"
        assert candidate.score > 0.6

    def test_surname_only(self, matcher):
        candidate = matcher.find_best_match(
            "salah",
            entries("Erling Haaland", "Mohamed Salah"),
        )
        assert candidate.name == "Mohamed Salah"

    def test_no_acceptable_candidate(self, matcher):
        assert matcher.find_best_match(
            "completely unknown",
            entries("Erling Haaland", "Mohamed Salah"),
        ) is None

    def test_empty_query(self, matcher):
        assert matcher.find_best_match("", entries("Erling Haaland")) is None

    def test_close_scores_prefer_more_matched_terms(self, matcher):
        # First entry: 2 exact terms (0.667). Second: 3 weaker terms (0.606)
        candidate = matcher.find_best_match(
            "luis alberto suarez",
            entries("Luis Suárez", "Luisito Albertosss Suarezzz"),
        )
        assert candidate.name == "Luisito Albertosss Suarezzz"
        assert candidate.matched_terms == 3

    def test_highest_score_wins(self, matcher):
        candidate = matcher.find_best_match(
            "mohamed salah",
            entries("Mohamed Salah", "Mohamedd Salahh"),
        )
        assert candidate.name == "Mohamed Salah"

    def test_thresholds_from_settings(self):
        thresholds = MatchThresholds.from_settings()
        assert thresholds.accept_score == 0.6
        assert thresholds.tie_margin == 0.1
