"""
Unit tests for profile data structures and settings.
"""

import pytest
from pydantic import ValidationError

from squadrate.config import Settings
from squadrate.players.profile import (
    CanonicalProfile,
    PartialProfile,
    ProfileSource,
    Query,
    ResolutionResult,
    SKILL_NAMES,
    clamp_rating,
)


class TestCanonicalProfile:

    def test_defaults_filled(self):
        profile = CanonicalProfile(name="Someone")

        assert profile.overall == 65
        assert profile.positions == ["Unknown"]
        assert profile.core_attributes["pace"] == 65
        assert set(profile.skills) == set(SKILL_NAMES)

    def test_ratings_clamped(self):
        profile = CanonicalProfile(name="x", overall=120, pace=-3, skills={"finishing": 150})

        assert profile.overall == 99
        assert profile.pace == 0
        assert profile.skills["finishing"] == 99

    def test_unknown_skills_dropped(self):
        profile = CanonicalProfile(name="x", skills={"juggling": 99})
        assert "juggling" not in profile.skills

    def test_clamp_rating(self):
        assert clamp_rating("80") == 80
        assert clamp_rating(None) == 65
        assert clamp_rating("abc", default=50) == 50
        assert clamp_rating(float("inf")) == 65
        assert clamp_rating(float("-inf"), default=40) == 40


class TestPartialProfile:

    def test_meaningful(self):
        assert PartialProfile(overall=80).is_meaningful()
        assert PartialProfile(name="X").is_meaningful()
        assert not PartialProfile(club="Liverpool").is_meaningful()
        assert not PartialProfile(name="").is_meaningful()

    def test_merge_fragment_wins(self):
        base = CanonicalProfile(name="Mohamed Salah", overall=89, club="Liverpool", age=31)
        merged = PartialProfile(name="M. Salah", overall=90, positions=[]).merge_into(base)

        assert merged.overall == 90
        assert merged.name == "Mohamed Salah"
        assert merged.club == "Liverpool"
        assert merged.age == 31
        assert merged.positions == base.positions
        assert base.overall == 89

    def test_to_canonical(self):
        profile = PartialProfile(name="Jonathan Tah", overall=84).to_canonical()

        assert profile.name == "Jonathan Tah"
        assert profile.overall == 84
        assert profile.potential == 84
        assert profile.skills["finishing"] == 65


class TestResolutionResult:

    def test_not_found(self):
        result = ResolutionResult.not_found(Query("Nobody"))

        assert not result.found
        assert result.profile is None
        assert result.source == ProfileSource.NOT_FOUND
        assert result.to_dict()["profile"] is None

    def test_fallback_tags(self):
        assert ProfileSource.fallback(ProfileSource.DATABASE) == "database_fallback"
        assert ProfileSource.fallback(ProfileSource.DATABASE_FUZZY) == "database_fuzzy_fallback"

    def test_query_is_immutable(self):
        query = Query("Alisson")
        with pytest.raises(AttributeError):
            query.name = "Other"


class TestSettings:

    def test_defaults(self):
        settings = Settings()
        assert settings.cache_ttl_seconds == 3600
        assert settings.rate_limit_max_requests == 10
        assert settings.rate_limit_window_seconds == 60
        assert settings.fetch_timeout == 10
        assert [relay.envelope for relay in settings.relay_endpoints] == [
            "raw", "json_contents", "raw",
        ]

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("SQUADRATE_BATCH_SIZE", "7")
        monkeypatch.setenv("SQUADRATE_LOG_LEVEL", "debug")

        settings = Settings()
        assert settings.batch_size == 7
        assert settings.log_level == "DEBUG"

    def test_invalid_log_level(self, monkeypatch):
        monkeypatch.setenv("SQUADRATE_LOG_LEVEL", "LOUD")
        with pytest.raises(ValidationError):
            Settings()

    def test_batch_size_must_be_positive(self, monkeypatch):
        monkeypatch.setenv("SQUADRATE_BATCH_SIZE", "0")
        with pytest.raises(ValidationError):
            Settings()
