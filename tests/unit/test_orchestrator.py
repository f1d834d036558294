"""
Unit tests for the enrichment orchestrator.

Each test builds its own orchestrator with a manual clock and scripted
fetch strategies, so tier selection, caching and rate limiting are
observable without any network access.
"""

import asyncio

import httpx

from squadrate.config import settings
from squadrate.enrich.cache import ResultCache
from squadrate.enrich.orchestrator import EnrichmentOrchestrator
from squadrate.enrich.rate_limit import RateLimiter
from squadrate.players.dataset import LocalDatasetStore
from squadrate.players.profile import PartialProfile, ProfileSource, Query, SKILL_NAMES
from squadrate.scrape.strategies import FetchStrategy, FetchStrategyChain


class ScriptedStrategy(FetchStrategy):
    """Returns a fixed fragment (or raises) and records its targets."""

    def __init__(self, outcome=None, error=None, name="scripted"):
        self.name = name
        self.outcome = outcome
        self.error = error
        self.targets = []

    async def attempt(self, target, client):
        self.targets.append(target)
        if self.error is not None:
            raise self.error
        return self.outcome


def build(store, clock, outcome=None, search_outcome=None, max_requests=10, **kwargs):
    strategy = ScriptedStrategy(outcome)
    search_strategy = ScriptedStrategy(search_outcome, name="search")
    orchestrator = EnrichmentOrchestrator(
        dataset=store,
        chain=FetchStrategyChain([strategy]),
        search_chain=FetchStrategyChain([search_strategy]),
        cache=ResultCache(ttl=3600, clock=clock),
        rate_limiter=RateLimiter(max_requests=max_requests, window=60, clock=clock),
        clock=clock,
        **kwargs,
    )
    return orchestrator, strategy, search_strategy


def resolve(orchestrator, *queries):
    async def go():
        async with orchestrator:
            return [await orchestrator.resolve(query) for query in queries]
    return asyncio.run(go())


class TestDatasetTiers:
    """Tests for exact and fuzzy dataset resolution."""

    def test_exact_match(self, builtin_store, clock):
        orchestrator, strategy, _ = build(builtin_store, clock)
        [result] = resolve(orchestrator, Query("kylian mbappe"))

        assert result.found
        assert result.source == ProfileSource.DATABASE
        assert result.profile.name == "Kylian Mbappé"
        assert result.profile.source == ProfileSource.DATABASE
        assert result.matched_name is None
        assert set(result.profile.skills) == set(SKILL_NAMES)
        assert result.resolved_at.timestamp() == clock.now
        assert strategy.targets == []

    def test_fuzzy_match(self, builtin_store, clock):
        orchestrator, _, _ = build(builtin_store, clock)
        [result] = resolve(orchestrator, Query("Erling Haland"))

        assert result.found
        assert result.source == ProfileSource.DATABASE_FUZZY
        assert result.matched_name == "Erling Haaland"
        assert result.match_score > 0.6
        assert result.profile.overall == 91

    def test_surname_only(self, builtin_store, clock):
        orchestrator, _, _ = build(builtin_store, clock)
        [result] = resolve(orchestrator, Query("haaland"))

        assert result.source == ProfileSource.DATABASE_FUZZY
        assert result.matched_name == "Erling Haaland"
        assert result.match_score > 0.6

    def test_accent_insensitive_exact(self, builtin_store, clock):
        orchestrator, _, _ = build(builtin_store, clock)
        [result] = resolve(orchestrator, Query("Kylian Mbappe"))

        assert result.source == ProfileSource.DATABASE
        assert result.profile.name == "Kylian Mbappé"

    def test_not_found(self, builtin_store, clock):
        orchestrator, _, _ = build(builtin_store, clock)
        [result] = resolve(orchestrator, Query("Completely Unknown Person", allow_network=True))

        assert not result.found
        assert result.profile is None
        assert result.source == ProfileSource.NOT_FOUND

    def test_non_finite_dataset_keeps_builtins(self, tmp_path, clock):
        (tmp_path / "players.json").write_text(
            '[{"id": 1, "name": "Bad Guy", "overall": Infinity}]', encoding="utf-8",
        )
        store = LocalDatasetStore(candidate_paths=["players.json"], base_dir=str(tmp_path))
        orchestrator, _, _ = build(store, clock)
        haaland, bad = resolve(orchestrator, Query("Erling Haaland"), Query("Bad Guy"))

        assert haaland.found
        assert haaland.profile.overall == 91
        assert bad.found
        assert bad.profile.overall == 65
        assert store.load_attempted

    def test_blank_name(self, builtin_store, clock):
        orchestrator, _, _ = build(builtin_store, clock)
        results = resolve(orchestrator, Query(""), Query("   "), Query(" .- "))

        assert all(not result.found for result in results)
        assert builtin_store.load_attempted is False


class TestLiveEnhancement:
    """Tests for the live tier and its fallbacks."""

    def test_live_success(self, builtin_store, clock):
        fragment = PartialProfile(name="E. Haaland", overall=93, club="Real Madrid", origin="relay")
        orchestrator, strategy, _ = build(builtin_store, clock, outcome=fragment)
        [result] = resolve(orchestrator, Query("Erling Haaland", allow_network=True))

        assert result.source == ProfileSource.LIVE_ENHANCED
        assert result.live_attempted
        assert result.profile.overall == 93
        assert result.profile.club == "Real Madrid"
        # Dataset values the fragment lacks are kept
        assert result.profile.name == "Erling Haaland"
        assert result.profile.potential == 94
        assert strategy.targets[0].reference == (
            "https://sofifa.com/player/239085/erling-haaland/250001/"
        )
        assert strategy.targets[0].external_id == 239085

    def test_all_strategies_fail(self, builtin_store, clock):
        orchestrator, _, _ = build(builtin_store, clock, outcome=None)
        [result] = resolve(orchestrator, Query("Erling Haaland", allow_network=True))

        assert result.found
        assert result.source == "database_fallback"
        assert result.profile.source == "database_fallback"
        assert result.failure_reason == "all_strategies_failed"
        assert result.live_attempted
        assert result.profile.overall == 91

    def test_fuzzy_fallback_tag(self, builtin_store, clock):
        orchestrator, _, _ = build(builtin_store, clock, outcome=None)
        [result] = resolve(orchestrator, Query("Erling Haland", allow_network=True))

        assert result.source == "database_fuzzy_fallback"
        assert result.matched_name == "Erling Haaland"

    def test_chain_error_text(self, builtin_store, clock):
        class BrokenChain:
            strategies = []

            async def run(self, target, client):
                raise RuntimeError("relay exploded")

        orchestrator = EnrichmentOrchestrator(
            dataset=builtin_store,
            chain=BrokenChain(),
            rate_limiter=RateLimiter(max_requests=10, window=60, clock=clock),
            clock=clock,
        )
        [result] = resolve(orchestrator, Query("Erling Haaland", allow_network=True))

        assert result.source == "database_fallback"
        assert result.failure_reason == "relay exploded"

    def test_rate_limited(self, builtin_store, clock):
        fragment = PartialProfile(overall=93)
        orchestrator, strategy, _ = build(builtin_store, clock, outcome=fragment, max_requests=1)
        first, second = resolve(
            orchestrator,
            Query("Erling Haaland", allow_network=True),
            Query("Mohamed Salah", allow_network=True),
        )

        assert first.source == ProfileSource.LIVE_ENHANCED
        assert second.source == "database_fallback"
        assert second.failure_reason == "rate_limited"
        assert not second.live_attempted
        assert second.profile.overall == 89
        assert len(strategy.targets) == 1

    def test_window_of_two_admits_two(self, builtin_store, clock):
        orchestrator, strategy, _ = build(
            builtin_store, clock, outcome=PartialProfile(overall=93), max_requests=2,
        )
        results = resolve(
            orchestrator,
            Query("Erling Haaland", allow_network=True),
            Query("Kylian Mbappe", allow_network=True),
            Query("Mohamed Salah", allow_network=True),
        )

        assert [r.source for r in results] == [
            "live_enhanced", "live_enhanced", "database_fallback",
        ]
        assert len(strategy.targets) == 2

    def test_network_not_allowed(self, builtin_store, clock):
        orchestrator, strategy, _ = build(builtin_store, clock, outcome=PartialProfile(overall=1))
        [result] = resolve(orchestrator, Query("Erling Haaland"))

        assert result.source == ProfileSource.DATABASE
        assert strategy.targets == []
        assert orchestrator.rate_limiter.snapshot().request_count == 0


class TestCacheTier:
    """Tests for the stable-id cache."""

    def test_cache_hit_makes_no_calls(self, builtin_store, clock):
        fragment = PartialProfile(overall=93)
        orchestrator, strategy, _ = build(builtin_store, clock, outcome=fragment)
        query = Query("Erling Haaland", allow_network=True, stable_id=239085)

        async def go():
            async with orchestrator:
                first = await orchestrator.resolve(query)
                clock.advance(3599)
                second = await orchestrator.resolve(query)
                clock.advance(2)
                third = await orchestrator.resolve(query)
                return first, second, third

        first, second, third = asyncio.run(go())

        assert first.source == ProfileSource.LIVE_ENHANCED
        assert second.source == ProfileSource.CACHE
        assert second.profile.overall == 93
        assert third.source == ProfileSource.LIVE_ENHANCED
        assert len(strategy.targets) == 2

    def test_cached_under_profile_id(self, builtin_store, clock):
        orchestrator, _, _ = build(builtin_store, clock)
        first, second = resolve(
            orchestrator,
            Query("Mohamed Salah"),
            Query("Mo", stable_id=209331),
        )

        assert first.source == ProfileSource.DATABASE
        assert second.source == ProfileSource.CACHE
        assert second.profile.name == "Mohamed Salah"
        assert second.query.name == "Mo"

    def test_rate_limited_fallback_not_cached(self, builtin_store, clock):
        fragment = PartialProfile(overall=93)
        orchestrator, strategy, _ = build(builtin_store, clock, outcome=fragment, max_requests=1)
        query = Query("Mohamed Salah", allow_network=True, stable_id=209331)

        async def go():
            async with orchestrator:
                await orchestrator.resolve(Query("Erling Haaland", allow_network=True))
                limited = await orchestrator.resolve(query)
                clock.advance(61)
                retried = await orchestrator.resolve(query)
                return limited, retried

        limited, retried = asyncio.run(go())

        assert limited.failure_reason == "rate_limited"
        assert retried.source == ProfileSource.LIVE_ENHANCED
        assert retried.profile.overall == 93
        assert len(strategy.targets) == 2

    def test_clear_caches(self, builtin_store, clock):
        orchestrator, _, _ = build(builtin_store, clock)
        resolve(orchestrator, Query("Mohamed Salah"))
        orchestrator.clear_caches()

        [result] = resolve(orchestrator, Query("Mohamed Salah", stable_id=209331))
        assert result.source == ProfileSource.DATABASE


class TestRemoteSearch:

    def test_found(self, builtin_store, clock):
        hit = PartialProfile(name="Jamal Musiala", overall=87, external_id=256790)
        orchestrator, _, search = build(builtin_store, clock, search_outcome=hit)

        async def go():
            async with orchestrator:
                return await orchestrator.search_remote("Jamal Musiala")

        result = asyncio.run(go())

        assert result.found
        assert result.source == ProfileSource.REMOTE_SEARCH
        assert result.profile.overall == 87
        assert result.profile.potential == 87
        assert result.live_attempted
        assert search.targets[0].reference == "https://sofifa.com/players?keyword=Jamal+Musiala"
        assert orchestrator.cache.get(256790) is result

    def test_nothing_found(self, builtin_store, clock):
        orchestrator, _, _ = build(builtin_store, clock)

        async def go():
            async with orchestrator:
                return await orchestrator.search_remote("Nobody")

        result = asyncio.run(go())
        assert not result.found
        assert result.failure_reason == "all_strategies_failed"

    def test_rate_limited(self, builtin_store, clock):
        hit = PartialProfile(name="X", overall=70)
        orchestrator, _, search = build(builtin_store, clock, search_outcome=hit, max_requests=0)

        async def go():
            async with orchestrator:
                return await orchestrator.search_remote("X")

        result = asyncio.run(go())
        assert not result.found
        assert result.failure_reason == "rate_limited"
        assert search.targets == []


class TestDiagnosticsAndLifecycle:

    def test_check_connectivity(self, builtin_store, clock):
        orchestrator, strategy, _ = build(builtin_store, clock, outcome=PartialProfile(overall=90))

        async def go():
            async with orchestrator:
                return await orchestrator.check_connectivity()

        outcome = asyncio.run(go())

        assert outcome["success"] is True
        assert outcome["player"] == "Virgil van Dijk"
        assert outcome["strategy"] == "scripted"
        assert outcome["elapsed_ms"] >= 0
        assert orchestrator.rate_limiter.snapshot().request_count == 0

    def test_stats(self, builtin_store, clock):
        orchestrator, _, _ = build(builtin_store, clock)
        resolve(orchestrator, Query("Mohamed Salah"))

        stats = orchestrator.stats()
        assert stats["cache"]["size"] == 1
        assert stats["rate_limit"]["max_requests"] == 10
        assert stats["dataset"]["total_players"] == len(builtin_store)
        assert stats["strategies"] == ["scripted"]

    def test_owned_client_closed(self, builtin_store, clock):
        orchestrator, _, _ = build(builtin_store, clock, outcome=PartialProfile(overall=90))
        resolve(orchestrator, Query("Erling Haaland", allow_network=True))
        assert orchestrator._client is None

    def test_owned_client_timeout(self, builtin_store, clock):
        orchestrator, _, _ = build(builtin_store, clock)
        try:
            timeout = orchestrator.client.timeout
            assert timeout.read >= settings.fetch_timeout
            assert timeout.read >= settings.search_timeout
        finally:
            asyncio.run(orchestrator.aclose())

    def test_injected_client_left_open(self, builtin_store, clock, mock_client):
        client = mock_client(lambda request: httpx.Response(200))
        orchestrator, _, _ = build(
            builtin_store, clock, outcome=PartialProfile(overall=90), client=client,
        )
        resolve(orchestrator, Query("Erling Haaland", allow_network=True))

        assert orchestrator.client is client
        assert not client.is_closed

    def test_unexpected_error_is_reported(self, clock):
        class BrokenStore:
            async def ensure_loaded(self):
                raise OSError("disk on fire")

        orchestrator, _, _ = build(BrokenStore(), clock)
        [result] = resolve(orchestrator, Query("Erling Haaland"))

        assert not result.found
        assert result.failure_reason == "disk on fire"

    def test_result_to_dict(self, builtin_store, clock):
        orchestrator, _, _ = build(builtin_store, clock)
        [result] = resolve(orchestrator, Query("Erling Haland"))

        data = result.to_dict()
        assert data["search_name"] == "Erling Haland"
        assert data["source"] == "database_fuzzy"
        assert data["profile"]["name"] == "Erling Haaland"
        assert data["profile"]["skills"]["finishing"] == 94
