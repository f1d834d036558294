"""
Unit tests for wave-based batch resolution and roster enrichment.
"""

import asyncio

import pytest

from squadrate.db.roster import RosterRecord, StaticRosterSource
from squadrate.enrich.batch import (
    BatchFailure,
    BatchResolver,
    EnrichedRosterPlayer,
    processing_statistics,
)
from squadrate.enrich.cache import ResultCache
from squadrate.enrich.orchestrator import EnrichmentOrchestrator
from squadrate.enrich.rate_limit import RateLimiter
from squadrate.players.profile import (
    CanonicalProfile,
    PartialProfile,
    ProfileSource,
    Query,
    ResolutionResult,
)
from squadrate.scrape.strategies import FetchStrategy, FetchStrategyChain


class RecordingSleep:
    def __init__(self):
        self.delays = []

    async def __call__(self, delay):
        self.delays.append(delay)


class FakeOrchestrator:
    """Resolves every name as found, except the ones told to fail."""

    def __init__(self, failing=()):
        self.failing = set(failing)
        self.in_flight = 0
        self.max_in_flight = 0
        self.searched = []

    async def resolve(self, query):
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        await asyncio.sleep(0)
        self.in_flight -= 1
        if query.name in self.failing:
            raise RuntimeError(f"cannot resolve {query.name}")
        return ResolutionResult(
            query=query,
            found=True,
            profile=CanonicalProfile(name=query.name),
            source=ProfileSource.DATABASE,
        )

    async def search_remote(self, name):
        self.searched.append(name)
        return ResolutionResult.not_found(Query(name))


class StaticSearchStrategy(FetchStrategy):
    name = "search"

    async def attempt(self, target, client):
        if target.name == "Jamal Musiala":
            return PartialProfile(name="Jamal Musiala", overall=87, external_id=256790)
        return None


def records(*names):
    return [RosterRecord(id=i, name=name, team="Squad FC") for i, name in enumerate(names, start=1)]


class TestResolveMany:
    """Tests for wave sizing, ordering and failure isolation."""

    def test_waves_and_failure(self):
        orchestrator = FakeOrchestrator(failing={"p4"})
        sleep = RecordingSleep()
        resolver = BatchResolver(orchestrator, batch_size=3, inter_batch_delay=1.0, sleep=sleep)
        queries = [Query(f"p{i}") for i in range(1, 8)]

        outcomes = asyncio.run(resolver.resolve_many(queries))

        assert resolver.wave_sizes == [3, 3, 1]
        assert sleep.delays == [1.0, 1.0]
        assert len(outcomes) == 7
        assert isinstance(outcomes[3], BatchFailure)
        assert outcomes[3].query.name == "p4"
        assert "cannot resolve p4" in str(outcomes[3].error)
        assert [o.query.name for o in outcomes] == [q.name for q in queries]
        assert all(isinstance(o, ResolutionResult) for i, o in enumerate(outcomes) if i != 3)

    def test_wave_concurrency_bounded(self):
        orchestrator = FakeOrchestrator()
        resolver = BatchResolver(orchestrator, batch_size=3, sleep=RecordingSleep())

        asyncio.run(resolver.resolve_many([Query(f"p{i}") for i in range(10)]))

        assert orchestrator.max_in_flight == 3
        assert resolver.wave_sizes == [3, 3, 3, 1]

    def test_no_sleep_for_single_wave(self):
        sleep = RecordingSleep()
        resolver = BatchResolver(FakeOrchestrator(), batch_size=5, sleep=sleep)

        asyncio.run(resolver.resolve_many([Query("a"), Query("b")]))

        assert sleep.delays == []
        assert resolver.wave_sizes == [2]

    def test_empty(self):
        resolver = BatchResolver(FakeOrchestrator(), sleep=RecordingSleep())
        assert asyncio.run(resolver.resolve_many([])) == []
        assert resolver.wave_sizes == []

    def test_per_call_overrides(self):
        sleep = RecordingSleep()
        resolver = BatchResolver(FakeOrchestrator(), batch_size=3, inter_batch_delay=1.0, sleep=sleep)

        asyncio.run(resolver.resolve_many([Query(str(i)) for i in range(4)], 2, 0.25))

        assert resolver.wave_sizes == [2, 2]
        assert sleep.delays == [0.25]

    def test_invalid_batch_size(self):
        resolver = BatchResolver(FakeOrchestrator(), sleep=RecordingSleep())
        with pytest.raises(ValueError):
            asyncio.run(resolver.resolve_many([Query("a")], batch_size=0))

    def test_zero_batch_size_in_constructor(self):
        resolver = BatchResolver(FakeOrchestrator(), batch_size=0, sleep=RecordingSleep())
        assert resolver.batch_size == 0
        with pytest.raises(ValueError):
            asyncio.run(resolver.resolve_many([Query("a")]))

    def test_defaults_from_settings(self):
        resolver = BatchResolver(FakeOrchestrator())
        assert resolver.batch_size == 3
        assert resolver.inter_batch_delay == 1.0


class TestEnrichRoster:
    """Tests for roster enrichment through a real orchestrator."""

    @pytest.fixture
    def orchestrator(self, builtin_store, clock):
        return EnrichmentOrchestrator(
            dataset=builtin_store,
            chain=FetchStrategyChain([]),
            search_chain=FetchStrategyChain([StaticSearchStrategy()]),
            cache=ResultCache(ttl=3600, clock=clock),
            rate_limiter=RateLimiter(max_requests=10, window=60, clock=clock),
            clock=clock,
        )

    def test_roster_waves(self, orchestrator):
        source = StaticRosterSource(records(
            "Erling Haaland", "mbappe", "Mo Salah", "Virgil van Dijk",
            "Luka Modric", "Kane Harry Unknown", "Alisson",
        ))
        sleep = RecordingSleep()
        resolver = BatchResolver(orchestrator, sleep=sleep)

        async def go():
            async with orchestrator:
                return await resolver.enrich_roster(source)

        players = asyncio.run(go())

        assert resolver.wave_sizes == [5, 2]
        assert sleep.delays == [0.5]
        assert [p.record.id for p in players] == [1, 2, 3, 4, 5, 6, 7]
        assert players[0].source == ProfileSource.DATABASE
        assert players[1].source == ProfileSource.DATABASE_FUZZY
        assert players[1].profile.name == "Kylian Mbappé"
        assert not players[5].found

    def test_remote_search_for_missing(self, orchestrator):
        source = StaticRosterSource(records("Erling Haaland", "Jamal Musiala", "Nobody Atall"))
        resolver = BatchResolver(orchestrator, sleep=RecordingSleep())

        async def go():
            async with orchestrator:
                return await resolver.enrich_roster(source, search_remote=True)

        players = asyncio.run(go())

        assert players[0].source == ProfileSource.DATABASE
        assert players[1].source == ProfileSource.REMOTE_SEARCH
        assert players[1].profile.overall == 87
        assert not players[2].found
        assert players[2].result.failure_reason == "all_strategies_failed"

    def test_failed_resolution_recorded(self):
        resolver = BatchResolver(FakeOrchestrator(failing={"Bad"}), sleep=RecordingSleep())
        source = StaticRosterSource(records("Good", "Bad"))

        players = asyncio.run(resolver.enrich_roster(source, search_remote=True))

        assert players[0].found
        assert players[1].error == "cannot resolve Bad"
        assert players[1].source == "error"
        assert resolver.orchestrator.searched == []

    def test_unreadable_roster(self):
        class BrokenSource:
            def fetch_all_players(self):
                raise ConnectionError("database unavailable")

        resolver = BatchResolver(FakeOrchestrator(), sleep=RecordingSleep())
        assert asyncio.run(resolver.enrich_roster(BrokenSource())) == []

    def test_to_dict(self):
        player = EnrichedRosterPlayer(
            record=RosterRecord(id=3, name="Mo Salah", team="Squad FC", goals=12),
            result=ResolutionResult(
                query=Query("Mo Salah"),
                found=True,
                profile=CanonicalProfile(name="Mohamed Salah", overall=89),
                source=ProfileSource.DATABASE_FUZZY,
            ),
        )
        data = player.to_dict()

        assert data["name"] == "Mo Salah"
        assert data["goals"] == 12
        assert data["source"] == "database_fuzzy"
        assert data["profile"]["overall"] == 89


class TestProcessingStatistics:

    def _player(self, source, found=True):
        query = Query("x")
        if not found:
            return EnrichedRosterPlayer(
                record=RosterRecord(id=1, name="x"),
                result=ResolutionResult.not_found(query),
            )
        return EnrichedRosterPlayer(
            record=RosterRecord(id=1, name="x"),
            result=ResolutionResult(
                query=query, found=True, profile=CanonicalProfile(name="x"), source=source,
            ),
        )

    def test_statistics(self):
        players = [
            self._player(ProfileSource.DATABASE),
            self._player(ProfileSource.DATABASE),
            self._player(ProfileSource.DATABASE_FUZZY),
            self._player(ProfileSource.LIVE_ENHANCED),
            self._player(ProfileSource.REMOTE_SEARCH),
            self._player(None, found=False),
        ]

        stats = processing_statistics(players)

        assert stats["total"] == 6
        assert stats["enhanced"] == 5
        assert stats["failed"] == 1
        assert stats["live"] == 2
        assert stats["sources"] == {
            "database": 2,
            "database_fuzzy": 1,
            "live_enhanced": 1,
            "remote_search": 1,
            "not_found": 1,
        }
        assert stats["success_rate"] == "83.3%"

    def test_errors_counted_as_failed(self):
        players = [EnrichedRosterPlayer(record=RosterRecord(id=1, name="x"), error="boom")]
        stats = processing_statistics(players)

        assert stats["failed"] == 1
        assert stats["sources"] == {"error": 1}
        assert stats["success_rate"] == "0.0%"

    def test_empty(self):
        stats = processing_statistics([])
        assert stats["total"] == 0
        assert stats["success_rate"] == "0.0%"
