"""
Batch resolution in bounded concurrent waves.

Queries are resolved a wave at a time: every query in a wave runs
concurrently, waves run one after another with a pause in between so a
large roster does not burst the remote host. One failing query never
sinks its wave; it shows up as a BatchFailure in its slot.
"""

import asyncio
import logging
from collections import Counter
from dataclasses import dataclass
from typing import Awaitable, Callable, Iterable, Optional, Protocol, Union

from squadrate.config import settings
from squadrate.db.roster import RosterRecord, RosterSource
from squadrate.players.profile import CanonicalProfile, ProfileSource, Query, ResolutionResult

logger = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[None]]

# Sources that involved a successful remote fetch
LIVE_SOURCES = {ProfileSource.LIVE_ENHANCED, ProfileSource.REMOTE_SEARCH}


class Resolver(Protocol):
    async def resolve(self, query: Query) -> ResolutionResult:
        ...

    async def search_remote(self, name: str) -> ResolutionResult:
        ...


@dataclass
class BatchFailure:
    """A query whose resolution raised."""
    query: Query
    error: BaseException

    def __repr__(self) -> str:
        return f"<BatchFailure('{self.query.name}', error={self.error!r})>"


BatchOutcome = Union[ResolutionResult, BatchFailure]


@dataclass
class EnrichedRosterPlayer:
    """A roster record with its resolution (or the error that prevented one)."""
    record: RosterRecord
    result: Optional[ResolutionResult] = None
    error: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.result is not None and self.result.found

    @property
    def source(self) -> str:
        if self.result is None:
            return "error"
        return self.result.source

    @property
    def profile(self) -> Optional[CanonicalProfile]:
        return self.result.profile if self.result else None

    def to_dict(self) -> dict:
        data = self.record.to_dict()
        data["source"] = self.source
        data["error"] = self.error
        data["profile"] = self.profile.to_dict() if self.profile else None
        return data


class BatchResolver:
    """
    Resolves many queries through one orchestrator.

    Usage:
        resolver = BatchResolver(orchestrator)
        outcomes = await resolver.resolve_many([Query("Salah"), Query("Kane")])
    """

    def __init__(
        self,
        orchestrator: Resolver,
        batch_size: Optional[int] = None,
        inter_batch_delay: Optional[float] = None,
        sleep: Sleep = asyncio.sleep,
    ):
        self.orchestrator = orchestrator
        self.batch_size = batch_size if batch_size is not None else settings.batch_size
        self.inter_batch_delay = (
            inter_batch_delay if inter_batch_delay is not None else settings.batch_delay_seconds
        )
        self.sleep = sleep
        # Sizes of the waves of the most recent resolve_many() call
        self.wave_sizes: list[int] = []

    async def resolve_many(
        self,
        queries: Iterable[Query],
        batch_size: Optional[int] = None,
        inter_batch_delay: Optional[float] = None,
    ) -> list[BatchOutcome]:
        """
        Resolve queries in waves.

        Args:
            queries: Queries to resolve
            batch_size: Queries per wave (default: the resolver's batch size)
            inter_batch_delay: Seconds to wait between waves

        Returns:
            One outcome per query, in input order

        Raises:
            ValueError: If batch_size is not positive
        """
        queries = list(queries)
        size = batch_size if batch_size is not None else self.batch_size
        delay = inter_batch_delay if inter_batch_delay is not None else self.inter_batch_delay
        if size <= 0:
            raise ValueError("batch_size must be positive")

        self.wave_sizes = []
        outcomes: list[BatchOutcome] = []
        total_waves = (len(queries) + size - 1) // size

        for wave_number, start in enumerate(range(0, len(queries), size), start=1):
            wave = queries[start:start + size]
            self.wave_sizes.append(len(wave))

            results = await asyncio.gather(
                *(self.orchestrator.resolve(query) for query in wave),
                return_exceptions=True,
            )

            failures = 0
            for query, result in zip(wave, results):
                if isinstance(result, Exception):
                    logger.warning(f"Resolving '{query.name}' raised: {result}")
                    outcomes.append(BatchFailure(query=query, error=result))
                    failures += 1
                else:
                    outcomes.append(result)

            logger.info(
                f"Wave {wave_number}/{total_waves}: {len(wave)} queries, {failures} failed "
                f"({len(outcomes)}/{len(queries)} done)"
            )

            if start + size < len(queries):
                await self.sleep(delay)

        return outcomes

    async def enrich_roster(
        self,
        source: RosterSource,
        allow_network: bool = False,
        search_remote: bool = False,
    ) -> list[EnrichedRosterPlayer]:
        """
        Resolve every player in a roster.

        Args:
            source: Roster to read
            allow_network: Permit live enhancement of dataset hits
            search_remote: Try the remote search for names the dataset lacks

        Returns:
            One EnrichedRosterPlayer per roster record, in roster order.
            Empty if the roster could not be read.
        """
        try:
            records = source.fetch_all_players()
        except Exception as e:
            logger.error(f"Could not read roster: {e}")
            return []

        logger.info(f"Enriching {len(records)} roster players")
        queries = [Query(name=record.name, allow_network=allow_network) for record in records]
        outcomes = await self.resolve_many(
            queries,
            batch_size=settings.roster_batch_size,
            inter_batch_delay=settings.roster_batch_delay_seconds,
        )

        enriched = []
        for record, outcome in zip(records, outcomes):
            if isinstance(outcome, BatchFailure):
                enriched.append(EnrichedRosterPlayer(record=record, error=str(outcome.error)))
                continue

            if search_remote and not outcome.found:
                try:
                    outcome = await self.orchestrator.search_remote(record.name)
                except Exception as e:
                    logger.warning(f"Remote search for '{record.name}' raised: {e}")
                    enriched.append(EnrichedRosterPlayer(record=record, error=str(e)))
                    continue

            enriched.append(EnrichedRosterPlayer(record=record, result=outcome))

        stats = processing_statistics(enriched)
        logger.info(
            f"Roster enrichment complete: {stats['enhanced']}/{stats['total']} "
            f"resolved ({stats['success_rate']})"
        )
        return enriched


def processing_statistics(players: list[EnrichedRosterPlayer]) -> dict:
    """
    Summarize a roster enrichment run.

    Returns:
        Dict with total, enhanced (resolved), failed, live (remote data
        used), sources (count per provenance tag) and success_rate
    """
    total = len(players)
    enhanced = sum(1 for player in players if player.found)
    live = sum(1 for player in players if player.source in LIVE_SOURCES)
    sources = Counter(player.source for player in players)

    return {
        "total": total,
        "enhanced": enhanced,
        "failed": total - enhanced,
        "live": live,
        "sources": dict(sources),
        "success_rate": f"{(enhanced / total * 100) if total else 0:.1f}%",
    }
