"""
Tiered player resolution.

The EnrichmentOrchestrator answers "which profile belongs to this name?"
by trying, in order:

1. The result cache (only when the query carries a stable id)
2. Exact normalized-name lookup in the local dataset
3. Fuzzy matching over the dataset
4. Live enhancement through the fetch strategy chain, only when the
   query allows network access and the rate window has room

A failed live tier never loses the dataset answer: the result keeps the
dataset profile and is tagged '<tier>_fallback' with the reason.

The orchestrator owns its cache, rate window and (unless one is passed
in) its HTTP client. Nothing is shared between instances.
"""

import asyncio
import logging
import time
from dataclasses import replace
from typing import Optional

import httpx

from squadrate.config import settings
from squadrate.enrich.cache import ResultCache
from squadrate.enrich.clock import Clock, system_clock, to_datetime
from squadrate.enrich.rate_limit import RateLimiter
from squadrate.players.dataset import LocalDatasetStore
from squadrate.players.matching import SimilarityMatcher
from squadrate.players.names import normalize_name
from squadrate.players.profile import FetchTarget, ProfileSource, Query, ResolutionResult
from squadrate.scrape.parsers import SearchResultsExtractor
from squadrate.scrape.references import build_search_url
from squadrate.scrape.strategies import (
    DirectFetchStrategy,
    FetchStrategyChain,
    RelayFetchStrategy,
)

logger = logging.getLogger(__name__)

RATE_LIMITED = "rate_limited"
ALL_STRATEGIES_FAILED = "all_strategies_failed"


def default_search_chain() -> FetchStrategyChain:
    """Relays then a direct GET, both reading search result pages."""
    extractor = SearchResultsExtractor()
    return FetchStrategyChain([
        RelayFetchStrategy(extractor=extractor, timeout=settings.search_timeout),
        DirectFetchStrategy(extractor=extractor, timeout=settings.search_timeout),
    ])


class EnrichmentOrchestrator:
    """
    Resolves player names to canonical profiles.

    Usage:
        async with EnrichmentOrchestrator() as orchestrator:
            result = await orchestrator.resolve(Query("Erling Haaland", allow_network=True))
            if result.found:
                print(result.profile.overall, result.source)
    """

    def __init__(
        self,
        dataset: Optional[LocalDatasetStore] = None,
        matcher: Optional[SimilarityMatcher] = None,
        chain: Optional[FetchStrategyChain] = None,
        search_chain: Optional[FetchStrategyChain] = None,
        cache: Optional[ResultCache] = None,
        rate_limiter: Optional[RateLimiter] = None,
        client: Optional[httpx.AsyncClient] = None,
        clock: Clock = system_clock,
    ):
        """
        Args:
            dataset: Local dataset store (a fresh one by default)
            matcher: Fuzzy matcher (thresholds from settings by default)
            chain: Strategy chain for live enhancement
            search_chain: Strategy chain for remote search
            cache: Result cache (TTL from settings by default)
            rate_limiter: Limiter shared by live enhancement and remote search
            client: HTTP client; if omitted one is created on first use and
                closed by aclose()
            clock: Time source for cache freshness, rate windows and timestamps
        """
        self.clock = clock
        self.dataset = dataset if dataset is not None else LocalDatasetStore()
        self.matcher = matcher or SimilarityMatcher()
        self.chain = chain if chain is not None else FetchStrategyChain.default()
        self.search_chain = search_chain if search_chain is not None else default_search_chain()
        self.cache = cache if cache is not None else ResultCache(clock=clock)
        self.rate_limiter = rate_limiter if rate_limiter is not None else RateLimiter(clock=clock)

        self._client = client
        self._owns_client = client is None
        # Guards cache and rate window; never held across a network call
        self._lock = asyncio.Lock()

    # =========================================================================
    # Lifecycle
    # =========================================================================

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                follow_redirects=True,
                timeout=max(settings.fetch_timeout, settings.search_timeout),
            )
        return self._client

    async def aclose(self) -> None:
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "EnrichmentOrchestrator":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    # =========================================================================
    # Resolution
    # =========================================================================

    async def resolve(self, query: Query) -> ResolutionResult:
        """
        Resolve one query through the tiers.

        Never raises: not found is a result, and any unexpected error is
        logged and reported as a not-found result carrying the error text.
        """
        try:
            return await self._resolve(query)
        except Exception as e:
            logger.error(f"Resolution of '{query.name}' failed: {e}", exc_info=True)
            result = ResolutionResult.not_found(query, resolved_at=self._now())
            result.failure_reason = str(e)
            return result

    async def _resolve(self, query: Query) -> ResolutionResult:
        normalized = normalize_name(query.name)
        if not normalized:
            logger.debug("Blank player name, nothing to resolve")
            return ResolutionResult.not_found(query, resolved_at=self._now())

        # Tier 1: cache
        if query.stable_id is not None:
            async with self._lock:
                cached = self.cache.get(query.stable_id)
            if cached is not None:
                logger.info(f"Cache hit for '{query.name}' (id {query.stable_id})")
                return replace(
                    cached,
                    query=query,
                    source=ProfileSource.CACHE,
                    profile=replace(cached.profile, source=ProfileSource.CACHE),
                )

        # Tiers 2 and 3: local dataset
        await self.dataset.ensure_loaded()

        tier = ProfileSource.DATABASE
        matched_name = None
        match_score = None
        profile = self.dataset.get_exact(normalized)
        if profile is None:
            candidate = self.matcher.find_best_match(normalized, self.dataset.entries())
            if candidate is not None:
                tier = ProfileSource.DATABASE_FUZZY
                profile = candidate.profile
                matched_name = candidate.name
                match_score = candidate.score

        if profile is None:
            logger.info(f"No match for '{query.name}'")
            return ResolutionResult.not_found(query, resolved_at=self._now())

        now = self._now()
        result = ResolutionResult(
            query=query,
            found=True,
            profile=replace(profile, source=tier, resolved_at=now),
            source=tier,
            matched_name=matched_name,
            match_score=match_score,
            resolved_at=now,
        )
        logger.info(f"Resolved '{query.name}' -> '{profile.name}' ({tier})")

        # Tier 4: live enhancement
        if query.allow_network and profile.reference_url:
            result = await self._enhance(result, tier)

        # Rate-limited fallbacks are not cached
        cache_key = query.stable_id if query.stable_id is not None else result.profile.external_id
        if cache_key is not None and result.failure_reason != RATE_LIMITED:
            async with self._lock:
                self.cache.put(cache_key, result)

        return result

    async def _enhance(self, result: ResolutionResult, tier: str) -> ResolutionResult:
        """Run the strategy chain over a dataset result; fall back to it on any failure."""
        async with self._lock:
            granted = self.rate_limiter.try_acquire()
        if not granted:
            return self._fallback(result, tier, RATE_LIMITED, live_attempted=False)

        profile = result.profile
        target = FetchTarget(
            reference=profile.reference_url,
            external_id=profile.external_id,
            name=profile.name,
        )
        try:
            partial, strategy_name = await self.chain.run(target, self.client)
        except Exception as e:
            logger.warning(f"Live enhancement of '{profile.name}' failed: {e}")
            return self._fallback(result, tier, str(e) or type(e).__name__, live_attempted=True)

        if partial is None:
            return self._fallback(result, tier, ALL_STRATEGIES_FAILED, live_attempted=True)

        now = self._now()
        enhanced = replace(
            partial.merge_into(profile),
            source=ProfileSource.LIVE_ENHANCED,
            resolved_at=now,
        )
        logger.info(f"Live data for '{profile.name}' via {strategy_name}")
        return replace(
            result,
            profile=enhanced,
            source=ProfileSource.LIVE_ENHANCED,
            live_attempted=True,
            resolved_at=now,
        )

    def _fallback(
        self,
        result: ResolutionResult,
        tier: str,
        reason: str,
        live_attempted: bool,
    ) -> ResolutionResult:
        source = ProfileSource.fallback(tier)
        logger.info(f"Keeping dataset data for '{result.profile.name}' ({reason})")
        return replace(
            result,
            profile=replace(result.profile, source=source),
            source=source,
            failure_reason=reason,
            live_attempted=live_attempted,
        )

    async def search_remote(self, name: str) -> ResolutionResult:
        """
        Look a name up on the remote search page.

        Used for players missing from the local dataset. Counts against
        the same rate window as live enhancement. Never raises.
        """
        query = Query(name=name, allow_network=True)
        if not normalize_name(name):
            return ResolutionResult.not_found(query, resolved_at=self._now())

        async with self._lock:
            granted = self.rate_limiter.try_acquire()
        if not granted:
            result = ResolutionResult.not_found(query, resolved_at=self._now())
            result.failure_reason = RATE_LIMITED
            return result

        target = FetchTarget(reference=build_search_url(name), name=name)
        try:
            partial, strategy_name = await self.search_chain.run(target, self.client)
        except Exception as e:
            logger.warning(f"Remote search for '{name}' failed: {e}")
            partial, strategy_name = None, None

        now = self._now()
        if partial is None:
            result = ResolutionResult.not_found(query, resolved_at=now)
            result.failure_reason = ALL_STRATEGIES_FAILED
            result.live_attempted = True
            return result

        profile = replace(
            partial.to_canonical(fallback_name=name),
            source=ProfileSource.REMOTE_SEARCH,
            resolved_at=now,
        )
        result = ResolutionResult(
            query=query,
            found=True,
            profile=profile,
            source=ProfileSource.REMOTE_SEARCH,
            matched_name=partial.name,
            live_attempted=True,
            resolved_at=now,
        )
        logger.info(f"Remote search found '{profile.name}' for '{name}' via {strategy_name}")

        if profile.external_id is not None:
            async with self._lock:
                self.cache.put(profile.external_id, result)
        return result

    # =========================================================================
    # Diagnostics
    # =========================================================================

    async def check_connectivity(self) -> dict:
        """
        One live chain run against the first dataset player with a reference.

        Does not consume a rate window slot.
        """
        await self.dataset.ensure_loaded()
        sample = next(
            (profile for _, profile in self.dataset.entries() if profile.reference_url),
            None,
        )
        if sample is None:
            return {"success": False, "player": None, "strategy": None, "elapsed_ms": 0}

        target = FetchTarget(
            reference=sample.reference_url,
            external_id=sample.external_id,
            name=sample.name,
        )
        started = time.perf_counter()
        partial, strategy_name = await self.chain.run(target, self.client)
        elapsed_ms = round((time.perf_counter() - started) * 1000)

        logger.info(
            f"Connectivity check with {sample.name}: "
            f"{'ok via ' + strategy_name if partial else 'failed'} in {elapsed_ms}ms"
        )
        return {
            "success": partial is not None,
            "player": sample.name,
            "strategy": strategy_name,
            "elapsed_ms": elapsed_ms,
        }

    def stats(self) -> dict:
        window = self.rate_limiter.snapshot()
        return {
            "cache": self.cache.stats(),
            "rate_limit": {
                "request_count": window.request_count,
                "max_requests": window.max_requests,
                "resets_in": max(0.0, window.reset_at - self.clock()),
            },
            "dataset": self.dataset.coverage(),
            "strategies": [strategy.name for strategy in self.chain.strategies],
        }

    def clear_caches(self) -> None:
        self.cache.clear()

    def _now(self):
        return to_datetime(self.clock())
