"""
Enrichment module for squadrate.

Ties the player dataset and the remote fetch chain together:
- EnrichmentOrchestrator: cache -> dataset -> fuzzy -> live, with fallback
- ResultCache / RateLimiter: per-orchestrator time-bounded state
- BatchResolver: bounded concurrent waves over many names or a roster
"""

from squadrate.enrich.batch import (
    BatchFailure,
    BatchResolver,
    EnrichedRosterPlayer,
    processing_statistics,
)
from squadrate.enrich.cache import CacheEntry, ResultCache
from squadrate.enrich.clock import ManualClock, system_clock
from squadrate.enrich.orchestrator import EnrichmentOrchestrator
from squadrate.enrich.rate_limit import RateLimiter, RateWindow

__all__ = [
    "BatchFailure",
    "BatchResolver",
    "EnrichedRosterPlayer",
    "processing_statistics",
    "CacheEntry",
    "ResultCache",
    "ManualClock",
    "system_clock",
    "EnrichmentOrchestrator",
    "RateLimiter",
    "RateWindow",
]
