"""
Time-bounded result cache.

Entries are never evicted on read: an entry older than the TTL is simply
treated as absent, and the next successful resolution overwrites it.
"""

import logging
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from squadrate.config import settings
from squadrate.enrich.clock import Clock, system_clock

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class CacheEntry(Generic[T]):
    key: str
    value: T
    inserted_at: float

    def is_fresh(self, now: float, ttl: float) -> bool:
        return now - self.inserted_at <= ttl


class ResultCache(Generic[T]):
    """
    Cache keyed by a stable identifier.

    Usage:
        cache = ResultCache(ttl=3600)
        cache.put("239085", result)
        cache.get("239085")  # None once the entry is older than an hour
    """

    def __init__(self, ttl: Optional[float] = None, clock: Clock = system_clock):
        self.ttl = ttl if ttl is not None else settings.cache_ttl_seconds
        self.clock = clock
        self._entries: dict[str, CacheEntry[T]] = {}
        self.hits = 0
        self.misses = 0

    @staticmethod
    def make_key(stable_id) -> str:
        return str(stable_id)

    def get(self, stable_id) -> Optional[T]:
        """Fresh cached value, or None if absent or stale."""
        key = self.make_key(stable_id)
        entry = self._entries.get(key)
        if entry is None or not entry.is_fresh(self.clock(), self.ttl):
            self.misses += 1
            return None
        self.hits += 1
        return entry.value

    def put(self, stable_id, value: T) -> CacheEntry[T]:
        key = self.make_key(stable_id)
        entry = CacheEntry(key=key, value=value, inserted_at=self.clock())
        self._entries[key] = entry
        return entry

    def clear(self) -> None:
        self._entries.clear()
        logger.info("Result cache cleared")

    def __len__(self) -> int:
        return len(self._entries)

    def stats(self) -> dict:
        now = self.clock()
        fresh = sum(1 for e in self._entries.values() if e.is_fresh(now, self.ttl))
        return {
            "size": len(self._entries),
            "fresh": fresh,
            "stale": len(self._entries) - fresh,
            "hits": self.hits,
            "misses": self.misses,
            "keys": list(self._entries),
        }
