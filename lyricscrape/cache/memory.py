from __future__ import annotations

import logging
import threading
from dataclasses import dataclass

from lyricscrape.sources.types import LookupResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CacheKey:
    source: str
    query: str


class LyricsCache:
    """
    In-process memo of lookup outcomes, NotFound included. Entries live for
    the lifetime of the cache; nothing is evicted.

    Two first-time lookups of the same key may both run and both put; the
    last put wins.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: dict[CacheKey, LookupResult] = {}

    def get(self, key: CacheKey) -> LookupResult | None:
        """Returns the memoized result, or None on a miss."""
        with self._lock:
            return self._entries.get(key)

    def put(self, key: CacheKey, result: LookupResult) -> None:
        with self._lock:
            self._entries[key] = result

    def invalidate(self, key: CacheKey) -> bool:
        with self._lock:
            return self._entries.pop(key, None) is not None

    def clear(self) -> None:
        with self._lock:
            n = len(self._entries)
            self._entries.clear()
        logger.debug("Cleared %d cached lookups", n)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries
