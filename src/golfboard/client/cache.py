"""In-memory response cache with per-read time-to-live."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

DEFAULT_MAX_ENTRIES = 512


@dataclass(frozen=True)
class CacheEntry:
    value: Any
    stored_at: float


class ResponseCache:
    """Memoize idempotent reads by key; freshness is decided by the reader's ttl.

    Stale entries are dropped when read. Past ``max_entries`` the oldest
    entry is evicted on write.
    """

    def __init__(
        self,
        clock: Callable[[], float] = time.monotonic,
        *,
        max_entries: int = DEFAULT_MAX_ENTRIES,
    ):
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        self._clock = clock
        self._max_entries = max_entries
        # Insertion order doubles as age order; set() re-inserts refreshed keys.
        self._entries: Dict[str, CacheEntry] = {}

    def get(self, key: str, ttl: float) -> Optional[Any]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if self._clock() - entry.stored_at >= ttl:
            del self._entries[key]
            return None
        return entry.value

    def set(self, key: str, value: Any) -> None:
        self._entries.pop(key, None)
        while len(self._entries) >= self._max_entries:
            del self._entries[next(iter(self._entries))]
        self._entries[key] = CacheEntry(value=value, stored_at=self._clock())

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
