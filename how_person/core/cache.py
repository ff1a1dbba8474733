"""Bounded in-memory cache mapping a request signature to a rendered summary."""

from __future__ import annotations

import logging
import time
from collections import OrderedDict
from collections.abc import Callable

logger = logging.getLogger(__name__)


class AnalysisCache:
    """LRU cache with an optional per-entry time-to-live.

    Entries are evicted least-recently-used first once ``max_entries`` is
    reached. A ``ttl_seconds`` of 0 (or less) disables expiry.
    """

    def __init__(
        self,
        max_entries: int = 128,
        ttl_seconds: float = 0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        self.max_entries = max_entries
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: OrderedDict[str, tuple[float, str]] = OrderedDict()

    def get(self, key: str) -> str | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        stored_at, value = entry
        if self.ttl_seconds > 0 and self._clock() - stored_at > self.ttl_seconds:
            del self._entries[key]
            logger.debug("Cache entry expired: %s", key)
            return None
        self._entries.move_to_end(key)
        return value

    def set(self, key: str, value: str) -> None:
        if key in self._entries:
            self._entries.move_to_end(key)
        self._entries[key] = (self._clock(), value)
        while len(self._entries) > self.max_entries:
            evicted, _ = self._entries.popitem(last=False)
            logger.debug("Cache full, evicted: %s", evicted)

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get(key) is not None

    def __len__(self) -> int:
        return len(self._entries)
