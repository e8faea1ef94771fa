"""Freshness-window cache for repository listings."""

from __future__ import annotations

import threading
import time
from typing import Callable


class ListingCache:
    """Per-key cache that expires entries after ``ttl_seconds``.

    Args:
        ttl_seconds: Freshness window. Entries older than this are misses.
        clock: Monotonic time source, injectable for tests.
    """

    def __init__(self, ttl_seconds: float = 300.0, clock: Callable[[], float] = time.monotonic):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[str, tuple[float, list[str]]] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> list[str] | None:
        now = self._clock()
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            stored_at, files = entry
            if now - stored_at >= self.ttl_seconds:
                del self._entries[key]
                return None
            return list(files)

    def set(self, key: str, files: list[str]) -> None:
        with self._lock:
            self._entries[key] = (self._clock(), list(files))

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
