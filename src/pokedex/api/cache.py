"""Time-expiring response cache with a background reaper."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional, Tuple

from ..utils.logger import Logger

DEFAULT_MAX_AGE_SECONDS = 24 * 60 * 60


class ReaperState(Enum):
    RUNNING = "running"
    STOPPED = "stopped"


@dataclass(frozen=True)
class CacheEntry:
    created_at: float
    value: bytes


class ResponseCache:
    """
    In-memory cache of raw response bodies keyed by request URL.

    Entries expire two ways. A reaper thread wakes every ``interval`` seconds
    and drops entries older than ``interval``. Independently, ``get`` refuses
    (and deletes) any entry older than ``max_age``, so stale data is caught on
    read even when the reaper is late or configured with a large interval.
    """

    def __init__(
        self,
        interval: float,
        max_age: float = DEFAULT_MAX_AGE_SECONDS,
        clock: Callable[[], float] = time.monotonic,
        logger: Optional[Logger] = None,
    ) -> None:
        if interval <= 0:
            raise ValueError(f"Reap interval must be positive, got {interval}")
        if max_age <= 0:
            raise ValueError(f"Max age must be positive, got {max_age}")

        self.interval = interval
        self.max_age = max_age
        self.logger = logger
        self._clock = clock
        self._store: Dict[str, CacheEntry] = {}
        self._lock = threading.Lock()
        self._stop_event = threading.Event()

        self._reaper = threading.Thread(
            target=self._reap_loop, name="response-cache-reaper", daemon=True
        )
        self.state = ReaperState.RUNNING
        self._reaper.start()

    def add(self, key: str, value: bytes) -> None:
        """Insert or replace the entry for ``key``."""
        with self._lock:
            self._store[key] = CacheEntry(created_at=self._clock(), value=value)

    def get(self, key: str) -> Tuple[Optional[bytes], bool]:
        """Return ``(value, True)`` for a live entry, ``(None, False)`` otherwise."""
        with self._lock:
            entry = self._store.get(key)
            if entry is None:
                return None, False
            if self._clock() - entry.created_at > self.max_age:
                del self._store[key]
                return None, False
            return entry.value, True

    def reap(self) -> int:
        """Drop entries older than the reap interval. Returns how many were removed."""
        with self._lock:
            now = self._clock()
            stale = [key for key, entry in self._store.items() if now - entry.created_at > self.interval]
            for key in stale:
                del self._store[key]

        if stale and self.logger:
            self.logger.log_reap(len(stale), self.interval)
        return len(stale)

    def stop(self, timeout: Optional[float] = None) -> None:
        """Signal the reaper to exit and wait for it."""
        self._stop_event.set()
        if self._reaper.is_alive() and threading.current_thread() is not self._reaper:
            self._reaper.join(timeout)
        self.state = ReaperState.STOPPED

    def is_running(self) -> bool:
        return self.state == ReaperState.RUNNING and self._reaper.is_alive()

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)

    def __enter__(self) -> "ResponseCache":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    def _reap_loop(self) -> None:
        # Fixed period on time.monotonic, independent of the injected entry clock.
        next_tick = time.monotonic() + self.interval
        while not self._stop_event.wait(max(0.0, next_tick - time.monotonic())):
            self.reap()
            next_tick += self.interval
            now = time.monotonic()
            if next_tick < now:
                next_tick = now + self.interval
