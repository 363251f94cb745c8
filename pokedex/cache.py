"""A small thread-safe cache whose entries expire after a fixed interval."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class _Entry:
    created_at: float
    val: Any


class Cache:
    """Key/value store whose background reaper drops entries older than ``interval`` seconds."""

    def __init__(self, interval: float) -> None:
        if interval <= 0:
            raise ValueError("cache interval must be positive")
        self.interval = float(interval)
        self._entries: dict[str, _Entry] = {}
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._reaper = threading.Thread(
            target=self._reap_loop, name="cache-reaper", daemon=True
        )
        self._reaper.start()

    def add(self, key: str, val: Any) -> None:
        """Store ``val`` under ``key``, stamped with the current time."""
        with self._lock:
            self._entries[key] = _Entry(time.monotonic(), val)

    def get(self, key: str) -> Any | None:
        """Return the value stored under ``key``, or None when it is absent."""
        with self._lock:
            entry = self._entries.get(key)
        return None if entry is None else entry.val

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def close(self) -> None:
        """Stop the background reaper; stored entries are kept."""
        self._stop.set()
        if self._reaper is not threading.current_thread():
            self._reaper.join()

    def __enter__(self) -> Cache:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def _reap_loop(self) -> None:
        while not self._stop.wait(self.interval):
            self._reap()

    def _reap(self) -> None:
        now = time.monotonic()
        with self._lock:
            expired = [
                key
                for key, entry in self._entries.items()
                if now - entry.created_at > self.interval
            ]
            for key in expired:
                del self._entries[key]