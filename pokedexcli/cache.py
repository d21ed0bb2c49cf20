"""Thread-safe in-memory cache whose entries expire after a fixed interval."""

from __future__ import annotations

import sys
import threading
import time
from dataclasses import dataclass
from typing import TextIO


@dataclass(frozen=True)
class _Entry:
    created_at: float
    val: bytes


class Cache:
    """Maps string keys to byte strings.

    A background thread wakes every ``interval`` seconds and drops entries
    that are at least ``interval`` seconds old.
    """

    def __init__(self, interval: float) -> None:
        if interval <= 0:
            raise ValueError("cache interval must be positive")
        self.interval = float(interval)
        self._store: dict[str, _Entry] = {}
        self._lock = threading.Lock()
        self._stopped = threading.Event()
        self._reaper = threading.Thread(
            target=self._reap_loop, name="cache-reaper", daemon=True
        )
        self._reaper.start()

    def add(self, key: str, val: bytes) -> None:
        """Store ``val`` under ``key``, replacing any earlier entry."""
        entry = _Entry(created_at=time.monotonic(), val=bytes(val))
        with self._lock:
            self._store[key] = entry

    def get(self, key: str) -> bytes | None:
        """Return the value stored under ``key``, or None if there is none."""
        with self._lock:
            entry = self._store.get(key)
        return None if entry is None else entry.val

    def reap(self) -> int:
        """Drop every entry that has reached the interval; return how many went."""
        now = time.monotonic()
        with self._lock:
            expired = [
                key
                for key, entry in self._store.items()
                if now - entry.created_at >= self.interval
            ]
            for key in expired:
                del self._store[key]
        return len(expired)

    def dump(self, file: TextIO | None = None) -> None:
        """Write every entry to ``file`` (standard output by default)."""
        out = sys.stdout if file is None else file
        with self._lock:
            items = list(self._store.items())
        for key, entry in items:
            text = entry.val.decode("utf-8", errors="replace")
            out.write(f"key: {key} - val: {text}\n\n")

    def close(self) -> None:
        """Stop the background reaper."""
        self._stopped.set()
        if self._reaper is not threading.current_thread():
            self._reaper.join()

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._store

    def __enter__(self) -> Cache:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _reap_loop(self) -> None:
        while not self._stopped.wait(self.interval):
            self.reap()