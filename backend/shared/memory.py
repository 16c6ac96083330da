"""
In-memory row store for development and tests.

Holds plain dict rows shaped like the Postgres tables so the in-memory
repositories can reuse the same row-to-model mapping as the Supabase ones.
A single lock serializes writes, which gives conditional updates the same
single-winner semantics as a row-level conditional UPDATE.
"""

import itertools
import threading
from dataclasses import dataclass, field
from typing import Any, Iterator


Row = dict[str, Any]


@dataclass
class MemoryStore:
    """Tables for users, verification history and trips."""

    users: dict[str, Row] = field(default_factory=dict)
    verification_history: list[Row] = field(default_factory=list)
    user_trips: dict[int, Row] = field(default_factory=dict)
    lock: threading.RLock = field(default_factory=threading.RLock)
    _sequences: dict[str, Iterator[int]] = field(default_factory=dict)

    def next_id(self, table: str) -> int:
        """Return the next serial id for a table (starts at 1)."""
        with self.lock:
            if table not in self._sequences:
                self._sequences[table] = itertools.count(1)
            return next(self._sequences[table])

    def clear(self) -> None:
        """Drop all rows and reset sequences."""
        with self.lock:
            self.users.clear()
            self.verification_history.clear()
            self.user_trips.clear()
            self._sequences.clear()
