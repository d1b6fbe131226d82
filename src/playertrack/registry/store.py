"""Thread-safe, dict-backed registry of the latest status per player."""

from __future__ import annotations

import threading
from datetime import datetime
from typing import Any, Dict, List, Optional

from playertrack.ingest.sanitize import clean
from playertrack.models import PlayerKey, PlayerRecord, StoredPlayer


class PlayerRegistry:
    """Keyed upsert store for player records.

    Entries are immutable and swapped whole under the lock, so readers never
    observe a partially written record. Iteration order follows first
    insertion but callers must not rely on it.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: Dict[PlayerKey, StoredPlayer] = {}

    def upsert(self, key: PlayerKey, record: PlayerRecord, origin: str, now: datetime) -> StoredPlayer:
        entry = StoredPlayer(record=record, last_updated=now, origin=origin)
        with self._lock:
            self._entries[key] = entry
        return entry

    def get(self, key: PlayerKey) -> Optional[StoredPlayer]:
        with self._lock:
            return self._entries.get(key)

    def remove(self, key: PlayerKey) -> bool:
        with self._lock:
            return self._entries.pop(key, None) is not None

    def evict_older_than(self, cutoff: datetime) -> int:
        """Remove entries last updated before ``cutoff``; returns the count removed."""

        with self._lock:
            stale = [key for key, entry in self._entries.items() if entry.last_updated < cutoff]
            for key in stale:
                del self._entries[key]
        return len(stale)

    def entries(self) -> List[StoredPlayer]:
        with self._lock:
            return list(self._entries.values())

    def snapshot(self) -> List[Dict[str, Any]]:
        """Sanitized, origin-free copies of every current entry."""

        return [clean(entry.export()) for entry in self.entries()]

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries
