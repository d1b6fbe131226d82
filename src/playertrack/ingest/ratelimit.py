"""Per-origin fixed window request counting."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Dict


@dataclass
class RateWindow:
    count: int
    window_start: float


class RateLimiter:
    """Count requests per origin and reject those over budget.

    A window opens on the first request from an origin and is replaced once
    more than ``window_seconds`` have elapsed since it opened. Rejected
    requests still count towards the open window.
    """

    def __init__(self, *, window_seconds: float = 10.0, max_requests: int = 20):
        if window_seconds <= 0:
            raise ValueError("window_seconds must be positive")
        if max_requests < 1:
            raise ValueError("max_requests must be at least 1")
        self.window_seconds = window_seconds
        self.max_requests = max_requests
        self._lock = threading.Lock()
        self._windows: Dict[str, RateWindow] = {}

    def admit(self, origin: str, now: float) -> bool:
        with self._lock:
            window = self._windows.get(origin)
            if window is None or now - window.window_start > self.window_seconds:
                self._windows[origin] = RateWindow(count=1, window_start=now)
                return True
            window.count += 1
            return window.count <= self.max_requests

    def window_for(self, origin: str) -> RateWindow | None:
        with self._lock:
            window = self._windows.get(origin)
            if window is None:
                return None
            return RateWindow(count=window.count, window_start=window.window_start)

    def sweep(self, now: float) -> int:
        """Drop windows that have already expired; returns how many were removed."""

        with self._lock:
            expired = [
                origin
                for origin, window in self._windows.items()
                if now - window.window_start > self.window_seconds
            ]
            for origin in expired:
                del self._windows[origin]
        return len(expired)

    def __len__(self) -> int:
        with self._lock:
            return len(self._windows)
