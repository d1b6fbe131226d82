from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest


class FakeClock:
    """Deterministic stand-in for both the monotonic and wall clocks."""

    def __init__(self, start: float = 1000.0):
        self.value = start
        self._epoch = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def monotonic(self) -> float:
        return self.value

    def wall(self) -> datetime:
        return self._epoch + timedelta(seconds=self.value)

    def advance(self, seconds: float) -> None:
        self.value += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def status() -> dict[str, str]:
    return {
        "playerName": "A",
        "displayName": "Alpha",
        "gameName": "Obby",
        "serverPlayers": "5",
        "maxPlayers": "10",
        "placeId": "1818",
        "jobId": "J1",
        "currentTime": "12:00:00",
        "country": "US",
        "executor": "exec",
        "version": "1.0",
    }
