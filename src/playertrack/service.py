"""Ingestion service owning the rate limiter and the player registry."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, List, Mapping, Union

from playertrack.config import TrackerSettings
from playertrack.errors import RateLimitedError
from playertrack.ingest import RateLimiter, to_record
from playertrack.registry import PlayerRegistry


logger = logging.getLogger("uvicorn.error")

PayloadSource = Union[Mapping[str, Any], Callable[[], Mapping[str, Any]]]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class SweepResult:
    expired_windows: int
    evicted_players: int


class TrackerService:
    """Single owner of tracker state; handlers receive it by injection.

    ``monotonic`` drives rate-limit windows and ``clock`` stamps
    ``lastUpdated``; both are injectable for tests.
    """

    def __init__(
        self,
        settings: TrackerSettings | None = None,
        *,
        monotonic: Callable[[], float] = time.monotonic,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self.settings = settings or TrackerSettings()
        self.limiter = RateLimiter(
            window_seconds=self.settings.window_seconds,
            max_requests=self.settings.max_requests,
        )
        self.registry = PlayerRegistry()
        self._monotonic = monotonic
        self._clock = clock

    def submit(self, payload: PayloadSource, origin: str) -> None:
        """Admit, validate and store one submission.

        ``payload`` is either the field mapping or a zero-argument callable
        producing it; a callable is only invoked once the origin is admitted,
        so rejected requests are never decoded. Raises
        :class:`RateLimitedError` or an ``InvalidPayloadError``; the registry
        is untouched on either path.
        """

        self._admit(origin)
        if callable(payload):
            payload = payload()
        self._store(payload, origin)

    def _admit(self, origin: str) -> None:
        if not self.limiter.admit(origin, self._monotonic()):
            logger.warning("Rate limit exceeded for %s", origin)
            raise RateLimitedError(origin)

    def _store(self, payload: Mapping[str, Any], origin: str) -> None:
        record = to_record(payload, strict=self.settings.strict_numeric)
        self.registry.upsert(record.key, record, origin, self._clock())
        logger.info("Updated player data for %s in %s", record.player_name, record.game_name)

    def list_players(self) -> List[Dict[str, Any]]:
        return self.registry.snapshot()

    def sweep(self) -> SweepResult:
        """Drop expired rate windows and, when a TTL is set, stale players."""

        expired = self.limiter.sweep(self._monotonic())
        evicted = 0
        ttl = self.settings.record_ttl_seconds
        if ttl is not None:
            cutoff = self._clock() - timedelta(seconds=ttl)
            evicted = self.registry.evict_older_than(cutoff)
            if evicted:
                logger.info("Evicted %s stale player record(s)", evicted)
        return SweepResult(expired_windows=expired, evicted_players=evicted)
