"""Tracker settings with environment and JSON profile loading."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Mapping, Optional, Tuple


logger = logging.getLogger(__name__)

ENV_PREFIX = "PLAYERTRACK_"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _raw_setting(key: str) -> Optional[str]:
    raw = os.getenv(ENV_PREFIX + key)
    if raw is None or not raw.strip():
        return None
    return raw.strip()


def _bad_setting(key: str, raw: str, kind: str, fallback: Any) -> None:
    logger.warning("Ignoring %s%s=%r (expected %s); keeping %s", ENV_PREFIX, key, raw, kind, fallback)


def _setting_float(key: str, default: float, *, floor: float | None = None) -> float:
    raw = _raw_setting(key)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        _bad_setting(key, raw, "a number", default)
        return default
    return value if floor is None else max(floor, value)


def _setting_int(key: str, default: int, *, floor: int | None = None) -> int:
    raw = _raw_setting(key)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        _bad_setting(key, raw, "an integer", default)
        return default
    return value if floor is None else max(floor, value)


def _setting_bool(key: str, default: bool) -> bool:
    raw = _raw_setting(key)
    if raw is None:
        return default
    lowered = raw.lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    _bad_setting(key, raw, "a boolean", default)
    return default


def _setting_ttl(key: str, default: Optional[float]) -> Optional[float]:
    raw = _raw_setting(key)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        _bad_setting(key, raw, "a number of seconds", default)
        return default
    # Non-positive TTL disables eviction.
    return value if value > 0 else None


@dataclass(frozen=True)
class TrackerSettings:
    window_seconds: float = 10.0
    max_requests: int = 20
    strict_numeric: bool = False
    record_ttl_seconds: Optional[float] = None
    sweep_interval_seconds: float = 60.0
    trust_forwarded_for: bool = False
    cors_origins: Tuple[str, ...] = field(default=("*",))
    host: str = "0.0.0.0"
    port: int = 8000

    def __post_init__(self) -> None:
        if self.window_seconds <= 0:
            raise ValueError("window_seconds must be positive")
        if self.max_requests < 1:
            raise ValueError("max_requests must be at least 1")
        if self.record_ttl_seconds is not None and self.record_ttl_seconds <= 0:
            raise ValueError("record_ttl_seconds must be positive when set")

    @classmethod
    def from_env(cls, base: "TrackerSettings | None" = None) -> "TrackerSettings":
        """Overlay ``PLAYERTRACK_*`` environment variables on ``base``."""

        base = base or cls()
        cors_raw = os.getenv(f"{ENV_PREFIX}CORS_ORIGINS")
        cors = base.cors_origins
        if cors_raw is not None:
            cors = tuple(item.strip() for item in cors_raw.split(",") if item.strip())
        return replace(
            base,
            window_seconds=_setting_float("WINDOW_SECONDS", base.window_seconds, floor=0.001),
            max_requests=_setting_int("MAX_REQUESTS", base.max_requests, floor=1),
            strict_numeric=_setting_bool("STRICT_NUMERIC", base.strict_numeric),
            record_ttl_seconds=_setting_ttl("RECORD_TTL_SECONDS", base.record_ttl_seconds),
            sweep_interval_seconds=_setting_float("SWEEP_INTERVAL_SECONDS", base.sweep_interval_seconds, floor=0.0),
            trust_forwarded_for=_setting_bool("TRUST_FORWARDED_FOR", base.trust_forwarded_for),
            cors_origins=cors,
            host=_raw_setting("HOST") or base.host,
            port=_setting_int("PORT", base.port, floor=0),
        )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "TrackerSettings":
        known = {item.name for item in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown settings keys: {', '.join(unknown)}")
        values = dict(data)
        if "cors_origins" in values:
            values["cors_origins"] = tuple(values["cors_origins"])
        return cls(**values)

    @classmethod
    def load(cls, path: Path) -> "TrackerSettings":
        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"Settings file {path} must contain a JSON object")
        return cls.from_mapping(data)

    def save(self, path: Path) -> None:
        payload = asdict(self)
        payload["cors_origins"] = list(self.cors_origins)
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
