"""Runtime configuration for the tracker service."""

from .settings import ENV_PREFIX, TrackerSettings

__all__ = ["ENV_PREFIX", "TrackerSettings"]
