"""Exception taxonomy for ingestion failures."""

from __future__ import annotations

from typing import Any


class TrackerError(Exception):
    """Base class for every error raised by the tracker core."""


class RateLimitedError(TrackerError):
    """Raised when an origin exceeded its request budget for the current window."""

    def __init__(self, origin: str | None = None):
        self.origin = origin
        super().__init__("Rate limit exceeded")


class InvalidPayloadError(TrackerError, ValueError):
    """Raised when a submission is rejected before it reaches the registry."""


class MissingFieldError(InvalidPayloadError):
    def __init__(self, field: str):
        self.field = field
        super().__init__(f"missing required field {field!r}")


class NotNumericError(InvalidPayloadError):
    def __init__(self, field: str, value: Any = None):
        self.field = field
        self.value = value
        super().__init__(f"field {field!r} is not an integer: {value!r}")


class MalformedBodyError(InvalidPayloadError):
    """Raised when the request body cannot be decoded into a field mapping."""
