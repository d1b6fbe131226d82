"""Pydantic models for API I/O."""

from .player import ErrorResponse, PlayerSnapshot, SubmitResponse

__all__ = [
    "ErrorResponse",
    "PlayerSnapshot",
    "SubmitResponse",
]
