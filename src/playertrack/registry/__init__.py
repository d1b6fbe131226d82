"""In-memory player registry."""

from .store import PlayerRegistry

__all__ = ["PlayerRegistry"]
