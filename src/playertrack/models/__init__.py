"""Player status models shared by the registry and the API layer."""

from .player import REQUIRED_FIELDS, NUMERIC_FIELDS, PlayerKey, PlayerRecord, StoredPlayer

__all__ = [
    "REQUIRED_FIELDS",
    "NUMERIC_FIELDS",
    "PlayerKey",
    "PlayerRecord",
    "StoredPlayer",
]
