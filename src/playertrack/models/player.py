"""Canonical player status models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Tuple

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


# Wire names, in the order reporters send them.
REQUIRED_FIELDS: Tuple[str, ...] = (
    "playerName",
    "displayName",
    "gameName",
    "serverPlayers",
    "maxPlayers",
    "placeId",
    "jobId",
    "currentTime",
    "country",
    "executor",
    "version",
)

NUMERIC_FIELDS: Tuple[str, ...] = ("serverPlayers", "maxPlayers")

PlayerKey = Tuple[str, str]


class PlayerRecord(BaseModel):
    """Latest self-reported status of one game client."""

    player_name: str = Field(..., alias="playerName")
    display_name: str = Field(..., alias="displayName")
    game_name: str = Field(..., alias="gameName")
    server_players: int = Field(..., alias="serverPlayers")
    max_players: int = Field(..., alias="maxPlayers")
    place_id: str = Field(..., alias="placeId")
    job_id: str = Field(..., alias="jobId")
    current_time: str = Field(..., alias="currentTime")
    country: str
    executor: str
    version: str

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        coerce_numbers_to_str=True,
        extra="ignore",
    )

    @property
    def key(self) -> PlayerKey:
        return (self.player_name, self.job_id)

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


@dataclass(frozen=True)
class StoredPlayer:
    """Registry entry: the record plus server-side metadata."""

    record: PlayerRecord
    last_updated: datetime
    origin: str

    def export(self) -> Dict[str, Any]:
        """Wire form of the entry without the submitting origin."""

        payload = self.record.to_wire()
        payload["lastUpdated"] = self.last_updated.isoformat()
        return payload
