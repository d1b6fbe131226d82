from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class SubmitResponse(BaseModel):
    success: bool = True


class ErrorResponse(BaseModel):
    error: str
    detail: str | None = None


class PlayerSnapshot(BaseModel):
    player_name: str = Field(alias="playerName")
    display_name: str = Field(alias="displayName")
    game_name: str = Field(alias="gameName")
    server_players: int = Field(alias="serverPlayers")
    max_players: int = Field(alias="maxPlayers")
    place_id: str = Field(alias="placeId")
    job_id: str = Field(alias="jobId")
    current_time: str = Field(alias="currentTime")
    country: str
    executor: str
    version: str
    last_updated: str = Field(alias="lastUpdated")

    model_config = ConfigDict(populate_by_name=True)
