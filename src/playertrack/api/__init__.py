"""REST gateway for the player tracker."""

from __future__ import annotations

import asyncio
import contextlib
import json
import logging
import urllib.parse
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse

from playertrack.api.dashboard import render_dashboard_page
from playertrack.api.schemas import ErrorResponse, PlayerSnapshot, SubmitResponse
from playertrack.config import TrackerSettings
from playertrack.errors import InvalidPayloadError, MalformedBodyError, RateLimitedError
from playertrack.service import TrackerService


logger = logging.getLogger("uvicorn.error")

SUBMIT_PATH = "/server/api/player"
PLAYERS_PATH = "/server/api/players"


def _error(status_code: int, error: str, detail: str | None = None) -> JSONResponse:
    body = ErrorResponse(error=error, detail=detail).model_dump(exclude_none=True)
    return JSONResponse(status_code=status_code, content=body)


def _client_origin(request: Request, trust_forwarded_for: bool) -> str:
    if trust_forwarded_for:
        forwarded = request.headers.get("x-forwarded-for", "")
        first_hop = forwarded.split(",")[0].strip()
        if first_hop:
            return first_hop
    if request.client is not None:
        return request.client.host
    return "unknown"


def _decode_payload(content_type: str, body: bytes) -> dict[str, Any]:
    if "application/x-www-form-urlencoded" in content_type:
        text = body.decode("utf-8", errors="replace")
        return dict(urllib.parse.parse_qsl(text, keep_blank_values=True))
    if not body:
        raise MalformedBodyError("request body is empty")
    try:
        data = json.loads(body)
    except ValueError as exc:
        raise MalformedBodyError(f"invalid JSON body: {exc}") from exc
    if not isinstance(data, dict):
        raise MalformedBodyError("request body must be a JSON object")
    return data


async def _sweep_forever(service: TrackerService, interval: float) -> None:
    while True:
        await asyncio.sleep(interval)
        try:
            service.sweep()
        except Exception:
            logger.exception("Registry sweep failed")


def create_app(settings: TrackerSettings | None = None, service: TrackerService | None = None) -> FastAPI:
    if service is None:
        service = TrackerService(settings or TrackerSettings.from_env())
    settings = service.settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        task = None
        if settings.sweep_interval_seconds > 0:
            task = asyncio.create_task(_sweep_forever(service, settings.sweep_interval_seconds))
        try:
            yield
        finally:
            if task is not None:
                task.cancel()
                with contextlib.suppress(asyncio.CancelledError):
                    await task

    app = FastAPI(title="playertrack", lifespan=lifespan)
    app.state.service = service
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RateLimitedError)
    async def rate_limited(request: Request, exc: RateLimitedError) -> JSONResponse:
        return _error(429, "Rate limit exceeded")

    @app.exception_handler(InvalidPayloadError)
    async def invalid_payload(request: Request, exc: InvalidPayloadError) -> JSONResponse:
        logger.warning("Rejected player data: %s", exc)
        return _error(400, "Invalid player data", str(exc))

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post(
        SUBMIT_PATH,
        response_model=SubmitResponse,
        responses={400: {"model": ErrorResponse}, 429: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    )
    async def submit_player(request: Request):
        origin = _client_origin(request, settings.trust_forwarded_for)
        content_type = request.headers.get("content-type", "")
        body = await request.body()
        try:
            service.submit(lambda: _decode_payload(content_type, body), origin)
        except (RateLimitedError, InvalidPayloadError):
            raise
        except Exception:
            logger.exception("Error processing player data")
            return _error(500, "Internal server error")
        return SubmitResponse()

    @app.get(PLAYERS_PATH, response_model=list[PlayerSnapshot])
    async def list_players():
        try:
            players = service.list_players()
        except Exception:
            logger.exception("Error exporting player data")
            return _error(500, "Internal server error")
        return players

    @app.get("/", response_class=HTMLResponse)
    async def dashboard() -> HTMLResponse:
        return HTMLResponse(render_dashboard_page(players_url=PLAYERS_PATH))

    return app
