"""HTTP client for reporters and dashboards talking to a tracker service."""

from __future__ import annotations

from typing import Any, Mapping

import httpx

from playertrack.errors import InvalidPayloadError, RateLimitedError, TrackerError


class TrackerClient:
    """Thin wrapper over :class:`httpx.Client` matching the tracker routes."""

    def __init__(self, base_url: str, *, timeout: float = 10.0, transport: httpx.BaseTransport | None = None):
        self._client = httpx.Client(base_url=base_url, timeout=timeout, transport=transport)

    def __enter__(self) -> "TrackerClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def report(self, status: Mapping[str, Any]) -> None:
        """Submit one status report, raising the matching tracker error on rejection."""

        resp = self._client.post("/server/api/player", json=dict(status))
        if resp.status_code == 429:
            raise RateLimitedError()
        if resp.status_code == 400:
            body = _json_or_empty(resp)
            raise InvalidPayloadError(body.get("detail") or body.get("error") or "Invalid player data")
        if resp.status_code >= 500:
            raise TrackerError(f"tracker returned HTTP {resp.status_code}")
        resp.raise_for_status()

    def players(self) -> list[dict[str, Any]]:
        resp = self._client.get("/server/api/players")
        resp.raise_for_status()
        return resp.json()

    def health(self) -> bool:
        try:
            resp = self._client.get("/health")
        except httpx.HTTPError:
            return False
        return resp.status_code == 200 and resp.json().get("status") == "ok"


def _json_or_empty(resp: httpx.Response) -> dict[str, Any]:
    try:
        data = resp.json()
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}
