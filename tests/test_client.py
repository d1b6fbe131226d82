import json

import httpx
import pytest

from playertrack.client import TrackerClient
from playertrack.errors import InvalidPayloadError, RateLimitedError, TrackerError


def _client(handler) -> TrackerClient:
    return TrackerClient("http://tracker", transport=httpx.MockTransport(handler))


def test_report_posts_json(status):
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"success": True})

    with _client(handler) as client:
        client.report(status)
    assert seen["path"] == "/server/api/player"
    assert seen["body"]["jobId"] == "J1"


@pytest.mark.parametrize(
    "code, body, error",
    [
        (429, {"error": "Rate limit exceeded"}, RateLimitedError),
        (400, {"error": "Invalid player data", "detail": "missing required field 'jobId'"}, InvalidPayloadError),
        (500, {"error": "Internal server error"}, TrackerError),
    ],
)
def test_report_maps_rejections(status, code, body, error):
    with _client(lambda request: httpx.Response(code, json=body)) as client:
        with pytest.raises(error):
            client.report(status)


def test_players_and_health():
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/health":
            return httpx.Response(200, json={"status": "ok"})
        return httpx.Response(200, json=[{"playerName": "A"}])

    with _client(handler) as client:
        assert client.health()
        assert client.players() == [{"playerName": "A"}]
