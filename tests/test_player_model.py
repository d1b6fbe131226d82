import pytest
from datetime import datetime, timezone
from pydantic import ValidationError

from playertrack.models import PlayerRecord, StoredPlayer


def test_player_record_is_frozen(status):
    record = PlayerRecord.model_validate({**status, "serverPlayers": 5, "maxPlayers": 10})

    assert record.player_name == "A"
    assert record.key == ("A", "J1")

    with pytest.raises((TypeError, ValidationError)):
        record.player_name = "B"  # type: ignore[misc]


def test_numeric_wire_values_become_strings(status):
    record = PlayerRecord.model_validate({**status, "placeId": 1818, "serverPlayers": 5, "maxPlayers": 10})
    assert record.place_id == "1818"


def test_stored_player_export_drops_origin(status):
    record = PlayerRecord.model_validate({**status, "serverPlayers": 5, "maxPlayers": 10})
    entry = StoredPlayer(record=record, last_updated=datetime(2024, 1, 1, tzinfo=timezone.utc), origin="10.0.0.1")

    exported = entry.export()
    assert exported["playerName"] == "A"
    assert exported["serverPlayers"] == 5
    assert exported["lastUpdated"] == "2024-01-01T00:00:00+00:00"
    assert "origin" not in exported
    assert "10.0.0.1" not in exported.values()
