from pathlib import Path

import pytest

from playertrack.cli import _parse_args, resolve_settings
from playertrack.config import TrackerSettings


def test_default_limits():
    settings = TrackerSettings()
    assert settings.window_seconds == 10.0
    assert settings.max_requests == 20
    assert settings.record_ttl_seconds is None
    assert settings.strict_numeric is False


def test_from_env_overrides_and_falls_back(monkeypatch):
    monkeypatch.setenv("PLAYERTRACK_MAX_REQUESTS", "5")
    monkeypatch.setenv("PLAYERTRACK_WINDOW_SECONDS", "not-a-number")
    monkeypatch.setenv("PLAYERTRACK_STRICT_NUMERIC", "yes")
    monkeypatch.setenv("PLAYERTRACK_RECORD_TTL_SECONDS", "0")
    monkeypatch.setenv("PLAYERTRACK_CORS_ORIGINS", "https://a.example, https://b.example")

    settings = TrackerSettings.from_env()
    assert settings.max_requests == 5
    assert settings.window_seconds == 10.0
    assert settings.strict_numeric is True
    assert settings.record_ttl_seconds is None
    assert settings.cors_origins == ("https://a.example", "https://b.example")


def test_profile_round_trip(tmp_path: Path):
    path = tmp_path / "tracker.json"
    TrackerSettings(max_requests=7, cors_origins=("https://x.example",)).save(path)
    loaded = TrackerSettings.load(path)
    assert loaded.max_requests == 7
    assert loaded.cors_origins == ("https://x.example",)


def test_profile_rejects_unknown_keys(tmp_path: Path):
    path = tmp_path / "tracker.json"
    path.write_text('{"max_requests": 3, "bogus": 1}', encoding="utf-8")
    with pytest.raises(ValueError):
        TrackerSettings.load(path)


def test_invalid_values_rejected():
    with pytest.raises(ValueError):
        TrackerSettings(max_requests=0)


def test_cli_flags_take_precedence(tmp_path: Path, monkeypatch):
    path = tmp_path / "tracker.json"
    TrackerSettings(max_requests=7, port=9000).save(path)
    monkeypatch.setenv("PLAYERTRACK_PORT", "9100")

    settings = resolve_settings(_parse_args(["--config", str(path), "--max-requests", "3", "--strict-numeric"]))
    assert settings.max_requests == 3
    assert settings.port == 9100
    assert settings.strict_numeric is True


def test_bad_env_value_warning_names_setting(monkeypatch, caplog):
    monkeypatch.setenv("PLAYERTRACK_MAX_REQUESTS", "lots")
    with caplog.at_level("WARNING", logger="playertrack.config.settings"):
        settings = TrackerSettings.from_env()
    assert settings.max_requests == 20
    assert "PLAYERTRACK_MAX_REQUESTS" in caplog.text
