"""Command-line entry point that serves the tracker API."""

from __future__ import annotations

import argparse
import dataclasses
from pathlib import Path

import uvicorn

from playertrack.api import create_app
from playertrack.config import TrackerSettings


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve the live player tracker")
    parser.add_argument("--config", type=Path, default=None, help="Load settings from a JSON profile")
    parser.add_argument("--save-config", type=Path, default=None, help="Write the resolved settings as JSON and exit")
    parser.add_argument("--host", default=None, help="Interface to bind")
    parser.add_argument("--port", type=int, default=None, help="Port to listen on")
    parser.add_argument("--window-seconds", type=float, default=None, help="Rate-limit window length in seconds")
    parser.add_argument("--max-requests", type=int, default=None, help="Requests allowed per origin per window")
    parser.add_argument(
        "--record-ttl",
        type=float,
        default=None,
        help="Drop players that have not reported for this many seconds (disabled by default)",
    )
    parser.add_argument(
        "--strict-numeric",
        action="store_true",
        default=None,
        help="Reject player counts with trailing characters instead of reading the leading integer",
    )
    parser.add_argument(
        "--trust-forwarded-for",
        action="store_true",
        default=None,
        help="Rate limit on the first X-Forwarded-For hop (only behind a trusted proxy)",
    )
    parser.add_argument("--log-level", default="info", help="uvicorn log level")
    return parser.parse_args(argv)


def resolve_settings(args: argparse.Namespace) -> TrackerSettings:
    """Defaults, then the JSON profile, then environment, then flags."""

    base = TrackerSettings.load(args.config) if args.config else TrackerSettings()
    settings = TrackerSettings.from_env(base)
    overrides = {
        "host": args.host,
        "port": args.port,
        "window_seconds": args.window_seconds,
        "max_requests": args.max_requests,
        "record_ttl_seconds": args.record_ttl,
        "strict_numeric": args.strict_numeric,
        "trust_forwarded_for": args.trust_forwarded_for,
    }
    return dataclasses.replace(settings, **{key: value for key, value in overrides.items() if value is not None})


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    settings = resolve_settings(args)
    if args.save_config:
        settings.save(args.save_config)
        print(f"Settings saved to {args.save_config}")
        return
    app = create_app(settings)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=args.log_level)


if __name__ == "__main__":
    main()
