"""Send a status report to, or list players from, a running tracker."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from playertrack.client import TrackerClient
from playertrack.errors import TrackerError


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the playertrack REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("--report", type=Path, metavar="JSON", help="Submit the status report stored in this JSON file")
    parser.add_argument("--list", action="store_true", help="Print the current player list")
    args = parser.parse_args()

    if not args.report and not args.list:
        raise SystemExit("nothing to do; pass --report and/or --list")

    with TrackerClient(args.base_url) as client:
        if args.report:
            try:
                status = json.loads(args.report.read_text(encoding="utf-8"))
            except json.JSONDecodeError as exc:
                raise SystemExit(f"Invalid report JSON: {exc}") from exc
            try:
                client.report(status)
            except TrackerError as exc:
                raise SystemExit(f"report rejected: {exc}") from exc
            print("Report accepted")
        if args.list:
            print(json.dumps(client.players(), indent=2))


if __name__ == "__main__":
    main()
