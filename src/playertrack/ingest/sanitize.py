"""Markup neutralization for exported player data."""

from __future__ import annotations

from typing import Any, Dict, Mapping


def escape_markup(value: str) -> str:
    # Only angle brackets; dashboards already render via textContent.
    return value.replace("<", "&lt;").replace(">", "&gt;")


def clean(data: Mapping[str, Any]) -> Dict[str, Any]:
    """Return a copy of ``data`` with every string value escaped."""

    return {
        key: escape_markup(value) if isinstance(value, str) else value
        for key, value in data.items()
    }
