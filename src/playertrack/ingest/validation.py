"""Submission checks applied before a record reaches the registry."""

from __future__ import annotations

import math
import re
from typing import Any, Mapping

from pydantic import ValidationError

from playertrack.errors import InvalidPayloadError, MissingFieldError, NotNumericError
from playertrack.models import NUMERIC_FIELDS, REQUIRED_FIELDS, PlayerRecord


_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")
_WHOLE_INT = re.compile(r"\s*[+-]?[0-9]+\s*")


def _digits_to_int(text: str) -> int | None:
    # Digit runs past the interpreter's conversion limit are not counts.
    try:
        return int(text)
    except ValueError:
        return None


def parse_leading_int(value: Any) -> int | None:
    """Parse the leading integer of ``value``, ignoring trailing characters.

    ``"12abc"`` gives 12, ``" -3"`` gives -3 and ``5.9`` gives 5. Only
    ASCII digits count. Returns ``None`` when no integer prefix exists or
    the prefix is too long to convert.
    """

    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return int(value)
    if not isinstance(value, str):
        return None
    match = _LEADING_INT.match(value)
    if match is None:
        return None
    return _digits_to_int(match.group(1))


def parse_strict_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str) and _WHOLE_INT.fullmatch(value):
        return _digits_to_int(value)
    return None


def _parse_int(value: Any, strict: bool) -> int | None:
    return parse_strict_int(value) if strict else parse_leading_int(value)


def check(payload: Mapping[str, Any], *, strict: bool = False) -> Mapping[str, Any]:
    """Validate a raw submission and return it unchanged.

    Raises :class:`MissingFieldError` for the first absent required field and
    :class:`NotNumericError` when a player count does not parse as an integer.
    Empty strings count as present.
    """

    if not isinstance(payload, Mapping):
        raise InvalidPayloadError("payload must be a mapping of fields")
    for field in REQUIRED_FIELDS:
        if payload.get(field) is None:
            raise MissingFieldError(field)
    for field in NUMERIC_FIELDS:
        if _parse_int(payload[field], strict) is None:
            raise NotNumericError(field, payload[field])
    return payload


def to_record(payload: Mapping[str, Any], *, strict: bool = False) -> PlayerRecord:
    """Check ``payload`` and build the stored record, counts parsed to ints."""

    check(payload, strict=strict)
    data = {field: payload[field] for field in REQUIRED_FIELDS}
    for field in NUMERIC_FIELDS:
        data[field] = _parse_int(payload[field], strict)
    try:
        return PlayerRecord.model_validate(data)
    except ValidationError as exc:
        fields = ", ".join(str(err["loc"][0]) for err in exc.errors() if err.get("loc"))
        raise InvalidPayloadError(f"unsupported value type for {fields}") from exc
