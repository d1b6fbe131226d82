"""Admission, validation and sanitization steps of the ingestion path."""

from .ratelimit import RateLimiter, RateWindow
from .sanitize import clean, escape_markup
from .validation import check, parse_leading_int, parse_strict_int, to_record

__all__ = [
    "RateLimiter",
    "RateWindow",
    "check",
    "clean",
    "escape_markup",
    "parse_leading_int",
    "parse_strict_int",
    "to_record",
]
