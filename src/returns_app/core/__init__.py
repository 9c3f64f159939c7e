"""Core utilities and shared functionality."""

from returns_app.core.timezone import (
    now_eastern,
    to_eastern,
    today_eastern_iso,
    to_epoch_ms,
    parse_iso_date,
    EASTERN_TZ,
)
from returns_app.core.symbols import normalize_ticker, to_source_symbol
from returns_app.core.exceptions import AppError, ValidationError

__all__ = [
    "now_eastern",
    "to_eastern",
    "today_eastern_iso",
    "to_epoch_ms",
    "parse_iso_date",
    "EASTERN_TZ",
    "normalize_ticker",
    "to_source_symbol",
    "AppError",
    "ValidationError",
]
