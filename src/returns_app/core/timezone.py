"""Timezone and calendar-date utilities for US/Eastern market time."""

from datetime import date, datetime

import pytz
from dateutil import parser as date_parser

EASTERN_TZ = pytz.timezone("US/Eastern")


def now_eastern() -> datetime:
    """Return current time in US/Eastern timezone."""
    return datetime.now(EASTERN_TZ)


def to_eastern(dt: datetime) -> datetime:
    """Convert a datetime to US/Eastern timezone."""
    if dt.tzinfo is None:
        # Assume naive datetime is already Eastern
        return EASTERN_TZ.localize(dt)
    return dt.astimezone(EASTERN_TZ)


def today_eastern_iso() -> str:
    """Return today's US/Eastern calendar date as YYYY-MM-DD."""
    return now_eastern().date().isoformat()


def to_epoch_ms(dt: datetime) -> int:
    """Milliseconds since the Unix epoch for an (aware or Eastern-naive) datetime."""
    return int(to_eastern(dt).timestamp() * 1000)


def parse_iso_date(value: str) -> date:
    """
    Parse a YYYY-MM-DD calendar date.

    Raises ValueError for anything that is not a plain ISO date.
    """
    text = (value or "").strip()
    if len(text) != 10 or text[4] != "-" or text[7] != "-":
        raise ValueError(f"Expected YYYY-MM-DD, got {value!r}")
    return date_parser.isoparse(text).date()
