"""
Price selection over a parsed daily series.

Both selectors scan from the most recent row backwards and return the first
usable match. A usable row has a finite close greater than zero; dates are
compared as YYYYMMDD integers.
"""

import math
from typing import Optional

from returns_app.domain.models import LatestPrice, SelectedPrice

DATE_COLUMN = "Date"
CLOSE_COLUMN = "Close"


def date_key(value: Optional[str]) -> Optional[int]:
    """Canonical YYYYMMDD integer for a date string ("2025-01-10" -> 20250110), else None."""
    if not value:
        return None
    try:
        return int(value.strip().replace("-", ""))
    except ValueError:
        return None


def parse_close(value: Optional[str]) -> Optional[float]:
    """Parse a close value; None unless finite and strictly positive."""
    if not value:
        return None
    try:
        close = float(value)
    except ValueError:
        return None
    if not math.isfinite(close) or close <= 0:
        return None
    return close


def find_on_or_before(
    series: list[dict[str, str]],
    target_date_iso: str,
) -> Optional[SelectedPrice]:
    """Most recent row dated on or before `target_date_iso` with a valid close."""
    target = date_key(target_date_iso)
    if target is None:
        return None

    for row in reversed(series):
        raw_date = row.get(DATE_COLUMN)
        key = date_key(raw_date)
        close = parse_close(row.get(CLOSE_COLUMN))
        if key is not None and close is not None and key <= target:
            return SelectedPrice(date_used=raw_date, close=close)
    return None


def find_latest(series: list[dict[str, str]]) -> Optional[LatestPrice]:
    """Most recent row with a valid close, regardless of date."""
    for row in reversed(series):
        raw_date = row.get(DATE_COLUMN)
        close = parse_close(row.get(CLOSE_COLUMN))
        if raw_date and close is not None:
            return LatestPrice(date=raw_date, close=close)
    return None
