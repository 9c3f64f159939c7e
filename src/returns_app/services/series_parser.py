"""
Series parser: raw CSV text from the price source -> ordered row dicts.

Rows keep the source's column names and raw string values; typing and
validation happen in the price selector.
"""

import csv
import logging
import re

from returns_app.domain.models import ResponseKind

logger = logging.getLogger(__name__)

# Body the source returns instead of CSV once the daily quota is used up.
RATE_LIMIT_MARKER = "Exceeded the daily hits limit"
HEADER_PREFIX = "Date,"

_RATE_LIMIT_RE = re.compile(re.escape(RATE_LIMIT_MARKER), re.IGNORECASE)
_LINE_SPLIT_RE = re.compile(r"\r?\n")


def is_rate_limited(text: str) -> bool:
    """True when the body carries the source's rate-limit notice."""
    return bool(_RATE_LIMIT_RE.search(text or ""))


def classify_response(text: str) -> ResponseKind:
    """Classify a response body as rate-limit notice, CSV table, or anything else."""
    if is_rate_limited(text):
        return ResponseKind.RATE_LIMITED
    if (text or "").strip().startswith(HEADER_PREFIX):
        return ResponseKind.TABULAR
    return ResponseKind.UNRECOGNIZED


def parse_series(text: str) -> list[dict[str, str]]:
    """
    Parse CSV text into a list of {column: raw value} dicts in source order.

    Returns [] when the text does not start with a Date header ("No data",
    HTML error pages, empty bodies). Rows whose column count differs from
    the header are dropped; a stray quote only spoils its own row.
    """
    trimmed = (text or "").strip()
    if not trimmed or not trimmed.startswith(HEADER_PREFIX):
        logger.warning("Unexpected CSV header. First 120 chars: %r", trimmed[:120])
        return []

    lines = _LINE_SPLIT_RE.split(trimmed)
    header = _split_line(lines[0])

    out: list[dict[str, str]] = []
    for line in lines[1:]:
        cols = _split_line(line)
        if len(cols) != len(header):
            continue
        out.append(dict(zip(header, cols)))
    return out


def _split_line(line: str) -> list[str]:
    """Split a single CSV line; an open quote never continues onto the next line."""
    try:
        return next(csv.reader([line]), [])
    except csv.Error:
        return []
