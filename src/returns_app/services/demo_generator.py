"""
Deterministic demo prices for tickers that cannot be priced for real.

The seed is a 32-bit string hash of ticker + buy date, so the same request
always yields the same synthetic pair while other tickers or dates diverge.
The hash and the derivation constants are part of the observable output
and must stay as they are.
"""

import logging
import math
from typing import Iterator, Optional

from returns_app.core.timezone import today_eastern_iso
from returns_app.domain.models import DemoPricePair, PriceRecord

logger = logging.getLogger(__name__)

MIN_BUY_PRICE = 40
BUY_PRICE_SPAN = 361  # buy price in [40, 400]
MIN_RETURN = -0.2  # return in [-0.20, +0.80)


def _utf16_code_units(text: str) -> Iterator[int]:
    data = text.encode("utf-16-le", "surrogatepass")
    for i in range(0, len(data), 2):
        yield data[i] | (data[i + 1] << 8)


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def hash_str(text: str) -> int:
    """Absolute value of the 31-multiplier 32-bit string hash over UTF-16 code units."""
    h = 0
    for unit in _utf16_code_units(text):
        h = _to_int32((h << 5) - h + unit)
    return abs(h)


def round2(value: float) -> float:
    """Round half up to cents on the binary value (2.675 -> 2.67, 1.5 -> 1.5)."""
    return math.floor(value * 100 + 0.5) / 100


def make_demo_pair(
    ticker: str,
    buy_date_iso: str,
    today_iso: Optional[str] = None,
) -> DemoPricePair:
    """Synthetic buy price on `buy_date_iso` and sell price today for `ticker`."""
    sell_date = today_iso or today_eastern_iso()
    seed = hash_str(ticker + buy_date_iso)
    buy = float(MIN_BUY_PRICE + seed % BUY_PRICE_SPAN)
    ret = MIN_RETURN + ((seed * 9301 + 49297) % 1000) / 1000
    sell = round2(buy * (1 + ret))
    logger.warning(
        "[DEMO BUILD] %s: buy=%.2f sell=%.2f date=%s", ticker, buy, sell, buy_date_iso
    )
    return DemoPricePair(
        buy=PriceRecord(date=buy_date_iso, close=buy),
        sell=PriceRecord(date=sell_date, close=sell),
    )
