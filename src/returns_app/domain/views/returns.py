"""View models for investment return outputs."""

from dataclasses import dataclass, field
from decimal import Decimal


@dataclass
class OutcomeRow:
    """
    Computed outcome of investing a fixed amount in one ticker.

    Monetary and percentage fields are rounded to cents.
    """

    ticker: str
    buy_date: str
    buy_price: Decimal
    sell_date: str
    sell_price: Decimal
    return_pct: Decimal
    initial_investment: Decimal
    current_value: Decimal
    profit: Decimal


@dataclass
class ReturnsSummary:
    """Totals across all outcome rows."""

    total_initial: Decimal = field(default_factory=lambda: Decimal("0"))
    total_current: Decimal = field(default_factory=lambda: Decimal("0"))
    total_profit: Decimal = field(default_factory=lambda: Decimal("0"))
    avg_return_pct: Decimal = field(default_factory=lambda: Decimal("0"))
    count: int = 0


@dataclass
class ReturnsReport:
    """Outcome rows plus summary for one request."""

    date_requested: str
    amount_per_ticker: Decimal
    rows: list[OutcomeRow] = field(default_factory=list)
    summary: ReturnsSummary = field(default_factory=ReturnsSummary)
    skipped: list[str] = field(default_factory=list)
