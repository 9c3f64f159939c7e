"""Outcome row computation."""

from decimal import Decimal, ROUND_HALF_UP
from typing import Union

from returns_app.domain.views import OutcomeRow, ReturnsSummary

CENTS = Decimal("0.01")

Number = Union[int, float, Decimal]


def to_cents(value: Number) -> Decimal:
    """Quantize a number to 2 decimal places, rounding half up."""
    return Decimal(str(value)).quantize(CENTS, rounding=ROUND_HALF_UP)


def build_row(
    ticker: str,
    buy_date: str,
    buy_price: float,
    sell_date: str,
    sell_price: float,
    amount: Number,
) -> OutcomeRow:
    """
    Compute the outcome of investing `amount` at `buy_price` and valuing at `sell_price`.

    Formula:
        growth = sell / buy
        current_value = amount * growth
        profit = current_value - amount
        return_pct = (growth - 1) * 100

    Rounding happens only on the outputs. Callers guarantee buy_price > 0.
    """
    amount_f = float(amount)
    growth = float(sell_price) / float(buy_price)
    current_value = amount_f * growth
    profit = current_value - amount_f
    return_pct = (growth - 1) * 100

    return OutcomeRow(
        ticker=ticker,
        buy_date=buy_date,
        buy_price=to_cents(buy_price),
        sell_date=sell_date,
        sell_price=to_cents(sell_price),
        return_pct=to_cents(return_pct),
        initial_investment=to_cents(amount_f),
        current_value=to_cents(current_value),
        profit=to_cents(profit),
    )


def summarize(rows: list[OutcomeRow]) -> ReturnsSummary:
    """Totals and average return across rows (zeros for no rows)."""
    if not rows:
        return ReturnsSummary()

    total_initial = sum((r.initial_investment for r in rows), Decimal("0"))
    total_current = sum((r.current_value for r in rows), Decimal("0"))
    total_profit = sum((r.profit for r in rows), Decimal("0"))
    total_return = sum((r.return_pct for r in rows), Decimal("0"))

    return ReturnsSummary(
        total_initial=total_initial,
        total_current=total_current,
        total_profit=total_profit,
        avg_return_pct=(total_return / len(rows)).quantize(CENTS, rounding=ROUND_HALF_UP),
        count=len(rows),
    )
