"""Pydantic schemas for returns endpoints."""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel


class OutcomeRowResponse(BaseModel):
    """Response schema for a single ticker outcome."""

    ticker: str
    buy_date: str
    buy_price: Decimal
    sell_date: str
    sell_price: Decimal
    return_pct: Decimal
    initial_investment: Decimal
    current_value: Decimal
    profit: Decimal


class ReturnsSummaryResponse(BaseModel):
    """Response schema for totals across outcome rows."""

    total_initial: Decimal
    total_current: Decimal
    total_profit: Decimal
    avg_return_pct: Decimal
    count: int


class ReturnsReportResponse(BaseModel):
    """Response schema for an investment returns report."""

    date_requested: str
    amount_per_ticker: Decimal
    rows: list[OutcomeRowResponse]
    summary: ReturnsSummaryResponse
    skipped: list[str]


class SelectedPriceResponse(BaseModel):
    """Response schema for the purchase price."""

    date_used: str
    close: float


class LatestPriceResponse(BaseModel):
    """Response schema for the latest price."""

    date: str
    close: float


class TickerResolutionResponse(BaseModel):
    """Response schema for one ticker's price resolution."""

    ticker: str
    source: str
    selected: Optional[SelectedPriceResponse] = None
    latest: Optional[LatestPriceResponse] = None
    error: Optional[str] = None
    error_kind: Optional[str] = None
    rate_limited: bool = False
    reason: Optional[str] = None


class BatchResolutionResponse(BaseModel):
    """Response schema for all resolutions of one request."""

    date_requested: str
    results: list[TickerResolutionResponse]
