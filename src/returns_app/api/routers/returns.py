"""Investment returns endpoints."""

from decimal import Decimal
from typing import Optional

from fastapi import APIRouter, Depends, Query

from returns_app.api.deps import get_returns_service
from returns_app.api.schemas import (
    OutcomeRowResponse,
    ReturnsSummaryResponse,
    ReturnsReportResponse,
    SelectedPriceResponse,
    LatestPriceResponse,
    TickerResolutionResponse,
    BatchResolutionResponse,
)
from returns_app.services import ReturnsService

router = APIRouter(prefix="/returns", tags=["returns"])


def _parse_tickers(tickers: Optional[str]) -> Optional[list[str]]:
    """Comma-separated tickers; None means the default basket."""
    if tickers is None or not tickers.strip():
        return None
    return [t for t in (s.strip() for s in tickers.split(",")) if t]


@router.get("", response_model=ReturnsReportResponse)
async def get_returns(
    start_date: str = Query(..., description="Purchase date, YYYY-MM-DD"),
    amount: Decimal = Query(..., description="Amount invested per ticker"),
    tickers: Optional[str] = Query(None, description="Comma-separated tickers (default basket if empty)"),
    service: ReturnsService = Depends(get_returns_service),
) -> ReturnsReportResponse:
    """Estimate what `amount` invested in each ticker on `start_date` is worth now."""
    report = await service.build_report(start_date, amount, _parse_tickers(tickers))

    return ReturnsReportResponse(
        date_requested=report.date_requested,
        amount_per_ticker=report.amount_per_ticker,
        rows=[
            OutcomeRowResponse(
                ticker=r.ticker,
                buy_date=r.buy_date,
                buy_price=r.buy_price,
                sell_date=r.sell_date,
                sell_price=r.sell_price,
                return_pct=r.return_pct,
                initial_investment=r.initial_investment,
                current_value=r.current_value,
                profit=r.profit,
            )
            for r in report.rows
        ],
        summary=ReturnsSummaryResponse(
            total_initial=report.summary.total_initial,
            total_current=report.summary.total_current,
            total_profit=report.summary.total_profit,
            avg_return_pct=report.summary.avg_return_pct,
            count=report.summary.count,
        ),
        skipped=report.skipped,
    )


@router.get("/prices", response_model=BatchResolutionResponse)
async def get_prices(
    start_date: str = Query(..., description="Purchase date, YYYY-MM-DD"),
    tickers: Optional[str] = Query(None, description="Comma-separated tickers (default basket if empty)"),
    service: ReturnsService = Depends(get_returns_service),
) -> BatchResolutionResponse:
    """Raw per-ticker price resolutions (purchase and latest close, or the error)."""
    cleaned = service.validate_request(start_date, Decimal("1"), _parse_tickers(tickers))
    batch = await service.resolve_batch(start_date, cleaned)

    return BatchResolutionResponse(
        date_requested=batch.date_requested,
        results=[
            TickerResolutionResponse(
                ticker=r.ticker,
                source=r.source.value,
                selected=(
                    SelectedPriceResponse(date_used=r.selected.date_used, close=r.selected.close)
                    if r.selected else None
                ),
                latest=(
                    LatestPriceResponse(date=r.latest.date, close=r.latest.close)
                    if r.latest else None
                ),
                error=r.error,
                error_kind=r.error_kind.value if r.error_kind else None,
                rate_limited=r.rate_limited,
                reason=r.reason,
            )
            for r in batch.results
        ],
    )
