"""Returns service: concurrent per-ticker resolution and outcome rows."""

import asyncio
import logging
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Callable, Optional, Sequence

from returns_app.config.settings import DEFAULT_TICKERS
from returns_app.core.exceptions import ValidationError
from returns_app.core.timezone import now_eastern, parse_iso_date
from returns_app.domain.models import (
    BatchResolution,
    PriceSource,
    ResolutionError,
    TickerResolution,
)
from returns_app.domain.views import OutcomeRow, ReturnsReport
from returns_app.services.demo_generator import make_demo_pair
from returns_app.services.price_resolver import PriceResolver
from returns_app.services.row_builder import build_row, summarize, to_cents

logger = logging.getLogger(__name__)

# Keeps every derived money value within Decimal's default 28 digits
MAX_AMOUNT = Decimal("1000000000000")


def _today_eastern() -> date:
    return now_eastern().date()


class ReturnsService:
    """
    Estimates what a fixed investment per ticker would be worth today.

    All tickers are resolved concurrently and joined before rows are built;
    one ticker's failure never aborts the batch.
    """

    def __init__(
        self,
        resolver: PriceResolver,
        default_tickers: Optional[Sequence[str]] = None,
        today: Callable[[], date] = _today_eastern,
    ):
        self._resolver = resolver
        self._default_tickers = list(default_tickers or DEFAULT_TICKERS)
        self._today = today

    @property
    def default_tickers(self) -> list[str]:
        return list(self._default_tickers)

    async def resolve_batch(self, date_iso: str, tickers: Sequence[str]) -> BatchResolution:
        """
        Resolve every ticker concurrently; results keep the input order.

        Exactly one resolution (and at most one fetch) per ticker.
        """
        results = await asyncio.gather(
            *(self._resolve_one(t, date_iso) for t in tickers)
        )
        return BatchResolution(date_requested=date_iso, results=list(results))

    async def resolve_outcome_rows(
        self,
        start_date_iso: str,
        amount: float | Decimal,
        tickers: Optional[Sequence[str]] = None,
    ) -> list[OutcomeRow]:
        """
        Outcome rows for `tickers` (default basket if omitted), in input order.

        Priced tickers get real rows, rate-limited ones get demo rows, the
        rest are skipped.
        """
        rows, _ = await self._rows_and_skips(start_date_iso, amount, tickers)
        return rows

    async def build_report(
        self,
        start_date_iso: str,
        amount: float | Decimal,
        tickers: Optional[Sequence[str]] = None,
    ) -> ReturnsReport:
        """Outcome rows plus totals and the list of skipped tickers."""
        rows, skipped = await self._rows_and_skips(start_date_iso, amount, tickers)
        return ReturnsReport(
            date_requested=start_date_iso,
            amount_per_ticker=to_cents(amount),
            rows=rows,
            summary=summarize(rows),
            skipped=skipped,
        )

    def validate_request(
        self,
        start_date_iso: str,
        amount: float | Decimal,
        tickers: Optional[Sequence[str]] = None,
    ) -> list[str]:
        """
        Check a request before any fetch and return the cleaned ticker list.

        Raises ValidationError for a malformed date, or an amount that is not a
        finite number in (0, MAX_AMOUNT].
        Blank tickers are dropped.
        """
        try:
            parse_iso_date(start_date_iso)
        except ValueError:
            raise ValidationError(f"Invalid start date: {start_date_iso!r} (expected YYYY-MM-DD)")

        try:
            value = Decimal(str(amount))
        except (InvalidOperation, TypeError, ValueError):
            value = None
        if value is None or not value.is_finite() or value <= 0:
            raise ValidationError(f"Investment amount must be positive, got {amount!r}")
        if value > MAX_AMOUNT:
            raise ValidationError(f"Investment amount must not exceed {MAX_AMOUNT:,}, got {amount!r}")

        requested = self._default_tickers if tickers is None else tickers
        return [t.strip() for t in requested if t and t.strip()]

    async def _rows_and_skips(
        self,
        start_date_iso: str,
        amount: float | Decimal,
        tickers: Optional[Sequence[str]],
    ) -> tuple[list[OutcomeRow], list[str]]:
        cleaned = self.validate_request(start_date_iso, amount, tickers)
        batch = await self.resolve_batch(start_date_iso, cleaned)

        rows: list[OutcomeRow] = []
        skipped: list[str] = []
        today_iso = self._today().isoformat()

        for r in batch.results:
            if r.is_success:
                rows.append(build_row(
                    r.ticker,
                    r.selected.date_used,
                    r.selected.close,
                    r.latest.date,
                    r.latest.close,
                    amount,
                ))
                if r.source == PriceSource.CACHE:
                    logger.info("[CACHE] %s -> %s / %s", r.ticker, r.selected.date_used, r.latest.date)
                else:
                    logger.info("[NETWORK] %s -> %s / %s", r.ticker, r.selected.date_used, r.latest.date)
                continue

            if r.rate_limited:
                pair = make_demo_pair(r.ticker, start_date_iso, today_iso)
                rows.append(build_row(
                    r.ticker,
                    pair.buy.date,
                    pair.buy.close,
                    pair.sell.date,
                    pair.sell.close,
                    amount,
                ))
                logger.warning("[DEMO] %s: %s, cache missing -> using fallback demo", r.ticker, r.error)
                continue

            logger.warning("[SKIP] %s: %s", r.ticker, r.error or "Unknown error")
            skipped.append(r.ticker)

        return rows, skipped

    async def _resolve_one(self, ticker: str, date_iso: str) -> TickerResolution:
        try:
            return await self._resolver.resolve(ticker, date_iso)
        except Exception as exc:
            logger.exception("Unexpected failure resolving %s", ticker)
            return TickerResolution.failure(
                ticker,
                ResolutionError.INVALID_SERIES,
                f"Unexpected error: {exc}",
                PriceSource.NETWORK,
            )
