"""Per-ticker price resolution results."""

from dataclasses import dataclass, field
from typing import Optional

from returns_app.domain.models.enums import PriceSource, ResolutionError
from returns_app.domain.models.prices import LatestPrice, SelectedPrice


@dataclass
class TickerResolution:
    """
    Outcome of resolving one ticker.

    Either both `selected` and `latest` are set, or `error` is.
    `ticker` keeps the caller's spelling (e.g. "BRK.B").
    """

    ticker: str
    source: PriceSource
    selected: Optional[SelectedPrice] = None
    latest: Optional[LatestPrice] = None
    error: Optional[str] = None
    error_kind: Optional[ResolutionError] = None
    rate_limited: bool = False
    reason: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return self.error is None and self.selected is not None and self.latest is not None

    @classmethod
    def success(
        cls,
        ticker: str,
        selected: SelectedPrice,
        latest: LatestPrice,
        source: PriceSource,
    ) -> "TickerResolution":
        return cls(ticker=ticker, source=source, selected=selected, latest=latest)

    @classmethod
    def failure(
        cls,
        ticker: str,
        kind: ResolutionError,
        error: str,
        source: PriceSource,
        reason: Optional[str] = None,
    ) -> "TickerResolution":
        return cls(
            ticker=ticker,
            source=source,
            error=error,
            error_kind=kind,
            rate_limited=kind == ResolutionError.RATE_LIMITED,
            reason=reason,
        )


@dataclass
class BatchResolution:
    """All ticker resolutions for one requested date, in input order."""

    date_requested: str
    results: list[TickerResolution] = field(default_factory=list)
