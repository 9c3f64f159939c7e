"""API schemas package."""

from returns_app.api.schemas.returns import (
    OutcomeRowResponse,
    ReturnsSummaryResponse,
    ReturnsReportResponse,
    SelectedPriceResponse,
    LatestPriceResponse,
    TickerResolutionResponse,
    BatchResolutionResponse,
)

__all__ = [
    "OutcomeRowResponse",
    "ReturnsSummaryResponse",
    "ReturnsReportResponse",
    "SelectedPriceResponse",
    "LatestPriceResponse",
    "TickerResolutionResponse",
    "BatchResolutionResponse",
]
