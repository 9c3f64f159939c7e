"""View models for service outputs."""

from returns_app.domain.views.returns import OutcomeRow, ReturnsSummary, ReturnsReport

__all__ = [
    "OutcomeRow",
    "ReturnsSummary",
    "ReturnsReport",
]
