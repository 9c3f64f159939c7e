"""API routers package."""

from returns_app.api.routers.returns import router as returns_router

__all__ = [
    "returns_router",
]
