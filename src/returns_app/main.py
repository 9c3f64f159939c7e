"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from returns_app.config.settings import get_settings
from returns_app.config.logging_config import setup_logging
from returns_app.repositories.sqlalchemy.database import init_db
from returns_app.api.deps import close_price_provider
from returns_app.api.routers import returns_router
from returns_app.core.exceptions import AppError


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    setup_logging()
    init_db()
    yield
    # Shutdown
    await close_price_provider()


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="Historical investment returns for a basket of equity tickers",
    version=settings.app_version,
    lifespan=lifespan,
)

app.include_router(returns_router)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Global handler for application errors."""
    return JSONResponse(
        status_code=400,
        content={"error": exc.code, "message": exc.message},
    )


@app.get("/health")
def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/")
def root() -> dict[str, str]:
    """Root endpoint with API info."""
    return {
        "app": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
    }
