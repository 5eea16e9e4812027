"""FastAPI application initialization."""

from contextlib import asynccontextmanager
from typing import Optional
from uuid import uuid4

from dotenv import load_dotenv

# Load environment variables before anything else
load_dotenv()

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.api.middleware import CorrelationIdMiddleware
from src.api.routes import router
from src.config import (
    SUMMARIES_KEY,
    ConfigurationError,
    Settings,
    WeatherOptions,
    get_settings,
)
from src.services.logging_service import configure_logging, get_logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    # Startup
    settings: Settings = app.state.settings
    configure_logging(settings.log_level)
    logger = get_logger("main")

    summaries = app.state.weather_options.get_summaries()
    if not summaries:
        logger.warning(
            "weather_summaries_missing",
            key=SUMMARIES_KEY,
            note="Forecast requests will fail until WEATHER_OPTIONS__SUMMARIES is set",
        )

    logger.info(
        "application_started",
        log_level=settings.log_level,
        summary_count=len(summaries),
    )

    yield

    # Shutdown
    logger.info("application_shutdown")


async def configuration_exception_handler(
    request: Request, exc: ConfigurationError
) -> JSONResponse:
    """Report missing configuration as 500 without any partial payload."""
    correlation_id = getattr(request.state, "correlation_id", None) or str(uuid4())
    logger = structlog.get_logger()

    logger.error(
        "configuration_error",
        correlation_id=correlation_id,
        key=exc.key,
        path=request.url.path,
        detail=str(exc),
    )

    return JSONResponse(
        status_code=500,
        content={
            "error": "Configuration error",
            "detail": str(exc),
            "correlation_id": correlation_id,
        },
        headers={"X-Correlation-Id": correlation_id},
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application with its configuration bound once.

    Args:
        settings: Settings to bind; defaults to the cached environment settings

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Weather Forecast API",
        description="Synthetic five-day weather forecast with configurable conditions",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.weather_options = WeatherOptions.from_settings(settings)

    app.add_exception_handler(ConfigurationError, configuration_exception_handler)

    # CORS middleware for browser clients
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    # Correlation ID middleware for request tracking and observability
    app.add_middleware(CorrelationIdMiddleware)

    app.include_router(router)
    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn using configured host and port."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "src.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
