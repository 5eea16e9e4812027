"""API route definitions for forecast, index and health endpoints."""

from datetime import datetime, timezone

import structlog
from fastapi import APIRouter, Depends

from src.api.dependencies import get_forecast_service, get_weather_options
from src.config import WeatherOptions
from src.models.response import ErrorResponse, HealthResponse, ServiceIndex
from src.models.weather import WeatherForecast
from src.services.forecast_service import ForecastService


router = APIRouter()


@router.get("/", response_model=ServiceIndex)
async def index() -> ServiceIndex:
    """Advertise the forecast endpoint."""
    return ServiceIndex()


@router.get("/health", response_model=HealthResponse)
async def health_check(
    options: WeatherOptions = Depends(get_weather_options),
) -> HealthResponse:
    """Health check endpoint.

    Returns:
        Status, timestamp in ISO8601 format and whether summaries are loaded
    """
    return HealthResponse(
        timestamp=datetime.now(timezone.utc),
        summaries_configured=bool(options.get_summaries()),
    )


@router.get(
    "/weatherforecast",
    response_model=list[WeatherForecast],
    name="get_weather_forecast",
    responses={500: {"model": ErrorResponse, "description": "Weather summaries not configured"}},
)
def get_weather_forecast(
    service: ForecastService = Depends(get_forecast_service),
) -> list[WeatherForecast]:
    """Return a randomized five-day forecast.

    Dates start tomorrow. Each day gets an independent temperature in
    [-20, 54] °C and a summary drawn from the configured condition list.
    Fails with 500 if no summaries are configured.
    """
    forecast = service.generate()
    structlog.get_logger().info(
        "weather_forecast_served",
        days=len(forecast),
        first_date=forecast[0].date.isoformat(),
    )
    return forecast
