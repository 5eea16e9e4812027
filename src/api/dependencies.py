"""FastAPI dependencies for configuration and forecast services."""

from fastapi import Depends, Request

from src.config import WeatherOptions
from src.services.forecast_service import ForecastService


def get_weather_options(request: Request) -> WeatherOptions:
    """Return the condition list bound when the application was created."""
    return request.app.state.weather_options


def get_forecast_service(
    options: WeatherOptions = Depends(get_weather_options),
) -> ForecastService:
    """Build a forecast service with a fresh random generator for this request."""
    return ForecastService(options)
