"""API package exports."""

from src.api.dependencies import get_forecast_service, get_weather_options
from src.api.middleware import CorrelationIdMiddleware
from src.api.routes import router

__all__ = [
    "router",
    "CorrelationIdMiddleware",
    "get_forecast_service",
    "get_weather_options",
]
