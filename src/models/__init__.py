"""Models package exports."""

from src.models.response import ErrorResponse, HealthResponse, ServiceIndex
from src.models.weather import WeatherForecast

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "ServiceIndex",
    "WeatherForecast",
]
