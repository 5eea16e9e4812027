"""Services package exports."""

from src.services.forecast_service import ForecastService
from src.services.logging_service import configure_logging, get_logger

__all__ = [
    "ForecastService",
    "configure_logging",
    "get_logger",
]
