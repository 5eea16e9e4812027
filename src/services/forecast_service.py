"""Synthetic five-day weather forecast generation."""

import random
from datetime import date, timedelta
from typing import Optional

import structlog

from src.config import SUMMARIES_KEY, ConfigurationError, WeatherOptions
from src.models.weather import WeatherForecast

logger = structlog.get_logger(__name__)

FORECAST_DAYS = 5
MIN_TEMPERATURE_C = -20
MAX_TEMPERATURE_C = 54


def _sample_temperature(rng: random.Random) -> int:
    """Draw a Celsius temperature uniformly from [-20, 54]."""
    return rng.randint(0, MAX_TEMPERATURE_C - MIN_TEMPERATURE_C) + MIN_TEMPERATURE_C


class ForecastService:
    """Builds randomized forecasts from the configured condition list.

    One instance is created per request, each with its own random generator,
    so no generator state is shared between concurrent requests.
    """

    def __init__(self, options: WeatherOptions, rng: Optional[random.Random] = None):
        self._options = options
        self._rng = rng if rng is not None else random.Random()

    def generate(self, today: Optional[date] = None) -> list[WeatherForecast]:
        """Generate forecasts for the five days following ``today``.

        Args:
            today: Reference date, defaults to the server's current local date

        Returns:
            Five forecasts in ascending date order, starting at today + 1

        Raises:
            ConfigurationError: If no weather summaries are configured
        """
        summaries = self._options.get_summaries()
        if not summaries:
            raise ConfigurationError(
                SUMMARIES_KEY,
                "No weather summaries are configured. "
                "Set WEATHER_OPTIONS__SUMMARIES to a JSON list such as '[\"Sunny\", \"Cloudy\"]'.",
            )

        start = today or date.today()
        forecast = [
            WeatherForecast(
                date=start + timedelta(days=offset),
                temperature_c=_sample_temperature(self._rng),
                summary=self._rng.choice(summaries),
            )
            for offset in range(1, FORECAST_DAYS + 1)
        ]

        logger.debug(
            "forecast_generated",
            days=len(forecast),
            first_date=forecast[0].date.isoformat(),
            summary_choices=len(summaries),
        )
        return forecast
