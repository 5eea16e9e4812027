"""Unit tests for weather models."""

from datetime import date

import pytest

from src.models.response import ErrorResponse, ServiceIndex
from src.models.weather import WeatherForecast


class TestWeatherForecast:
    """Tests for WeatherForecast model."""

    def test_valid_forecast(self):
        """Test creating a valid forecast by field name."""
        forecast = WeatherForecast(date=date(2024, 1, 2), temperature_c=21, summary="Sunny")
        assert forecast.date == date(2024, 1, 2)
        assert forecast.temperature_c == 21
        assert forecast.summary == "Sunny"

    def test_accepts_camel_case_alias(self):
        """Test the JSON key is accepted on input."""
        forecast = WeatherForecast.model_validate(
            {"date": "2024-01-02", "temperatureC": -5, "summary": "Chilly"}
        )
        assert forecast.temperature_c == -5
        assert forecast.date == date(2024, 1, 2)

    def test_json_shape(self):
        """Test serialized keys and ISO-8601 date."""
        forecast = WeatherForecast(date=date(2024, 1, 2), temperature_c=0, summary="Cool")

        data = forecast.model_dump(mode="json", by_alias=True)

        assert data == {
            "date": "2024-01-02",
            "temperatureC": 0,
            "temperatureF": 32,
            "summary": "Cool",
        }

    @pytest.mark.parametrize(
        "celsius,fahrenheit",
        [(-20, -3), (0, 32), (25, 76), (54, 129)],
    )
    def test_fahrenheit_truncates(self, celsius, fahrenheit):
        """Test Fahrenheit uses 32 + int(C / 0.5556)."""
        forecast = WeatherForecast(date=date(2024, 1, 2), temperature_c=celsius, summary="Mild")
        assert forecast.temperature_f == fahrenheit

    def test_temperature_below_range_fails(self):
        with pytest.raises(ValueError):
            WeatherForecast(date=date(2024, 1, 2), temperature_c=-21, summary="Freezing")

    def test_temperature_above_range_fails(self):
        with pytest.raises(ValueError):
            WeatherForecast(date=date(2024, 1, 2), temperature_c=55, summary="Scorching")

    def test_empty_summary_fails(self):
        """Test that empty summary fails validation."""
        with pytest.raises(ValueError):
            WeatherForecast(date=date(2024, 1, 2), temperature_c=10, summary="")

    def test_is_frozen(self):
        """Test records cannot be modified after construction."""
        forecast = WeatherForecast(date=date(2024, 1, 2), temperature_c=10, summary="Mild")
        with pytest.raises(ValueError):
            forecast.summary = "Hot"


class TestResponseModels:
    """Tests for API response models."""

    def test_service_index_alias(self):
        assert ServiceIndex().model_dump(by_alias=True) == {"weatherForecast": "/weatherforecast"}

    def test_error_response_accepts_non_uuid_correlation_id(self):
        """Test client-supplied correlation IDs need not be UUIDs."""
        error = ErrorResponse(error="Configuration error", detail="missing", correlation_id="abc-123")
        assert error.correlation_id == "abc-123"
