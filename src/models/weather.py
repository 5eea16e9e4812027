"""Weather forecast data models."""

from datetime import date as date_type

from pydantic import BaseModel, ConfigDict, Field, computed_field


class WeatherForecast(BaseModel):
    """Synthetic forecast for a single day.

    Serialized with camelCase keys (``temperatureC``, ``temperatureF``) to
    match the public JSON contract.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    date: date_type = Field(..., description="Forecast date")
    temperature_c: int = Field(
        ..., ge=-20, le=54, alias="temperatureC", description="Temperature in Celsius"
    )
    summary: str = Field(..., min_length=1, description="Weather condition (e.g., 'Sunny')")

    @computed_field(alias="temperatureF")  # type: ignore[prop-decorator]
    @property
    def temperature_f(self) -> int:
        """Temperature in Fahrenheit, truncated toward zero."""
        return 32 + int(self.temperature_c / 0.5556)
