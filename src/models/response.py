"""API response models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """Body returned when a request cannot be served, e.g. no summaries configured.

    Attributes:
        error: Short error category, e.g. "Configuration error"
        detail: Which setting is missing and how to supply it
        correlation_id: Request ID, also sent as X-Correlation-Id
    """

    error: str
    detail: str
    correlation_id: str


class HealthResponse(BaseModel):
    """Liveness check payload.

    Attributes:
        status: Always "healthy" when the process can answer
        timestamp: Server time in UTC
        summaries_configured: Whether at least one weather summary is loaded
    """

    status: str = "healthy"
    timestamp: datetime
    summaries_configured: bool


class ServiceIndex(BaseModel):
    """Links advertised from the service root."""

    model_config = ConfigDict(populate_by_name=True)

    weather_forecast: str = Field("/weatherforecast", alias="weatherForecast")
