"""Application configuration using Pydantic settings."""

from dataclasses import dataclass
from functools import lru_cache
from typing import List

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings

# Dotted name of the condition list, as operators see it in error messages
SUMMARIES_KEY = "weather_options.summaries"


class ConfigurationError(Exception):
    """Raised when required configuration is missing or unusable at request time.

    Attributes:
        key: Dotted configuration key that is missing or empty
    """

    def __init__(self, key: str, message: str):
        self.key = key
        super().__init__(message)


class WeatherOptionsConfig(BaseModel):
    """Raw ``weather_options`` section as bound from the environment."""

    summaries: List[str] = Field(
        default_factory=list,
        description="Weather condition descriptions (e.g. 'Sunny', 'Cloudy')",
    )

    @field_validator("summaries")
    @classmethod
    def summaries_not_blank(cls, v: List[str]) -> List[str]:
        """Strip whitespace and reject blank condition names."""
        cleaned = [s.strip() for s in v]
        if any(not s for s in cleaned):
            raise ValueError("weather summaries must be non-empty strings")
        return cleaned


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Logging
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8080

    # Forecast conditions, e.g. WEATHER_OPTIONS__SUMMARIES='["Sunny","Cloudy"]'
    weather_options: WeatherOptionsConfig = Field(default_factory=WeatherOptionsConfig)

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_nested_delimiter": "__",
        "case_sensitive": False,
        "extra": "ignore",
    }


@dataclass(frozen=True)
class WeatherOptions:
    """Read-only condition list bound once at startup.

    Built from Settings when the application is created and handed to
    request handlers through FastAPI dependencies. Never reloaded.
    """

    summaries: tuple[str, ...] = ()

    @classmethod
    def from_settings(cls, settings: Settings) -> "WeatherOptions":
        """Bind the condition list from loaded settings.

        A missing ``weather_options`` section yields an empty list; callers
        decide whether that is an error.
        """
        section = getattr(settings, "weather_options", None)
        summaries = getattr(section, "summaries", None) or []
        return cls(summaries=tuple(summaries))

    def get_summaries(self) -> tuple[str, ...]:
        """Return the configured condition names in configuration order."""
        return self.summaries


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
