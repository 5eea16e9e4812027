"""Pytest configuration and fixtures."""

import os
from typing import AsyncGenerator, Callable, Generator, Sequence

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

# Set test environment variables before importing app
os.environ.setdefault("WEATHER_OPTIONS__SUMMARIES", '["Sunny", "Cloudy"]')
os.environ.setdefault("LOG_LEVEL", "INFO")

from src.config import Settings, WeatherOptions  # noqa: E402

DEFAULT_SUMMARIES = ["Sunny", "Cloudy"]


@pytest.fixture
def summaries() -> list[str]:
    """Condition list used by most tests."""
    return list(DEFAULT_SUMMARIES)


@pytest.fixture
def weather_options(summaries) -> WeatherOptions:
    """Read-only condition list built from the summaries fixture."""
    return WeatherOptions(summaries=tuple(summaries))


@pytest.fixture
def make_app() -> Callable[[Sequence[str]], FastAPI]:
    """Factory building an app bound to the given condition list.

    The .env file is ignored so tests never depend on a developer's local setup.
    """
    from src.main import create_app

    def _make(summaries: Sequence[str]) -> FastAPI:
        settings = Settings(
            _env_file=None,
            weather_options={"summaries": list(summaries)},
        )
        return create_app(settings)

    return _make


@pytest.fixture
def app(make_app, summaries) -> FastAPI:
    """App configured with the default summaries."""
    return make_app(summaries)


@pytest.fixture
def client(app) -> Generator[TestClient, None, None]:
    """TestClient with lifespan events running."""
    with TestClient(app) as tc:
        yield tc
    app.dependency_overrides.clear()


@pytest.fixture
def unconfigured_client(make_app) -> Generator[TestClient, None, None]:
    """TestClient for an app started without any weather summaries."""
    with TestClient(make_app([])) as tc:
        yield tc


@pytest.fixture
async def async_client(app) -> AsyncGenerator[AsyncClient, None]:
    """Create async HTTP client for integration tests."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
