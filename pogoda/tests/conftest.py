"""Shared test fixtures."""

from datetime import date
from pathlib import Path

import pytest

from pogoda.config.schema import WeatherConfig
from pogoda.ingest.document import SoupDocument
from pogoda.tests.helpers import BASE_URL, FIXTURE_DIR, HOURLY_URL, TODAY, read_fixture


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def moscow_config() -> WeatherConfig:
    return WeatherConfig(
        city="moscow",
        color=False,
        base_url=BASE_URL,
        hourly_url=HOURLY_URL,
    )


@pytest.fixture
def forecast_html() -> str:
    return read_fixture("forecast_moscow.html")


@pytest.fixture
def hourly_html() -> str:
    return read_fixture("hourly_moscow.html")


@pytest.fixture
def forecast_doc(forecast_html: str) -> SoupDocument:
    return SoupDocument.from_html(forecast_html)


@pytest.fixture
def hourly_doc(hourly_html: str) -> SoupDocument:
    return SoupDocument.from_html(hourly_html)


@pytest.fixture
def moscow_pages(forecast_html: str, hourly_html: str) -> dict[str, str | Exception]:
    """Both pages for moscow_config, keyed by URL."""
    return {
        BASE_URL + "moscow": forecast_html,
        HOURLY_URL + "moscow": hourly_html,
    }
