"""Tests for config schema validation."""

import pytest
from pydantic import ValidationError

from pogoda.config.defaults import DEFAULT_LAYOUT, LEGACY_LAYOUT, RU_LOCALE
from pogoda.config.schema import (
    DEFAULT_BASE_URL,
    FORECAST_DAYS,
    OutputFormat,
    WeatherConfig,
)


class TestWeatherConfig:
    def test_defaults(self):
        config = WeatherConfig()
        assert config.city == ""
        assert config.output == OutputFormat.HUMAN
        assert config.color is True
        assert config.today is True
        assert config.days == FORECAST_DAYS
        assert config.page_url == DEFAULT_BASE_URL

    def test_urls(self):
        config = WeatherConfig(
            city="kiev",
            base_url="http://localhost:8000/",
            hourly_url="http://localhost:8000/hours/",
        )
        assert config.page_url == "http://localhost:8000/kiev"
        assert config.hourly_page_url == "http://localhost:8000/hours/kiev"

    def test_output_from_string(self):
        assert WeatherConfig(output="json").output == OutputFormat.JSON

    def test_frozen(self):
        config = WeatherConfig()
        with pytest.raises(ValidationError):
            config.city = "london"

    @pytest.mark.parametrize("days", [0, -1, FORECAST_DAYS + 1])
    def test_days_range(self, days: int):
        with pytest.raises(ValidationError):
            WeatherConfig(days=days)

    def test_timeout_positive(self):
        with pytest.raises(ValidationError):
            WeatherConfig(timeout=0)

    def test_unknown_key_rejected(self):
        with pytest.raises(ValidationError):
            WeatherConfig(colour=False)

    def test_bad_output(self):
        with pytest.raises(ValidationError):
            WeatherConfig(output="xml")


class TestLayouts:
    def test_default_layout_reads_datetime(self):
        assert DEFAULT_LAYOUT.date_attr == "datetime"
        assert set(DEFAULT_LAYOUT.hour_fields) == {"hour", "temp", "icon"}

    def test_legacy_layout_reads_day_numbers(self):
        assert LEGACY_LAYOUT.date_attr is None
        assert LEGACY_LAYOUT.hour_item == DEFAULT_LAYOUT.hour_item
        assert "navigation-city" in LEGACY_LAYOUT.current["city"]

    def test_locale_weekdays_monday_first(self):
        assert RU_LOCALE.weekdays[0] == "пн"
        assert RU_LOCALE.weekdays[6] == "вс"

    def test_layout_frozen(self):
        with pytest.raises(ValidationError):
            DEFAULT_LAYOUT.date_attr = None
