"""Pydantic v2 configuration schema with strict validation."""

from enum import StrEnum

from pydantic import BaseModel, Field

DEFAULT_BASE_URL = "https://yandex.ru/pogoda/"
DEFAULT_HOURLY_URL = "https://yandex.ru/pogoda/details/"
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_10_1) AppleWebKit/600.1.25 "
    "(KHTML, like Gecko) Version/8.0 Safari/600.1.25"
)
FORECAST_DAYS = 10


class OutputFormat(StrEnum):
    HUMAN = "human"
    JSON = "json"


class WeatherConfig(BaseModel):
    model_config = {"extra": "forbid", "frozen": True}

    city: str = ""
    output: OutputFormat = OutputFormat.HUMAN
    color: bool = True
    today: bool = True
    days: int = Field(default=FORECAST_DAYS, ge=1, le=FORECAST_DAYS)
    base_url: str = DEFAULT_BASE_URL
    hourly_url: str = DEFAULT_HOURLY_URL
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float = Field(default=30.0, gt=0.0)

    @property
    def page_url(self) -> str:
        return self.base_url + self.city

    @property
    def hourly_page_url(self) -> str:
        return self.hourly_url + self.city


class SiteLayout(BaseModel):
    """CSS selectors for one revision of the weather page markup."""

    model_config = {"extra": "forbid", "frozen": True}

    current: dict[str, str]
    # fields shown as "Label: value" on the page
    prefixed_fields: tuple[str, ...] = ("wind", "humidity", "pressure")
    numeric_fields: tuple[str, ...] = ("term_now",)
    next_days: dict[str, str]
    # None reads the element text (a bare day-of-month)
    date_attr: str | None = "datetime"
    hour_item: str
    hour_fields: dict[str, str]
    hour_icon_attr: str = "class"


class Locale(BaseModel):
    model_config = {"extra": "forbid", "frozen": True}

    weekdays: tuple[str, str, str, str, str, str, str]  # Monday first
    weekend_pattern: str
    calm_wind: str
    labels: dict[str, str]
