"""Forecast data models scraped from the weather page."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class CurrentConditions:
    city: str = ""
    term_now: int = 0
    desc_now: str = ""
    wind: str = ""
    humidity: str = ""
    pressure: str = ""

    @property
    def found(self) -> bool:
        return bool(self.city)


@dataclass(frozen=True)
class HourTemp:
    hour: int  # 0-23
    temp: int
    icon: str = ""  # e.g. "icon_snow", empty when unknown


@dataclass(frozen=True)
class DayForecast:
    date: str  # "18.03 (пт)"
    json_date: str  # YYYY-MM-DD
    desc: str
    temp: int
    temp_night: int


@dataclass(frozen=True)
class Forecast:
    now: CurrentConditions
    by_hours: list[HourTemp] = field(default_factory=list)
    next_days: list[DayForecast] = field(default_factory=list)
