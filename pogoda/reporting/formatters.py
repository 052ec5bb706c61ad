"""Output formatters for the forecast report."""

import json
import re
from collections.abc import Mapping, Sequence
from typing import Any

from pogoda.config.defaults import ICON_GLYPHS, RU_LOCALE
from pogoda.config.schema import Locale, WeatherConfig
from pogoda.models.forecast import DayForecast, Forecast, HourTemp
from pogoda.reporting.colors import ansi_colour_string
from pogoda.reporting.histogram import INTERPOLATION_FACTOR, render_histogram

# one hour of the hourly block, one histogram glyph per interpolated sample
HOUR_WIDTH = INTERPOLATION_FACTOR
# keeps the days table at least as wide as a half-day hourly block
DESC_MIN_WIDTH = 21
TABLE_EXTRA_WIDTH = 27
RULE_CHAR = "─"


def get_max_length(rows: Sequence[Any], attr: str) -> int:
    """Longest value of ``attr`` across rows, in characters."""
    return max((len(getattr(row, attr)) for row in rows), default=0)


def format_report_text(
    forecast: Forecast,
    config: WeatherConfig,
    locale: Locale = RU_LOCALE,
    icons: Mapping[str, str] = ICON_GLYPHS,
) -> str:
    """Human readable report; color tags are expanded or stripped per config."""
    now = forecast.now
    labels = locale.labels
    lines = [
        f"{now.city} (<yellow>{config.page_url}</>)",
        f"{labels['now']}: <green>{now.term_now} °C</>, <green>{now.desc_now}</>",
        f"{labels['pressure']}: <green>{now.pressure}</>",
        f"{labels['humidity']}: <green>{now.humidity}</>",
        f"{labels['wind']}: <green>{now.wind}</>",
    ]

    if config.today and forecast.by_hours:
        lines.extend(_format_by_hours(forecast.by_hours, icons))

    if forecast.next_days:
        lines.extend(_format_next_days(forecast.next_days, locale))

    return "\n".join(ansi_colour_string(line, config.color) for line in lines)


def _format_by_hours(
    by_hours: Sequence[HourTemp], icons: Mapping[str, str]
) -> list[str]:
    hours = "".join(f"{p.hour:<{HOUR_WIDTH}}" for p in by_hours)
    temps = "".join(f"{_signed(p.temp) + '°':<{HOUR_WIDTH}}" for p in by_hours)
    glyphs = "".join(f"{icons.get(p.icon, ''):<{HOUR_WIDTH}}" for p in by_hours)
    return [
        f"<grey>{hours.rstrip()}</>",
        f"<cyan>{render_histogram(by_hours)}</>",
        temps.rstrip(),
        glyphs.rstrip(),
    ]


def _format_next_days(next_days: Sequence[DayForecast], locale: Locale) -> list[str]:
    labels = locale.labels
    weekend_re = re.compile(locale.weekend_pattern)
    desc_length = max(get_max_length(next_days, "desc"), DESC_MIN_WIDTH)
    rule = RULE_CHAR * (TABLE_EXTRA_WIDTH + desc_length)

    lines = [
        rule,
        f"<blue+h> {labels['date']:<10} {labels['temp']:>4} "
        f"{labels['desc']:<{desc_length}} {labels['temp_night']:>8}</>",
        rule,
    ]
    for row in next_days:
        # pad before coloring so escape codes do not count towards the width
        date = weekend_re.sub(r"<red+h>\1</>", f"{row.date:>10}")
        lines.append(
            f" {date} {row.temp:3d}° {row.desc:<{desc_length}} {row.temp_night:7d}°"
        )
    lines.append(rule)
    return lines


def _signed(temp: int) -> str:
    return f"{temp:+d}" if temp else "0"


def report_to_dict(forecast: Forecast, config: WeatherConfig) -> dict[str, Any]:
    now = forecast.now
    data: dict[str, Any] = {
        "city": now.city,
        "term_now": now.term_now,
        "desc_now": now.desc_now,
        "wind": now.wind,
        "humidity": now.humidity,
        "pressure": now.pressure,
    }
    if config.today and forecast.by_hours:
        data["by_hours"] = [
            {"hour": p.hour, "temp": p.temp, "icon": p.icon}
            for p in forecast.by_hours
        ]
    if forecast.next_days:
        # the JSON date is the machine readable one
        data["next_days"] = [
            {
                "date": row.json_date,
                "desc": row.desc,
                "temp": row.temp,
                "temp_night": row.temp_night,
            }
            for row in forecast.next_days
        ]
    return data


def format_report_json(forecast: Forecast, config: WeatherConfig) -> str:
    """Single line JSON for programmatic consumption."""
    return json.dumps(report_to_dict(forecast, config), ensure_ascii=False)
