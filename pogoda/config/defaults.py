"""Default page layout, locale and icon tables."""

from types import MappingProxyType

from pogoda.config.schema import Locale, SiteLayout

DEFAULT_LAYOUT = SiteLayout(
    current={
        "city": "h1.title",
        "term_now": "div.fact div.fact__temp span.temp__value",
        "desc_now": "div.fact div.link__condition",
        "wind": "div.fact div.fact__wind-speed",
        "humidity": "div.fact div.fact__humidity",
        "pressure": "div.fact div.fact__pressure",
    },
    next_days={
        "date": "div.forecast-briefly div.forecast-briefly__day time.time",
        "desc": "div.forecast-briefly div.forecast-briefly__condition",
        "temp": "div.forecast-briefly div.forecast-briefly__temp_day span.temp__value",
        "temp_night": "div.forecast-briefly div.forecast-briefly__temp_night span.temp__value",
    },
    hour_item="div.fact__hour-list li.fact__hour",
    hour_fields={
        "hour": "div.fact__hour-label",
        "temp": "div.fact__hour-temp",
        "icon": ".icon",
    },
)

# Older page revision: day-of-month numerals instead of <time datetime=...>
LEGACY_LAYOUT = DEFAULT_LAYOUT.model_copy(
    update={
        "current": {
            "city": "div.navigation-city h1",
            "term_now": "div.current-weather div.current-weather__thermometer_type_now",
            "desc_now": "div.current-weather span.current-weather__comment",
            "wind": "div.current-weather div.current-weather__info-row:nth-child(2) span.wind-speed",
            "humidity": "div.current-weather div.current-weather__info-row:nth-child(3)",
            "pressure": "div.current-weather div.current-weather__info-row:nth-child(4)",
        },
        "next_days": {
            "date": "div.tabs-panes span.forecast-brief__item-day",
            "desc": "div.tabs-panes div.forecast-brief__item-comment",
            "temp": "div.tabs-panes div.forecast-brief__item-temp-day",
            "temp_night": "div.tabs-panes div.forecast-brief__item-temp-night",
        },
        "date_attr": None,
    }
)

RU_LOCALE = Locale(
    weekdays=("пн", "вт", "ср", "чт", "пт", "сб", "вс"),
    weekend_pattern=r"(сб|вс)",
    calm_wind="0 м/с",
    labels={
        "now": "Сейчас",
        "pressure": "Давление",
        "humidity": "Влажность",
        "wind": "Ветер",
        "date": "дата",
        "temp": "°C",
        "desc": "погода",
        "temp_night": "°C ночью",
    },
)

ICON_GLYPHS = MappingProxyType({
    "icon_clear": "☀",
    "icon_sunny": "☀",
    "icon_cloudy": "☁",
    "icon_overcast": "☁",
    "icon_partly_cloudy": "⛅",
    "icon_rain": "☂",
    "icon_light_rain": "☂",
    "icon_snow": "❄",
    "icon_light_snow": "❄",
    "icon_sleet": "☃",
    "icon_thunderstorm": "⚡",
    "icon_fog": "≡",
})
