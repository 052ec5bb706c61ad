"""Forecast extractor: pulls current, hourly and daily data out of the pages."""

import asyncio
import logging
import re
from dataclasses import fields
from datetime import date

from pogoda.config.defaults import DEFAULT_LAYOUT, RU_LOCALE
from pogoda.config.schema import Locale, SiteLayout, WeatherConfig
from pogoda.ingest.dates import format_date, parse_iso_date, suggest_day
from pogoda.ingest.document import Document, DocumentError
from pogoda.ingest.page_client import DocumentFetcher, PageFetchError
from pogoda.ingest.text import (
    clear_nonprint,
    convert_str_to_int,
    parse_hour,
    parse_icon,
)
from pogoda.models.forecast import (
    CurrentConditions,
    DayForecast,
    Forecast,
    HourTemp,
)

logger = logging.getLogger(__name__)

# "Влажность: 80%" -> "80%"
_LABEL_PREFIX_RE = re.compile(r"^[^:：]*[:：]\s*")

_CURRENT_FIELDS = {f.name for f in fields(CurrentConditions)}


class ExtractionError(Exception):
    """The forecast page could not be queried."""


class CityNotFoundError(Exception):
    def __init__(self, city: str):
        self.city = city
        super().__init__(f'City "{city}" not found')


class ForecastExtractor:
    def __init__(
        self,
        fetcher: DocumentFetcher,
        layout: SiteLayout = DEFAULT_LAYOUT,
        locale: Locale = RU_LOCALE,
    ):
        self.fetcher = fetcher
        self.layout = layout
        self.locale = locale

    def extract(self, config: WeatherConfig, today: date | None = None) -> Forecast:
        """Fetch both pages concurrently and build the forecast.

        Raises PageFetchError or ExtractionError when the main page fails and
        CityNotFoundError when it has no city name. Hourly data is optional.
        """
        if today is None:
            today = date.today()
        forecast = asyncio.run(self._extract(config, today))
        if not forecast.now.found:
            raise CityNotFoundError(config.city)
        return forecast

    async def _extract(self, config: WeatherConfig, today: date) -> Forecast:
        async with self.fetcher:
            tasks = [self._extract_main(config, today)]
            if config.today:
                tasks.append(self._extract_hourly(config))
            # wait for both pages even if one fails, the session closes after
            results = await asyncio.gather(*tasks, return_exceptions=True)

        for result in results:
            if isinstance(result, BaseException):
                raise result
        now, next_days = results[0]
        by_hours = results[1] if config.today else []
        return Forecast(now=now, by_hours=by_hours, next_days=next_days)

    async def _extract_main(
        self, config: WeatherConfig, today: date
    ) -> tuple[CurrentConditions, list[DayForecast]]:
        doc = await self.fetcher.fetch(config.page_url)
        try:
            now = extract_current(doc, self.layout, self.locale)
            next_days = extract_next_days(
                doc, self.layout, self.locale, today, config.days
            )
        except DocumentError as e:
            raise ExtractionError(str(e)) from e
        logger.info(
            "Parsed %s: %d forecast days", now.city or "<no city>", len(next_days)
        )
        return now, next_days

    async def _extract_hourly(self, config: WeatherConfig) -> list[HourTemp]:
        url = config.hourly_page_url
        try:
            doc = await self.fetcher.fetch(url)
            by_hours = extract_by_hours(doc, self.layout)
        except (PageFetchError, DocumentError) as e:
            logger.warning("Hourly forecast unavailable: %s", e)
            return []
        logger.info("Parsed %d hourly points from %s", len(by_hours), url)
        return by_hours


def extract_current(
    doc: Document, layout: SiteLayout, locale: Locale
) -> CurrentConditions:
    """Current conditions; the first element matching each selector wins."""
    values: dict[str, str | int] = {}
    for name, selector in layout.current.items():
        found = doc.query(selector)
        if not found:
            logger.debug("Field %s not found on page", name)
            continue
        value = clear_nonprint(found[0]).strip()
        if name in layout.prefixed_fields:
            value = _LABEL_PREFIX_RE.sub("", value, count=1)
        values[name] = value

    for name in layout.numeric_fields:
        values[name] = convert_str_to_int(str(values.get(name, "")))

    # calm days have no wind row at all
    if not values.get("wind"):
        values["wind"] = locale.calm_wind

    return CurrentConditions(
        **{k: v for k, v in values.items() if k in _CURRENT_FIELDS}
    )


def extract_next_days(
    doc: Document,
    layout: SiteLayout,
    locale: Locale,
    today: date,
    limit: int,
) -> list[DayForecast]:
    """Multi-day rows, aligned by index across the column selectors.

    Rows whose date is unparseable, not after today or not after the previous
    accepted row are dropped.
    """
    columns = {
        name: doc.query(selector, attr=layout.date_attr if name == "date" else None)
        for name, selector in layout.next_days.items()
    }

    result: list[DayForecast] = []
    last_day = today
    for i, raw_date in enumerate(columns.get("date", [])):
        if len(result) >= limit:
            break

        raw_date = clear_nonprint(raw_date).strip()
        day = parse_iso_date(raw_date)
        if day is None:
            day = suggest_day(raw_date, i, today)
        if day is None or day <= last_day:
            logger.debug("Skipping forecast row %d with date %r", i, raw_date)
            continue

        human_date, json_date = format_date(day, locale.weekdays)
        result.append(
            DayForecast(
                date=human_date,
                json_date=json_date,
                desc=_cell(columns, "desc", i).lower(),
                temp=convert_str_to_int(_cell(columns, "temp", i)),
                temp_night=convert_str_to_int(_cell(columns, "temp_night", i)),
            )
        )
        last_day = day

    return result


def extract_by_hours(doc: Document, layout: SiteLayout) -> list[HourTemp]:
    result: list[HourTemp] = []
    for item in doc.items(layout.hour_item):
        labels = item.query(layout.hour_fields["hour"])
        hour = parse_hour(labels[0]) if labels else None
        if hour is None:
            continue

        temps = item.query(layout.hour_fields["temp"])
        icons = item.query(layout.hour_fields["icon"], attr=layout.hour_icon_attr)
        result.append(
            HourTemp(
                hour=hour,
                temp=convert_str_to_int(temps[0]) if temps else 0,
                icon=parse_icon(icons[0]) if icons else "",
            )
        )
    return result


def _cell(columns: dict[str, list[str]], name: str, i: int) -> str:
    column = columns.get(name, [])
    if i >= len(column):
        return ""
    return clear_nonprint(column[i]).strip()
