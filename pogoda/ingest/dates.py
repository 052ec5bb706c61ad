"""Reconstruct calendar dates from the day numbers shown in forecast rows."""

import re
from datetime import date, timedelta

from pogoda.ingest.text import clear_integer

MAX_DATE_STEPS = 3

_ISO_PREFIX_RE = re.compile(r"^\s*(\d{4}-\d{2}-\d{2})")


def format_date(day: date, weekdays: tuple[str, ...]) -> tuple[str, str]:
    """Return the human ("18.03 (пт)") and JSON ("2016-03-18") forms."""
    human = f"{day:%d.%m} ({weekdays[day.weekday()]})"
    return human, day.isoformat()


def suggest_day(day_token: str, order_num: int, today: date) -> date | None:
    """Find the calendar date for a day-of-month shown in row ``order_num``.

    The row position is only a first guess: the day number on the page wins,
    so the guess is moved forward up to MAX_DATE_STEPS days to match it.
    Returns None when the token is not a number.
    """
    try:
        day_num = int(clear_integer(day_token))
    except ValueError:
        return None

    candidate = today + timedelta(days=order_num)
    for _ in range(MAX_DATE_STEPS):
        if candidate.day == day_num:
            break
        candidate += timedelta(days=1)
    return candidate


def suggest_date(
    day_token: str,
    order_num: int,
    today: date,
    weekdays: tuple[str, ...],
) -> tuple[str, str]:
    """Human and JSON dates for a row, or the token itself twice if unparseable."""
    day = suggest_day(day_token, order_num, today)
    if day is None:
        return day_token, day_token
    return format_date(day, weekdays)


def parse_iso_date(text: str) -> date | None:
    """Parse the leading YYYY-MM-DD of a datetime attribute."""
    m = _ISO_PREFIX_RE.match(text)
    if m is None:
        return None
    try:
        return date.fromisoformat(m.group(1))
    except ValueError:
        return None
