"""Cleanup helpers for text scraped from the weather page."""

import re

THIN_SPACE = "\u2009"
MINUS_SIGN = "\u2212"

_NON_INTEGER_RE = re.compile(r"[^0-9-]+")
_HOUR_RE = re.compile(r"(\d{1,2})")


def clear_nonprint(text: str) -> str:
    """Replace thin spaces with ordinary ones."""
    return text.replace(THIN_SPACE, " ")


def clear_integer(text: str) -> str:
    """Drop everything except digits and minus signs."""
    return _NON_INTEGER_RE.sub("", text.replace(MINUS_SIGN, "-"))


def convert_str_to_int(text: str) -> int:
    """Best-effort integer parse, 0 when nothing sensible is left."""
    try:
        return int(clear_integer(text))
    except ValueError:
        return 0


def parse_icon(classes: str) -> str:
    """Pick the weather icon name out of an element's class list.

    "icon icon_size_24 icon_snow" -> "icon_snow"
    """
    icon = ""
    for name in classes.split():
        if name.startswith("icon_") and not name.startswith("icon_size"):
            icon = name
    return icon


def parse_hour(label: str) -> int | None:
    m = _HOUR_RE.search(label)
    if m is None:
        return None
    hour = int(m.group(1))
    if hour > 23:
        return None
    return hour
