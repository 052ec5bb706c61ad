"""Inline color tags: "<red>123</> str <green+b>456</green>" to ANSI codes."""

import re

from colorama import Back, Fore, Style
from colorama.ansi import code_to_chars

_ONE_COLOR = (
    r"(?:black|red|green|yellow|blue|magenta|cyan|white|grey|\d{1,3})"
    r"(?:\+[bBuih]+)?"
)
_TAG_RE = re.compile(rf"<(?:{_ONE_COLOR}(?::{_ONE_COLOR})?|/\w*)>")

RESET = Style.RESET_ALL

_STYLES = {
    "b": Style.BRIGHT,
    "i": code_to_chars(3),
    "u": code_to_chars(4),
    "B": code_to_chars(5),
}


def _color(palette, name: str, bright: bool, ext_prefix: str) -> str:
    if name.isdigit():
        return code_to_chars(f"{ext_prefix};5;{name}")
    if name == "grey":
        return palette.LIGHTBLACK_EX
    attr = name.upper()
    if bright:
        attr = f"LIGHT{attr}_EX"
    return getattr(palette, attr)


def color_code(tag: str) -> str:
    """Escape sequence for a tag body like "green", "red+bh" or "white:blue"."""
    fg_spec, _, bg_spec = tag.partition(":")
    fg_name, _, fg_mods = fg_spec.partition("+")

    codes = [_STYLES[mod] for mod in fg_mods if mod in _STYLES]
    codes.append(_color(Fore, fg_name, "h" in fg_mods, "38"))
    if bg_spec:
        bg_name, _, bg_mods = bg_spec.partition("+")
        codes.append(_color(Back, bg_name, "h" in bg_mods, "48"))
    return "".join(codes)


def ansi_colour_string(text: str, color: bool = True) -> str:
    """Expand color tags, or drop them when color is off.

    Closing tags ("</>" or "</name>") reset all attributes; an unclosed tag
    simply never gets a reset.
    """

    def _replace(m: re.Match) -> str:
        if not color:
            return ""
        tag = m.group(0)[1:-1]
        if tag.startswith("/"):
            return RESET
        return color_code(tag)

    return _TAG_RE.sub(_replace, text)
