"""Output stream selection for colored text."""

import sys
from typing import TextIO

import colorama


def stdout_is_terminal(stream: TextIO | None = None) -> bool:
    """False when output goes to a pipe or file."""
    if stream is None:
        stream = sys.stdout
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False


def get_color_writer(color: bool) -> TextIO:
    """Stream to print the report to.

    Windows consoles need colorama to understand ANSI escapes; elsewhere the
    plain stdout is returned.
    """
    if color and sys.platform == "win32":
        colorama.just_fix_windows_console()
    return sys.stdout
