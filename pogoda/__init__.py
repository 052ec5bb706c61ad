"""Command line interface for the Yandex weather service."""

__version__ = "0.3.0"
