"""CLI entry point for the Yandex weather client."""

import argparse
import logging
import sys

from pogoda import __version__
from pogoda.config.loader import ConfigError, load_config
from pogoda.config.schema import FORECAST_DAYS, OutputFormat, WeatherConfig
from pogoda.ingest.forecast_extractor import (
    CityNotFoundError,
    ExtractionError,
    ForecastExtractor,
)
from pogoda.ingest.page_client import PageClient, PageFetchError
from pogoda.models.forecast import Forecast
from pogoda.reporting.formatters import format_report_json, format_report_text
from pogoda.reporting.terminal import get_color_writer, stdout_is_terminal

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_NOT_FOUND = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="yandex-weather",
        description="Weather forecast from pogoda.yandex.ru",
        epilog="examples:\n  yandex-weather kiev\n  yandex-weather --json london",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "city", nargs="?", default=None,
        help="City name as used in the site URL (default: detect by IP)",
    )
    parser.add_argument(
        "--json", dest="output", action="store_const",
        const=OutputFormat.JSON, default=None, help="Print JSON",
    )
    parser.add_argument(
        "--no-color", dest="color", action="store_false", default=None,
        help="Disable colored output",
    )
    parser.add_argument(
        "--no-today", dest="today", action="store_false", default=None,
        help="Skip the forecast by hours for today",
    )
    parser.add_argument(
        "--days", type=int, default=None,
        help=f"Days in the forecast table (1-{FORECAST_DAYS})",
    )
    parser.add_argument("--config", default=None, help="Config YAML path")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Debug logging to stderr"
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    color = args.color
    if color is None and not stdout_is_terminal():
        color = False

    try:
        config = load_config(
            args.config,
            city=args.city,
            output=args.output,
            color=color,
            today=args.today,
            days=args.days,
        )
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    extractor = ForecastExtractor(
        PageClient(user_agent=config.user_agent, timeout=config.timeout)
    )
    try:
        forecast = extractor.extract(config)
    except CityNotFoundError as e:
        print(e, file=sys.stderr)
        return EXIT_NOT_FOUND
    except (PageFetchError, ExtractionError) as e:
        logger.debug("Forecast failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    _render(forecast, config)
    return EXIT_OK


def _render(forecast: Forecast, config: WeatherConfig) -> None:
    if config.output == OutputFormat.JSON:
        print(format_report_json(forecast, config))
        return
    out = get_color_writer(config.color)
    print(format_report_text(forecast, config), file=out)


def main_entry() -> None:
    sys.exit(main())
