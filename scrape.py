"""
Command-line entry point: scrape the MotoGP calendar into a JSON file.

Exit status:
    0  calendar scraped and written
    1  scraping or enrichment failed, nothing written
    2  calendar scraped but the output file could not be written
"""

import argparse
import asyncio
import logging
import sys

from dotenv import load_dotenv

from browser_client import BrowserConfig
from config import ScraperConfig
from models.errors import CalendarScraperError, SinkError
from pipeline import CalendarPipeline

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_NOT_SAVED = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Scrape the MotoGP calendar into JSON.")
    parser.add_argument("-o", "--output", help="Output file (default: data.json or $OUTPUT_PATH).")
    parser.add_argument("--season", type=int, help="Year for schedule dates shown without one.")
    parser.add_argument("--class-marker", help="Racing class to keep (default: MotoGP).")
    parser.add_argument("--day-tabs", type=int, help="Number of schedule day tabs per event.")
    parser.add_argument("--concurrency", type=int, help="Concurrent geocoding requests.")
    parser.add_argument("--headed", action="store_true", help="Show the browser window.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
    return parser


def apply_overrides(config: ScraperConfig, args: argparse.Namespace) -> ScraperConfig:
    """Command-line flags take precedence over environment values."""
    if args.output is not None:
        config.output_path = args.output
    if args.season is not None:
        config.season = args.season
    if args.class_marker is not None:
        config.class_marker = args.class_marker
    if args.day_tabs is not None:
        config.day_tab_count = args.day_tabs
    if args.concurrency is not None:
        config.geocode_concurrency = args.concurrency
    return config


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    load_dotenv()

    config = apply_overrides(ScraperConfig.from_env(), args)
    browser_config = BrowserConfig.from_env()
    if args.headed:
        browser_config.headless = False

    pipeline = CalendarPipeline(config, browser_config=browser_config)

    try:
        asyncio.run(pipeline.run())
    except SinkError:
        logger.exception("Calendar scraped but not saved")
        return EXIT_NOT_SAVED
    except CalendarScraperError:
        logger.exception("Scrape failed")
        return EXIT_FAILED

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
