import argparse
import logging
import sys
from dataclasses import replace
from datetime import datetime
from typing import Optional, Sequence, TextIO

import httpx

from foodtrucks.core.config import load_config
from foodtrucks.core.errors import FoodTruckFinderError
from foodtrucks.finder import find_open_trucks
from foodtrucks.presenter import present_listings
from foodtrucks.sources.registry import SOURCES
from foodtrucks.sources.sfgov.http import configure_logging_if_needed
from foodtrucks.utils.time import DAY_NAMES

logger = logging.getLogger(__name__)

ERROR_PREFIX = "Error encountered while generating list of available food trucks: "


def validate_hh_colon_mm(value: str) -> tuple[int, int]:
    v = value.strip()
    try:
        hh, mm = v.split(":")
        h, m = int(hh), int(mm)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Time must be HH:MM (e.g. 12:30). Got: {value}")
    if not (0 <= h <= 23 and 0 <= m <= 59):
        raise argparse.ArgumentTypeError(f"Invalid HH:MM time: {value}")
    return h, m


def positive_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected a positive integer. Got: {value}")
    if n < 1:
        raise argparse.ArgumentTypeError(f"Expected a positive integer. Got: {value}")
    return n


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="List food trucks open right now, sorted by name.")
    p.add_argument("--source", default="sfgov", choices=SOURCES.keys())
    p.add_argument("--base-url", help="Override the dataset endpoint")
    p.add_argument("--day", choices=list(DAY_NAMES.values()), help="Query this day instead of today")
    p.add_argument("--at", type=validate_hh_colon_mm, metavar="HH:MM", help="Use this time instead of now")
    p.add_argument("--page-size", type=positive_int, help="Rows per page (default: 10)")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")
    return p


def main(
    argv: Optional[Sequence[str]] = None,
    *,
    now: Optional[datetime] = None,
    stdout: Optional[TextIO] = None,
    stdin: Optional[TextIO] = None,
    transport: Optional[httpx.BaseTransport] = None,
) -> int:
    args = build_parser().parse_args(argv)
    out = sys.stdout if stdout is None else stdout
    inp = sys.stdin if stdin is None else stdin

    try:
        cfg = load_config()
        configure_logging_if_needed("DEBUG" if args.verbose else cfg.log_level)

        if args.base_url:
            cfg = replace(cfg, base_url=args.base_url)
        if args.page_size:
            cfg = replace(cfg, page_size=args.page_size)

        if now is None:
            now = datetime.now(cfg.tzinfo())
        if args.at is not None:
            now = now.replace(hour=args.at[0], minute=args.at[1], second=0, microsecond=0)

        source = SOURCES[args.source](cfg, transport=transport)
        result = find_open_trucks(source, now, day_name=args.day)

    except FoodTruckFinderError as e:
        logger.debug("Finder run failed", exc_info=True)
        print(ERROR_PREFIX + str(e), file=out)
        return 1

    summary = present_listings(result.open_now, out, inp, page_size=cfg.page_size)
    logger.info("Shown %d/%d pages (%d rows)", summary.pages_shown, summary.total_pages, summary.rows_shown)
    return 0


if __name__ == "__main__":
    sys.exit(main())
