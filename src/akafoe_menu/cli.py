"""Command-line entry point: print today's menus."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from datetime import date
from pathlib import Path
from typing import Sequence

from akafoe_menu.config import AKAFOE_MENU_LOG_LEVEL
from akafoe_menu.exceptions import AkafoeMenuError
from akafoe_menu.feeds import FEEDS, get_feed
from akafoe_menu.ingestion import ingest_feeds
from akafoe_menu.menu import parse_menu
from akafoe_menu.output_formatter import (
    format_banner,
    format_results,
    format_results_json,
)
from akafoe_menu.schemas import FeedResult, FeedSource

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="akafoe-menu", description="Show today's menus of the AKAFÖ canteens."
    )
    parser.add_argument(
        "--feed",
        action="append",
        dest="feeds",
        metavar="KEY",
        help="Feed to show (repeatable); defaults to all feeds",
    )
    parser.add_argument(
        "--date",
        type=date.fromisoformat,
        help="Reference date as YYYY-MM-DD (default: today)",
    )
    parser.add_argument("--file", type=Path, help="Parse a local feed document instead of fetching")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of text")
    parser.add_argument("--no-banner", action="store_true", help="Do not print the banner")
    parser.add_argument("--list-feeds", action="store_true", help="List known feeds and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else AKAFOE_MENU_LOG_LEVEL,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.list_feeds:
        for feed in FEEDS:
            print(f"{feed.key:12} {feed.name}")
        return 0

    try:
        sources = [get_feed(key) for key in args.feeds] if args.feeds else list(FEEDS)
    except AkafoeMenuError as exc:
        parser.error(str(exc))
    today = args.date or date.today()

    if args.file:
        if args.feeds and len(sources) > 1:
            parser.error("--file accepts at most one --feed")
        source = sources[0] if args.feeds else _file_source(args.file)
        results = [_parse_file(args.file, source, today=today)]
    else:
        results = asyncio.run(ingest_feeds(sources, today=today))

    if args.json:
        print(format_results_json(results))
    else:
        if not args.no_banner:
            print(format_banner())
            print()
        print(format_results(results))

    return 0 if any(result.ok for result in results) else 1


def _file_source(path: Path) -> FeedSource:
    return FeedSource(key="file", name=path.name, url=path.resolve().as_uri())


def _parse_file(path: Path, source: FeedSource, *, today: date) -> FeedResult:
    try:
        menu = parse_menu(path.read_bytes(), today=today)
    except (OSError, AkafoeMenuError) as exc:
        logger.error("Unable to load menu from %s: %s", path, exc)
        return FeedResult(source=source, error=str(exc))
    return FeedResult(source=source, menu=menu)


if __name__ == "__main__":
    sys.exit(main())
