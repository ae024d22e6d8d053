"""Fetch and parse several facility feeds concurrently."""

from __future__ import annotations

import asyncio
import logging
from datetime import date
from typing import Iterable

import httpx

from akafoe_menu.exceptions import AkafoeMenuError
from akafoe_menu.fetch import fetch_feed
from akafoe_menu.http_utils import create_client
from akafoe_menu.menu import parse_menu
from akafoe_menu.schemas import FeedResult, FeedSource, Menu

logger = logging.getLogger(__name__)


async def ingest_feed(
    source: FeedSource,
    *,
    today: date,
    client: httpx.AsyncClient | None = None,
) -> Menu:
    """Fetch one feed and build its menu for ``today``.

    Raises:
        FetchError: If the feed cannot be downloaded.
        TokenizeError: If the document has unterminated markup.
        TreeBuildError: If the document is not well-formed.
        OrphanListError: If today's entry lists meals before any heading.
    """
    document = await fetch_feed(source, client=client)
    return parse_menu(document, today=today)


async def ingest_feeds(
    sources: Iterable[FeedSource],
    *,
    today: date,
    client: httpx.AsyncClient | None = None,
) -> list[FeedResult]:
    """Ingest ``sources`` concurrently, keeping their order.

    A failing feed does not affect the others: its error is logged and
    recorded on its :class:`FeedResult`.
    """
    sources = list(sources)

    async def run(http_client: httpx.AsyncClient) -> list[FeedResult]:
        return list(
            await asyncio.gather(
                *(_ingest_one(source, today=today, client=http_client) for source in sources)
            )
        )

    if client is not None:
        return await run(client)

    async with create_client() as new_client:
        return await run(new_client)


async def _ingest_one(
    source: FeedSource, *, today: date, client: httpx.AsyncClient
) -> FeedResult:
    try:
        menu = await ingest_feed(source, today=today, client=client)
    except AkafoeMenuError as exc:
        logger.error("Unable to load menu of %s: %s", source.name, exc)
        return FeedResult(source=source, error=str(exc))
    return FeedResult(source=source, menu=menu)
