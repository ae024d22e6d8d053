"""Fetch raw feed documents."""

from __future__ import annotations

import httpx

from akafoe_menu.exceptions import FeedNotAvailableError
from akafoe_menu.http_utils import fetch_with_retries
from akafoe_menu.schemas import FeedSource


async def fetch_feed(
    source: FeedSource, *, client: httpx.AsyncClient | None = None
) -> bytes:
    """Download the Atom feed of ``source`` as raw bytes.

    The bytes are handed to the tokenizer undecoded.

    Raises:
        FeedNotAvailableError: If the feed URL returns 404.
        FetchError: If the fetch fails after retries.
    """
    return await fetch_with_retries(
        source.url,
        client=client,
        on_404=FeedNotAvailableError,
        on_404_message=f"No menu feed available for {source.name} at {source.url}",
    )
