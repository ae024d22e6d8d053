"""HTTP utilities for fetching content with retry logic and connection pooling."""

from __future__ import annotations

import asyncio
import logging
from typing import Final

import httpx

from akafoe_menu.config import (
    AKAFOE_MENU_FETCH_BACKOFF_S,
    AKAFOE_MENU_FETCH_MAX_RETRIES,
    AKAFOE_MENU_FETCH_TIMEOUT_S,
    AKAFOE_MENU_USER_AGENT,
)
from akafoe_menu.exceptions import FetchError

logger = logging.getLogger(__name__)

RETRY_STATUS_CODES: Final[frozenset[int]] = frozenset({429, 500, 502, 503, 504})

_MAX_REDIRECTS: Final[int] = 5


def create_client() -> httpx.AsyncClient:
    """Create an AsyncClient with the configured timeout and User-Agent."""
    return httpx.AsyncClient(
        timeout=httpx.Timeout(AKAFOE_MENU_FETCH_TIMEOUT_S),
        headers={"User-Agent": AKAFOE_MENU_USER_AGENT},
        follow_redirects=True,
        max_redirects=_MAX_REDIRECTS,
    )


async def fetch_with_retries(
    url: str,
    *,
    client: httpx.AsyncClient | None = None,
    on_404: type[Exception] = FetchError,
    on_404_message: str | None = None,
) -> bytes:
    """Fetch the raw body of ``url``, retrying transient failures.

    Responses with a status in ``RETRY_STATUS_CODES``, other HTTP errors and
    network errors are retried with exponential backoff. A 404 is final.

    Args:
        url: The URL to fetch.
        client: Optional httpx.AsyncClient for connection pooling. If not
            provided, a new client is created for this request.
        on_404: Exception class raised on 404.
        on_404_message: Message for the 404 exception. If None, a generic
            message is used.

    Returns:
        The undecoded response body.

    Raises:
        FetchError (or ``on_404``): If the fetch fails after all retries or
            returns 404.
    """
    if client is None:
        async with create_client() as new_client:
            return await fetch_with_retries(
                url, client=new_client, on_404=on_404, on_404_message=on_404_message
            )

    last_exc: Exception | None = None
    for attempt in range(AKAFOE_MENU_FETCH_MAX_RETRIES + 1):
        if attempt:
            backoff = AKAFOE_MENU_FETCH_BACKOFF_S * (2 ** (attempt - 1))
            logger.debug("Retrying %s in %.1fs after: %s", url, backoff, last_exc)
            await asyncio.sleep(backoff)

        try:
            response = await client.get(url)
        except httpx.RequestError as exc:
            last_exc = exc
            continue

        if response.status_code == 404:
            raise on_404(on_404_message or f"Resource not found at {url}")
        if response.status_code in RETRY_STATUS_CODES:
            last_exc = FetchError(f"HTTP {response.status_code} from {url}")
            continue
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            last_exc = exc
            continue
        return response.content

    raise FetchError(f"Failed to fetch {url}: {last_exc}")
