"""Feed source and per-feed result models."""

from __future__ import annotations

from pydantic import BaseModel

from akafoe_menu.schemas.menu import Menu


class FeedSource(BaseModel):
    """A facility publishing its menu as an Atom feed.

    Attributes:
        key: Short name used on the command line.
        name: Human readable facility name.
        url: Feed URL.
    """

    key: str
    name: str
    url: str


class FeedResult(BaseModel):
    """Outcome of ingesting one feed: either a menu or an error message."""

    source: FeedSource
    menu: Menu | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.menu is not None
