"""Tests for the feed catalogue."""

from __future__ import annotations

import pytest

from akafoe_menu.exceptions import UnknownFeedError
from akafoe_menu.feeds import FEEDS, get_feed


def test_catalogue_order() -> None:
    assert [feed.key for feed in FEEDS] == ["mensa", "bistro", "qwest", "henkelmann"]


def test_urls_request_atom_feed() -> None:
    for feed in FEEDS:
        assert feed.url.startswith("http://www.akafoe.de/gastronomie/")
        assert "controller%5D=AtomFeed" in feed.url


@pytest.mark.parametrize("key", ["mensa", "  Bistro ", "QWEST"])
def test_get_feed_is_case_insensitive(key: str) -> None:
    assert get_feed(key).key == key.strip().lower()


def test_unknown_feed() -> None:
    with pytest.raises(UnknownFeedError, match="choose one of: mensa, bistro"):
        get_feed("cafeteria")
