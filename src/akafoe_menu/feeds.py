"""Known AKAFÖ facility feeds."""

from __future__ import annotations

from akafoe_menu.exceptions import UnknownFeedError
from akafoe_menu.schemas import FeedSource

_FEED_QUERY = (
    "tx_akafoespeiseplan_mensadetails%5Baction%5D=feed"
    "&tx_akafoespeiseplan_mensadetails%5Bcontroller%5D=AtomFeed"
)
_BASE_URL = "http://www.akafoe.de/gastronomie"

FEEDS: tuple[FeedSource, ...] = (
    FeedSource(
        key="mensa",
        name="Mensa der Ruhr-Universität Bochum",
        url=f"{_BASE_URL}/speiseplaene-der-mensen/ruhr-universitaet-bochum/?mid=1?{_FEED_QUERY}",
    ),
    FeedSource(
        key="bistro",
        name="Bistro der Ruhr-Universität Bochum",
        url=f"{_BASE_URL}/speiseplaene-der-mensen/bistro-der-ruhr-universitaet-bochum/?mid=37?{_FEED_QUERY}",
    ),
    FeedSource(
        key="qwest",
        name="Q-West",
        url=f"{_BASE_URL}/gastronomien/q-west/?mid=38?{_FEED_QUERY}",
    ),
    FeedSource(
        key="henkelmann",
        name="Henkelmann",
        url=f"{_BASE_URL}/henkelmann/?mid=21&{_FEED_QUERY}",
    ),
)


def get_feed(key: str) -> FeedSource:
    """Look up a feed by its command-line key (case-insensitive)."""
    wanted = key.strip().lower()
    for feed in FEEDS:
        if feed.key == wanted:
            return feed
    known = ", ".join(feed.key for feed in FEEDS)
    raise UnknownFeedError(f"Unknown feed {key!r}; choose one of: {known}")
