"""akafoe_menu: today's canteen menus from AKAFÖ Atom feeds."""

from akafoe_menu.exceptions import (
    AkafoeMenuError,
    AssemblyError,
    BareAmpersandError,
    BuilderStateError,
    DecodeError,
    FeedNotAvailableError,
    FetchError,
    IncompleteDocumentError,
    MismatchedTagError,
    OrphanListError,
    TokenizeError,
    TreeBuildError,
    UnescapeError,
    UnknownFeedError,
)
from akafoe_menu.feeds import FEEDS, get_feed
from akafoe_menu.ingestion import ingest_feed, ingest_feeds
from akafoe_menu.menu import build_menu, parse_menu
from akafoe_menu.schemas import FeedResult, FeedSource, Meal, Menu, Section

__all__ = [
    "AkafoeMenuError",
    "AssemblyError",
    "BareAmpersandError",
    "BuilderStateError",
    "DecodeError",
    "FEEDS",
    "FeedNotAvailableError",
    "FeedResult",
    "FeedSource",
    "FetchError",
    "IncompleteDocumentError",
    "Meal",
    "Menu",
    "MismatchedTagError",
    "OrphanListError",
    "Section",
    "TokenizeError",
    "TreeBuildError",
    "UnescapeError",
    "UnknownFeedError",
    "build_menu",
    "get_feed",
    "ingest_feed",
    "ingest_feeds",
    "parse_menu",
]
