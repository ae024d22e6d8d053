"""Select the feed entry for the reference date."""

from __future__ import annotations

import logging

from akafoe_menu.nodes import Element, find_child, iter_children, text
from akafoe_menu.patterns import DEFAULT_PATTERNS, MenuPatterns

logger = logging.getLogger(__name__)

UNKNOWN_TITLE = "Unknown"


def extract_title(feed: Element, *, patterns: MenuPatterns = DEFAULT_PATTERNS) -> str:
    """Return the feed title with whitespace collapsed."""
    title = find_child(feed, "title")
    if title is None:
        logger.warning("Menu has no title")
        return UNKNOWN_TITLE
    return patterns.collapse_whitespace(text(title))


def extract_entry_date(
    entry_id: str, *, patterns: MenuPatterns = DEFAULT_PATTERNS
) -> str | None:
    """Return the ``YY-MM-DD`` suffix of an entry id such as ``.../21-05-02``."""
    match = patterns.date_suffix.match(entry_id.strip())
    return match.group(1) if match else None


def select_entry(
    feed: Element,
    reference_date: str,
    *,
    patterns: MenuPatterns = DEFAULT_PATTERNS,
) -> Element | None:
    """Return the first ``entry`` whose id ends in ``reference_date``.

    Entries without an id are skipped with a warning. Later entries for the
    same date are never looked at.
    """
    for entry in iter_children(feed, "entry"):
        entry_id = find_child(entry, "id")
        if entry_id is None:
            logger.warning("Menu entry is missing its id")
            continue
        if extract_entry_date(text(entry_id), patterns=patterns) == reference_date:
            return entry
    return None
