"""Turn one feed document into today's :class:`Menu`."""

from __future__ import annotations

import logging
from datetime import date
from typing import Iterable

from akafoe_menu.entries import extract_title, select_entry
from akafoe_menu.events import Event, iter_events
from akafoe_menu.patterns import DEFAULT_PATTERNS, MenuPatterns
from akafoe_menu.schemas import Menu
from akafoe_menu.sections import assemble_sections
from akafoe_menu.tree_builder import build_tree

logger = logging.getLogger(__name__)

ENTRY_DATE_FORMAT = "%y-%m-%d"
DATE_LABEL_FORMAT = "%d.%m.%y"


def build_menu(
    events: Iterable[Event],
    *,
    today: date,
    patterns: MenuPatterns = DEFAULT_PATTERNS,
) -> Menu:
    """Build the menu for ``today`` from a feed's event stream.

    Args:
        events: Markup events of one feed document.
        today: Reference date; selects the entry and labels the menu.
        patterns: Compiled patterns for the extraction steps.

    Returns:
        The menu. It has no sections when no entry matches ``today``.

    Raises:
        TreeBuildError: If the events do not form a well-formed tree.
        OrphanListError: If the selected entry lists meals before a heading.
    """
    feed = build_tree(events)
    title = extract_title(feed, patterns=patterns)
    reference_date = today.strftime(ENTRY_DATE_FORMAT)

    entry = select_entry(feed, reference_date, patterns=patterns)
    sections = [] if entry is None else assemble_sections(entry, patterns=patterns)
    if not sections:
        logger.warning("No meal section found for %s", reference_date)

    return Menu(
        title=title,
        date_label=today.strftime(DATE_LABEL_FORMAT),
        sections=sections,
    )


def parse_menu(
    document: bytes,
    *,
    today: date,
    patterns: MenuPatterns = DEFAULT_PATTERNS,
) -> Menu:
    """Tokenize ``document`` and build its menu for ``today``."""
    return build_menu(iter_events(document), today=today, patterns=patterns)
