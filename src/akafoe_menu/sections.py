"""Group the list items of an entry under their section headings."""

from __future__ import annotations

import logging

from akafoe_menu.exceptions import OrphanListError
from akafoe_menu.meals import parse_meal
from akafoe_menu.nodes import Element, element_children, find_child, iter_children, text
from akafoe_menu.patterns import DEFAULT_PATTERNS, MenuPatterns
from akafoe_menu.schemas import Section

logger = logging.getLogger(__name__)

_HEADING_TAG = "p"
_LIST_TAG = "ul"
_ITEM_TAG = "li"
UNKNOWN_SECTION = "Unknown"


def assemble_sections(
    entry: Element, *, patterns: MenuPatterns = DEFAULT_PATTERNS
) -> list[Section]:
    """Build the sections of ``entry`` in document order.

    The walkable stream is the element children of the first element inside
    the entry's ``content``. A ``p`` opens a section; each ``li`` of a
    following ``ul`` becomes a meal of that section. Other tags are skipped.

    Raises:
        OrphanListError: If a ``ul`` comes before any ``p``.
    """
    items = _content_items(entry)
    if items is None:
        logger.warning("No meals found in entry")
        return []

    sections: list[Section] = []
    current: Section | None = None
    for item in items:
        if item.name == _HEADING_TAG:
            current = Section(title=_section_title(item, patterns))
            sections.append(current)
        elif item.name == _LIST_TAG:
            if current is None:
                raise OrphanListError("Meal list found before any section heading")
            for list_item in iter_children(item, _ITEM_TAG):
                current.items.append(parse_meal(text(list_item), patterns=patterns))
    return sections


def _content_items(entry: Element) -> list[Element] | None:
    content = find_child(entry, "content")
    if content is None:
        return None
    wrapper = next(iter(element_children(content)), None)
    if wrapper is None:
        return None
    return element_children(wrapper)


def _section_title(heading: Element, patterns: MenuPatterns) -> str:
    children = element_children(heading)
    title = text(children[0]) if children else UNKNOWN_SECTION
    return patterns.collapse_whitespace(title)
