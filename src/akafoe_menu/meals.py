"""Parse free-form meal descriptions into :class:`Meal` records."""

from __future__ import annotations

import logging

from akafoe_menu.patterns import DEFAULT_PATTERNS, MenuPatterns
from akafoe_menu.schemas import Meal

logger = logging.getLogger(__name__)

NO_DESCRIPTION = "No description"


def space_punctuation(name: str, *, patterns: MenuPatterns = DEFAULT_PATTERNS) -> str:
    """Put a single space after ``,``, ``.`` and ``:`` where none follows."""
    return patterns.punctuation.sub(r"\1 ", name).strip()


def parse_price(value: str) -> float:
    """Parse a decimal-comma price, falling back to ``0.0``."""
    try:
        return float(value.replace(",", "."))
    except ValueError:
        return 0.0


def parse_meal(description: str, *, patterns: MenuPatterns = DEFAULT_PATTERNS) -> Meal:
    """Split a list item like ``"Pasta (V) 1,50 EUR - 3,00 EUR"`` into fields.

    Descriptions that do not have the expected shape yield a placeholder meal
    with no prices, and a warning is logged.
    """
    description = patterns.collapse_whitespace(description).strip()
    match = patterns.meal.match(description)
    if match is None:
        logger.warning("Cannot get description of meal: %r", description)
        return Meal(name=NO_DESCRIPTION)

    name, info, primary, secondary = match.groups()
    return Meal(
        name=space_punctuation(name, patterns=patterns),
        info=info.strip(),
        price_primary=parse_price(primary),
        price_secondary=parse_price(secondary),
    )
