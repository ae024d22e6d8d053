"""Format menus as console text or JSON."""

from __future__ import annotations

import json
from typing import Iterable

from akafoe_menu.schemas import FeedResult, Meal, Menu

_BANNER = "\n".join(
    [
        r"         __         ____",
        r"  ____ _/ /______ _/ __/___  ___     ____ ___  ___  ____  __  __",
        r" / __ `/ //_/ __ `/ /_/ __ \/ _ \   / __ `__ \/ _ \/ __ \/ / / /",
        r"/ /_/ / ,< / /_/ / __/ /_/ /  __/  / / / / / /  __/ / / / /_/ /",
        r"\__,_/_/|_|\__,_/_/  \____/\___/  /_/ /_/ /_/\___/_/ /_/\__,_/",
    ]
)


def format_banner() -> str:
    return _BANNER


def format_meal(meal: Meal) -> str:
    """One aligned line: name, info, student and guest price."""
    description = f"{meal.name:70} {meal.info:>15}"
    return f"{description} \t{meal.price_primary:.2f}€ / {meal.price_secondary:.2f}€"


def format_menu(menu: Menu) -> str:
    """Render a menu with an underlined header; empty sections are left out."""
    header = f":: {menu.title} ({menu.date_label})"
    lines = [header, "=" * len(header)]
    for section in menu.sections:
        if not section.items:
            continue
        lines.append(f"  :: {section.title}")
        lines.extend(f"     * {format_meal(meal)}" for meal in section.items)
    return "\n".join(lines)


def format_results(results: Iterable[FeedResult]) -> str:
    blocks: list[str] = []
    for result in results:
        if result.menu is not None:
            blocks.append(format_menu(result.menu))
        else:
            blocks.append(f"Unable to load menu of {result.source.name}: {result.error}")
    return "\n\n".join(blocks)


def format_results_json(results: Iterable[FeedResult]) -> str:
    payload = [result.model_dump(mode="json") for result in results]
    return json.dumps(payload, ensure_ascii=False, indent=2)
