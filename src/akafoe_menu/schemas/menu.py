"""Menu models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Meal(BaseModel):
    """A single dish parsed from one list item.

    Attributes:
        name: Dish name with normalized punctuation spacing.
        info: Parenthetical remarks (additives, diet hints), possibly empty.
        price_primary: Student price in EUR.
        price_secondary: Guest price in EUR.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    info: str = ""
    price_primary: float = Field(0.0, ge=0)
    price_secondary: float = Field(0.0, ge=0)


class Section(BaseModel):
    """A titled group of meals, e.g. one counter of the canteen."""

    title: str
    items: list[Meal] = Field(default_factory=list)


class Menu(BaseModel):
    """Today's menu of one facility."""

    model_config = ConfigDict(frozen=True)

    title: str
    date_label: str
    sections: list[Section] = Field(default_factory=list)
