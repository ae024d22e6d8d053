"""Shared schemas for akafoe_menu."""

from akafoe_menu.schemas.feed import FeedResult, FeedSource
from akafoe_menu.schemas.menu import Meal, Menu, Section

__all__ = ["FeedResult", "FeedSource", "Meal", "Menu", "Section"]
