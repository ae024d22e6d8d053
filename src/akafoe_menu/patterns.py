"""Compiled regular expressions shared by the extraction steps."""

from __future__ import annotations

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class MenuPatterns:
    """Patterns used to pick today's entry and parse meal descriptions.

    Attributes:
        whitespace: Any whitespace run, collapsed to a single space.
        date_suffix: Trailing ``/YY-MM-DD`` path segment of an entry id.
        meal: Name, up to two parenthetical groups, student and guest price.
        punctuation: ``,``, ``.`` or ``:`` not followed by whitespace.
    """

    whitespace: re.Pattern[str]
    date_suffix: re.Pattern[str]
    meal: re.Pattern[str]
    punctuation: re.Pattern[str]

    def collapse_whitespace(self, value: str) -> str:
        return self.whitespace.sub(" ", value)


def compile_patterns() -> MenuPatterns:
    return MenuPatterns(
        whitespace=re.compile(r"\s+"),
        date_suffix=re.compile(r"^.*/(\d{2}-\d{2}-\d{2})$"),
        meal=re.compile(
            r"^([^()]+\S)\s+((?:\(.*\)\s+){0,2})([\d,]+)\s*EUR\s*-\s*([\d,]+)\s*EUR$"
        ),
        punctuation=re.compile(r"([,.:])(?!\s)"),
    )


DEFAULT_PATTERNS = compile_patterns()
