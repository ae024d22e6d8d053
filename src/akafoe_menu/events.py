"""Split raw feed bytes into a flat stream of markup events.

The tokenizer only finds tag boundaries. Tag names are kept as raw bytes,
attributes are skipped and text is passed through without unescaping, so
decoding and entity handling stay with the tree builder.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, Union

from akafoe_menu.exceptions import TokenizeError


@dataclass(frozen=True)
class StartTag:
    name: bytes


@dataclass(frozen=True)
class EndTag:
    name: bytes


@dataclass(frozen=True)
class Text:
    raw: bytes


@dataclass(frozen=True)
class Other:
    """Markup the tree builder does not act on (comments, CDATA, ...)."""

    kind: str
    raw: bytes


Event = Union[StartTag, EndTag, Text, Other]

_NAME_RE = re.compile(rb"[^\s/>]*")
# A quoted attribute value may contain ">" or "/>".
_TAG_RE = re.compile(rb"""<((?:[^>"']|"[^"]*"|'[^']*')*)>""")
# Ordered: the more specific openers must be tried before the plain tag.
_SPECIAL_MARKUP = (
    (b"<!--", b"-->", "comment"),
    (b"<![CDATA[", b"]]>", "cdata"),
    (b"<?", b"?>", "pi"),
    (b"<!", b">", "doctype"),
)


def iter_events(document: bytes) -> Iterator[Event]:
    """Yield markup events for ``document`` in order.

    Text between tags is stripped and whitespace-only text is skipped.

    Raises:
        TokenizeError: If a tag, comment or other construct is not closed.
    """
    pos = 0
    end = len(document)
    while pos < end:
        lt = document.find(b"<", pos)
        if lt == -1:
            yield from _text_event(document[pos:])
            return
        if lt > pos:
            yield from _text_event(document[pos:lt])

        special = _match_special(document, lt)
        if special is not None:
            event, pos = special
            yield event
            continue

        match = _TAG_RE.match(document, lt)
        if match is None:
            raise TokenizeError(f"Unterminated tag at byte {lt}")
        tag = match.group(1)
        pos = match.end()
        if tag.startswith(b"/"):
            yield EndTag(name=tag[1:].strip())
        elif tag.endswith(b"/"):
            yield Other(kind="empty", raw=document[lt:pos])
        else:
            yield StartTag(name=_NAME_RE.match(tag).group(0))


def _text_event(chunk: bytes) -> Iterator[Text]:
    stripped = chunk.strip()
    if stripped:
        yield Text(raw=stripped)


def _match_special(document: bytes, lt: int) -> tuple[Other, int] | None:
    for opener, closer, kind in _SPECIAL_MARKUP:
        if document.startswith(opener, lt):
            close = document.find(closer, lt + len(opener))
            if close == -1:
                raise TokenizeError(f"Unterminated {kind} at byte {lt}")
            stop = close + len(closer)
            return Other(kind=kind, raw=document[lt:stop]), stop
    return None
