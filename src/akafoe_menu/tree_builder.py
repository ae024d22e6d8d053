"""Rebuild a document tree from a flat stream of markup events."""

from __future__ import annotations

import logging
import re
from typing import Iterable

from akafoe_menu.events import EndTag, Event, StartTag, Text
from akafoe_menu.exceptions import (
    BareAmpersandError,
    BuilderStateError,
    DecodeError,
    IncompleteDocumentError,
    MismatchedTagError,
    UnescapeError,
)
from akafoe_menu.nodes import Element, TextNode

logger = logging.getLogger(__name__)

_REFERENCE_RE = re.compile(r"&(?:#([0-9]+)|#x([0-9a-fA-F]+)|(lt|gt|amp|quot|apos));")
_NAMED_REFERENCES = {"lt": "<", "gt": ">", "amp": "&", "quot": '"', "apos": "'"}
_MAX_CODEPOINT = 0x10FFFF
_SURROGATES = range(0xD800, 0xE000)


def unescape(value: str) -> str:
    """Resolve the XML predefined and numeric character references in ``value``.

    Raises:
        BareAmpersandError: If an ``&`` does not start a recognised reference.
        UnescapeError: If a numeric reference names an invalid code point.
    """
    parts: list[str] = []
    pos = 0
    while True:
        amp = value.find("&", pos)
        if amp == -1:
            parts.append(value[pos:])
            return "".join(parts)
        parts.append(value[pos:amp])
        match = _REFERENCE_RE.match(value, amp)
        if match is None:
            raise BareAmpersandError(f"Unrecognised '&' at offset {amp} in {value!r}")
        parts.append(_resolve_reference(match))
        pos = match.end()


def _resolve_reference(match: re.Match[str]) -> str:
    decimal, hexadecimal, name = match.groups()
    if name:
        return _NAMED_REFERENCES[name]
    codepoint = int(decimal, 10) if decimal else int(hexadecimal, 16)
    if codepoint == 0 or codepoint > _MAX_CODEPOINT or codepoint in _SURROGATES:
        raise UnescapeError(f"Invalid character reference {match.group(0)!r}")
    return chr(codepoint)


def _decode(raw: bytes, what: str) -> str:
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DecodeError(f"Cannot decode {what} {raw!r}: {exc}") from exc


class TreeBuilder:
    """Single-use stack machine turning events into one root element.

    Feed events with :meth:`feed`. The call that closes the outermost element
    returns it; after that the builder is done and rejects further events.
    """

    def __init__(self) -> None:
        self._stack: list[Element] = []
        self._done = False

    @property
    def done(self) -> bool:
        return self._done

    @property
    def depth(self) -> int:
        return len(self._stack)

    def feed(self, event: Event) -> Element | None:
        """Apply one event; return the root element once it is complete.

        Raises:
            BuilderStateError: If the root was already produced.
            DecodeError: If a tag name or text cannot be decoded as UTF-8.
            UnescapeError: If text references cannot be resolved, even after
                repairing bare ampersands.
            MismatchedTagError: If an end tag does not match the open element.
        """
        if self._done:
            raise BuilderStateError("Builder already produced its root element")

        if isinstance(event, StartTag):
            self._start(event.name)
        elif isinstance(event, Text):
            self._text(event.raw)
        elif isinstance(event, EndTag):
            return self._end(event.name)
        return None

    def _start(self, raw_name: bytes) -> None:
        name = _decode(raw_name, "tag name")
        if not name:
            raise DecodeError("Empty tag name")
        self._stack.append(Element(name=name))

    def _text(self, raw: bytes) -> None:
        if not self._stack:
            return
        content = _decode(raw, "text")
        try:
            content = unescape(content)
        except BareAmpersandError:
            logger.debug("Escaping bare '&' in text %r", content)
            try:
                content = unescape(content.replace("&", "&amp;"))
            except UnescapeError as exc:
                raise UnescapeError(f"Cannot unescape text after repair: {exc}") from exc
        self._stack[-1].children.append(TextNode(content=content))

    def _end(self, raw_name: bytes) -> Element | None:
        name = _decode(raw_name, "tag name")
        if not self._stack:
            raise MismatchedTagError(f"End tag </{name}> without matching start")
        element = self._stack.pop()
        if element.name != name:
            raise MismatchedTagError(
                f"Tag name mismatch: expected </{element.name}>, got </{name}>"
            )
        if self._stack:
            self._stack[-1].children.append(element)
            return None
        self._done = True
        return element


def build_tree(events: Iterable[Event]) -> Element:
    """Build the root element from ``events``.

    Events after the root element closes are not consumed.

    Raises:
        IncompleteDocumentError: If the events end before the root closes.
        TreeBuildError: Any error raised by :class:`TreeBuilder`.
    """
    builder = TreeBuilder()
    for event in events:
        root = builder.feed(event)
        if root is not None:
            return root
    raise IncompleteDocumentError(
        f"Event stream ended with {builder.depth} unclosed element(s)"
    )
