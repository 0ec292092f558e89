"""Classify a cursor offset as host markup or embedded expression.

Runs on every keystroke, so the work is bounded: a small state machine walks
forward to the cursor from at most ``SCAN_WINDOW`` characters before it,
tracking quoted attribute values and brace depth as it goes.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from enum import Enum

from .constants import SCAN_WINDOW
from .models import BoundaryContext

EXPRESSION_QUOTES = frozenset("'\"`")
ATTRIBUTE_QUOTES = frozenset("'\"")
TAG_NAME_PATTERN = re.compile(r"[A-Za-z][\w:.-]*")
RAW_TEXT_END_PATTERNS = {
    "script": re.compile(r"</script", re.IGNORECASE),
    "style": re.compile(r"</style", re.IGNORECASE),
}


class ScanState(str, Enum):
    MARKUP = "markup"
    IN_TAG = "in_tag"
    IN_QUOTED_ATTR_VALUE = "in_quoted_attr_value"
    IN_EXPRESSION = "in_expression"


@dataclass(frozen=True)
class ScannerState:
    """State of the forward scan.

    ``quote`` is the open quote of an attribute value, or of a string literal
    when inside an expression. ``depth`` counts open braces of the expression.
    """

    state: ScanState = ScanState.MARKUP
    quote: str | None = None
    depth: int = 0
    escaped: bool = False


def _starts_tag(char: str, next_char: str) -> bool:
    return char == "<" and next_char.isalpha()


def step(current: ScannerState, char: str, next_char: str = "") -> ScannerState:
    """Advance the scan by one character."""
    state = current.state

    if state is ScanState.MARKUP:
        if _starts_tag(char, next_char):
            return ScannerState(ScanState.IN_TAG)
        return current

    if state is ScanState.IN_TAG:
        if char in ATTRIBUTE_QUOTES:
            return ScannerState(ScanState.IN_QUOTED_ATTR_VALUE, quote=char)
        if char == "{":
            return ScannerState(ScanState.IN_EXPRESSION, depth=1)
        if char == ">":
            return ScannerState(ScanState.MARKUP)
        return current

    if state is ScanState.IN_QUOTED_ATTR_VALUE:
        # Braces in a quoted value are literal text
        if char == current.quote:
            return ScannerState(ScanState.IN_TAG)
        return current

    # IN_EXPRESSION
    if current.quote is not None:
        if current.escaped:
            return replace(current, escaped=False)
        if char == "\\":
            return replace(current, escaped=True)
        if char == current.quote:
            return replace(current, quote=None)
        return current
    if char in EXPRESSION_QUOTES:
        return replace(current, quote=char)
    if char == "{":
        return replace(current, depth=current.depth + 1)
    if char == "}":
        if current.depth == 1:
            return ScannerState(ScanState.IN_TAG)
        return replace(current, depth=current.depth - 1)
    return current


def _raw_text_end(text: str, tag_start: int, content_start: int) -> int | None:
    """End of the content of a ``<script>`` or ``<style>`` tag, else None."""
    if text[content_start - 2] == "/":
        return None
    match = TAG_NAME_PATTERN.match(text, tag_start + 1)
    pattern = RAW_TEXT_END_PATTERNS.get(match.group().lower()) if match else None
    if pattern is None:
        return None
    end = pattern.search(text, content_start)
    return len(text) if end is None else end.start()


def _walk(text: str, start: int, end: int) -> tuple[ScannerState, int | None]:
    """Run the state machine over ``text[start:end]`` starting in markup.

    Comments and script/style content are skipped as markup. Returns the final
    state and the ``<`` of the tag it is in, if any.
    """
    current = ScannerState()
    tag_start = None
    length = len(text)
    index = start
    while index < end:
        if current.state is ScanState.MARKUP and text.startswith("<!--", index):
            close = text.find("-->", index + 4)
            if close == -1:
                break
            index = close + 3
            continue

        previous = current.state
        next_char = text[index + 1] if index + 1 < length else ""
        current = step(current, text[index], next_char)
        index += 1

        if previous is ScanState.MARKUP and current.state is ScanState.IN_TAG:
            tag_start = index - 1
        elif previous is ScanState.IN_TAG and current.state is ScanState.MARKUP:
            raw_end = _raw_text_end(text, tag_start, index)
            tag_start = None
            if raw_end is not None:
                index = raw_end
    return current, tag_start


def scan(text: str, start: int, end: int) -> ScannerState:
    """Run the state machine over ``text[start:end]`` starting in markup."""
    return _walk(text, start, end)[0]


def find_tag_start(text: str, offset: int, window: int = SCAN_WINDOW) -> int | None:
    """Find the ``<`` of the tag enclosing ``offset``.

    The scan starts in markup ``window`` characters before ``offset``, so
    quoted values and expressions are followed forward and a ``<`` inside
    either is not mistaken for a tag. Returns None when ``offset`` is not
    inside a tag that starts within the window.
    """
    offset = max(0, min(offset, len(text)))
    current, tag_start = _walk(text, max(0, offset - window), offset)
    if current.state is ScanState.MARKUP:
        return None
    return tag_start


class BoundaryScanner:
    """Decides whether a cursor sits in markup or in a ``{...}`` expression."""

    def __init__(self, window: int = SCAN_WINDOW):
        self.window = window

    def classify(self, text: str, offset: int) -> BoundaryContext:
        offset = max(0, min(offset, len(text)))
        if scan(text, max(0, offset - self.window), offset).state is ScanState.IN_EXPRESSION:
            return BoundaryContext.EXPRESSION
        return BoundaryContext.MARKUP


def classify(text: str, offset: int, window: int = SCAN_WINDOW) -> BoundaryContext:
    """Classify ``offset`` in ``text``; see ``BoundaryScanner``."""
    return BoundaryScanner(window).classify(text, offset)
