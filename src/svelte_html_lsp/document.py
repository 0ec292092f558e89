"""Document snapshots and position/offset conversion.

Offsets are indices into the Python ``str`` text. Positions follow the LSP
convention where ``character`` counts UTF-16 code units, so characters outside
the Basic Multilingual Plane count twice.
"""

from __future__ import annotations

import re
from bisect import bisect_right
from functools import cached_property
from typing import TYPE_CHECKING, Any

from lsprotocol.types import Position, Range

from ._logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = get_logger(__name__)

LINE_BREAK_PATTERN = re.compile(r"\r\n|\r|\n")


def _utf16_len(text: str) -> int:
    return len(text) + sum(1 for ch in text if ord(ch) > 0xFFFF)


class Document:
    """Immutable snapshot of a text document."""

    def __init__(self, uri: str, text: str, version: int = 0, language_id: str = "svelte"):
        self.uri = uri
        self.text = text
        self.version = version
        self.language_id = language_id

    def __repr__(self) -> str:
        return f"Document(uri={self.uri!r}, version={self.version})"

    @cached_property
    def line_offsets(self) -> list[int]:
        """Offsets at which each line starts."""
        return [0] + [match.end() for match in LINE_BREAK_PATTERN.finditer(self.text)]

    @property
    def line_count(self) -> int:
        return len(self.line_offsets)

    def _line_end(self, line: int) -> int:
        """Offset of the end of ``line``, excluding its line terminator."""
        offsets = self.line_offsets
        end = offsets[line + 1] if line + 1 < len(offsets) else len(self.text)
        while end > offsets[line] and self.text[end - 1] in "\r\n":
            end -= 1
        return end

    def offset_at(self, position: Position) -> int:
        """Convert a client position to an offset, clamping to the document."""
        offsets = self.line_offsets
        if position.line >= len(offsets):
            return len(self.text)
        if position.line < 0:
            return 0

        offset = offsets[position.line]
        line_end = self._line_end(position.line)
        units = 0
        while offset < line_end and units < position.character:
            units += 2 if ord(self.text[offset]) > 0xFFFF else 1
            offset += 1
        return offset

    def position_at(self, offset: int) -> Position:
        """Convert an offset to a client position, clamping to the document."""
        offset = max(0, min(offset, len(self.text)))
        line = bisect_right(self.line_offsets, offset) - 1
        line_start = self.line_offsets[line]
        offset = min(offset, max(line_start, self._line_end(line)))
        return Position(line=line, character=_utf16_len(self.text[line_start:offset]))

    def range_at(self, start: int, end: int) -> Range:
        return Range(start=self.position_at(start), end=self.position_at(end))

    def with_changes(self, changes: Iterable[Any], version: int | None = None) -> Document:
        """Return a new snapshot with LSP content changes applied in order.

        Each change either carries a ``range`` (incremental) or replaces the
        whole text.
        """
        document = self
        for change in changes:
            change_range = getattr(change, "range", None)
            if change_range is None:
                text = change.text
            else:
                start = document.offset_at(change_range.start)
                end = document.offset_at(change_range.end)
                text = document.text[:start] + change.text + document.text[end:]
            document = Document(document.uri, text, document.version, document.language_id)
        return Document(
            self.uri,
            document.text,
            self.version if version is None else version,
            self.language_id,
        )


class DocumentManager:
    """Tracks the latest snapshot of every open document."""

    def __init__(self):
        self._documents: dict[str, Document] = {}

    def __contains__(self, uri: str) -> bool:
        return uri in self._documents

    def __len__(self) -> int:
        return len(self._documents)

    def open(self, uri: str, text: str, version: int = 0, language_id: str = "svelte") -> Document:
        document = Document(uri, text, version, language_id)
        self._documents[uri] = document
        logger.debug(f"Opened {uri} (version {version})")
        return document

    def update(self, uri: str, changes: Iterable[Any], version: int | None = None) -> Document | None:
        """Apply content changes to an open document, returning the new snapshot."""
        document = self._documents.get(uri)
        if document is None:
            logger.warning(f"Change for unknown document {uri} ignored")
            return None
        document = document.with_changes(changes, version)
        self._documents[uri] = document
        return document

    def close(self, uri: str) -> None:
        self._documents.pop(uri, None)
        logger.debug(f"Closed {uri}")

    def get(self, uri: str) -> Document | None:
        return self._documents.get(uri)
