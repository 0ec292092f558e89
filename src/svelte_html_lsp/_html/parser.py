"""Lenient HTML parser producing a node tree with offsets.

Parse results are cached by a hash of the text, so hover, completion and
tag-complete requests for the same snapshot share one tree.
"""

from __future__ import annotations

import hashlib
import os
from bisect import bisect_left
from collections import OrderedDict

from svelte_html_lsp.constants import VOID_ELEMENTS

from .scanner import Scanner, TokenType

# Parse tree cache: hash(text) -> (HTMLDocument, text). A pure memo: entries
# depend only on the text, so no state carries from one request to the next.
_parse_cache: OrderedDict[str, tuple[HTMLDocument, str]] = OrderedDict()

_CACHE_ENABLED = os.environ.get("SVELTE_HTML_LSP_DISABLE_CACHE") != "1"
_MAX_CACHE_SIZE = int(os.environ.get("SVELTE_HTML_LSP_CACHE_SIZE", "32"))


def is_void_element(tag: str | None) -> bool:
    return bool(tag) and tag.lower() in VOID_ELEMENTS


class Node:
    """An element of the parsed document.

    ``start``/``end`` span the whole element. ``start_tag_end`` is set once
    the start tag's ``>`` is seen and ``end_tag_start`` once a matching end
    tag is found. Attribute values keep their quotes or braces.
    """

    def __init__(self, start: int, end: int, parent: Node | None = None):
        self.start = start
        self.end = end
        self.parent = parent
        self.children: list[Node] = []
        self.tag: str | None = None
        self.closed = False
        self.start_tag_end: int | None = None
        self.end_tag_start: int | None = None
        self.attributes: dict[str, str | None] = {}

    def __repr__(self) -> str:
        return f"Node(tag={self.tag!r}, start={self.start}, end={self.end}, closed={self.closed})"

    @property
    def last_child(self) -> Node | None:
        return self.children[-1] if self.children else None

    def is_same_tag(self, tag: str | None) -> bool:
        return self.tag is not None and tag is not None and self.tag.lower() == tag.lower()

    def _child_index_before(self, offset: int) -> int:
        """Index of the last child starting before ``offset``, or -1."""
        starts = [child.start for child in self.children]
        return bisect_left(starts, offset) - 1

    def find_node_before(self, offset: int) -> Node:
        index = self._child_index_before(offset)
        if index >= 0:
            child = self.children[index]
            if offset > child.start:
                if offset < child.end:
                    return child.find_node_before(offset)
                last_child = child.last_child
                if last_child is not None and last_child.end == child.end:
                    return child.find_node_before(offset)
                return child
        return self

    def find_node_at(self, offset: int) -> Node:
        index = self._child_index_before(offset)
        if index >= 0:
            child = self.children[index]
            if child.start < offset <= child.end:
                return child.find_node_at(offset)
        return self


class HTMLDocument:
    """Root of a parsed document. Top-level elements are ``roots``."""

    def __init__(self, root: Node):
        self._root = root

    @property
    def roots(self) -> list[Node]:
        return self._root.children

    def find_node_before(self, offset: int) -> Node | None:
        node = self._root.find_node_before(offset)
        return None if node is self._root else node

    def find_node_at(self, offset: int) -> Node | None:
        node = self._root.find_node_at(offset)
        return None if node is self._root else node


def _parse(text: str) -> HTMLDocument:
    scanner = Scanner(text)
    root = Node(0, len(text))
    current = root
    end_tag_start: int | None = None
    end_tag_name: str | None = None
    pending_attribute: str | None = None

    token = scanner.scan()
    while token is not TokenType.EOS:
        if token is TokenType.START_TAG_OPEN:
            child = Node(scanner.token_offset, len(text), current)
            current.children.append(child)
            current = child
        elif token is TokenType.START_TAG:
            current.tag = scanner.token_text
        elif token is TokenType.START_TAG_CLOSE:
            if current.parent is not None:
                current.end = scanner.token_end
                current.start_tag_end = scanner.token_end
                if is_void_element(current.tag):
                    current.closed = True
                    current = current.parent
        elif token is TokenType.START_TAG_SELF_CLOSE:
            if current.parent is not None:
                current.closed = True
                current.end = scanner.token_end
                current.start_tag_end = scanner.token_end
                current = current.parent
        elif token is TokenType.END_TAG_OPEN:
            end_tag_start = scanner.token_offset
            end_tag_name = None
        elif token is TokenType.END_TAG:
            end_tag_name = scanner.token_text.lower()
        elif token is TokenType.END_TAG_CLOSE:
            if end_tag_name:
                node = current
                # Find the innermost open element with this name
                while not node.is_same_tag(end_tag_name) and node.parent is not None:
                    node = node.parent
                if node.parent is not None:
                    while current is not node:
                        current.end = end_tag_start
                        current.closed = False
                        current = current.parent
                    current.closed = True
                    current.end_tag_start = end_tag_start
                    current.end = scanner.token_end
                    current = current.parent
        elif token is TokenType.ATTRIBUTE_NAME:
            pending_attribute = scanner.token_text
            current.attributes[pending_attribute] = None
        elif token is TokenType.ATTRIBUTE_VALUE:
            if pending_attribute is not None:
                current.attributes[pending_attribute] = scanner.token_text
                pending_attribute = None
        token = scanner.scan()

    while current.parent is not None:
        current.end = len(text)
        current.closed = False
        current = current.parent

    return HTMLDocument(root)


def _compute_hash(text: str) -> str:
    return hashlib.sha256(text.encode("utf-8", "surrogatepass")).hexdigest()


def clear_cache() -> None:
    """Clear the parse cache."""
    _parse_cache.clear()


def get_cache_stats() -> dict[str, int]:
    return {
        "size": len(_parse_cache),
        "capacity": _MAX_CACHE_SIZE,
        "enabled": _CACHE_ENABLED,
    }


def parse_html(text: str) -> HTMLDocument:
    """Parse ``text`` into an ``HTMLDocument``, reusing a cached tree if possible."""
    if not _CACHE_ENABLED:
        return _parse(text)

    cache_key = _compute_hash(text)
    cached = _parse_cache.get(cache_key)
    # Compare the text too in case of a hash collision
    if cached is not None and cached[1] == text:
        _parse_cache.move_to_end(cache_key)
        return cached[0]

    document = _parse(text)
    _parse_cache[cache_key] = (document, text)
    while len(_parse_cache) > _MAX_CACHE_SIZE:
        _parse_cache.popitem(last=False)
    return document
