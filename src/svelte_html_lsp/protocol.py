"""Protocol for the markup engine the HTML plugin delegates to."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from lsprotocol.types import CompletionList, Hover

    from svelte_html_lsp.document import Document


class MarkupEngine(Protocol):
    """Interface of a generic markup language engine.

    Implementations know nothing about embedded expressions. Every method
    returns None when it has nothing to offer at ``offset``.
    """

    def hover(self, document: Document, offset: int) -> Hover | None:
        """Return hover documentation for the token at ``offset``."""
        ...

    def complete(self, document: Document, offset: int) -> CompletionList | None:
        """Return raw completion items for ``offset``."""
        ...

    def tag_complete(self, document: Document, offset: int) -> str | None:
        """Return a snippet auto-closing the tag just typed before ``offset``."""
        ...
