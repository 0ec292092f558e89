"""
HTML language service - the generic markup engine behind the plugin.

It provides hover, completion and tag auto-close for plain HTML plus the
Svelte element and directive vocabulary, without any knowledge of where
embedded ``{...}`` expressions start or end.
"""

from __future__ import annotations

from .data import HTML5_PROVIDER, SVELTE_PROVIDER, HTMLDataProvider
from .parser import HTMLDocument, Node, parse_html
from .scanner import Scanner, ScannerState, TokenType
from .service import HTMLLanguageService

__all__ = [
    "HTML5_PROVIDER",
    "SVELTE_PROVIDER",
    "HTMLDataProvider",
    "HTMLDocument",
    "HTMLLanguageService",
    "Node",
    "Scanner",
    "ScannerState",
    "TokenType",
    "parse_html",
]
