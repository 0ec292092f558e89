"""Shared fixtures for svelte-html-lsp tests."""

from __future__ import annotations

import pytest
from lsprotocol.types import Position

from svelte_html_lsp._html import HTMLLanguageService
from svelte_html_lsp._html.parser import clear_cache
from svelte_html_lsp.config import HTMLPluginConfig
from svelte_html_lsp.document import Document
from svelte_html_lsp.plugin import HTMLPlugin


@pytest.fixture(autouse=True)
def _clear_parse_cache():
    clear_cache()
    yield
    clear_cache()


@pytest.fixture
def config():
    return HTMLPluginConfig()


@pytest.fixture
def plugin(config):
    return HTMLPlugin(config)


@pytest.fixture
def service():
    return HTMLLanguageService()


@pytest.fixture
def make_document():
    """Create a document and a position from text and a line/character pair."""

    def _make(text: str, line: int = 0, character: int | None = None):
        if character is None:
            character = len(text.splitlines()[line]) if text else 0
        return Document("file:///test/App.svelte", text), Position(line=line, character=character)

    return _make
