"""Tests for the language server feature handlers."""

from __future__ import annotations

import pytest
from lsprotocol.types import (
    ClientCapabilities,
    CompletionParams,
    DidChangeConfigurationParams,
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    DidOpenTextDocumentParams,
    HoverParams,
    InitializeParams,
    Position,
    TextDocumentContentChangeEvent_Type2,
    TextDocumentIdentifier,
    TextDocumentItem,
    TextDocumentPositionParams,
    VersionedTextDocumentIdentifier,
)

from svelte_html_lsp import server as server_module
from svelte_html_lsp.config import HTMLPluginConfig
from svelte_html_lsp.document import DocumentManager
from svelte_html_lsp.plugin import HTMLPlugin

URI = "file:///test/App.svelte"


@pytest.fixture
def lsp_server():
    server = server_module.create_server()
    server.documents = DocumentManager()
    server.html_config = HTMLPluginConfig()
    server.html_plugin = HTMLPlugin(server.html_config)
    return server


def _open(text: str) -> None:
    server_module.did_open(
        DidOpenTextDocumentParams(
            text_document=TextDocumentItem(uri=URI, language_id="svelte", version=1, text=text)
        )
    )


def _settings(**html) -> dict:
    return {"svelte": {"plugin": {"html": html}}}


class TestDocumentSync:
    """Test document lifecycle notifications."""

    def test_open_change_close(self, lsp_server):
        _open("<div>")
        assert lsp_server.documents.get(URI).text == "<div>"

        server_module.did_change(
            DidChangeTextDocumentParams(
                text_document=VersionedTextDocumentIdentifier(uri=URI, version=2),
                content_changes=[TextDocumentContentChangeEvent_Type2(text="<span>")],
            )
        )
        document = lsp_server.documents.get(URI)
        assert document.text == "<span>"
        assert document.version == 2

        server_module.did_close(DidCloseTextDocumentParams(text_document=TextDocumentIdentifier(uri=URI)))
        assert URI not in lsp_server.documents


class TestRequests:
    """Test request handlers delegate to the plugin."""

    def test_hover(self, lsp_server):
        _open("<h1>Hello, world!</h1>")

        result = server_module.hover(
            HoverParams(text_document=TextDocumentIdentifier(uri=URI), position=Position(line=0, character=2))
        )

        assert result.contents.value.startswith("The h1 element represents a section heading.")

    def test_hover_unknown_document(self, lsp_server):
        result = server_module.hover(
            HoverParams(text_document=TextDocumentIdentifier(uri=URI), position=Position(line=0, character=2))
        )

        assert result is None

    def test_completion(self, lsp_server):
        _open("<div on:click={bla} >")

        result = server_module.completion(
            CompletionParams(text_document=TextDocumentIdentifier(uri=URI), position=Position(line=0, character=21))
        )

        assert result.items[0].label == "</div>"

    def test_completion_inside_expression(self, lsp_server):
        _open("<div on:click={() =>")

        result = server_module.completion(
            CompletionParams(text_document=TextDocumentIdentifier(uri=URI), position=Position(line=0, character=20))
        )

        assert result is None

    def test_tag_complete_typed_params(self, lsp_server):
        _open("<div on:click={bla} >")

        result = server_module.tag_complete(
            TextDocumentPositionParams(
                text_document=TextDocumentIdentifier(uri=URI), position=Position(line=0, character=21)
            )
        )

        assert result == "$0</div>"

    def test_tag_complete_wire_params(self, lsp_server):
        _open("<p>")

        result = server_module.tag_complete(
            {"textDocument": {"uri": URI}, "position": {"line": 0, "character": 3}}
        )

        assert result == "$0</p>"


class TestConfiguration:
    """Test client settings handling."""

    def test_did_change_configuration(self, lsp_server):
        _open("<h1>Hello, world!</h1>")

        server_module.did_change_configuration(
            DidChangeConfigurationParams(settings=_settings(hover={"enable": False}))
        )

        assert lsp_server.html_config.hover_enable is False
        result = server_module.hover(
            HoverParams(text_document=TextDocumentIdentifier(uri=URI), position=Position(line=0, character=2))
        )
        assert result is None

    def test_invalid_settings_ignored(self, lsp_server):
        changed = lsp_server.apply_settings(_settings(langAlternates={"style": 3}))

        assert changed == []
        assert "style" in lsp_server.html_config.language_alternates()

    def test_other_sections_ignored(self, lsp_server):
        assert lsp_server.apply_settings({"python": {"analysis": {}}}) == []
        assert lsp_server.apply_settings(None) == []

    def test_initialization_options(self, lsp_server):
        result = server_module.initialize(
            InitializeParams(
                capabilities=ClientCapabilities(),
                initialization_options=_settings(completions={"enable": False}),
            )
        )

        assert result.capabilities.hover_provider is True
        assert "<" in result.capabilities.completion_provider.trigger_characters
        assert lsp_server.html_config.completions_enable is False


class TestTextDocumentPosition:
    """Test extraction of positions from request params."""

    def test_wire_names(self):
        uri, position = server_module.text_document_position(
            {"textDocument": {"uri": URI}, "position": {"line": 2, "character": 4}}
        )

        assert uri == URI
        assert position == Position(line=2, character=4)
