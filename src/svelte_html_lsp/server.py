"""pygls language server exposing the HTML plugin."""

from __future__ import annotations

from typing import Any

from lsprotocol.types import (
    CompletionList,
    CompletionOptions,
    CompletionParams,
    DidChangeConfigurationParams,
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    DidOpenTextDocumentParams,
    Hover,
    HoverParams,
    InitializeParams,
    InitializeResult,
    Position,
    ServerCapabilities,
    TextDocumentSyncKind,
)
from pygls.server import LanguageServer

from . import __version__
from ._logging import get_logger
from .config import HTMLPluginConfig
from .constants import COMPLETION_TRIGGER_CHARACTERS, SETTINGS_SECTION, TAG_COMPLETE_REQUEST
from .document import Document, DocumentManager
from .plugin import HTMLPlugin

logger = get_logger(__name__)


def _get(obj: Any, *names: str) -> Any:
    """Read the first present attribute or key out of ``names``."""
    for name in names:
        if isinstance(obj, dict):
            if name in obj:
                return obj[name]
        elif hasattr(obj, name):
            return getattr(obj, name)
    return None


def text_document_position(params: Any) -> tuple[str, Position]:
    """Extract (uri, position) from typed or untyped position params.

    Custom requests like ``html/tag`` arrive without an lsprotocol type, so
    their params may use the camelCase wire names.
    """
    text_document = _get(params, "text_document", "textDocument")
    position = _get(params, "position")
    uri = _get(text_document, "uri")
    if not isinstance(position, Position):
        position = Position(line=_get(position, "line"), character=_get(position, "character"))
    return uri, position


class SvelteHTMLLanguageServer(LanguageServer):
    """Language Server for the HTML part of Svelte components."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.documents = DocumentManager()
        self.html_config = HTMLPluginConfig()
        self.html_plugin = HTMLPlugin(self.html_config)

    def get_document(self, uri: str) -> Document | None:
        document = self.documents.get(uri)
        if document is None:
            logger.warning(f"Request for unknown document: {uri}")
        return document

    def apply_settings(self, settings: Any) -> list[str]:
        """Apply the ``svelte.plugin.html`` section of client settings.

        Invalid settings are logged and ignored. Returns the names of the
        options that changed.
        """
        section = settings
        for key in SETTINGS_SECTION:
            section = section.get(key) if isinstance(section, dict) else None
        if not isinstance(section, dict):
            return []
        try:
            changed = self.html_config.update_from_settings(section)
        except ValueError as e:
            logger.warning(f"Ignoring invalid HTML plugin settings: {e}")
            return []
        if changed:
            logger.info(f"Updated HTML plugin settings: {', '.join(changed)}")
        return changed


server = SvelteHTMLLanguageServer("svelte-html-lsp", __version__)


def create_server() -> SvelteHTMLLanguageServer:
    """Return the language server with all features registered."""
    return server


@server.feature("initialize")
def initialize(params: InitializeParams) -> InitializeResult:
    """Initialize the language server."""
    logger.info("Initializing Svelte HTML LSP server")

    # Clients may send their settings up front instead of via didChangeConfiguration
    if params.initialization_options:
        server.apply_settings(params.initialization_options)

    return InitializeResult(
        capabilities=ServerCapabilities(
            text_document_sync=TextDocumentSyncKind.Incremental,
            completion_provider=CompletionOptions(trigger_characters=COMPLETION_TRIGGER_CHARACTERS),
            hover_provider=True,
        )
    )


@server.feature("textDocument/didOpen")
def did_open(params: DidOpenTextDocumentParams):
    """Handle document open event."""
    item = params.text_document
    server.documents.open(item.uri, item.text, item.version, item.language_id)
    logger.info(f"Opened document: {item.uri}")


@server.feature("textDocument/didChange")
def did_change(params: DidChangeTextDocumentParams):
    """Handle document change event."""
    server.documents.update(
        params.text_document.uri, params.content_changes, params.text_document.version
    )


@server.feature("textDocument/didClose")
def did_close(params: DidCloseTextDocumentParams):
    """Handle document close event."""
    server.documents.close(params.text_document.uri)


@server.feature("workspace/didChangeConfiguration")
def did_change_configuration(params: DidChangeConfigurationParams):
    """Pick up changed HTML plugin settings."""
    server.apply_settings(params.settings)


@server.feature("textDocument/hover")
def hover(params: HoverParams) -> Hover | None:
    """Provide hover information."""
    document = server.get_document(params.text_document.uri)
    if document is None:
        return None
    return server.html_plugin.do_hover(document, params.position)


@server.feature(
    "textDocument/completion",
    CompletionOptions(trigger_characters=COMPLETION_TRIGGER_CHARACTERS),
)
def completion(params: CompletionParams) -> CompletionList | None:
    """Provide completion suggestions."""
    document = server.get_document(params.text_document.uri)
    if document is None:
        return None
    return server.html_plugin.get_completions(document, params.position)


@server.feature(TAG_COMPLETE_REQUEST)
def tag_complete(params: Any) -> str | None:
    """Snippet closing the tag just typed, for clients that auto-close tags."""
    uri, position = text_document_position(params)
    document = server.get_document(uri)
    if document is None:
        return None
    return server.html_plugin.do_tag_complete(document, position)
