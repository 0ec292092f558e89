"""HTML plugin: markup features that step aside inside ``{...}`` expressions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from lsprotocol.types import CompletionList

from ._html import HTMLLanguageService
from ._logging import get_logger
from .augment import augment
from .boundary import BoundaryScanner
from .config import HTMLPluginConfig
from .models import BoundaryContext

if TYPE_CHECKING:
    from lsprotocol.types import Hover, Position

    from .document import Document
    from .protocol import MarkupEngine

logger = get_logger(__name__)


class HTMLPlugin:
    """Hover, completion and tag-complete for the markup part of a document.

    Completion and tag-complete return None while the cursor is inside an
    attribute expression such as ``on:click={...}``, which belongs to the
    script side. Hover only triggers on known tag and attribute names and
    therefore needs no such check.
    """

    def __init__(
        self,
        config: HTMLPluginConfig | None = None,
        engine: MarkupEngine | None = None,
        boundary_scanner: BoundaryScanner | None = None,
    ):
        self.config = config if config is not None else HTMLPluginConfig()
        self.engine: MarkupEngine = engine if engine is not None else HTMLLanguageService()
        self.boundary_scanner = boundary_scanner if boundary_scanner is not None else BoundaryScanner()

    def _in_expression(self, document: Document, offset: int) -> bool:
        return self.boundary_scanner.classify(document.text, offset) is BoundaryContext.EXPRESSION

    def do_hover(self, document: Document, position: Position) -> Hover | None:
        if not self.config.feature_enabled("hover"):
            return None
        return self.engine.hover(document, document.offset_at(position))

    def get_completions(self, document: Document, position: Position) -> CompletionList | None:
        if not self.config.feature_enabled("completions"):
            return None

        offset = document.offset_at(position)
        if self._in_expression(document, offset):
            logger.debug(f"No HTML completions inside expression at {document.uri}:{offset}")
            return None

        result = self.engine.complete(document, offset)
        if result is None:
            return None

        items = augment(result.items, document.text, offset, self.config.language_alternates())
        return CompletionList(is_incomplete=result.is_incomplete, items=items)

    def do_tag_complete(self, document: Document, position: Position) -> str | None:
        if not self.config.feature_enabled("tag_complete"):
            return None

        offset = document.offset_at(position)
        if self._in_expression(document, offset):
            return None
        return self.engine.tag_complete(document, offset)
