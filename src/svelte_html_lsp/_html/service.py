"""Generic HTML hover, completion and tag auto-close.

Nothing here knows about Svelte expressions beyond the scanner keeping
``{...}`` attribute values in one token; deciding when not to ask this
service is the plugin's job.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from lsprotocol.types import (
    CompletionItem,
    CompletionItemKind,
    CompletionList,
    Hover,
    InsertTextFormat,
    MarkupContent,
    MarkupKind,
    Range,
    TextEdit,
)

from svelte_html_lsp._logging import get_logger

from .data import HTML5_PROVIDER, SVELTE_PROVIDER, HTMLDataProvider
from .parser import is_void_element, parse_html
from .scanner import Scanner, ScannerState, TokenType

if TYPE_CHECKING:
    from svelte_html_lsp.document import Document
    from svelte_html_lsp.models import AttributeInfo, TagInfo

    from .parser import Node

logger = get_logger(__name__)

DOCTYPE_DOCUMENTATION = "A preamble for an HTML document."

ENTITIES: dict[str, str] = {
    "amp;": "&",
    "lt;": "<",
    "gt;": ">",
    "quot;": '"',
    "apos;": "'",
    "nbsp;": " ",
    "copy;": "©",
    "reg;": "®",
    "trade;": "™",
    "hellip;": "…",
    "mdash;": "—",
    "ndash;": "–",
    "laquo;": "«",
    "raquo;": "»",
    "euro;": "€",
    "times;": "×",
    "larr;": "←",
    "rarr;": "→",
}


def _format_references(references: tuple[tuple[str, str], ...]) -> str:
    return " | ".join(f"[{name}]({url})" for name, url in references)


def generate_documentation(item: TagInfo | AttributeInfo) -> MarkupContent | None:
    """Markdown documentation: description followed by reference links."""
    value = item.description
    if item.references:
        links = _format_references(item.references)
        value = f"{value}\n\n{links}" if value else links
    if not value:
        return None
    return MarkupContent(kind=MarkupKind.Markdown, value=value)


def _is_whitespace(char: str) -> bool:
    return char in " \t\n\r"


def _get_word_start(text: str, offset: int, limit: int) -> int:
    while offset > limit and not _is_whitespace(text[offset - 1]):
        offset -= 1
    return offset


def _get_word_end(text: str, offset: int, limit: int) -> int:
    while offset < limit and not _is_whitespace(text[offset]):
        offset += 1
    return offset


def _is_followed_by(text: str, offset: int, state: ScannerState, expected: TokenType) -> bool:
    scanner = Scanner(text, offset, state)
    token = scanner.scan()
    while token is TokenType.WHITESPACE:
        token = scanner.scan()
    return token is expected


class HTMLLanguageService:
    """HTML language features over one or more data providers."""

    def __init__(self, data_providers: list[HTMLDataProvider] | None = None):
        if data_providers is None:
            data_providers = [HTML5_PROVIDER, SVELTE_PROVIDER]
        self.data_providers = data_providers

    def _find_tag(self, tag: str) -> TagInfo | None:
        for provider in self.data_providers:
            info = provider.get_tag(tag)
            if info is not None:
                return info
        return None

    def _find_attribute(self, tag: str, attribute: str) -> AttributeInfo | None:
        for provider in self.data_providers:
            info = provider.get_attribute(tag, attribute)
            if info is not None:
                return info
        return None

    def _all_tags(self) -> list[TagInfo]:
        seen: set[str] = set()
        tags = []
        for provider in self.data_providers:
            for tag in provider.provide_tags():
                if tag.name not in seen:
                    seen.add(tag.name)
                    tags.append(tag)
        return tags

    def is_void(self, tag: str | None) -> bool:
        if not tag:
            return False
        info = self._find_tag(tag)
        return info.void if info is not None else is_void_element(tag)

    # ------------------------------------------------------------------ hover

    def hover(self, document: Document, offset: int) -> Hover | None:
        """Documentation for the tag or attribute name under ``offset``."""
        html = parse_html(document.text)
        node = html.find_node_at(offset)
        if node is None or not node.tag:
            return None

        text = document.text

        def token_range(token_type: TokenType, start: int) -> tuple[int, int] | None:
            scanner = Scanner(text, start)
            token = scanner.scan()
            while token is not TokenType.EOS and (
                scanner.token_end < offset
                or (scanner.token_end == offset and token is not token_type)
            ):
                token = scanner.scan()
            if token is token_type and offset <= scanner.token_end:
                return scanner.token_offset, scanner.token_end
            return None

        if node.end_tag_start is not None and offset >= node.end_tag_start:
            span = token_range(TokenType.END_TAG, node.end_tag_start)
            if span is not None:
                return self._tag_hover(document, node.tag, span)
            return None

        span = token_range(TokenType.START_TAG, node.start)
        if span is not None:
            return self._tag_hover(document, node.tag, span)

        span = token_range(TokenType.ATTRIBUTE_NAME, node.start)
        if span is not None:
            attribute = text[span[0] : span[1]]
            return self._attribute_hover(document, node.tag, attribute, span)

        return None

    def _tag_hover(self, document: Document, tag: str, span: tuple[int, int]) -> Hover | None:
        info = self._find_tag(tag)
        if info is None:
            return None
        contents = generate_documentation(info) or MarkupContent(
            kind=MarkupKind.Markdown, value=""
        )
        return Hover(contents=contents, range=document.range_at(*span))

    def _attribute_hover(
        self, document: Document, tag: str, attribute: str, span: tuple[int, int]
    ) -> Hover | None:
        info = self._find_attribute(tag, attribute)
        if info is None:
            return None
        contents = generate_documentation(info)
        if contents is None:
            return None
        return Hover(contents=contents, range=document.range_at(*span))

    # ------------------------------------------------------------- completion

    def complete(self, document: Document, offset: int) -> CompletionList | None:
        """Completion items for ``offset``, in the order they should be shown."""
        result = _CompletionSession(self, document, offset).run()
        logger.debug(f"{len(result.items)} completion items at offset {offset}")
        return result

    # ----------------------------------------------------------- tag complete

    def tag_complete(self, document: Document, offset: int) -> str | None:
        """Snippet closing the element whose start or end tag was just typed."""
        text = document.text
        if offset <= 0 or offset > len(text):
            return None
        char = text[offset - 1]
        html = parse_html(text)

        if char == ">":
            node = html.find_node_before(offset)
            if (
                node is not None
                and node.tag
                and not self.is_void(node.tag)
                and node.start < offset
                and (node.end_tag_start is None or node.end_tag_start > offset)
            ):
                scanner = Scanner(text, node.start)
                token = scanner.scan()
                while token is not TokenType.EOS and scanner.token_end <= offset:
                    if token is TokenType.START_TAG_CLOSE and scanner.token_end == offset:
                        return f"$0</{node.tag}>"
                    token = scanner.scan()
        elif char == "/":
            node = html.find_node_before(offset)
            while node is not None and node.closed:
                node = node.parent
            if node is not None and node.tag:
                scanner = Scanner(text, node.start)
                token = scanner.scan()
                while token is not TokenType.EOS and scanner.token_end <= offset:
                    if token is TokenType.END_TAG_OPEN and scanner.token_end == offset:
                        return f"{node.tag}>"
                    token = scanner.scan()
        return None


class _CompletionSession:
    """State for a single completion request."""

    def __init__(self, service: HTMLLanguageService, document: Document, offset: int):
        self.service = service
        self.document = document
        self.text = document.text
        self.offset = offset
        self.items: list[CompletionItem] = []
        self.node: Node | None = None
        self.current_tag = ""
        self.current_attribute: str | None = None
        self.scanner: Scanner | None = None

    def _result(self) -> CompletionList:
        return CompletionList(is_incomplete=False, items=self.items)

    def _replace_range(self, start: int, end: int | None = None) -> Range:
        if end is None:
            end = self.offset
        start = min(start, self.offset)
        return self.document.range_at(start, end)

    def run(self) -> CompletionList:
        html = parse_html(self.text)
        offset = self.offset
        self.node = html.find_node_before(offset)
        scanner = Scanner(self.text, self.node.start if self.node is not None else 0)
        self.scanner = scanner
        token = scanner.scan()
        while token is not TokenType.EOS and scanner.token_offset <= offset:
            start, end = scanner.token_offset, scanner.token_end

            if token is TokenType.START_TAG_OPEN:
                if end == offset:
                    end_pos = self._scan_next_for_end_pos(TokenType.START_TAG)
                    if self.document.position_at(offset).line == 0:
                        self._suggest_doctype(offset, end_pos)
                    return self._collect_tag_suggestions(offset, end_pos)
            elif token is TokenType.START_TAG:
                if start <= offset <= end:
                    return self._collect_open_tag_suggestions(start, end)
                self.current_tag = scanner.token_text
            elif token is TokenType.ATTRIBUTE_NAME:
                if start <= offset <= end:
                    return self._collect_attribute_name_suggestions(start, end)
                self.current_attribute = scanner.token_text
            elif token is TokenType.DELIMITER_ASSIGN:
                if end == offset:
                    end_pos = self._scan_next_for_end_pos(TokenType.ATTRIBUTE_VALUE)
                    return self._collect_attribute_value_suggestions(offset, end_pos)
            elif token is TokenType.ATTRIBUTE_VALUE:
                if start <= offset <= end:
                    return self._collect_attribute_value_suggestions(start, end)
            elif token is TokenType.WHITESPACE:
                if offset <= end:
                    state = scanner.state
                    if state is ScannerState.AFTER_OPENING_START_TAG:
                        end_pos = self._scan_next_for_end_pos(TokenType.START_TAG)
                        return self._collect_tag_suggestions(start, end_pos)
                    if state in (ScannerState.WITHIN_TAG, ScannerState.AFTER_ATTRIBUTE_NAME):
                        return self._collect_attribute_name_suggestions(end)
                    if state is ScannerState.BEFORE_ATTRIBUTE_VALUE:
                        return self._collect_attribute_value_suggestions(end)
                    if state is ScannerState.AFTER_OPENING_END_TAG:
                        return self._collect_close_tag_suggestions(start - 1, False)
                    if state is ScannerState.WITHIN_CONTENT:
                        return self._collect_inside_content()
            elif token is TokenType.END_TAG_OPEN:
                if offset <= end:
                    end_pos = self._scan_next_for_end_pos(TokenType.END_TAG)
                    return self._collect_close_tag_suggestions(start + 1, False, end_pos)
            elif token is TokenType.END_TAG:
                if offset <= end:
                    index = start - 1
                    while index >= 0:
                        char = self.text[index]
                        if char == "/":
                            return self._collect_close_tag_suggestions(index, False, end)
                        if not _is_whitespace(char):
                            break
                        index -= 1
            elif token is TokenType.START_TAG_CLOSE:
                if offset <= end and self.current_tag:
                    return self._collect_auto_close_tag_suggestion(end, self.current_tag)
            elif token is TokenType.CONTENT:
                if offset <= end:
                    return self._collect_inside_content()
            elif offset <= end:
                return self._result()
            token = scanner.scan()
        return self._result()

    def _scan_next_for_end_pos(self, next_token: TokenType) -> int:
        scanner = self.scanner
        if self.offset == scanner.token_end:
            token = scanner.scan()
            if token is next_token and scanner.token_offset == self.offset:
                return scanner.token_end
        return self.offset

    def _suggest_doctype(self, start: int, end: int) -> None:
        self.items.append(
            CompletionItem(
                label="!DOCTYPE",
                kind=CompletionItemKind.Property,
                documentation=DOCTYPE_DOCUMENTATION,
                text_edit=TextEdit(range=self._replace_range(start, end), new_text="!DOCTYPE html>"),
                insert_text_format=InsertTextFormat.PlainText,
            )
        )

    def _collect_open_tag_suggestions(self, after_open_bracket: int, tag_name_end: int) -> CompletionList:
        replace_range = self._replace_range(after_open_bracket, tag_name_end)
        for tag in self.service._all_tags():
            self.items.append(
                CompletionItem(
                    label=tag.name,
                    kind=CompletionItemKind.Property,
                    documentation=tag.description or None,
                    text_edit=TextEdit(range=replace_range, new_text=tag.name),
                    insert_text_format=InsertTextFormat.PlainText,
                )
            )
        return self._result()

    def _collect_close_tag_suggestions(
        self, after_open_bracket: int, in_open_tag: bool, tag_name_end: int | None = None
    ) -> CompletionList:
        if tag_name_end is None:
            tag_name_end = self.offset
        replace_range = self._replace_range(after_open_bracket, tag_name_end)
        close_tag = (
            ""
            if _is_followed_by(
                self.text, tag_name_end, ScannerState.WITHIN_END_TAG, TokenType.END_TAG_CLOSE
            )
            else ">"
        )

        current = self.node
        if in_open_tag and current is not None:
            current = current.parent
        while current is not None:
            tag = current.tag
            if tag and (
                not current.closed
                or (current.end_tag_start is not None and current.end_tag_start > self.offset)
            ):
                self.items.append(
                    CompletionItem(
                        label=f"/{tag}",
                        kind=CompletionItemKind.Property,
                        filter_text=f"/{tag}",
                        text_edit=TextEdit(range=replace_range, new_text=f"/{tag}{close_tag}"),
                        insert_text_format=InsertTextFormat.PlainText,
                    )
                )
                return self._result()
            current = current.parent

        if in_open_tag:
            return self._result()

        for info in self.service._all_tags():
            self.items.append(
                CompletionItem(
                    label=f"/{info.name}",
                    kind=CompletionItemKind.Property,
                    documentation=info.description or None,
                    filter_text=f"/{info.name}{close_tag}",
                    text_edit=TextEdit(range=replace_range, new_text=f"/{info.name}{close_tag}"),
                    insert_text_format=InsertTextFormat.PlainText,
                )
            )
        return self._result()

    def _collect_tag_suggestions(self, tag_start: int, tag_end: int) -> CompletionList:
        self._collect_open_tag_suggestions(tag_start, tag_end)
        self._collect_close_tag_suggestions(tag_start, True, tag_end)
        return self._result()

    def _collect_auto_close_tag_suggestion(self, tag_close_end: int, tag: str) -> CompletionList:
        if not self.service.is_void(tag):
            position = self.document.position_at(tag_close_end)
            self.items.append(
                CompletionItem(
                    label=f"</{tag}>",
                    kind=CompletionItemKind.Property,
                    filter_text=f"</{tag}>",
                    text_edit=TextEdit(range=Range(start=position, end=position), new_text=f"$0</{tag}>"),
                    insert_text_format=InsertTextFormat.Snippet,
                )
            )
        return self._result()

    def _collect_attribute_name_suggestions(self, name_start: int, name_end: int | None = None) -> CompletionList:
        if name_end is None:
            name_end = self.offset
        replace_end = self.offset
        while replace_end < name_end and self.text[replace_end] != "<":
            replace_end += 1
        replace_range = self._replace_range(name_start, replace_end)
        has_value = _is_followed_by(
            self.text, name_end, ScannerState.AFTER_ATTRIBUTE_NAME, TokenType.DELIMITER_ASSIGN
        )
        typed = self.text[name_start:name_end]
        seen = {name for name in self.node.attributes if name != typed} if self.node else set()

        labels: set[str] = set()
        for provider in self.service.data_providers:
            for attribute in provider.provide_attributes(self.current_tag):
                if attribute.name in seen or attribute.name in labels:
                    continue
                labels.add(attribute.name)
                if has_value or attribute.value_set == "v" or attribute.name.endswith(":"):
                    snippet = attribute.name
                elif attribute.directive:
                    snippet = f"{attribute.name}={{$1}}"
                else:
                    snippet = f'{attribute.name}="$1"'
                self.items.append(
                    CompletionItem(
                        label=attribute.name,
                        kind=(
                            CompletionItemKind.Function
                            if attribute.value_set == "handler"
                            else CompletionItemKind.Value
                        ),
                        documentation=attribute.description or None,
                        text_edit=TextEdit(range=replace_range, new_text=snippet),
                        insert_text_format=InsertTextFormat.Snippet,
                    )
                )
        return self._result()

    def _collect_attribute_value_suggestions(self, value_start: int, value_end: int | None = None) -> CompletionList:
        if value_end is None:
            value_end = self.offset
        text = self.text
        if value_start < len(text) and text[value_start] == "{":
            # Expression values are completed by the script side
            return self._result()

        if value_start < self.offset <= value_end and text[value_start] in "'\"":
            content_start = value_start + 1
            content_end = value_end
            if value_end > content_start and text[value_end - 1] == text[value_start]:
                content_end -= 1
            word_start = _get_word_start(text, self.offset, content_start)
            word_end = _get_word_end(text, self.offset, content_end)
            replace_range = self._replace_range(word_start, word_end)
            quote = ""
        else:
            replace_range = self._replace_range(value_start, value_end)
            quote = '"'

        if self.current_attribute:
            seen_values: set[str] = set()
            for provider in self.service.data_providers:
                for value in provider.provide_values(self.current_tag, self.current_attribute):
                    if value in seen_values:
                        continue
                    seen_values.add(value)
                    self.items.append(
                        CompletionItem(
                            label=value,
                            filter_text=f"{quote}{value}{quote}",
                            kind=CompletionItemKind.Unit,
                            text_edit=TextEdit(range=replace_range, new_text=f"{quote}{value}{quote}"),
                            insert_text_format=InsertTextFormat.PlainText,
                        )
                    )
        return self._result()

    def _collect_inside_content(self) -> CompletionList:
        """Character entity completions after ``&``."""
        text = self.text
        start = self.offset
        while start > 0 and (text[start - 1].isalnum() or text[start - 1] == ";"):
            start -= 1
        if start == 0 or text[start - 1] != "&":
            return self._result()
        replace_range = self._replace_range(start - 1)
        for name, character in ENTITIES.items():
            label = f"&{name}"
            self.items.append(
                CompletionItem(
                    label=label,
                    kind=CompletionItemKind.Keyword,
                    documentation=f"Character entity representing '{character}'",
                    text_edit=TextEdit(range=replace_range, new_text=label),
                    insert_text_format=InsertTextFormat.PlainText,
                )
            )
        return self._result()
