"""Tests for the generic HTML scanner, parser and language service."""

from __future__ import annotations

from lsprotocol.types import CompletionItemKind, InsertTextFormat, MarkupKind

from svelte_html_lsp._html import HTML5_PROVIDER, SVELTE_PROVIDER, Scanner, TokenType, parse_html
from svelte_html_lsp._html.parser import get_cache_stats
from svelte_html_lsp.document import Document


def _tokens(text: str) -> list[tuple[TokenType, str]]:
    scanner = Scanner(text)
    tokens = []
    token = scanner.scan()
    while token is not TokenType.EOS:
        tokens.append((token, scanner.token_text))
        token = scanner.scan()
    return tokens


def _doc(text: str) -> Document:
    return Document("file:///test/App.svelte", text)


def _labels(result) -> list[str]:
    return [item.label for item in result.items]


class TestScanner:
    """Test HTML tokenization."""

    def test_simple_element(self):
        assert _tokens("<h1>Hi</h1>") == [
            (TokenType.START_TAG_OPEN, "<"),
            (TokenType.START_TAG, "h1"),
            (TokenType.START_TAG_CLOSE, ">"),
            (TokenType.CONTENT, "Hi"),
            (TokenType.END_TAG_OPEN, "</"),
            (TokenType.END_TAG, "h1"),
            (TokenType.END_TAG_CLOSE, ">"),
        ]

    def test_expression_value_is_one_token(self):
        tokens = _tokens("<div on:click={() => a > b}>")
        assert (TokenType.ATTRIBUTE_VALUE, "{() => a > b}") in tokens
        assert tokens[-1] == (TokenType.START_TAG_CLOSE, ">")

    def test_shorthand_attribute(self):
        tokens = _tokens("<input {value} />")
        assert (TokenType.ATTRIBUTE_NAME, "{value}") in tokens
        assert tokens[-1] == (TokenType.START_TAG_SELF_CLOSE, "/>")

    def test_quoted_value_with_brace(self):
        tokens = _tokens('<div title="}">')
        assert (TokenType.ATTRIBUTE_VALUE, '"}"') in tokens

    def test_comment_and_doctype(self):
        tokens = _tokens("<!DOCTYPE html><!-- note -->")
        assert [token for token, _ in tokens] == [
            TokenType.START_DOCTYPE_TAG,
            TokenType.DOCTYPE,
            TokenType.END_DOCTYPE_TAG,
            TokenType.START_COMMENT_TAG,
            TokenType.COMMENT,
            TokenType.END_COMMENT_TAG,
        ]

    def test_script_content(self):
        tokens = _tokens("<script>let a = '<b>';</script>")
        assert (TokenType.SCRIPT, "let a = '<b>';") in tokens
        assert tokens[-2] == (TokenType.END_TAG, "script")


class TestParser:
    """Test the node tree built from tokens."""

    def test_nested_elements(self):
        html = parse_html("<div><p>a</p><br></div>")
        (div,) = html.roots
        assert div.tag == "div"
        assert div.closed
        assert [child.tag for child in div.children] == ["p", "br"]
        assert div.children[1].closed

    def test_unclosed_element(self):
        html = parse_html("<div><span>")
        (div,) = html.roots
        assert not div.closed
        assert div.end == len("<div><span>")
        assert div.children[0].tag == "span"

    def test_attributes(self):
        html = parse_html('<input type="text" on:input={handle} disabled>')
        (node,) = html.roots
        assert node.attributes == {"type": '"text"', "on:input": "{handle}", "disabled": None}

    def test_find_node_at(self):
        html = parse_html("<div><span>x</span></div>")
        assert html.find_node_at(7).tag == "span"
        assert html.find_node_at(2).tag == "div"
        assert html.find_node_at(0) is None

    def test_parse_is_cached(self):
        text = "<div></div>"
        assert parse_html(text) is parse_html(text)
        assert get_cache_stats()["size"] == 1

    def test_cache_keyed_by_text(self):
        first = parse_html("<div></div>")
        second = parse_html("<span></span>")
        assert [node.tag for node in first.roots] == ["div"]
        assert [node.tag for node in second.roots] == ["span"]
        assert parse_html("<div></div>") is first
        assert get_cache_stats()["size"] == 2


class TestDataProviders:
    """Test element and attribute data."""

    def test_heading_reference(self):
        info = HTML5_PROVIDER.get_tag("H2")
        assert info.references == (
            ("MDN Reference", "https://developer.mozilla.org/docs/Web/HTML/Element/Heading_Elements"),
        )

    def test_element_attributes_first(self):
        names = [attribute.name for attribute in HTML5_PROVIDER.provide_attributes("input")]
        assert names[0] == "accept"
        assert "class" in names

    def test_values(self):
        assert HTML5_PROVIDER.provide_values("div", "dir") == ["ltr", "rtl", "auto"]
        assert HTML5_PROVIDER.provide_values("div", "class") == []

    def test_svelte_directives(self):
        assert SVELTE_PROVIDER.get_attribute("div", "on:click").directive
        assert SVELTE_PROVIDER.get_tag("svelte:window") is not None


class TestHover:
    """Test hover of the language service."""

    def test_attribute_hover(self, service):
        document = _doc('<div class="a"></div>')

        result = service.hover(document, 7)

        assert result.contents.kind == MarkupKind.Markdown
        assert result.contents.value.startswith("A space-separated list of the classes")
        assert "Global_attributes/class" in result.contents.value
        assert result.range.start.character == 5
        assert result.range.end.character == 10

    def test_unknown_tag(self, service):
        assert service.hover(_doc("<foo-bar></foo-bar>"), 2) is None

    def test_svelte_element_hover(self, service):
        result = service.hover(_doc("<svelte:head></svelte:head>"), 3)
        assert "document.head" in result.contents.value


class TestCompletion:
    """Test completion of the language service."""

    def test_close_tag_after_end_tag_open(self, service):
        text = "<div><span></"

        result = service.complete(_doc(text), len(text))

        assert _labels(result)[0] == "/span"
        assert result.items[0].text_edit.new_text == "/span>"

    def test_close_tag_suggested_in_tag_position(self, service):
        text = "<div>\n  <"

        labels = _labels(service.complete(_doc(text), len(text)))

        assert "/div" in labels
        assert "div" in labels
        assert "!DOCTYPE" not in labels

    def test_attribute_snippets(self, service):
        text = "<div "

        items = {item.label: item for item in service.complete(_doc(text), len(text)).items}

        assert items["class"].text_edit.new_text == 'class="$1"'
        assert items["class"].insert_text_format == InsertTextFormat.Snippet
        assert items["on:click"].text_edit.new_text == "on:click={$1}"
        assert items["hidden"].text_edit.new_text == "hidden"
        assert items["onclick"].kind == CompletionItemKind.Function

    def test_existing_attributes_skipped(self, service):
        text = '<div class="a" '

        labels = _labels(service.complete(_doc(text), len(text)))

        assert "class" not in labels
        assert "id" in labels

    def test_attribute_values(self, service):
        text = '<input type="'

        result = service.complete(_doc(text), len(text))

        assert "checkbox" in _labels(result)
        assert result.items[0].kind == CompletionItemKind.Unit

    def test_no_values_for_expression(self, service):
        text = "<input value={"

        assert service.complete(_doc(text), len(text)).items == []

    def test_entities(self, service):
        text = "<p>&am"

        result = service.complete(_doc(text), len(text))

        assert "&amp;" in _labels(result)
        assert result.items[0].text_edit.range.start.character == 3

    def test_void_element_not_auto_closed(self, service):
        text = "<br>"

        assert service.complete(_doc(text), len(text)).items == []


class TestTagComplete:
    """Test tag auto-close of the language service."""

    def test_close_start_tag(self, service):
        assert service.tag_complete(_doc("<p>"), 3) == "$0</p>"

    def test_already_closed(self, service):
        assert service.tag_complete(_doc("<p></p>"), 3) is None

    def test_end_tag_slash(self, service):
        assert service.tag_complete(_doc("<div><span>text</"), 17) == "span>"

    def test_out_of_range(self, service):
        assert service.tag_complete(_doc("<p>"), 0) is None
        assert service.tag_complete(_doc("<p>"), 10) is None
