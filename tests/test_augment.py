"""Tests for language alternate completion items."""

from __future__ import annotations

import pytest
from lsprotocol.types import (
    CompletionItem,
    CompletionItemKind,
    Position,
    Range,
    TextEdit,
)

from svelte_html_lsp.augment import augment, completion_site, language_label
from svelte_html_lsp.config import parse_alternates
from svelte_html_lsp.models import CompletionSite, LanguageAlternate

ALTERNATES = parse_alternates({"style": ["less", "scss"], "script": ["ts"]})


def _tag_item(name: str, kind: CompletionItemKind = CompletionItemKind.Property) -> CompletionItem:
    edit_range = Range(start=Position(line=0, character=1), end=Position(line=0, character=1))
    return CompletionItem(
        label=name,
        kind=kind,
        documentation=f"The {name} element.",
        text_edit=TextEdit(range=edit_range, new_text=name),
    )


class TestCompletionSite:
    """Test classification of completion sites."""

    @pytest.mark.parametrize(
        ("text", "offset", "expected"),
        [
            ("<", 1, CompletionSite.TAG_NAME),
            ("<sty", 4, CompletionSite.TAG_NAME),
            ("<div>\n  <svelte:he", 18, CompletionSite.TAG_NAME),
            ("<div sty", 8, CompletionSite.ATTRIBUTE),
            ("<div ", 5, CompletionSite.ATTRIBUTE),
            ('<div class="a" ', 15, CompletionSite.ATTRIBUTE),
            ("<div>", 5, CompletionSite.OTHER),
            ("text", 2, CompletionSite.OTHER),
            ("", 0, CompletionSite.OTHER),
        ],
    )
    def test_completion_site(self, text, offset, expected):
        assert completion_site(text, offset) is expected


class TestAugment:
    """Test insertion of synthetic items."""

    def test_items_follow_their_element(self):
        raw = [_tag_item("div"), _tag_item("style"), _tag_item("span")]

        items = augment(raw, "<", 1, ALTERNATES)

        assert [item.label for item in items] == [
            "div",
            "style",
            'style (lang="less")',
            'style (lang="scss")',
            "span",
        ]

    def test_synthetic_item_content(self):
        items = augment([_tag_item("script")], "<", 1, ALTERNATES)

        synthetic = items[1]
        assert synthetic.label == 'script (lang="ts")'
        assert synthetic.kind == CompletionItemKind.Property
        assert synthetic.text_edit.new_text == 'script lang="ts"'
        assert synthetic.text_edit.range == items[0].text_edit.range
        assert "TypeScript" in synthetic.documentation

    def test_insert_text_extended(self):
        raw = [CompletionItem(label="style", kind=CompletionItemKind.Property, insert_text="style")]

        items = augment(raw, "<", 1, ALTERNATES)

        assert items[1].insert_text == 'style lang="less"'
        assert items[1].text_edit is None

    def test_raw_items_unchanged(self):
        raw = [_tag_item("style")]

        augment(raw, "<", 1, ALTERNATES)

        assert raw[0].label == "style"
        assert raw[0].text_edit.new_text == "style"

    def test_only_at_tag_name_sites(self):
        raw = [_tag_item("style")]

        items = augment(raw, "<div sty", 8, ALTERNATES)

        assert items == raw
        assert items is not raw

    def test_non_property_items_ignored(self):
        raw = [_tag_item("style", CompletionItemKind.Value)]

        assert augment(raw, "<", 1, ALTERNATES) == raw

    def test_no_duplicate_labels(self):
        raw = [_tag_item("style"), _tag_item('style (lang="less")'), _tag_item("style")]

        labels = [item.label for item in augment(raw, "<", 1, ALTERNATES)]

        assert labels.count('style (lang="less")') == 1
        assert labels.count('style (lang="scss")') == 1

    def test_same_input_same_output(self):
        raw = [_tag_item("style"), _tag_item("script")]

        assert augment(raw, "<s", 2, ALTERNATES) == augment(raw, "<s", 2, ALTERNATES)

    def test_no_alternates(self):
        raw = [_tag_item("style")]

        assert augment(raw, "<", 1, {}) == raw

    def test_custom_attribute(self):
        alternates = {"style": (LanguageAlternate("postcss", 'type="text/postcss"'),)}

        items = augment([_tag_item("style")], "<", 1, alternates)

        assert items[1].label == language_label("style", alternates["style"][0])
        assert items[1].text_edit.new_text == 'style type="text/postcss"'
