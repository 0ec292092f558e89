"""Add ``<style lang="...">``-style variants to tag name completions."""

from __future__ import annotations

from typing import TYPE_CHECKING

import attrs
from lsprotocol.types import CompletionItem, CompletionItemKind

from .boundary import ScanState, find_tag_start, scan
from .constants import LANGUAGE_NAMES, TAG_NAME_CHARS
from .models import CompletionSite, LanguageAlternate

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence


def completion_site(text: str, offset: int) -> CompletionSite:
    """Classify where a completion was requested.

    A ``<`` followed only by tag name characters up to ``offset`` is a tag
    name site. Anything else inside an open start tag is an attribute site.
    """
    offset = max(0, min(offset, len(text)))
    word_start = offset
    while word_start > 0 and text[word_start - 1] in TAG_NAME_CHARS:
        word_start -= 1
    if word_start > 0 and text[word_start - 1] == "<":
        return CompletionSite.TAG_NAME

    tag_start = find_tag_start(text, word_start)
    if tag_start is not None and scan(text, tag_start, word_start).state is ScanState.IN_TAG:
        return CompletionSite.ATTRIBUTE
    return CompletionSite.OTHER


def language_label(element: str, alternate: LanguageAlternate) -> str:
    return f'{element} (lang="{alternate.language}")'


def _synthetic_item(base: CompletionItem, alternate: LanguageAlternate) -> CompletionItem:
    element = base.label
    language = LANGUAGE_NAMES.get(alternate.language, alternate.language)
    changes = {
        "label": language_label(element, alternate),
        "documentation": f"<{element}> block written in {language}, inserted with {alternate.attribute}.",
    }
    if base.text_edit is not None:
        changes["text_edit"] = attrs.evolve(
            base.text_edit, new_text=f"{base.text_edit.new_text} {alternate.attribute}"
        )
    if base.insert_text is not None:
        changes["insert_text"] = f"{base.insert_text} {alternate.attribute}"
    return attrs.evolve(base, **changes)


def augment(
    raw_items: Sequence[CompletionItem],
    text: str,
    offset: int,
    alternates: Mapping[str, Sequence[LanguageAlternate]],
) -> list[CompletionItem]:
    """Insert one item per alternate language right after each language block tag.

    Only applies at tag name sites; anywhere else the raw items are returned
    unchanged. Relative order of the raw items is preserved and no label is
    emitted twice.
    """
    if not alternates or completion_site(text, offset) is not CompletionSite.TAG_NAME:
        return list(raw_items)

    labels = {item.label for item in raw_items}
    items: list[CompletionItem] = []
    for item in raw_items:
        items.append(item)
        if item.kind != CompletionItemKind.Property:
            continue
        for alternate in alternates.get(item.label, ()):
            label = language_label(item.label, alternate)
            if label in labels:
                continue
            labels.add(label)
            items.append(_synthetic_item(item, alternate))
    return items

