"""Data models shared by the scanner, augmenter and plugin."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class BoundaryContext(str, Enum):
    """Whether a cursor offset is in host markup or inside an embedded expression."""

    MARKUP = "markup"
    EXPRESSION = "expression"


class CompletionSite(str, Enum):
    """Syntactic position a completion request was made from."""

    TAG_NAME = "tag_name"
    ATTRIBUTE = "attribute"
    OTHER = "other"


@dataclass(frozen=True)
class LanguageAlternate:
    """An alternate language for a language-block element like ``<style>``."""

    language: str
    attribute: str

    @classmethod
    def for_language(cls, language: str) -> LanguageAlternate:
        """Create the alternate using the conventional ``lang="..."`` attribute."""
        return cls(language=language, attribute=f'lang="{language}"')


@dataclass(frozen=True)
class TagInfo:
    """Documentation for an element known to the markup engine."""

    name: str
    description: str = ""
    references: tuple[tuple[str, str], ...] = ()
    attributes: tuple[str, ...] = ()
    void: bool = False


@dataclass(frozen=True)
class AttributeInfo:
    """Documentation for an attribute known to the markup engine."""

    name: str
    description: str = ""
    value_set: str | None = None
    references: tuple[tuple[str, str], ...] = ()
    # Directive prefixes like ``on:`` complete without a value snippet
    directive: bool = False
