"""Tokenizer for HTML with Svelte ``{...}`` attribute values.

The scanner can start at any offset in any state, which lets callers
re-scan just one tag instead of the whole document.
"""

from __future__ import annotations

import re
from enum import Enum, auto


class TokenType(Enum):
    START_COMMENT_TAG = auto()
    COMMENT = auto()
    END_COMMENT_TAG = auto()
    START_TAG_OPEN = auto()
    START_TAG_CLOSE = auto()
    START_TAG_SELF_CLOSE = auto()
    START_TAG = auto()
    END_TAG_OPEN = auto()
    END_TAG_CLOSE = auto()
    END_TAG = auto()
    DELIMITER_ASSIGN = auto()
    ATTRIBUTE_NAME = auto()
    ATTRIBUTE_VALUE = auto()
    START_DOCTYPE_TAG = auto()
    DOCTYPE = auto()
    END_DOCTYPE_TAG = auto()
    CONTENT = auto()
    WHITESPACE = auto()
    UNKNOWN = auto()
    SCRIPT = auto()
    STYLES = auto()
    EOS = auto()


class ScannerState(Enum):
    WITHIN_CONTENT = auto()
    AFTER_OPENING_START_TAG = auto()
    AFTER_OPENING_END_TAG = auto()
    WITHIN_DOCTYPE = auto()
    WITHIN_TAG = auto()
    WITHIN_END_TAG = auto()
    WITHIN_COMMENT = auto()
    WITHIN_SCRIPT = auto()
    WITHIN_STYLE = auto()
    AFTER_ATTRIBUTE_NAME = auto()
    BEFORE_ATTRIBUTE_VALUE = auto()


ELEMENT_NAME_PATTERN = re.compile(r"[_:\w][_:\w\-.\d]*")
ATTRIBUTE_NAME_PATTERN = re.compile(r"[^\s\"'>/=\x00-\x0F\x7F\x80-\x9F]+")
UNQUOTED_VALUE_PATTERN = re.compile(r"[^\s\"'`=<>]+")
WHITESPACE_PATTERN = re.compile(r"\s+")
DOCTYPE_PATTERN = re.compile(r"!doctype", re.IGNORECASE)
STRING_QUOTES = "'\"`"
SCRIPT_END_PATTERN = re.compile(r"</script", re.IGNORECASE)
STYLE_END_PATTERN = re.compile(r"</style", re.IGNORECASE)


def _skip_braced(text: str, pos: int) -> int:
    """Return the offset just past the ``}`` matching the ``{`` at ``pos``.

    String literals inside the braces are skipped. An unterminated expression
    runs to the end of the text.
    """
    depth = 0
    quote = None
    length = len(text)
    while pos < length:
        char = text[pos]
        if quote is not None:
            if char == "\\":
                pos += 1
            elif char == quote:
                quote = None
        elif char in STRING_QUOTES:
            quote = char
        elif char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return pos + 1
        pos += 1
    return length


class Scanner:
    """Produces one token per ``scan()`` call until ``TokenType.EOS``."""

    def __init__(
        self,
        text: str,
        initial_offset: int = 0,
        initial_state: ScannerState = ScannerState.WITHIN_CONTENT,
    ):
        self.text = text
        self.pos = initial_offset
        self.state = initial_state
        self.token_offset = initial_offset
        self.token_type = TokenType.UNKNOWN
        self.last_tag = ""
        self.has_space_after_tag = False

    @property
    def token_end(self) -> int:
        return self.pos

    @property
    def token_text(self) -> str:
        return self.text[self.token_offset : self.pos]

    def scan(self) -> TokenType:
        offset = self.pos
        old_state = self.state
        token = self._internal_scan()
        if token is not TokenType.EOS and offset == self.pos:
            # Never stall: consume one character as unknown
            self.pos += 1
            self.state = old_state
            return self._finish(offset, TokenType.UNKNOWN)
        return token

    def _finish(self, offset: int, token: TokenType) -> TokenType:
        self.token_type = token
        self.token_offset = offset
        return token

    def _starts_with(self, value: str) -> bool:
        return self.text.startswith(value, self.pos)

    def _match(self, pattern: re.Pattern[str]) -> str:
        match = pattern.match(self.text, self.pos)
        if match is None:
            return ""
        self.pos = match.end()
        return match.group()

    def _skip_whitespace(self) -> bool:
        return bool(self._match(WHITESPACE_PATTERN))

    def _advance_until(self, value: str) -> bool:
        """Move to the next occurrence of ``value``, or to the end."""
        index = self.text.find(value, self.pos)
        if index == -1:
            self.pos = len(self.text)
            return False
        self.pos = index
        return True

    def _internal_scan(self) -> TokenType:
        offset = self.pos
        text = self.text
        if offset >= len(text):
            return self._finish(offset, TokenType.EOS)

        state = self.state

        if state is ScannerState.WITHIN_COMMENT:
            if self._starts_with("-->"):
                self.pos += 3
                self.state = ScannerState.WITHIN_CONTENT
                return self._finish(offset, TokenType.END_COMMENT_TAG)
            self._advance_until("-->")
            return self._finish(offset, TokenType.COMMENT)

        if state is ScannerState.WITHIN_DOCTYPE:
            if self._starts_with(">"):
                self.pos += 1
                self.state = ScannerState.WITHIN_CONTENT
                return self._finish(offset, TokenType.END_DOCTYPE_TAG)
            self._advance_until(">")
            return self._finish(offset, TokenType.DOCTYPE)

        if state is ScannerState.WITHIN_CONTENT:
            if self._starts_with("<"):
                if text.startswith("!--", offset + 1):
                    self.pos += 4
                    self.state = ScannerState.WITHIN_COMMENT
                    return self._finish(offset, TokenType.START_COMMENT_TAG)
                if DOCTYPE_PATTERN.match(text, offset + 1):
                    self.pos += 9
                    self.state = ScannerState.WITHIN_DOCTYPE
                    return self._finish(offset, TokenType.START_DOCTYPE_TAG)
                if text.startswith("/", offset + 1):
                    self.pos += 2
                    self.state = ScannerState.AFTER_OPENING_END_TAG
                    return self._finish(offset, TokenType.END_TAG_OPEN)
                self.pos += 1
                self.state = ScannerState.AFTER_OPENING_START_TAG
                return self._finish(offset, TokenType.START_TAG_OPEN)
            self._advance_until("<")
            return self._finish(offset, TokenType.CONTENT)

        if state is ScannerState.AFTER_OPENING_END_TAG:
            tag_name = self._match(ELEMENT_NAME_PATTERN)
            if tag_name:
                self.state = ScannerState.WITHIN_END_TAG
                return self._finish(offset, TokenType.END_TAG)
            if self._skip_whitespace():
                return self._finish(offset, TokenType.WHITESPACE)
            self.state = ScannerState.WITHIN_END_TAG
            self._advance_until(">")
            if offset < self.pos:
                return self._finish(offset, TokenType.UNKNOWN)
            return self._internal_scan()

        if state is ScannerState.WITHIN_END_TAG:
            if self._skip_whitespace():
                return self._finish(offset, TokenType.WHITESPACE)
            if self._starts_with(">"):
                self.pos += 1
                self.state = ScannerState.WITHIN_CONTENT
                return self._finish(offset, TokenType.END_TAG_CLOSE)
            self._advance_until(">")
            return self._finish(offset, TokenType.UNKNOWN)

        if state is ScannerState.AFTER_OPENING_START_TAG:
            tag_name = self._match(ELEMENT_NAME_PATTERN)
            if tag_name:
                self.last_tag = tag_name.lower()
                self.state = ScannerState.WITHIN_TAG
                self.has_space_after_tag = False
                return self._finish(offset, TokenType.START_TAG)
            if self._skip_whitespace():
                # Whitespace is not valid directly after "<"
                return self._finish(offset, TokenType.WHITESPACE)
            self.state = ScannerState.WITHIN_TAG
            self._advance_until(">")
            if offset < self.pos:
                return self._finish(offset, TokenType.UNKNOWN)
            return self._internal_scan()

        if state is ScannerState.WITHIN_TAG:
            if self._skip_whitespace():
                self.has_space_after_tag = True
                return self._finish(offset, TokenType.WHITESPACE)
            if self.has_space_after_tag:
                if self._starts_with("{"):
                    # Svelte shorthand attribute or spread: {name} / {...props}
                    self.pos = _skip_braced(text, self.pos)
                    self.has_space_after_tag = False
                    return self._finish(offset, TokenType.ATTRIBUTE_NAME)
                attribute_name = self._match(ATTRIBUTE_NAME_PATTERN)
                if attribute_name:
                    self.state = ScannerState.AFTER_ATTRIBUTE_NAME
                    self.has_space_after_tag = False
                    return self._finish(offset, TokenType.ATTRIBUTE_NAME)
            if self._starts_with("/>"):
                self.pos += 2
                self.state = ScannerState.WITHIN_CONTENT
                return self._finish(offset, TokenType.START_TAG_SELF_CLOSE)
            if self._starts_with(">"):
                self.pos += 1
                if self.last_tag == "script":
                    self.state = ScannerState.WITHIN_SCRIPT
                elif self.last_tag == "style":
                    self.state = ScannerState.WITHIN_STYLE
                else:
                    self.state = ScannerState.WITHIN_CONTENT
                return self._finish(offset, TokenType.START_TAG_CLOSE)
            self.pos += 1
            return self._finish(offset, TokenType.UNKNOWN)

        if state is ScannerState.AFTER_ATTRIBUTE_NAME:
            if self._skip_whitespace():
                self.has_space_after_tag = True
                return self._finish(offset, TokenType.WHITESPACE)
            if self._starts_with("="):
                self.pos += 1
                self.state = ScannerState.BEFORE_ATTRIBUTE_VALUE
                return self._finish(offset, TokenType.DELIMITER_ASSIGN)
            self.state = ScannerState.WITHIN_TAG
            return self._internal_scan()

        if state is ScannerState.BEFORE_ATTRIBUTE_VALUE:
            if self._skip_whitespace():
                return self._finish(offset, TokenType.WHITESPACE)
            if self._starts_with("{"):
                self.pos = _skip_braced(text, self.pos)
                self.state = ScannerState.WITHIN_TAG
                self.has_space_after_tag = False
                return self._finish(offset, TokenType.ATTRIBUTE_VALUE)
            value = self._match(UNQUOTED_VALUE_PATTERN)
            if value:
                if value.endswith("/") and self._starts_with(">"):
                    # <foo bar=http://foo/> keeps the "/" for the self close
                    self.pos -= 1
                self.state = ScannerState.WITHIN_TAG
                self.has_space_after_tag = False
                return self._finish(offset, TokenType.ATTRIBUTE_VALUE)
            char = text[offset]
            if char in "'\"":
                self.pos += 1
                closing = text.find(char, self.pos)
                self.pos = len(text) if closing == -1 else closing + 1
                self.state = ScannerState.WITHIN_TAG
                self.has_space_after_tag = False
                return self._finish(offset, TokenType.ATTRIBUTE_VALUE)
            self.state = ScannerState.WITHIN_TAG
            self.has_space_after_tag = False
            return self._internal_scan()

        if state is ScannerState.WITHIN_SCRIPT or state is ScannerState.WITHIN_STYLE:
            pattern = SCRIPT_END_PATTERN if state is ScannerState.WITHIN_SCRIPT else STYLE_END_PATTERN
            match = pattern.search(text, offset)
            self.pos = len(text) if match is None else match.start()
            self.state = ScannerState.WITHIN_CONTENT
            if offset < self.pos:
                token = TokenType.SCRIPT if state is ScannerState.WITHIN_SCRIPT else TokenType.STYLES
                return self._finish(offset, token)
            return self._internal_scan()

        self.pos += 1
        self.state = ScannerState.WITHIN_CONTENT
        return self._finish(offset, TokenType.UNKNOWN)
