"""Constants shared across svelte-html-lsp."""

from __future__ import annotations

import os

# Maximum number of characters the boundary scanner walks back from the cursor
SCAN_WINDOW = int(os.environ.get("SVELTE_HTML_LSP_SCAN_WINDOW", "4096"))

# Elements whose content can be authored in an alternate language, mapped to
# the alternates offered as extra tag completions.
DEFAULT_LANG_ALTERNATES: dict[str, list[str]] = {
    "script": ["ts"],
    "style": ["less", "scss"],
    "template": ["pug"],
}

LANGUAGE_NAMES: dict[str, str] = {
    "ts": "TypeScript",
    "typescript": "TypeScript",
    "less": "Less",
    "scss": "SCSS",
    "sass": "Sass",
    "stylus": "Stylus",
    "postcss": "PostCSS",
    "pug": "Pug",
    "coffee": "CoffeeScript",
}

# Characters that may appear in a tag name after the first letter
TAG_NAME_CHARS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789-_:.")

VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "keygen",
        "link",
        "menuitem",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)

COMPLETION_TRIGGER_CHARACTERS = ["<", ".", ":", '"', "'", "=", "/"]

# Settings section sent by clients in workspace/didChangeConfiguration
SETTINGS_SECTION = ("svelte", "plugin", "html")

TAG_COMPLETE_REQUEST = "html/tag"
