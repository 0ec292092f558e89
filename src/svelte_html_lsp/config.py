"""User configuration of the HTML plugin."""

from __future__ import annotations

from typing import Any

import param

from .constants import DEFAULT_LANG_ALTERNATES
from .models import LanguageAlternate

FEATURES = ("hover", "completions", "tag_complete")

# Client setting keys (camelCase, nested) mapped to parameter names
_SETTING_KEYS: dict[tuple[str, ...], str] = {
    ("enable",): "enable",
    ("hover", "enable"): "hover_enable",
    ("completions", "enable"): "completions_enable",
    ("tagComplete", "enable"): "tag_complete_enable",
    ("langAlternates",): "lang_alternates",
}


def _to_alternate(element: str, entry: Any) -> LanguageAlternate:
    if isinstance(entry, str):
        return LanguageAlternate.for_language(entry)
    if isinstance(entry, dict) and isinstance(entry.get("language"), str):
        language = entry["language"]
        return LanguageAlternate(language, entry.get("attribute") or f'lang="{language}"')
    raise ValueError(f"Invalid alternate language {entry!r} for <{element}>")


def parse_alternates(raw: dict[str, Any]) -> dict[str, tuple[LanguageAlternate, ...]]:
    """Normalize a mapping of element name to alternates.

    Alternates may be given as plain language names (``"less"``) or as
    ``{"language": ..., "attribute": ...}`` objects. A single entry may be
    given without a list. Duplicate languages are dropped, keeping the first.
    """
    if not isinstance(raw, dict):
        raise ValueError(f"Language alternates must be a mapping, got {raw!r}")
    result: dict[str, tuple[LanguageAlternate, ...]] = {}
    for element, entries in raw.items():
        if not isinstance(element, str) or not element:
            raise ValueError(f"Invalid language block element name {element!r}")
        if isinstance(entries, (str, dict)):
            entries = [entries]
        elif not isinstance(entries, (list, tuple)):
            raise ValueError(f"Invalid alternate languages {entries!r} for <{element}>")
        alternates: list[LanguageAlternate] = []
        seen: set[str] = set()
        for entry in entries:
            alternate = _to_alternate(element, entry)
            if alternate.language not in seen:
                seen.add(alternate.language)
                alternates.append(alternate)
        result[element.lower()] = tuple(alternates)
    return result


def _lookup(settings: dict[str, Any], path: tuple[str, ...]) -> Any:
    value: Any = settings
    for key in path:
        if not isinstance(value, dict) or key not in value:
            return None
        value = value[key]
    return value


class HTMLPluginConfig(param.Parameterized):
    """Feature toggles and language alternates for the HTML plugin."""

    enable = param.Boolean(default=True, doc="Enable the HTML plugin.")

    hover_enable = param.Boolean(default=True, doc="Enable hover info for HTML tags and attributes.")

    completions_enable = param.Boolean(default=True, doc="Enable completions for HTML tags and attributes.")

    tag_complete_enable = param.Boolean(default=True, doc="Enable automatic closing of HTML tags.")

    lang_alternates = param.Dict(
        default=dict(DEFAULT_LANG_ALTERNATES),
        doc="""
        Alternate languages offered as extra completions for language block
        elements, keyed by element name.""",
    )

    @param.depends("lang_alternates", watch=True, on_init=True)
    def _validate_lang_alternates(self):
        parse_alternates(self.lang_alternates)

    def feature_enabled(self, feature: str) -> bool:
        """Whether ``feature`` (one of ``FEATURES``) is switched on."""
        if feature not in FEATURES:
            raise ValueError(f"Unknown feature {feature!r}, expected one of {FEATURES}")
        return self.enable and getattr(self, f"{feature}_enable")

    def language_alternates(self) -> dict[str, tuple[LanguageAlternate, ...]]:
        return parse_alternates(self.lang_alternates)

    def update_from_settings(self, settings: dict[str, Any]) -> list[str]:
        """Apply client settings for the HTML plugin, returning changed names.

        Unknown keys are ignored. Invalid values raise ``ValueError`` and leave
        the configuration untouched.
        """
        updates = {}
        for path, name in _SETTING_KEYS.items():
            value = _lookup(settings, path)
            if value is not None and value != getattr(self, name):
                updates[name] = value

        if "lang_alternates" in updates:
            parse_alternates(updates["lang_alternates"])
        for name, value in updates.items():
            if name != "lang_alternates" and not isinstance(value, bool):
                raise ValueError(f"Setting for {name!r} must be a boolean, got {value!r}")

        self.param.update(**updates)
        return sorted(updates)
