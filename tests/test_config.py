"""Tests for HTML plugin configuration."""

from __future__ import annotations

import pytest

from svelte_html_lsp.config import HTMLPluginConfig, parse_alternates
from svelte_html_lsp.models import LanguageAlternate


class TestParseAlternates:
    """Test normalization of language alternates."""

    def test_plain_names(self):
        assert parse_alternates({"Style": ["less", "less", "scss"]}) == {
            "style": (LanguageAlternate("less", 'lang="less"'), LanguageAlternate("scss", 'lang="scss"')),
        }

    def test_single_entry_and_objects(self):
        result = parse_alternates(
            {
                "script": "ts",
                "style": {"language": "postcss", "attribute": 'type="text/postcss"'},
            }
        )
        assert result["script"] == (LanguageAlternate("ts", 'lang="ts"'),)
        assert result["style"] == (LanguageAlternate("postcss", 'type="text/postcss"'),)

    @pytest.mark.parametrize(
        "raw",
        [
            ["style"],
            {"": ["less"]},
            {"style": 3},
            {"style": [{"attribute": "x"}]},
            {"style": [None]},
        ],
    )
    def test_invalid(self, raw):
        with pytest.raises(ValueError):
            parse_alternates(raw)


class TestHTMLPluginConfig:
    """Test feature toggles and client settings."""

    def test_defaults(self, config):
        assert all(config.feature_enabled(feature) for feature in ("hover", "completions", "tag_complete"))
        assert [alternate.language for alternate in config.language_alternates()["style"]] == ["less", "scss"]

    def test_global_switch(self, config):
        config.enable = False
        assert not config.feature_enabled("hover")

    def test_unknown_feature(self, config):
        with pytest.raises(ValueError, match="Unknown feature"):
            config.feature_enabled("rename")

    def test_invalid_alternates_rejected(self):
        with pytest.raises(ValueError):
            HTMLPluginConfig(lang_alternates={"style": 3})

    def test_update_from_settings(self, config):
        changed = config.update_from_settings(
            {
                "hover": {"enable": False},
                "tagComplete": {"enable": False},
                "langAlternates": {"style": ["sass"]},
                "unknown": True,
            }
        )

        assert changed == ["hover_enable", "lang_alternates", "tag_complete_enable"]
        assert not config.feature_enabled("hover")
        assert config.feature_enabled("completions")
        assert not config.feature_enabled("tag_complete")
        assert list(config.language_alternates()) == ["style"]

    def test_update_without_changes(self, config):
        assert config.update_from_settings({"enable": True, "completions": {"enable": True}}) == []

    def test_invalid_settings_leave_config_untouched(self, config):
        with pytest.raises(ValueError):
            config.update_from_settings({"hover": {"enable": False}, "completions": {"enable": "no"}})

        assert config.hover_enable is True
        assert config.completions_enable is True
