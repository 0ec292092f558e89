"""Tests for the command line interface."""

from __future__ import annotations

import json
import logging
import sys

import pytest

from svelte_html_lsp import __version__
from svelte_html_lsp.__main__ import main


@pytest.fixture(autouse=True)
def _restore_logging():
    root_logger = logging.getLogger()
    handlers, level = root_logger.handlers[:], root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


def _run(monkeypatch, *args: str) -> None:
    monkeypatch.setattr(sys, "argv", ["svelte-html-lsp", *args])
    main()


class TestQueryCommand:
    """Test the query subcommand."""

    def test_hover(self, monkeypatch, capsys, tmp_path):
        path = tmp_path / "App.svelte"
        path.write_text("<h1>Hello, world!</h1>")

        _run(monkeypatch, "query", "hover", str(path), "0", "2")

        result = json.loads(capsys.readouterr().out)
        assert result["contents"]["kind"] == "markdown"
        assert result["range"] == {
            "start": {"line": 0, "character": 1},
            "end": {"line": 0, "character": 3},
        }

    def test_complete(self, monkeypatch, capsys, tmp_path):
        path = tmp_path / "App.svelte"
        path.write_text("<div on:click={bla} >")

        _run(monkeypatch, "query", "complete", str(path), "0", "21")

        result = json.loads(capsys.readouterr().out)
        assert result["items"][0]["label"] == "</div>"
        assert result["items"][0]["insertTextFormat"] == 2

    def test_tag_inside_expression(self, monkeypatch, capsys, tmp_path):
        path = tmp_path / "App.svelte"
        path.write_text("<div on:click={() =>")

        _run(monkeypatch, "query", "tag", str(path), "0", "20")

        assert json.loads(capsys.readouterr().out) is None

    def test_missing_file(self, monkeypatch, capsys, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            _run(monkeypatch, "query", "hover", str(tmp_path / "missing.svelte"), "0", "0")

        assert exc_info.value.code == 1
        assert "Error reading" in capsys.readouterr().err


class TestArguments:
    """Test argument handling."""

    def test_subcommand_required(self, monkeypatch):
        with pytest.raises(SystemExit) as exc_info:
            _run(monkeypatch)

        assert exc_info.value.code == 2

    def test_version(self, monkeypatch, capsys):
        with pytest.raises(SystemExit):
            _run(monkeypatch, "--version")

        assert __version__ in capsys.readouterr().out

    def test_tcp_and_stdio_exclusive(self, monkeypatch):
        with pytest.raises(SystemExit) as exc_info:
            _run(monkeypatch, "server", "--tcp", "--stdio")

        assert exc_info.value.code == 2
