"""Colored logging configuration for svelte-html-lsp."""

from __future__ import annotations

import logging
import sys
from typing import ClassVar

_PACKAGE = "svelte_html_lsp"


def _display_name(name: str) -> str:
    """Strip the package prefix so log lines stay short."""
    if name.startswith(f"{_PACKAGE}."):
        return name[len(_PACKAGE) + 1 :]
    if name == _PACKAGE:
        return "SvelteHTML"
    return name


def _timestamp(formatter: logging.Formatter, record: logging.LogRecord) -> str:
    ct = formatter.converter(record.created)
    return f"{ct.tm_year:04d}-{ct.tm_mon:02d}-{ct.tm_mday:02d} {ct.tm_hour:02d}:{ct.tm_min:02d}:{ct.tm_sec:02d}.{int(record.msecs):03d}"


class PlainFormatter(logging.Formatter):
    """Formatter producing JupyterLab style lines without colors.

    Formats log messages as:
    [LEVEL YYYY-MM-DD HH:MM:SS.mmm component] message
    """

    # Map full level names to single-letter codes like JupyterLab
    LEVEL_CODES: ClassVar[dict[str, str]] = {
        "DEBUG": "D",
        "INFO": "I",
        "WARNING": "W",
        "ERROR": "E",
        "CRITICAL": "C",
    }

    def _prefix(self, record: logging.LogRecord) -> str:
        level_code = self.LEVEL_CODES.get(record.levelname, record.levelname[0])
        return f"[{level_code} {_timestamp(self, record)} {_display_name(record.name)}]"

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record in JupyterLab style."""
        message = f"{self._prefix(record)} {record.getMessage()}"

        if record.exc_info:
            message += "\n" + self.formatException(record.exc_info)

        return message


class ColoredFormatter(PlainFormatter):
    """Same layout as PlainFormatter with the prefix colored by level."""

    # ANSI color codes
    COLORS: ClassVar[dict[str, str]] = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET: ClassVar[str] = "\033[0m"

    def _prefix(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.RESET)
        return f"{color}{super()._prefix(record)}{self.RESET}"


def get_logger(name: str, component: str | None = None) -> logging.Logger:
    """Return a logger for a module.

    When ``component`` is given the logger is named after it instead of the
    module, which keeps entry points like ``__main__`` readable in the log.
    """
    if component is not None:
        return logging.getLogger(f"{_PACKAGE}.{component}")
    return logging.getLogger(name)


def setup_colored_logging(level: int = logging.INFO) -> None:
    """Configure colored logging for svelte-html-lsp in JupyterLab style.

    Logs go to stderr since stdout carries the LSP stream when running over stdio.

    Args:
        level: The logging level to use (e.g., logging.INFO, logging.DEBUG)
    """
    supports_color = hasattr(sys.stderr, "isatty") and sys.stderr.isatty()
    formatter = ColoredFormatter() if supports_color else PlainFormatter()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)
