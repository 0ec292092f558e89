from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .__version import __version__
from ._logging import get_logger, setup_colored_logging

logger = get_logger(__name__, "main")

_DESCRIPTION = """\
svelte-html-lsp: HTML language features for Svelte components

Provides IDE support for the markup of .svelte files with:
• Hover documentation for HTML elements and attributes
• Tag, attribute and value completions, including <style lang="..."> variants
• Automatic closing of HTML tags
• No HTML suggestions inside {...} attribute expressions"""


def main():
    """Main entry point for the language server."""
    parser = argparse.ArgumentParser(
        description=_DESCRIPTION,
        prog="svelte-html-lsp",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set the logging level (default: %(default)s)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Server subcommand
    server_parser = subparsers.add_parser(
        "server",
        help="Start the LSP server",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    server_parser.add_argument("--tcp", action="store_true", help="Use TCP instead of stdio")
    server_parser.add_argument(
        "--port", type=int, default=8080, help="TCP port to listen on (default: %(default)s)"
    )
    server_parser.add_argument("--stdio", action="store_true", help="Use stdio (default)")

    # Query subcommand
    query_parser = subparsers.add_parser(
        "query",
        help="Run a single HTML feature on a file and print the result as JSON",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    query_parser.add_argument("feature", choices=["hover", "complete", "tag"], help="Feature to run")
    query_parser.add_argument("file", type=str, help="Svelte or HTML file to query")
    query_parser.add_argument("line", type=int, help="Zero-based line of the cursor")
    query_parser.add_argument("character", type=int, help="Zero-based character of the cursor")

    args = parser.parse_args()

    # Require explicit subcommand
    if args.command is None:
        parser.error(
            "A subcommand is required. Use 'svelte-html-lsp server' to start the LSP server.\n"
            "See 'svelte-html-lsp --help' for available commands."
        )

    # Configure colored logging
    log_level = getattr(logging, args.log_level)
    setup_colored_logging(level=log_level)

    if args.command == "query":
        _run_query(args.feature, args.file, args.line, args.character)
        return

    elif args.command == "server":
        # Check for mutually exclusive options
        if args.tcp and args.stdio:
            parser.error("--tcp and --stdio are mutually exclusive")

        # Import server only when actually needed
        from .server import create_server

        server = create_server()

        if args.tcp:
            logger.info(f"Starting Svelte HTML LSP server ({__version__}) on TCP port {args.port}")
            server.start_tcp("localhost", args.port)
        else:
            logger.info(f"Starting Svelte HTML LSP server ({__version__}) on stdio")
            server.start_io()


def _run_query(feature: str, file: str, line: int, character: int) -> None:
    """Run one plugin feature on ``file`` and print the result as JSON."""
    from lsprotocol.converters import get_converter
    from lsprotocol.types import Position

    from .document import Document
    from .plugin import HTMLPlugin

    path = Path(file)
    try:
        content = path.read_text()
    except OSError as e:
        print(f"Error reading {path}: {e}", file=sys.stderr)
        sys.exit(1)

    if line < 0 or character < 0:
        print("Error: line and character must be non-negative", file=sys.stderr)
        sys.exit(1)

    document = Document(path.absolute().as_uri(), content)
    position = Position(line=line, character=character)
    plugin = HTMLPlugin()

    if feature == "hover":
        result = plugin.do_hover(document, position)
    elif feature == "complete":
        result = plugin.get_completions(document, position)
    else:
        result = plugin.do_tag_complete(document, position)

    print(json.dumps(get_converter().unstructure(result), indent=2))


if __name__ == "__main__":
    main()
