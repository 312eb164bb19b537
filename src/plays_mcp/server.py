"""Plays MCP Server - Shakespeare's plays exposed over MCP."""

import argparse
import dataclasses
import logging
import sys
from pathlib import Path
from typing import Sequence

from fastmcp import FastMCP

from plays_mcp import __version__
from plays_mcp.config import LibraryConfig, get_library_config
from plays_mcp.library import (
    CatalogConfigurationError,
    ConsoleChooser,
    PlayLibrary,
    PlayLookupError,
)
from plays_mcp.tools import browse_play, find_play, list_titles

logger = logging.getLogger("plays-mcp.server")


def create_server(library: PlayLibrary) -> FastMCP:
    """Build an MCP server whose tools read from ``library``."""
    mcp = FastMCP(
        "Plays MCP Server",
        instructions=(
            "Shakespeare plays MCP server. "
            "Provides tools for listing the play catalog, resolving a play "
            "from its key or a fragment of its title, and browsing a play "
            "by act and scene."
        ),
    )

    list_titles.register(mcp, library)
    find_play.register(mcp, library)
    browse_play.register(mcp, library)
    return mcp


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="plays-mcp",
        description="Plays MCP Server - Shakespeare's plays exposed over MCP",
    )
    parser.add_argument("--version", "-v", action="version", version=f"plays-mcp {__version__}")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http", "sse"],
        default="stdio",
        help="Transport protocol (default: stdio)",
    )
    parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host to bind when using http/sse transport (default: 127.0.0.1)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port to bind when using http/sse transport (default: 8000)",
    )
    parser.add_argument("--plays-dir", type=Path, help="Directory holding the play XML files")
    parser.add_argument("--catalog", type=Path, help="Catalog table (CSV: file,title)")
    parser.add_argument("--artifact-dir", type=Path, help="Directory for saved parse artifacts")
    parser.add_argument(
        "--no-persist",
        action="store_true",
        help="Do not read or write parse artifacts",
    )
    parser.add_argument(
        "--find",
        metavar="NAME",
        help="Resolve NAME on the console (asking when several titles match), print the key, and exit",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level for stderr logging (default: WARNING)",
    )
    return parser


def _config_from_args(args: argparse.Namespace) -> LibraryConfig:
    config = get_library_config()
    overrides = {}
    if args.plays_dir is not None:
        overrides["plays_dir"] = args.plays_dir
    if args.catalog is not None:
        overrides["catalog_path"] = args.catalog
    if args.artifact_dir is not None:
        overrides["artifact_dir"] = args.artifact_dir
    if args.no_persist:
        overrides["persist"] = False
    return dataclasses.replace(config, **overrides)


def _run_find(library: PlayLibrary, name: str) -> int:
    try:
        key = library.find(name, ask=True, materialize=False, get=False)
    except PlayLookupError as exc:
        print(exc, file=sys.stderr)
        return 1
    entry = library.catalog.get(key)
    print(f"{key}\t{entry.title if entry else key}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the plays MCP server."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        stream=sys.stderr,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    config = _config_from_args(args)
    try:
        library = PlayLibrary.open(config, chooser=ConsoleChooser())
    except CatalogConfigurationError as exc:
        logger.error("Cannot open play library: %s", exc)
        return 2

    with library:
        if args.find:
            return _run_find(library, args.find)

        run_kwargs: dict = {"transport": args.transport, "show_banner": False}
        if args.transport in ("http", "sse"):
            run_kwargs["host"] = args.host
            run_kwargs["port"] = args.port

        # Suppress noisy uvicorn shutdown messages (e.g. "Cancel N running task(s)")
        logging.getLogger("uvicorn.error").setLevel(logging.CRITICAL)

        try:
            create_server(library).run(**run_kwargs)
        except KeyboardInterrupt:
            pass
    return 0


if __name__ == "__main__":
    sys.exit(main())
