"""Play Catalog Tool - List titles and keys."""

from typing import Any

from fastmcp import FastMCP

from plays_mcp.contracts import build_ok, build_plays_data
from plays_mcp.library import PlayLibrary


def register(mcp: FastMCP, library: PlayLibrary) -> None:
    """Register plays_list_titles tool with the MCP server."""

    @mcp.tool()
    def plays_list_titles() -> dict[str, Any]:
        """List every play in the catalog with its key.

        Either the key or any fragment that matches exactly one title can be
        passed as `name` to the other play tools.

        Related tools:
        - plays_find: Check which play a name resolves to
        - plays_browse: Outline, act, or scene of a play
        """
        entries = [
            {
                "title": entry.title,
                "key": entry.key,
                "cached": library.is_cached(entry.key),
            }
            for entry in library.titles()
        ]
        return build_ok(
            build_plays_data(
                source="catalog",
                action="list",
                entries=entries,
                summary={"count": len(entries)},
            )
        )
