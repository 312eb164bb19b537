"""Play Find Tool - Resolve a name to a catalog key."""

from pathlib import Path
from typing import Any

from fastmcp import FastMCP

from plays_mcp.contracts import build_ok, build_plays_data
from plays_mcp.formatting import build_lookup_error
from plays_mcp.library import PlayLibrary, PlayLookupError
from plays_mcp.utils import Materialize, PlayName, normalize_input


def register(mcp: FastMCP, library: PlayLibrary) -> None:
    """Register plays_find tool with the MCP server."""

    @mcp.tool()
    def plays_find(name: PlayName, materialize: Materialize = False) -> dict[str, Any]:
        """Resolve a play key or title fragment to exactly one play.

        Matching rules:
        - An exact key always wins
        - Otherwise a case-sensitive title substring, then case-insensitive
          only if nothing matched
        - Several matches fail with `ambiguous_match` listing the candidates

        With materialize, an unmatched name that is the path of an existing
        file is registered as an external play. Does not load the play text.
        """
        query = normalize_input(name)
        # Only real files may grow the shared catalog
        register_external = materialize and Path(query).is_file()
        try:
            key = library.resolve(query, ask=False, materialize=register_external)
        except PlayLookupError as exc:
            return build_lookup_error(exc, source="catalog", name=query)

        entry = library.catalog.get(key)
        return build_ok(
            build_plays_data(
                source="catalog",
                action="find",
                entries=[
                    {
                        "key": key,
                        "title": entry.title if entry else key,
                        "external": bool(entry and entry.is_synthetic),
                        "cached": library.is_cached(key),
                    }
                ],
                summary={"count": 1},
            )
        )
