"""Error rendering helpers for tool outputs."""

from __future__ import annotations

from typing import Any

from plays_mcp.contracts import build_error
from plays_mcp.library import (
    AmbiguousMatchError,
    CatalogConfigurationError,
    PlayLookupError,
    PlayNotFoundError,
    SourceNotFoundError,
)


def build_lookup_error(exc: PlayLookupError, *, source: str, name: str) -> dict[str, Any]:
    """Build a unified error envelope for a failed play lookup."""
    details: dict[str, Any] = {"source": source, "input": {"name": name}}

    if isinstance(exc, AmbiguousMatchError):
        details["candidates"] = exc.candidates
        details["action"] = "retry with a longer title fragment or the play key"
        return build_error("ambiguous_match", "Several titles matched", details)

    if isinstance(exc, PlayNotFoundError):
        details["action"] = "list titles with plays_list_titles"
        return build_error("play_not_found", str(exc), details)

    if isinstance(exc, SourceNotFoundError):
        details["key"] = exc.key
        details["path"] = str(exc.path)
        details["action"] = "set PLAYS_MCP_PLAYS_DIR to the directory holding the play XML files"
        return build_error("configuration_error", str(exc), details)

    if isinstance(exc, CatalogConfigurationError):
        return build_error("configuration_error", str(exc), details)

    return build_error("lookup_error", str(exc), details)


def build_parse_error(exc: Exception, *, key: str, name: str) -> dict[str, Any]:
    """Build an error envelope for a play source that could not be parsed."""
    details: dict[str, Any] = {"source": "play", "input": {"name": name}, "key": key}
    return build_error("parse_error", f"Play {key} could not be parsed", details)
