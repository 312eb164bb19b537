"""Play MCP tool implementations."""

from . import browse_play, find_play, list_titles

__all__ = [
    "browse_play",
    "find_play",
    "list_titles",
]
