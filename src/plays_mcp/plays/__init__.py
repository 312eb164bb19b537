"""Play documents: models, XML parser, and text formatting.

Components:
    - parse_play: Parse a Bosak-style XML play into a Play model
    - PlayFormatter: Render outlines and scenes for tool output

Data Models:
    - Play, Act, Scene, Speech
"""

from plays_mcp.plays.formatter import PlayFormatter
from plays_mcp.plays.models import Act, Play, Scene, Speech
from plays_mcp.plays.parser import PlayParseError, parse_play

__all__ = [
    "parse_play",
    "PlayParseError",
    "PlayFormatter",
    "Play",
    "Act",
    "Scene",
    "Speech",
]
