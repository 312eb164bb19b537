"""XML parser for plays in Jon Bosak's markup.

Expected layout::

    PLAY
      TITLE
      PERSONAE  (PERSONA | PGROUP/PERSONA)*
      ACT*
        TITLE
        (SCENE | PROLOGUE | EPILOGUE)*
          TITLE
          (STAGEDIR | SPEECH)*
            SPEECH: SPEAKER+ (LINE | STAGEDIR)*
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path

from plays_mcp.plays.models import Act, Play, Scene, Speech

logger = logging.getLogger("plays-mcp.parser")

_SCENE_TAGS = {"SCENE", "PROLOGUE", "EPILOGUE"}


class PlayParseError(Exception):
    """The source file is not a well-formed play."""


def _text(element: ET.Element | None) -> str:
    if element is None:
        return ""
    return " ".join("".join(element.itertext()).split())


def _parse_speech(element: ET.Element) -> Speech:
    speakers = [_text(speaker) for speaker in element.findall("SPEAKER")]
    lines = [_text(line) for line in element.findall("LINE")]
    return Speech(speakers=[s for s in speakers if s], lines=lines)


def _parse_scene(element: ET.Element) -> Scene:
    scene = Scene(title=_text(element.find("TITLE")) or element.tag.title())
    for child in element:
        if child.tag == "SPEECH":
            scene.speeches.append(_parse_speech(child))
        elif child.tag == "STAGEDIR":
            scene.stage_directions.append(_text(child))
    return scene


def _parse_act(element: ET.Element) -> Act:
    return Act(
        title=_text(element.find("TITLE")),
        scenes=[_parse_scene(child) for child in element if child.tag in _SCENE_TAGS],
    )


def parse_play(path: str | Path) -> Play:
    """Parse a play XML file.

    Args:
        path: Path to the XML source

    Returns:
        Parsed Play

    Raises:
        PlayParseError: If the file is not well-formed or has no PLAY root
        OSError: If the file cannot be read
    """
    path = Path(path)
    try:
        root = ET.parse(path).getroot()
    except ET.ParseError as exc:
        raise PlayParseError(f"Malformed play XML {path}: {exc}") from exc

    if root.tag != "PLAY":
        raise PlayParseError(f"Expected PLAY root element in {path}, found {root.tag}")

    personae: list[str] = []
    cast = root.find("PERSONAE")
    if cast is not None:
        personae = [_text(persona) for persona in cast.iter("PERSONA")]

    play = Play(
        title=_text(root.find("TITLE")),
        personae=personae,
        acts=[_parse_act(act) for act in root.findall("ACT")],
    )
    logger.debug("Parsed %s: %d acts", path, len(play.acts))
    return play
