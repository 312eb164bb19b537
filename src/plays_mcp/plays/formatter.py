"""Formatting of parsed plays for tool output.

Produces JSON-friendly entry lists at three levels:
- Play outline: one entry per act with its scene titles
- Act: one entry per scene with speech and line counts
- Scene: one entry per speech, plus the scene as plain text
"""

from typing import Any

from plays_mcp.plays.models import Act, Play, Scene


class PlayFormatter:
    """Render Play models as entry dicts and plain text."""

    @staticmethod
    def outline_entries(play: Play) -> list[dict[str, Any]]:
        return [
            {
                "act": number,
                "title": act.title,
                "scenes": [scene.title for scene in act.scenes],
            }
            for number, act in enumerate(play.acts, start=1)
        ]

    @staticmethod
    def act_entries(act: Act) -> list[dict[str, Any]]:
        return [
            {
                "scene": number,
                "title": scene.title,
                "speeches": len(scene.speeches),
                "lines": scene.line_count,
            }
            for number, scene in enumerate(act.scenes, start=1)
        ]

    @staticmethod
    def scene_entries(scene: Scene) -> list[dict[str, Any]]:
        return [
            {"speakers": speech.speakers, "lines": speech.lines}
            for speech in scene.speeches
        ]

    @staticmethod
    def format_scene(scene: Scene) -> str:
        """Format a scene as a readable script.

        Args:
            scene: Scene to render

        Returns:
            Title, opening stage directions, then each speech as
            ``SPEAKER`` followed by indented lines
        """
        parts = [scene.title, ""]
        for direction in scene.stage_directions[:1]:
            parts.append(f"[{direction}]")
            parts.append("")
        for speech in scene.speeches:
            parts.append(" / ".join(speech.speakers) or "?")
            parts.extend(f"    {line}" for line in speech.lines)
            parts.append("")
        return "\n".join(parts).rstrip()
