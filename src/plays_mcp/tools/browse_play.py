"""Play Browse Tool - Navigate a play by act and scene."""

from typing import Any

from fastmcp import FastMCP

from plays_mcp.contracts import build_error, build_ok, build_plays_data
from plays_mcp.formatting import build_lookup_error, build_parse_error
from plays_mcp.library import PlayLibrary, PlayLookupError
from plays_mcp.plays import Play, PlayFormatter, PlayParseError
from plays_mcp.utils import ActNumber, PlayName, SceneNumber, normalize_input


def register(mcp: FastMCP, library: PlayLibrary) -> None:
    """Register plays_browse tool with the MCP server."""

    @mcp.tool()
    def plays_browse(
        name: PlayName,
        act: ActNumber = None,
        scene: SceneNumber = None,
    ) -> dict[str, Any]:
        """Browse a play's text.

        Navigation levels:
        - name only: Outline (acts and their scene titles, personae)
        - name + act: Scenes of the act with speech and line counts
        - name + act + scene: Full scene (speeches and lines)

        The first request for a play parses it; later requests are served
        from memory or from the parse artifact saved by an earlier session.
        """
        query = normalize_input(name)
        if scene is not None and act is None:
            return build_error(
                "invalid_arguments",
                "scene requires act",
                {"source": "play", "input": {"name": query, "scene": scene}},
            )

        try:
            key = library.resolve(query, ask=False, materialize=False)
            play, loaded_from = library.load_with_source(key)
        except PlayLookupError as exc:
            return build_lookup_error(exc, source="play", name=query)
        except (PlayParseError, OSError) as exc:
            return build_parse_error(exc, key=key, name=query)

        summary: dict[str, Any] = {
            "key": key,
            "title": play.title,
            "loaded_from": loaded_from.value,
        }

        if act is None:
            return build_ok(_browse_outline(play, summary))
        return _wrap_payload(_browse_act(play, act, scene, summary, query))


def _browse_outline(play: Play, summary: dict[str, Any]) -> dict[str, Any]:
    entries = PlayFormatter.outline_entries(play)
    return build_plays_data(
        source="play",
        action="browse",
        entries=entries,
        summary={
            **summary,
            "count": len(entries),
            "personae": play.personae,
            "speakers": play.speakers,
        },
    )


def _browse_act(
    play: Play,
    act: int,
    scene: int | None,
    summary: dict[str, Any],
    query: str,
) -> dict[str, Any]:
    if act > len(play.acts):
        return {
            "error": {
                "code": "act_not_found",
                "message": f"Act {act} not found; the play has {len(play.acts)} acts.",
            },
            "source": "play",
            "input": {"name": query, "act": act},
        }

    act_doc = play.acts[act - 1]
    if scene is None:
        entries = PlayFormatter.act_entries(act_doc)
        return build_plays_data(
            source="play",
            action="browse",
            entries=entries,
            summary={**summary, "count": len(entries), "act": act, "act_title": act_doc.title},
        )

    if scene > len(act_doc.scenes):
        return {
            "error": {
                "code": "scene_not_found",
                "message": f"Scene {scene} not found; act {act} has {len(act_doc.scenes)} scenes.",
            },
            "source": "play",
            "input": {"name": query, "act": act, "scene": scene},
        }

    scene_doc = act_doc.scenes[scene - 1]
    entries = PlayFormatter.scene_entries(scene_doc)
    return build_plays_data(
        source="play",
        action="browse",
        entries=entries,
        summary={
            **summary,
            "count": len(entries),
            "act": act,
            "scene": scene,
            "scene_title": scene_doc.title,
            "text": PlayFormatter.format_scene(scene_doc),
        },
    )


def _wrap_payload(payload: dict[str, Any]) -> dict[str, Any]:
    if "error" in payload:
        err = payload.get("error") or {}
        details = {k: v for k, v in payload.items() if k != "error"}
        return build_error(
            code=str(err.get("code") or "browse_error"),
            message=str(err.get("message") or "Browse failed"),
            details=details or None,
        )
    return build_ok(payload)
