"""Shared fixtures: a small catalog with XML plays in a temporary directory."""

import csv
from pathlib import Path

import pytest

from plays_mcp.config import LibraryConfig
from plays_mcp.library import PlayLibrary
from plays_mcp.plays import parse_play

CATALOG_ROWS = [
    ("hamlet.xml", "The Tragedy of Hamlet, Prince of Denmark"),
    ("hen_iv_1.xml", "The First Part of Henry the Fourth"),
    ("hen_v.xml", "The Life of Henry the Fifth"),
    ("lear.xml", "The Tragedy of King Lear"),
    ("tempest.xml", "The Tempest"),
    ("storm.xml", "A tempest in a teapot"),
]

TITLES = {name[: -len(".xml")]: title for name, title in CATALOG_ROWS}

# Plays with a source file on disk; the rest of the catalog has none
PLAYS_ON_DISK = ["hamlet", "hen_iv_1", "hen_v", "tempest"]


def play_xml(title: str) -> str:
    return f"""<?xml version="1.0"?>
<PLAY>
<TITLE>{title}</TITLE>
<PERSONAE>
<TITLE>Dramatis Personae</TITLE>
<PERSONA>BERNARDO, an officer.</PERSONA>
<PGROUP>
<PERSONA>ROSENCRANTZ</PERSONA>
<PERSONA>GUILDENSTERN</PERSONA>
<GRPDESCR>courtiers.</GRPDESCR>
</PGROUP>
</PERSONAE>
<ACT><TITLE>ACT I</TITLE>
<SCENE><TITLE>SCENE I.  Elsinore. A platform before the castle.</TITLE>
<STAGEDIR>FRANCISCO at his post. Enter to him BERNARDO</STAGEDIR>
<SPEECH>
<SPEAKER>BERNARDO</SPEAKER>
<LINE>Who's there?</LINE>
</SPEECH>
<SPEECH>
<SPEAKER>FRANCISCO</SPEAKER>
<LINE>Nay, answer me: stand, and unfold yourself.</LINE>
</SPEECH>
</SCENE>
<SCENE><TITLE>SCENE II.  A room of state in the castle.</TITLE>
<SPEECH>
<SPEAKER>ROSENCRANTZ</SPEAKER>
<SPEAKER>GUILDENSTERN</SPEAKER>
<LINE>We both obey,</LINE>
<LINE>And here give up ourselves.</LINE>
</SPEECH>
</SCENE>
</ACT>
<ACT><TITLE>ACT II</TITLE>
<PROLOGUE><TITLE>PROLOGUE</TITLE>
<SPEECH>
<SPEAKER>Chorus</SPEAKER>
<LINE>Now entertain conjecture of a time</LINE>
</SPEECH>
</PROLOGUE>
<SCENE><TITLE>SCENE I.  A room in POLONIUS' house.</TITLE>
<SPEECH>
<SPEAKER>LORD POLONIUS</SPEAKER>
<LINE>Give him this money and these notes, Reynaldo.</LINE>
</SPEECH>
</SCENE>
</ACT>
</PLAY>
"""


class CountingParser:
    """Parser stub that records every call and delegates to the real parser."""

    def __init__(self, fail: bool = False):
        self.calls: list[Path] = []
        self.fail = fail

    def __call__(self, path: Path):
        self.calls.append(Path(path))
        if self.fail:
            raise AssertionError(f"parser should not be called for {path}")
        return parse_play(path)


class FixedChooser:
    """Chooser stub that always picks the same index and records candidates."""

    def __init__(self, pick: int | None):
        self.pick = pick
        self.seen: list[list[str]] = []

    def choose_one(self, candidates):
        self.seen.append(list(candidates))
        return self.pick


@pytest.fixture
def plays_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "plays"
    directory.mkdir()
    for key in PLAYS_ON_DISK:
        (directory / f"{key}.xml").write_text(play_xml(TITLES[key]), encoding="utf-8")
    return directory


@pytest.fixture
def catalog_path(tmp_path: Path) -> Path:
    path = tmp_path / "titleTable.csv"
    with open(path, "w", encoding="utf-8", newline="") as f:
        csv.writer(f).writerows(CATALOG_ROWS)
    return path


@pytest.fixture
def config(tmp_path: Path, plays_dir: Path, catalog_path: Path) -> LibraryConfig:
    return LibraryConfig(
        catalog_path=catalog_path,
        plays_dir=plays_dir,
        artifact_dir=tmp_path / "artifacts" / "parse",
        persist=True,
        interactive=False,
    )


@pytest.fixture
def parser() -> CountingParser:
    return CountingParser()


@pytest.fixture
def library(config: LibraryConfig, parser: CountingParser) -> PlayLibrary:
    with PlayLibrary.open(config, parser=parser) as lib:
        yield lib
