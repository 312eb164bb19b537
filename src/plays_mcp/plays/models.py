"""Data models for parsed plays."""

from pydantic import BaseModel, Field


class Speech(BaseModel):
    """One speech: who speaks and the verse or prose lines."""

    speakers: list[str] = Field(default_factory=list)
    lines: list[str] = Field(default_factory=list)


class Scene(BaseModel):
    """A scene, prologue, or epilogue within an act."""

    title: str
    stage_directions: list[str] = Field(default_factory=list)
    speeches: list[Speech] = Field(default_factory=list)

    @property
    def line_count(self) -> int:
        return sum(len(speech.lines) for speech in self.speeches)


class Act(BaseModel):
    title: str
    scenes: list[Scene] = Field(default_factory=list)


class Play(BaseModel):
    """A parsed play."""

    title: str
    personae: list[str] = Field(default_factory=list)
    acts: list[Act] = Field(default_factory=list)

    @property
    def speakers(self) -> list[str]:
        """Distinct speaker names in order of first appearance."""
        seen: dict[str, None] = {}
        for act in self.acts:
            for scene in act.scenes:
                for speech in scene.speeches:
                    for speaker in speech.speakers:
                        seen.setdefault(speaker, None)
        return list(seen)
