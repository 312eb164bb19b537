"""Lookup errors raised by the play library.

Only these errors reach callers. Artifact storage failures are never raised;
they are reported through ``PersistOutcome`` instead.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence


class PlayLookupError(Exception):
    """Base class for play lookup failures."""


class AmbiguousMatchError(PlayLookupError):
    """Several titles matched and no choice was made.

    Recoverable: retry with a more specific name.
    """

    def __init__(self, query: str, candidates: Sequence[str]):
        self.query = query
        self.candidates = list(candidates)
        listing = "\n".join(f"    {title}" for title in self.candidates)
        super().__init__(
            "Several titles matched--you need to disambiguate the name:\n" + listing
        )


class PlayNotFoundError(PlayLookupError):
    """No key or title matched and materialization was not requested."""

    def __init__(self, query: str):
        self.query = query
        super().__init__(f'No play title or key matches: "{query}"')


class CatalogConfigurationError(PlayLookupError):
    """The catalog and the data on disk disagree. Fatal, never retried."""


class SourceNotFoundError(CatalogConfigurationError):
    """A resolved key has no source document on disk."""

    def __init__(self, key: str, path: Path | str):
        self.key = key
        self.path = Path(path)
        super().__init__(f"Source document for play '{key}' not found: {self.path}")
