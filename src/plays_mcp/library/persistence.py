"""On-disk artifact tier for parsed plays.

One artifact file per key, ``<base_dir>/<key><suffix>``. Artifacts are
written at most once and never rewritten. Every storage failure degrades to
"tier unavailable": nothing in this module raises on I/O errors.
"""

from __future__ import annotations

import logging
import os
from enum import Enum
from pathlib import Path
from typing import Any

from plays_mcp.config import ARTIFACT_SUFFIX
from plays_mcp.library.codec import Codec

logger = logging.getLogger("plays-mcp.persistence")


class ProbeMode(str, Enum):
    READ = "read"
    WRITE = "write"


class PersistOutcome(str, Enum):
    """Why an artifact was or was not written."""

    WRITTEN = "written"
    SKIPPED_EXISTS = "skipped_exists"
    SKIPPED_UNWRITABLE = "skipped_unwritable"
    SKIPPED_DISABLED = "skipped_disabled"
    FAILED = "failed"


class ArtifactStore:
    """Maps catalog keys to optional artifact files."""

    def __init__(self, base_dir: Path, suffix: str = ARTIFACT_SUFFIX):
        self.base_dir = Path(base_dir)
        self.suffix = suffix

    def artifact_path(self, key: str) -> Path:
        return self.base_dir / f"{key}{self.suffix}"

    def ensure_base_dir(self) -> bool:
        """Create the base directory if possible. Returns False if unusable."""
        try:
            self.base_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            logger.debug("Artifact directory %s unavailable: %s", self.base_dir, exc)
            return False
        return True

    def probe(self, key: str, mode: ProbeMode) -> Path | None:
        """Check whether the artifact for ``key`` can be used.

        Read mode returns the path only if the file exists and is readable.
        Write mode opens the path for writing and closes it again, which
        creates or truncates the file as a side effect. Returns None when the
        location cannot be used.
        """
        path = self.artifact_path(key)
        if mode is ProbeMode.READ:
            if path.is_file() and os.access(path, os.R_OK):
                return path
            return None

        try:
            with open(path, "wb"):
                pass
        except OSError as exc:
            logger.debug("Artifact %s not writable: %s", path, exc)
            return None
        return path

    def read(self, key: str, codec: Codec) -> Any | None:
        """Deserialize the artifact for ``key``, or None if there is none."""
        path = self.probe(key, ProbeMode.READ)
        if path is None:
            return None
        try:
            document = codec.deserialize(path)
        except (OSError, ValueError) as exc:
            logger.debug("Artifact %s unreadable: %s", path, exc)
            return None
        logger.debug("Loaded artifact %s", path)
        return document

    def write(self, key: str, document: Any, codec: Codec) -> PersistOutcome:
        """Write the artifact for ``key`` unless one already exists."""
        if self._has_artifact(key):
            return PersistOutcome.SKIPPED_EXISTS

        path = self.probe(key, ProbeMode.WRITE)
        if path is None:
            return PersistOutcome.SKIPPED_UNWRITABLE

        try:
            codec.serialize(document, path)
        except Exception as exc:
            logger.warning("Failed to write artifact %s: %s", path, exc)
            self._discard(path)
            return PersistOutcome.FAILED

        logger.info("Saved artifact %s", path)
        return PersistOutcome.WRITTEN

    def _has_artifact(self, key: str) -> bool:
        path = self.artifact_path(key)
        if not path.exists():
            return False
        if not path.is_file():
            return True
        # An empty file is a write probe whose serialize never ran
        try:
            return path.stat().st_size > 0
        except OSError:
            return True

    def _discard(self, path: Path) -> None:
        try:
            path.unlink()
        except OSError as exc:
            logger.debug("Could not remove partial artifact %s: %s", path, exc)
