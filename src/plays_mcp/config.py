"""Runtime configuration for the plays MCP server."""

from dataclasses import dataclass
from pathlib import Path
import os
import sys

# Bundled resources: the catalog table and the default plays directory
_RESOURCES_DIR = Path(__file__).parent / "resources"

DEFAULT_CATALOG_PATH = _RESOURCES_DIR / "titleTable.csv"
DEFAULT_PLAYS_DIR = _RESOURCES_DIR / "plays"
DEFAULT_ARTIFACT_DIR = Path.home() / ".plays-mcp" / "parse"

# Suffix stripped from the catalog's file column to form a key
SOURCE_SUFFIX = ".xml"

# Extension of persisted parse artifacts
ARTIFACT_SUFFIX = ".json"


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_path(name: str, default: Path) -> Path:
    value = os.getenv(name)
    if not value:
        return default
    return Path(value).expanduser()


def _stdin_is_interactive() -> bool:
    try:
        return sys.stdin is not None and sys.stdin.isatty()
    except ValueError:
        # stdin already closed
        return False


@dataclass(frozen=True)
class LibraryConfig:
    catalog_path: Path
    plays_dir: Path
    artifact_dir: Path
    persist: bool
    interactive: bool


def get_library_config() -> LibraryConfig:
    """Load library config from environment variables."""
    return LibraryConfig(
        catalog_path=_env_path("PLAYS_MCP_CATALOG", DEFAULT_CATALOG_PATH),
        plays_dir=_env_path("PLAYS_MCP_PLAYS_DIR", DEFAULT_PLAYS_DIR),
        artifact_dir=_env_path("PLAYS_MCP_ARTIFACT_DIR", DEFAULT_ARTIFACT_DIR),
        persist=_env_bool("PLAYS_MCP_PERSIST", True),
        interactive=_env_bool("PLAYS_MCP_INTERACTIVE", _stdin_is_interactive()),
    )
