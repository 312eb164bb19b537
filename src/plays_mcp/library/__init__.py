"""Play lookup core: catalog, name resolution, and two-tier caching.

Components:
    - PlayLibrary: Context object owning the catalog and caches
    - Resolver: Key / title-fragment resolution with disambiguation
    - ArtifactStore: On-disk parse artifacts surviving across sessions

Choosers:
    - DeclineChooser: Headless default, never picks
    - ConsoleChooser: Numbered menu on stdin/stdout
"""

from plays_mcp.library.catalog import Catalog, CatalogEntry, load_catalog
from plays_mcp.library.codec import Codec, ModelJsonCodec
from plays_mcp.library.errors import (
    AmbiguousMatchError,
    CatalogConfigurationError,
    PlayLookupError,
    PlayNotFoundError,
    SourceNotFoundError,
)
from plays_mcp.library.loader import LoadReport, LoadSource, PlayLibrary
from plays_mcp.library.persistence import ArtifactStore, PersistOutcome, ProbeMode
from plays_mcp.library.resolver import Chooser, ConsoleChooser, DeclineChooser, Resolver

__all__ = [
    # Core components
    "PlayLibrary",
    "Resolver",
    "ArtifactStore",
    "Catalog",
    "load_catalog",
    # Collaborator protocols
    "Chooser",
    "ConsoleChooser",
    "DeclineChooser",
    "Codec",
    "ModelJsonCodec",
    # Data models
    "CatalogEntry",
    "LoadReport",
    "LoadSource",
    "PersistOutcome",
    "ProbeMode",
    # Errors
    "PlayLookupError",
    "AmbiguousMatchError",
    "PlayNotFoundError",
    "CatalogConfigurationError",
    "SourceNotFoundError",
]
