"""Play library: resolve a name, then materialize the play through the caches.

Lookup pipeline:
    name -> Resolver -> key
    key  -> in-memory cache -> artifact on disk -> parse source
         -> write back to artifact (best effort) and cache

The in-memory cache is append-only: once a key is loaded it is never
recomputed for the life of the library. Artifacts are written at most once
per key and never rewritten.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Callable

from plays_mcp.config import SOURCE_SUFFIX, LibraryConfig
from plays_mcp.library.catalog import Catalog, CatalogEntry, load_catalog
from plays_mcp.library.codec import Codec, ModelJsonCodec
from plays_mcp.library.errors import PlayNotFoundError, SourceNotFoundError
from plays_mcp.library.persistence import ArtifactStore, PersistOutcome
from plays_mcp.library.resolver import Chooser, Resolver
from plays_mcp.plays import Play, parse_play

logger = logging.getLogger("plays-mcp.library")

Parser = Callable[[Path], Any]


class LoadSource(str, Enum):
    MEMORY = "memory"
    ARTIFACT = "artifact"
    PARSED = "parsed"


@dataclass(frozen=True)
class LoadReport:
    """How a play entered the in-memory cache."""

    key: str
    source: LoadSource
    # None when the play came from an artifact and nothing was written
    persisted: PersistOutcome | None = None


class PlayLibrary:
    """Catalog, caches, and collaborators for play lookups.

    Construct with ``PlayLibrary.open(config)``. Thread-safe: catalog appends
    and cache inserts share one lock, and a per-key lock makes each key parse
    at most once.
    """

    def __init__(
        self,
        config: LibraryConfig,
        catalog: Catalog,
        *,
        parser: Parser | None = None,
        codec: Codec | None = None,
        chooser: Chooser | None = None,
        store: ArtifactStore | None = None,
    ):
        self.config = config
        self.catalog = catalog
        self.parser = parser or parse_play
        self.codec = codec or ModelJsonCodec(Play)
        self.resolver = Resolver(catalog, chooser)
        self.store = store or ArtifactStore(config.artifact_dir)

        self._cache: dict[str, Any] = {}
        self._reports: dict[str, LoadReport] = {}
        self._lock = threading.RLock()
        self._key_locks: dict[str, threading.Lock] = {}

    @classmethod
    def open(
        cls,
        config: LibraryConfig,
        *,
        parser: Parser | None = None,
        codec: Codec | None = None,
        chooser: Chooser | None = None,
    ) -> "PlayLibrary":
        """Load the catalog and prepare the artifact directory.

        Raises:
            CatalogConfigurationError: If the catalog table is missing or invalid
        """
        catalog = load_catalog(config.catalog_path)
        library = cls(config, catalog, parser=parser, codec=codec, chooser=chooser)
        if config.persist and not library.store.ensure_base_dir():
            logger.info("Artifact directory %s unavailable; parsing every session", config.artifact_dir)
        logger.info(
            "Play library opened: %d plays, sources=%s, artifacts=%s",
            len(catalog),
            config.plays_dir,
            config.artifact_dir if config.persist else "disabled",
        )
        return library

    def close(self) -> None:
        with self._lock:
            self._cache.clear()
            self._reports.clear()
            self._key_locks.clear()

    def __enter__(self) -> "PlayLibrary":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Catalog queries
    # ------------------------------------------------------------------

    def titles(self) -> list[CatalogEntry]:
        """Catalog entries in insertion order (title and key pairs)."""
        return self.catalog.entries()

    def resolve(self, query: str, ask: bool | None = None, materialize: bool = True) -> str:
        """Resolve a name to a key without loading the play.

        Args:
            query: Key, title fragment, or path to an external play file
            ask: Offer a choice when several titles match; None uses the
                configured interactivity
            materialize: Register unmatched names as external sources

        Raises:
            AmbiguousMatchError: Several titles matched and none was chosen
            PlayNotFoundError: Nothing matched and ``materialize`` is false
        """
        allow_prompt = self.config.interactive if ask is None else ask
        try:
            return self.resolver.resolve(query, allow_prompt=allow_prompt)
        except PlayNotFoundError:
            if not materialize:
                raise

        # Re-run under the lock so concurrent lookups of one external
        # source append a single entry.
        with self._lock:
            return self.resolver.resolve(query, allow_prompt=allow_prompt, materialize=True)

    def find(
        self,
        query: str,
        ask: bool | None = None,
        materialize: bool = True,
        get: bool = True,
    ) -> str:
        """Resolve a name to a key, loading the play when ``get`` is true."""
        key = self.resolve(query, ask=ask, materialize=materialize)
        if get:
            self.load(key)
        return key

    def get(self, query: str, ask: bool | None = None) -> Any:
        """Resolve a name and return the loaded play."""
        return self.load(self.resolve(query, ask=ask))

    # ------------------------------------------------------------------
    # Materialization
    # ------------------------------------------------------------------

    def is_cached(self, key: str) -> bool:
        return key in self._cache

    def report(self, key: str) -> LoadReport | None:
        return self._reports.get(key)

    def source_path(self, entry: CatalogEntry) -> Path:
        if entry.source is not None:
            return Path(entry.source).expanduser()
        return self.config.plays_dir / f"{entry.key}{SOURCE_SUFFIX}"

    def load(self, key: str) -> Any:
        """Return the play for ``key``, parsing it at most once.

        See ``load_with_source`` for the error contract.
        """
        return self.load_with_source(key)[0]

    def load_with_source(self, key: str) -> tuple[Any, LoadSource]:
        """Return the play for ``key`` and the tier it came from.

        Raises:
            PlayNotFoundError: If ``key`` is not in the catalog
            SourceNotFoundError: If the play's source file does not exist
        """
        if key in self._cache:
            logger.debug("Cache hit for %s", key)
            return self._cache[key], LoadSource.MEMORY

        entry = self.catalog.get(key)
        if entry is None:
            raise PlayNotFoundError(key)

        with self._key_lock(key):
            if key in self._cache:
                return self._cache[key], LoadSource.MEMORY

            document, report = self._materialize(entry)
            with self._lock:
                self._cache[key] = document
                self._reports[key] = report
        return document, report.source

    def _key_lock(self, key: str) -> threading.Lock:
        with self._lock:
            lock = self._key_locks.get(key)
            if lock is None:
                lock = self._key_locks[key] = threading.Lock()
            return lock

    def _materialize(self, entry: CatalogEntry) -> tuple[Any, LoadReport]:
        key = entry.key
        persist = self.config.persist and not entry.is_synthetic

        if persist:
            document = self.store.read(key, self.codec)
            if document is not None:
                logger.debug("Loaded %s from artifact", key)
                return document, LoadReport(key, LoadSource.ARTIFACT)

        path = self.source_path(entry)
        if not path.is_file():
            raise SourceNotFoundError(key, path)

        logger.info("Parsing %s from %s", key, path)
        document = self.parser(path)

        if persist:
            outcome = self.store.write(key, document, self.codec)
        else:
            outcome = PersistOutcome.SKIPPED_DISABLED
        return document, LoadReport(key, LoadSource.PARSED, outcome)
