"""Catalog of known plays.

The catalog is read once from a two-column CSV table (source file name,
title). Keys are the file names without their ``.xml`` suffix. The only
mutation allowed afterwards is appending synthetic entries for external
sources that match nothing in the table.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from plays_mcp.config import SOURCE_SUFFIX
from plays_mcp.library.errors import CatalogConfigurationError

logger = logging.getLogger("plays-mcp.catalog")

SYNTHETIC_KEY_PREFIX = "Play."


@dataclass(frozen=True)
class CatalogEntry:
    key: str
    title: str
    # Raw external path for synthetic entries, None for bundled ones
    source: str | None = None

    @property
    def is_synthetic(self) -> bool:
        return self.source is not None


class Catalog:
    """Ordered, append-only sequence of catalog entries.

    Index position is insertion order; it decides the order of candidates
    reported for ambiguous lookups and the sequence number of synthetic keys.
    """

    def __init__(self, entries: list[CatalogEntry] | None = None):
        self._entries: list[CatalogEntry] = []
        self._by_key: dict[str, CatalogEntry] = {}
        for entry in entries or []:
            self._add(entry)

    def _add(self, entry: CatalogEntry) -> None:
        if entry.key in self._by_key:
            raise CatalogConfigurationError(f"Duplicate catalog key: {entry.key}")
        self._entries.append(entry)
        self._by_key[entry.key] = entry

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[CatalogEntry]:
        return iter(list(self._entries))

    def __contains__(self, key: object) -> bool:
        return key in self._by_key

    def get(self, key: str) -> CatalogEntry | None:
        return self._by_key.get(key)

    def entries(self) -> list[CatalogEntry]:
        return list(self._entries)

    def keys(self) -> list[str]:
        return [entry.key for entry in self._entries]

    def titles(self) -> list[str]:
        return [entry.title for entry in self._entries]

    def append_external(self, source: str) -> CatalogEntry:
        """Append a synthetic entry for a raw external source.

        The key is ``Play.N`` with N one past the current catalog size and the
        title is the raw source string itself, so a repeated lookup with the
        same string matches this entry by title.
        """
        entry = CatalogEntry(
            key=f"{SYNTHETIC_KEY_PREFIX}{len(self._entries) + 1}",
            title=source,
            source=source,
        )
        self._add(entry)
        logger.info("Appended external play %s (%s)", entry.key, source)
        return entry


def key_from_filename(filename: str) -> str:
    """Strip the source suffix from a catalog file name."""
    name = filename.strip()
    if name.endswith(SOURCE_SUFFIX):
        return name[: -len(SOURCE_SUFFIX)]
    return name


def load_catalog(table_path: Path) -> Catalog:
    """Load the catalog table.

    Args:
        table_path: CSV file without header, one ``file,title`` row per play

    Returns:
        Catalog in table order

    Raises:
        CatalogConfigurationError: If the table is missing, malformed, or
            repeats a key
    """
    if not table_path.is_file():
        raise CatalogConfigurationError(f"Catalog table not found: {table_path}")

    entries: list[CatalogEntry] = []
    with open(table_path, encoding="utf-8", newline="") as f:
        for line_no, row in enumerate(csv.reader(f), start=1):
            if not row or not any(cell.strip() for cell in row):
                continue
            if len(row) < 2:
                raise CatalogConfigurationError(
                    f"Catalog table {table_path} line {line_no}: expected 2 columns, got {len(row)}"
                )
            entries.append(CatalogEntry(key=key_from_filename(row[0]), title=row[1].strip()))

    catalog = Catalog(entries)
    logger.debug("Loaded %d catalog entries from %s", len(catalog), table_path)
    return catalog
