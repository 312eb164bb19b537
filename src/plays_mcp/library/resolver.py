"""Name resolution: turn a user-supplied name into a catalog key.

Resolution order:
1. Exact key match (always wins)
2. Literal substring match against titles
3. Case-insensitive substring match, only if step 2 found nothing
4. Several hits: optional one-of-N choice through a pluggable chooser
5. No hits: append a synthetic entry when materializing, else not found

Matching is plain substring containment. There is no regex, token, or
edit-distance matching.
"""

from __future__ import annotations

import logging
from typing import Callable, Protocol, Sequence

from plays_mcp.library.catalog import Catalog, CatalogEntry
from plays_mcp.library.errors import AmbiguousMatchError, PlayNotFoundError

logger = logging.getLogger("plays-mcp.resolver")


class Chooser(Protocol):
    """Disambiguation strategy for several matching titles."""

    def choose_one(self, candidates: Sequence[str]) -> int | None:
        """Return the zero-based index of the chosen title, or None to decline."""
        ...


class DeclineChooser:
    """Headless chooser that never picks."""

    def choose_one(self, candidates: Sequence[str]) -> int | None:
        return None


class ConsoleChooser:
    """Numbered menu on the console.

    Blocks until a line is read. ``0`` or an empty line declines.
    """

    def __init__(
        self,
        read: Callable[[str], str] | None = None,
        write: Callable[[str], None] | None = None,
    ):
        self._read = read if read is not None else input
        self._write = write if write is not None else print

    def choose_one(self, candidates: Sequence[str]) -> int | None:
        self._write("Matching titles (pick one):")
        for number, title in enumerate(candidates, start=1):
            self._write(f"{number:>3}: {title}")

        while True:
            try:
                answer = self._read("Selection (0 for none): ").strip()
            except EOFError:
                return None
            if not answer:
                return None
            if answer.isdigit():
                pick = int(answer)
                if pick == 0:
                    return None
                if pick <= len(candidates):
                    return pick - 1
            self._write(f"Enter a number between 0 and {len(candidates)}")


class Resolver:
    """Resolves names against a catalog."""

    def __init__(self, catalog: Catalog, chooser: Chooser | None = None):
        self.catalog = catalog
        self.chooser = chooser or DeclineChooser()

    def match_titles(self, query: str) -> list[CatalogEntry]:
        """Return entries whose title contains ``query``.

        The case-insensitive pass runs only when the literal pass is empty,
        so an exact-case hit is never diluted by case-folded ones.
        """
        entries = self.catalog.entries()
        hits = [entry for entry in entries if query in entry.title]
        if hits:
            return hits

        folded = query.casefold()
        return [entry for entry in entries if folded in entry.title.casefold()]

    def resolve(self, query: str, allow_prompt: bool = False, materialize: bool = False) -> str:
        """Resolve ``query`` to exactly one catalog key.

        Args:
            query: Key, title fragment, or raw external source path
            allow_prompt: Ask the chooser when several titles match
            materialize: Append a synthetic entry when nothing matches

        Returns:
            Catalog key

        Raises:
            AmbiguousMatchError: Several titles matched and none was chosen
            PlayNotFoundError: Nothing matched and ``materialize`` is false
        """
        if query in self.catalog:
            return query

        hits = self.match_titles(query)

        if len(hits) > 1 and allow_prompt:
            pick = self.chooser.choose_one([entry.title for entry in hits])
            if pick is not None and 0 <= pick < len(hits):
                hits = [hits[pick]]
            else:
                logger.debug("Disambiguation declined for %r", query)

        if len(hits) > 1:
            raise AmbiguousMatchError(query, [entry.title for entry in hits])

        if hits:
            return hits[0].key

        if materialize:
            return self.catalog.append_external(query).key

        raise PlayNotFoundError(query)
