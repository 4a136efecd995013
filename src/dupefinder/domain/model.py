"""Snapshot entities shared by the matching, tagging and scan stages.

Everything here is built fresh from adapter snapshots at the start of a scan and
discarded at its end; only the tag write-back outlives a scan.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .errors import StoreError

type EntryId = int


class Source(StrEnum):
    LIBRARY = "library"
    WISHLIST = "wishlist"


class MatchKind(StrEnum):
    EXACT = "exact"
    FUZZY = "fuzzy"


@dataclass(frozen=True, slots=True, kw_only=True)
class LocalEntry:
    """A game in the local vault."""

    id: EntryId
    title: str | None = None
    tags: tuple[str, ...] = ()
    external_refs: tuple[str, ...] = ()

    def has_tag(self, name: str) -> bool:
        return name in self.tags


@dataclass(frozen=True, slots=True, kw_only=True)
class ReferenceEntry:
    """A game in one of the external reference catalogs."""

    external_id: str
    name: str | None = None
    source: Source = Source.LIBRARY


@dataclass(frozen=True, slots=True, kw_only=True)
class MatchResult:
    entry: LocalEntry
    source: Source
    kind: MatchKind
    matched_external_id: str | None = None
    matched_name: str | None = None


@dataclass(slots=True)
class ResultSet:
    """Matches of one scan keyed by vault entry id, at most one per source.

    The first result recorded for an (entry, source) pair wins; later ones are
    ignored. Iteration follows insertion order.
    """

    _matches: dict[EntryId, dict[Source, MatchResult]] = field(
        default_factory=dict["EntryId", dict[Source, MatchResult]]
    )

    def add(self, result: MatchResult) -> bool:
        """Record ``result``; return ``False`` if the pair was already matched."""
        by_source = self._matches.setdefault(result.entry.id, {})
        if result.source in by_source:
            return False
        by_source[result.source] = result
        return True

    def get(self, entry_id: EntryId, source: Source) -> MatchResult | None:
        return self._matches.get(entry_id, {}).get(source)

    def for_source(self, source: Source) -> list[MatchResult]:
        return [by_source[source] for by_source in self._matches.values() if source in by_source]

    def count(self, source: Source) -> int:
        return sum(1 for by_source in self._matches.values() if source in by_source)

    def entries(self) -> list[LocalEntry]:
        """Distinct matched entries in first-seen order."""
        return [next(iter(by_source.values())).entry for by_source in self._matches.values()]

    def __contains__(self, entry_id: object) -> bool:
        return entry_id in self._matches

    def __iter__(self) -> Iterator[MatchResult]:
        for by_source in self._matches.values():
            yield from by_source.values()

    def __len__(self) -> int:
        return sum(len(by_source) for by_source in self._matches.values())


@dataclass(frozen=True, slots=True, kw_only=True)
class TagWrite:
    """Request to replace an entry's tags with ``tags``."""

    entry_id: EntryId
    tags: tuple[str, ...]
    title: str | None = None


@dataclass(frozen=True, slots=True)
class TagWriteFailure:
    write: TagWrite
    error: StoreError


@dataclass(slots=True)
class TagWriteReport:
    applied: list[TagWrite] = field(default_factory=list["TagWrite"])
    failures: list[TagWriteFailure] = field(default_factory=list["TagWriteFailure"])
