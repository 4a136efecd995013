"""Two-tier matching of vault entries against reference catalogs.

For every vault entry and catalog:

1. entries already carrying the duplicate tag are skipped;
2. a Steam app id found in the entry's references that is present in the catalog
   is an exact match, and no fuzzy scan happens;
3. otherwise the first catalog entry (in catalog order) whose name scores above the
   threshold against the entry title is a fuzzy match.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .identifiers import extract_external_id
from .model import MatchKind, MatchResult, ResultSet, Source
from .similarity import SIMILARITY_THRESHOLD, is_similar, similarity

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from .model import LocalEntry, ReferenceEntry
    from .similarity import Scorer


@dataclass(frozen=True, slots=True)
class ReferenceCatalog:
    """Immutable snapshot of one reference source with an id index."""

    source: Source
    entries: tuple[ReferenceEntry, ...]
    _by_id: dict[str, ReferenceEntry] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        by_id: dict[str, ReferenceEntry] = {}
        for entry in self.entries:
            by_id.setdefault(entry.external_id, entry)
        object.__setattr__(self, "_by_id", by_id)

    @classmethod
    def of(cls, source: Source, entries: Iterable[ReferenceEntry]) -> ReferenceCatalog:
        return cls(source=source, entries=tuple(entries))

    def get(self, external_id: str) -> ReferenceEntry | None:
        return self._by_id.get(external_id)

    def __iter__(self) -> Iterator[ReferenceEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


def match_entry(
    entry: LocalEntry,
    catalog: ReferenceCatalog,
    *,
    sentinel_tag: str,
    threshold: float = SIMILARITY_THRESHOLD,
    scorer: Scorer = similarity,
) -> MatchResult | None:
    """Return the match of ``entry`` in ``catalog``, if any."""

    if entry.has_tag(sentinel_tag):
        return None

    external_id = extract_external_id(entry)
    if external_id is not None:
        reference = catalog.get(external_id)
        if reference is not None:
            return MatchResult(
                entry=entry,
                source=catalog.source,
                kind=MatchKind.EXACT,
                matched_external_id=reference.external_id,
                matched_name=reference.name,
            )

    if not entry.title:
        return None

    for reference in catalog:
        if not reference.name:
            continue
        if is_similar(scorer(entry.title, reference.name), threshold):
            return MatchResult(
                entry=entry,
                source=catalog.source,
                kind=MatchKind.FUZZY,
                matched_external_id=reference.external_id,
                matched_name=reference.name,
            )
    return None


def match_catalogs(
    entries: Iterable[LocalEntry],
    library: ReferenceCatalog,
    wishlist: ReferenceCatalog | None = None,
    *,
    sentinel_tag: str,
    threshold: float = SIMILARITY_THRESHOLD,
    scorer: Scorer = similarity,
) -> ResultSet:
    """Match every entry against the library and, when given, the wishlist."""

    catalogs = (library,) if wishlist is None else (library, wishlist)
    results = ResultSet()
    for entry in entries:
        for catalog in catalogs:
            result = match_entry(
                entry,
                catalog,
                sentinel_tag=sentinel_tag,
                threshold=threshold,
                scorer=scorer,
            )
            if result is not None:
                results.add(result)
    return results
