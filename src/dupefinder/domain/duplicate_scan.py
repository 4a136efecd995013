"""Application service that runs one duplicate scan end to end.

A scan takes fresh snapshots of the vault and the reference catalogs, matches every
vault entry against each catalog, and tags newly found duplicates. It keeps no state
between runs: running it again on unchanged data plans no writes, because entries
tagged by the previous run are skipped.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .events import (
    DuplicateFound,
    ScanFailed,
    ScanFinished,
    ScanStarted,
    SnapshotsFetched,
    TagWriteFailed,
    discard_events,
)
from .matching import ReferenceCatalog, match_catalogs
from .model import ReferenceEntry, ResultSet, Source, TagWrite, TagWriteReport
from .similarity import SIMILARITY_THRESHOLD
from .tagging import apply_tag_writes, plan_tag_writes

if TYPE_CHECKING:
    from .events import EventSink
    from .model import LocalEntry
    from .ports import CatalogFetcher, VaultStore


@dataclass(frozen=True, slots=True, kw_only=True)
class ScanSettings:
    sentinel_tag: str
    similarity_threshold: float = SIMILARITY_THRESHOLD
    include_wishlist: bool = True


@dataclass(slots=True)
class Snapshots:
    entries: list[LocalEntry]
    library: ReferenceCatalog
    wishlist: ReferenceCatalog | None


@dataclass(slots=True)
class DuplicateScanResult:
    """Outcome of a duplicate scan."""

    entries_scanned: int
    owned_count: int
    wishlist_count: int
    result_set: ResultSet
    writes: list[TagWrite] = field(default_factory=list["TagWrite"])
    report: TagWriteReport = field(default_factory=TagWriteReport)

    @property
    def library_duplicates(self) -> int:
        return self.result_set.count(Source.LIBRARY)

    @property
    def wishlist_duplicates(self) -> int:
        return self.result_set.count(Source.WISHLIST)


def scan_for_duplicates(
    *,
    store: VaultStore,
    catalog: CatalogFetcher,
    settings: ScanSettings,
    events: EventSink = discard_events,
) -> DuplicateScanResult:
    """Run one scan and return its summary.

    Failing to read the vault or either catalog raises before anything is written.
    Individual tag write failures are reported in the result instead.
    """

    events(ScanStarted(include_wishlist=settings.include_wishlist))
    try:
        snapshots = take_snapshots(
            store=store, catalog=catalog, include_wishlist=settings.include_wishlist
        )
    except Exception as exc:
        events(ScanFailed(error=exc))
        raise

    events(
        SnapshotsFetched(
            entries=len(snapshots.entries),
            owned=len(snapshots.library),
            wishlisted=len(snapshots.wishlist) if snapshots.wishlist is not None else 0,
        )
    )

    result_set = match_catalogs(
        snapshots.entries,
        snapshots.library,
        snapshots.wishlist,
        sentinel_tag=settings.sentinel_tag,
        threshold=settings.similarity_threshold,
    )
    for match in result_set:
        events(
            DuplicateFound(
                entry_id=match.entry.id,
                title=match.entry.title,
                source=match.source,
                kind=match.kind,
                external_id=match.matched_external_id,
            )
        )

    writes = plan_tag_writes(result_set, sentinel_tag=settings.sentinel_tag)
    report = apply_tag_writes(store, writes)
    for failure in report.failures:
        events(
            TagWriteFailed(
                entry_id=failure.write.entry_id,
                title=failure.write.title,
                message=str(failure.error),
            )
        )

    result = DuplicateScanResult(
        entries_scanned=len(snapshots.entries),
        owned_count=len(snapshots.library),
        wishlist_count=len(snapshots.wishlist) if snapshots.wishlist is not None else 0,
        result_set=result_set,
        writes=writes,
        report=report,
    )
    events(
        ScanFinished(
            library_duplicates=result.library_duplicates,
            wishlist_duplicates=result.wishlist_duplicates,
            writes_planned=len(writes),
            writes_applied=len(report.applied),
            writes_failed=len(report.failures),
        )
    )
    return result


def take_snapshots(
    *,
    store: VaultStore,
    catalog: CatalogFetcher,
    include_wishlist: bool,
) -> Snapshots:
    """Fetch the vault and the catalogs concurrently and wait for all of them."""

    with ThreadPoolExecutor(max_workers=3, thread_name_prefix="dupefinder-snapshot") as pool:
        entries_future = pool.submit(
            store.list_entries, include_relations=True, include_deleted=False
        )
        owned_future = pool.submit(catalog.fetch_owned)
        wishlist_future = pool.submit(catalog.fetch_wishlist) if include_wishlist else None

        entries = entries_future.result()
        owned = owned_future.result()
        wishlisted = wishlist_future.result() if wishlist_future is not None else None

    return Snapshots(
        entries=entries,
        library=_catalog(Source.LIBRARY, owned),
        wishlist=_catalog(Source.WISHLIST, wishlisted) if wishlisted is not None else None,
    )


def _catalog(source: Source, entries: list[ReferenceEntry]) -> ReferenceCatalog:
    return ReferenceCatalog.of(
        source,
        (
            entry
            if entry.source is source
            else ReferenceEntry(external_id=entry.external_id, name=entry.name, source=source)
            for entry in entries
        ),
    )
