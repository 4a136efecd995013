"""Events emitted by a duplicate scan.

The scan reports progress through an :class:`EventSink` instead of logging, so the
matching code stays free of I/O. ``adapters.event_log`` renders events as log lines.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .model import EntryId, MatchKind, Source


@dataclass(frozen=True, slots=True)
class ScanStarted:
    include_wishlist: bool


@dataclass(frozen=True, slots=True)
class SnapshotsFetched:
    entries: int
    owned: int
    wishlisted: int


@dataclass(frozen=True, slots=True)
class DuplicateFound:
    entry_id: EntryId
    title: str | None
    source: Source
    kind: MatchKind
    external_id: str | None


@dataclass(frozen=True, slots=True)
class TagWriteFailed:
    entry_id: EntryId
    title: str | None
    message: str


@dataclass(frozen=True, slots=True)
class ScanFinished:
    library_duplicates: int
    wishlist_duplicates: int
    writes_planned: int
    writes_applied: int
    writes_failed: int


@dataclass(frozen=True, slots=True)
class ScanFailed:
    error: BaseException


type ScanEvent = (
    ScanStarted | SnapshotsFetched | DuplicateFound | TagWriteFailed | ScanFinished | ScanFailed
)


class EventSink(Protocol):
    def __call__(self, event: ScanEvent) -> None: ...


def discard_events(event: ScanEvent) -> None:
    _ = event
