"""Turn scan results into tag writes and submit them to the vault store."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .errors import StoreError
from .model import TagWrite, TagWriteFailure, TagWriteReport

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .model import ResultSet
    from .ports import VaultStore


def plan_tag_writes(result_set: ResultSet, *, sentinel_tag: str) -> list[TagWrite]:
    """One write per matched entry that does not carry ``sentinel_tag`` yet.

    The tag is appended to the entry's existing tags, so an entry matched by both
    the library and the wishlist still gets it once.
    """

    writes: list[TagWrite] = []
    for entry in result_set.entries():
        if entry.has_tag(sentinel_tag):
            continue
        writes.append(
            TagWrite(entry_id=entry.id, title=entry.title, tags=(*entry.tags, sentinel_tag))
        )
    return writes


def apply_tag_writes(store: VaultStore, writes: Iterable[TagWrite]) -> TagWriteReport:
    """Submit ``writes`` one by one; a failed write does not stop the others."""

    report = TagWriteReport()
    for write in writes:
        try:
            store.update_tags(write.entry_id, write.tags)
        except StoreError as exc:
            report.failures.append(TagWriteFailure(write=write, error=exc))
            continue
        report.applied.append(write)
    return report
