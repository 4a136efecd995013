from __future__ import annotations

from dupefinder.domain.matching import ReferenceCatalog, match_catalogs
from dupefinder.domain.model import MatchKind, MatchResult, ResultSet, Source, TagWrite
from dupefinder.domain.tagging import apply_tag_writes, plan_tag_writes
from tests.helpers.vault_entries import (
    DUPLICATE_TAG,
    FakeVaultStore,
    make_entry,
    make_reference,
    store_url,
)


def test_result_set_keeps_first_result_per_source() -> None:
    entry = make_entry(1, "Portal 2")
    results = ResultSet()
    first = MatchResult(entry=entry, source=Source.LIBRARY, kind=MatchKind.EXACT)
    second = MatchResult(entry=entry, source=Source.LIBRARY, kind=MatchKind.FUZZY)
    wishlisted = MatchResult(entry=entry, source=Source.WISHLIST, kind=MatchKind.EXACT)

    assert results.add(first) is True
    assert results.add(second) is False
    assert results.add(wishlisted) is True

    assert results.get(1, Source.LIBRARY) is first
    assert results.for_source(Source.WISHLIST) == [wishlisted]
    assert len(results) == 2
    assert results.entries() == [entry]


def test_plan_appends_tag_once_for_entries_matched_in_both_sources() -> None:
    entry = make_entry(1, "Portal 2", tags=["coop"], refs=[store_url(620)])
    library = ReferenceCatalog.of(Source.LIBRARY, [make_reference(620, "Portal 2")])
    wishlist = ReferenceCatalog.of(
        Source.WISHLIST, [make_reference(620, source=Source.WISHLIST)]
    )
    results = match_catalogs([entry], library, wishlist, sentinel_tag=DUPLICATE_TAG)

    writes = plan_tag_writes(results, sentinel_tag=DUPLICATE_TAG)

    assert writes == [TagWrite(entry_id=1, title="Portal 2", tags=("coop", DUPLICATE_TAG))]


def test_plan_skips_entries_already_tagged() -> None:
    entry = make_entry(1, "Portal 2", tags=[DUPLICATE_TAG])
    results = ResultSet()
    results.add(MatchResult(entry=entry, source=Source.LIBRARY, kind=MatchKind.FUZZY))

    assert plan_tag_writes(results, sentinel_tag=DUPLICATE_TAG) == []


def test_plan_for_empty_result_set_is_empty() -> None:
    assert plan_tag_writes(ResultSet(), sentinel_tag=DUPLICATE_TAG) == []


def test_apply_collects_failures_without_stopping() -> None:
    store = FakeVaultStore(
        entries=[make_entry(1, "A"), make_entry(2, "B"), make_entry(3, "C")],
        failing_ids={2},
    )
    writes = [
        TagWrite(entry_id=entry_id, tags=(DUPLICATE_TAG,), title=title)
        for entry_id, title in ((1, "A"), (2, "B"), (3, "C"))
    ]

    report = apply_tag_writes(store, writes)

    assert [write.entry_id for write in report.applied] == [1, 3]
    assert len(report.failures) == 1
    failure = report.failures[0]
    assert failure.write.entry_id == 2
    assert failure.error.entry_id == 2
    assert store.updates == [(1, (DUPLICATE_TAG,)), (3, (DUPLICATE_TAG,))]
