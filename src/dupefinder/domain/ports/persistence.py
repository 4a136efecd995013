"""Ports for reading and updating the local vault."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from dupefinder.domain.model import EntryId, LocalEntry


@runtime_checkable
class VaultStore(Protocol):
    """What a duplicate scan needs from the vault.

    ``list_entries`` failures abort the scan; ``update_tags`` raises ``StoreError``
    for a single entry and leaves other entries unaffected.
    """

    def list_entries(
        self, *, include_relations: bool = True, include_deleted: bool = False
    ) -> list[LocalEntry]: ...

    def update_tags(self, entry_id: EntryId, tags: Sequence[str]) -> None: ...


@runtime_checkable
class VaultEntryRepository(Protocol):
    """Persistence contract for vault entries inside a unit of work."""

    def add(
        self,
        *,
        title: str | None,
        tags: Sequence[str] = (),
        external_refs: Sequence[str] = (),
    ) -> LocalEntry: ...

    def get(self, entry_id: EntryId, *, include_deleted: bool = False) -> LocalEntry | None: ...

    def list_entries(
        self, *, include_relations: bool = True, include_deleted: bool = False
    ) -> list[LocalEntry]: ...

    def replace_tags(self, entry_id: EntryId, tags: Sequence[str]) -> None: ...

    def soft_delete(self, entry_id: EntryId) -> None: ...
