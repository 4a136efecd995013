"""Vault store used by duplicate scans, backed by the SQLAlchemy unit of work."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from sqlalchemy.exc import SQLAlchemyError

from dupefinder.domain.errors import StoreError

from .unit_of_work import SqlAlchemyVaultUnitOfWork

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from dupefinder.domain.model import EntryId, LocalEntry
    from dupefinder.domain.ports.unit_of_work import VaultUnitOfWork

log = getLogger(__name__)


class SqlAlchemyVaultStore:
    """Read the vault snapshot and write tags, one unit of work per call."""

    def __init__(
        self, unit_of_work_factory: Callable[[], VaultUnitOfWork] = SqlAlchemyVaultUnitOfWork
    ) -> None:
        self._unit_of_work_factory = unit_of_work_factory

    def list_entries(
        self, *, include_relations: bool = True, include_deleted: bool = False
    ) -> list[LocalEntry]:
        try:
            with self._unit_of_work_factory() as uow:
                entries = uow.repositories.entries.list_entries(
                    include_relations=include_relations,
                    include_deleted=include_deleted,
                )
        except SQLAlchemyError as exc:
            raise StoreError(f"Could not read vault entries: {exc}") from exc
        log.debug("Loaded %s vault entries", len(entries))
        return entries

    def update_tags(self, entry_id: EntryId, tags: Sequence[str]) -> None:
        try:
            with self._unit_of_work_factory() as uow:
                uow.repositories.entries.replace_tags(entry_id, tags)
                uow.commit()
        except SQLAlchemyError as exc:
            raise StoreError(
                f"Could not update tags of vault entry {entry_id}: {exc}", entry_id=entry_id
            ) from exc
