"""Repository implementations backed by SQLAlchemy sessions."""

from __future__ import annotations

from collections import defaultdict
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from sqlalchemy import delete, insert, select, update

from dupefinder.domain.errors import StoreError
from dupefinder.domain.model import LocalEntry

from .mappings import vault_entry_link_table, vault_entry_table, vault_entry_tag_table

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from sqlalchemy import Row
    from sqlalchemy.orm import Session

    from dupefinder.domain.model import EntryId


def _unique(values: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    ordered: list[str] = []
    for value in values:
        if value in seen:
            continue
        seen.add(value)
        ordered.append(value)
    return ordered


class SqlAlchemyVaultEntryRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def add(
        self,
        *,
        title: str | None,
        tags: Sequence[str] = (),
        external_refs: Sequence[str] = (),
    ) -> LocalEntry:
        result = self.session.execute(
            insert(vault_entry_table).values(title=title, created_at=datetime.now(UTC))
        )
        entry_id = int(result.inserted_primary_key[0])
        self._insert_tags(entry_id, tags)
        self._insert_links(entry_id, external_refs)
        return LocalEntry(
            id=entry_id,
            title=title,
            tags=tuple(_unique(tags)),
            external_refs=tuple(external_refs),
        )

    def get(self, entry_id: EntryId, *, include_deleted: bool = False) -> LocalEntry | None:
        stmt = select(vault_entry_table).where(vault_entry_table.c.id == entry_id)
        if not include_deleted:
            stmt = stmt.where(vault_entry_table.c.deleted_at.is_(None))
        row = self.session.execute(stmt).one_or_none()
        if row is None:
            return None
        return self._assemble([row], include_relations=True)[0]

    def list_entries(
        self, *, include_relations: bool = True, include_deleted: bool = False
    ) -> list[LocalEntry]:
        stmt = select(vault_entry_table).order_by(vault_entry_table.c.id)
        if not include_deleted:
            stmt = stmt.where(vault_entry_table.c.deleted_at.is_(None))
        rows = self.session.execute(stmt).all()
        return self._assemble(rows, include_relations=include_relations)

    def replace_tags(self, entry_id: EntryId, tags: Sequence[str]) -> None:
        if self.get(entry_id) is None:
            raise StoreError(f"Vault entry {entry_id} does not exist", entry_id=entry_id)
        self.session.execute(
            delete(vault_entry_tag_table).where(vault_entry_tag_table.c.entry_id == entry_id)
        )
        self._insert_tags(entry_id, tags)

    def soft_delete(self, entry_id: EntryId) -> None:
        self.session.execute(
            update(vault_entry_table)
            .where(vault_entry_table.c.id == entry_id)
            .values(deleted_at=datetime.now(UTC))
        )

    def _insert_tags(self, entry_id: EntryId, tags: Iterable[str]) -> None:
        rows = [
            {"entry_id": entry_id, "position": position, "name": name}
            for position, name in enumerate(_unique(tags))
        ]
        if rows:
            self.session.execute(insert(vault_entry_tag_table), rows)

    def _insert_links(self, entry_id: EntryId, urls: Iterable[str]) -> None:
        rows = [
            {"entry_id": entry_id, "position": position, "url": url}
            for position, url in enumerate(urls)
        ]
        if rows:
            self.session.execute(insert(vault_entry_link_table), rows)

    def _assemble(
        self, rows: Sequence[Row[Any]], *, include_relations: bool
    ) -> list[LocalEntry]:
        ids = [int(row.id) for row in rows]
        tags: dict[int, list[str]] = defaultdict(list)
        links: dict[int, list[str]] = defaultdict(list)
        if include_relations and ids:
            tag_rows = self.session.execute(
                select(vault_entry_tag_table.c.entry_id, vault_entry_tag_table.c.name)
                .where(vault_entry_tag_table.c.entry_id.in_(ids))
                .order_by(vault_entry_tag_table.c.entry_id, vault_entry_tag_table.c.position)
            )
            for entry_id, name in tag_rows:
                tags[entry_id].append(name)
            link_rows = self.session.execute(
                select(vault_entry_link_table.c.entry_id, vault_entry_link_table.c.url)
                .where(vault_entry_link_table.c.entry_id.in_(ids))
                .order_by(vault_entry_link_table.c.entry_id, vault_entry_link_table.c.position)
            )
            for entry_id, url in link_rows:
                links[entry_id].append(url)

        return [
            LocalEntry(
                id=int(row.id),
                title=row.title,
                tags=tuple(tags.get(int(row.id), ())),
                external_refs=tuple(links.get(int(row.id), ())),
            )
            for row in rows
        ]
