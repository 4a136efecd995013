"""SQLAlchemy table metadata for the vault database."""

from __future__ import annotations

from datetime import UTC, datetime

from sqlalchemy import (
    Column,
    DateTime,
    Dialect,
    ForeignKey,
    Integer,
    MetaData,
    String,
    Table,
    TypeDecorator,
    UniqueConstraint,
)


class UTCDateTime(TypeDecorator[datetime]):
    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        _ = dialect
        if value is None:
            return None
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return value.astimezone(UTC)

    def process_result_value(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        _ = dialect
        if value is None:
            return None
        return value if value.tzinfo else value.replace(tzinfo=UTC)


metadata = MetaData(
    naming_convention={
        "ix": "ix_%(column_0_label)s",
        "uq": "uq_%(table_name)s_%(column_0_label)s",
        "ck": "ck_%(table_name)s_%(constraint_name)s",
        "fk": "fk_%(table_name)s_%(column_0_label)s_%(referred_table_name)s",
        "pk": "pk_%(table_name)s",
    }
)

vault_entry_table = Table(
    "vault_entry",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", String(512), nullable=True),
    Column("created_at", UTCDateTime(), nullable=False, default=lambda: datetime.now(UTC)),
    Column("deleted_at", UTCDateTime(), nullable=True),
)

vault_entry_tag_table = Table(
    "vault_entry_tag",
    metadata,
    Column(
        "entry_id",
        Integer,
        ForeignKey("vault_entry.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("position", Integer, primary_key=True),
    Column("name", String(255), nullable=False),
    UniqueConstraint("entry_id", "name"),
)

vault_entry_link_table = Table(
    "vault_entry_link",
    metadata,
    Column(
        "entry_id",
        Integer,
        ForeignKey("vault_entry.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("position", Integer, primary_key=True),
    Column("url", String(2048), nullable=False),
)
