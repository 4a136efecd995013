"""SQLAlchemy adapter package for the vault database."""

from __future__ import annotations

from .mappings import (
    metadata,
    vault_entry_link_table,
    vault_entry_table,
    vault_entry_tag_table,
)
from .repositories import SqlAlchemyVaultEntryRepository
from .store import SqlAlchemyVaultStore
from .unit_of_work import SqlAlchemyVaultUnitOfWork, StartupError, shutdown, startup

__all__ = [
    "SqlAlchemyVaultEntryRepository",
    "SqlAlchemyVaultStore",
    "SqlAlchemyVaultUnitOfWork",
    "StartupError",
    "metadata",
    "shutdown",
    "startup",
    "vault_entry_link_table",
    "vault_entry_table",
    "vault_entry_tag_table",
]
