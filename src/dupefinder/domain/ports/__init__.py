"""Domain port definitions for adapters."""

from __future__ import annotations

from .fetching import CatalogFetcher
from .persistence import VaultEntryRepository, VaultStore
from .unit_of_work import VaultRepositories, VaultUnitOfWork

__all__ = [
    "CatalogFetcher",
    "VaultEntryRepository",
    "VaultRepositories",
    "VaultStore",
    "VaultUnitOfWork",
]
