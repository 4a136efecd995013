"""Transaction boundary around the vault repositories."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, Self, runtime_checkable

if TYPE_CHECKING:
    from types import TracebackType

    from dupefinder.domain.ports.persistence import VaultEntryRepository


@dataclass(slots=True)
class VaultRepositories:
    """Repositories sharing one vault transaction."""

    entries: VaultEntryRepository


@runtime_checkable
class VaultUnitOfWork(Protocol):
    """Context manager that opens a transaction and rolls it back on error.

    Nothing is persisted unless :meth:`commit` is called inside the block.
    """

    @property
    def repositories(self) -> VaultRepositories: ...

    def __enter__(self) -> Self: ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> bool: ...

    def commit(self) -> None: ...

    def rollback(self) -> None: ...
