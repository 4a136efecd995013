"""Errors raised across the port boundary by catalog and vault adapters."""

from __future__ import annotations


class FetchError(RuntimeError):
    """Raised when a reference catalog cannot be retrieved.

    Aborts the current scan; the next scan starts from a fresh snapshot.
    """

    def __init__(
        self,
        message: str,
        *,
        source: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.source = source
        self.status_code = status_code


class StoreError(RuntimeError):
    """Raised when the vault store cannot be read or an entry cannot be updated."""

    def __init__(self, message: str, *, entry_id: int | None = None) -> None:
        super().__init__(message)
        self.entry_id = entry_id
