"""Ports for fetching reference catalogs."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from dupefinder.domain.model import ReferenceEntry


@runtime_checkable
class CatalogFetcher(Protocol):
    """Source of the owned-games list and the wishlist.

    Both calls raise ``MissingConfigurationError`` when credentials are absent and
    ``FetchError`` when the upstream service does not answer successfully.
    """

    def fetch_owned(self) -> list[ReferenceEntry]: ...

    def fetch_wishlist(self) -> list[ReferenceEntry]: ...


__all__ = ["CatalogFetcher"]
