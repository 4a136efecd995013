"""Synchronous catalog fetcher backed by the Steam Web API."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .client import SteamClient
from .translator import translate_owned_games, translate_wishlist

if TYPE_CHECKING:
    from dupefinder.domain.model import ReferenceEntry
    from dupefinder.domain.ports.fetching import CatalogFetcher


@dataclass(slots=True)
class SteamCatalogFetcher:
    """``CatalogFetcher`` for a Steam account's library and wishlist."""

    client: SteamClient = field(default_factory=SteamClient)

    def fetch_owned(self) -> list[ReferenceEntry]:
        payload = asyncio.run(self.client.owned_games())
        return translate_owned_games(payload.response.games)

    def fetch_wishlist(self) -> list[ReferenceEntry]:
        payload = asyncio.run(self.client.wishlist())
        return translate_wishlist(payload.response.items)


if TYPE_CHECKING:
    _fetcher_check: CatalogFetcher = SteamCatalogFetcher()
