"""Steam adapter package."""

from __future__ import annotations

from .client import SteamClient
from .fetcher import SteamCatalogFetcher
from .schema import OwnedGame, OwnedGamesResponse, WishlistItem, WishlistResponse
from .translator import (
    translate_owned_game,
    translate_owned_games,
    translate_wishlist,
    translate_wishlist_item,
)

__all__ = [
    "OwnedGame",
    "OwnedGamesResponse",
    "SteamCatalogFetcher",
    "SteamClient",
    "WishlistItem",
    "WishlistResponse",
    "translate_owned_game",
    "translate_owned_games",
    "translate_wishlist",
    "translate_wishlist_item",
]
