"""Translate Steam payloads into reference catalog entries."""

from __future__ import annotations

from typing import TYPE_CHECKING

from dupefinder.domain.model import ReferenceEntry, Source

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .schema import OwnedGame, WishlistItem


def translate_owned_game(game: OwnedGame) -> ReferenceEntry:
    return ReferenceEntry(
        external_id=str(game.appid),
        name=game.name.strip() if game.name else None,
        source=Source.LIBRARY,
    )


def translate_wishlist_item(item: WishlistItem) -> ReferenceEntry:
    # the wishlist service only returns app ids, so these only match exactly
    return ReferenceEntry(external_id=str(item.appid), source=Source.WISHLIST)


def translate_owned_games(games: Iterable[OwnedGame]) -> list[ReferenceEntry]:
    return [translate_owned_game(game) for game in games]


def translate_wishlist(items: Iterable[WishlistItem]) -> list[ReferenceEntry]:
    return [translate_wishlist_item(item) for item in items]
