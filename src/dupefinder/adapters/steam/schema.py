"""Minimal Pydantic models for the Steam Web API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class SteamBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class OwnedGame(SteamBaseModel):
    appid: int
    name: str | None = None
    playtime_forever: int = 0
    playtime_2weeks: int | None = None
    img_icon_url: str | None = None
    rtime_last_played: int | None = None


class OwnedGames(SteamBaseModel):
    # private profiles answer with an empty response object
    game_count: int = 0
    games: list[OwnedGame] = Field(default_factory=list["OwnedGame"])


class OwnedGamesResponse(SteamBaseModel):
    response: OwnedGames


class WishlistItem(SteamBaseModel):
    appid: int
    priority: int | None = None
    date_added: int | None = None


class Wishlist(SteamBaseModel):
    items: list[WishlistItem] = Field(default_factory=list["WishlistItem"])


class WishlistResponse(SteamBaseModel):
    response: Wishlist
