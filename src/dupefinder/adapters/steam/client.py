"""HTTP client for the Steam Web API."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from pydantic import BaseModel, ValidationError

from dupefinder.adapters.http_resilience import ResilientClient
from dupefinder.config.steam import STEAM_API_BASE_URL, SteamConfig, get_steam_config
from dupefinder.domain.errors import FetchError

from .schema import OwnedGamesResponse, WishlistResponse

if TYPE_CHECKING:
    from collections.abc import Callable

    from dupefinder.config.http_resilience import ResilienceConfig

log = getLogger(__name__)

OWNED_GAMES_PATH = "/IPlayerService/GetOwnedGames/v0001/"
WISHLIST_PATH = "/IWishlistService/GetWishlist/v1/"


def _default_client_factory(config: ResilienceConfig) -> ResilientClient:
    return ResilientClient(config)


@dataclass(slots=True)
class SteamClient:
    """Reads a user's owned games and wishlist.

    Credentials are checked before any request is made, so a missing API key or
    user id surfaces as ``MissingConfigurationError`` without touching the network.
    """

    config: SteamConfig = field(default_factory=get_steam_config)
    client_factory: Callable[[ResilienceConfig], ResilientClient] = field(
        default=_default_client_factory
    )

    async def owned_games(self) -> OwnedGamesResponse:
        api_key, user_id = self.config.require_credentials()
        params = httpx.QueryParams(
            {
                "key": api_key,
                "steamid": user_id,
                "include_appinfo": 1,
                "format": "json",
            }
        )
        return await self._get(OWNED_GAMES_PATH, params, "Steam library", OwnedGamesResponse)

    async def wishlist(self) -> WishlistResponse:
        _api_key, user_id = self.config.require_credentials()
        params = httpx.QueryParams({"steamid": user_id})
        return await self._get(WISHLIST_PATH, params, "Steam wishlist", WishlistResponse)

    async def _get[TPayload: BaseModel](
        self,
        path: str,
        params: httpx.QueryParams,
        context: str,
        model: type[TPayload],
    ) -> TPayload:
        base_url = self.config.resilience.base_url or STEAM_API_BASE_URL
        url = f"{base_url.rstrip('/')}{path}"
        try:
            async with self.client_factory(self.config.resilience) as client:
                response = await client.get(url, params=params)
        except httpx.HTTPError as exc:
            raise FetchError(f"{context} API request failed: {exc}", source=context) from exc

        if not response.is_success:
            raise FetchError(
                f"{context} API fetch failed with {response.status_code}: "
                f"{response.reason_phrase}",
                source=context,
                status_code=response.status_code,
            )

        try:
            payload = model.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            log.debug("Unexpected %s payload: %s", context, response.text[:200])
            raise FetchError(
                f"Unexpected {context} API payload",
                source=context,
                status_code=response.status_code,
            ) from exc
        return payload
