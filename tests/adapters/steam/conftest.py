"""Shared fixtures for Steam adapter tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
import pytest

from dupefinder.adapters.steam.client import SteamClient
from dupefinder.config.http_resilience import ResilienceConfig, RetryPolicy
from dupefinder.config.steam import SteamConfig
from tests.helpers.steam import SteamPayload, load_fixture, make_client_factory

if TYPE_CHECKING:
    from collections.abc import Callable


@pytest.fixture
def owned_games_payload() -> SteamPayload:
    return load_fixture("owned_games.json")


@pytest.fixture
def wishlist_payload() -> SteamPayload:
    return load_fixture("wishlist.json")


@pytest.fixture
def steam_config() -> SteamConfig:
    return SteamConfig(
        api_key="test-key",
        user_id="76561197960287930",
        resilience=ResilienceConfig(
            name="steam",
            base_url="http://steam.test",
            retry=RetryPolicy(total=0),
            cache=None,
        ),
    )


@pytest.fixture
def steam_router(
    owned_games_payload: SteamPayload, wishlist_payload: SteamPayload
) -> Callable[[httpx.Request], httpx.Response]:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.startswith("/IPlayerService/GetOwnedGames"):
            return httpx.Response(200, json=owned_games_payload)
        if request.url.path.startswith("/IWishlistService/GetWishlist"):
            return httpx.Response(200, json=wishlist_payload)
        return httpx.Response(404)

    return handler


@pytest.fixture
def steam_client(
    steam_config: SteamConfig, steam_router: Callable[[httpx.Request], httpx.Response]
) -> SteamClient:
    return SteamClient(config=steam_config, client_factory=make_client_factory(steam_router))
