"""Steam client behaviour against mocked Web API responses."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import httpx
import pytest

from dupefinder.adapters.steam.client import SteamClient
from dupefinder.config.errors import MissingConfigurationError
from dupefinder.config.steam import SteamConfig
from dupefinder.domain.errors import FetchError
from tests.helpers.steam import make_client_factory

if TYPE_CHECKING:
    from tests.helpers.steam import SteamPayload


def test_owned_games_sends_credentials(
    steam_config: SteamConfig, owned_games_payload: SteamPayload
) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=owned_games_payload)

    client = SteamClient(config=steam_config, client_factory=make_client_factory(handler))

    payload = asyncio.run(client.owned_games())

    assert payload.response.game_count == 4
    assert [game.appid for game in payload.response.games] == [70, 400, 620, 1091500]
    request = seen[0]
    assert request.url.host == "steam.test"
    assert request.url.path == "/IPlayerService/GetOwnedGames/v0001/"
    assert request.url.params["key"] == "test-key"
    assert request.url.params["steamid"] == "76561197960287930"
    assert request.url.params["include_appinfo"] == "1"


def test_wishlist_only_sends_user_id(
    steam_config: SteamConfig, wishlist_payload: SteamPayload
) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=wishlist_payload)

    client = SteamClient(config=steam_config, client_factory=make_client_factory(handler))

    payload = asyncio.run(client.wishlist())

    assert [item.appid for item in payload.response.items] == [1145360, 367520, 620]
    assert seen[0].url.path == "/IWishlistService/GetWishlist/v1/"
    assert "key" not in seen[0].url.params
    assert seen[0].url.params["steamid"] == "76561197960287930"


def test_private_profile_yields_empty_library(steam_config: SteamConfig) -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"response": {}})

    client = SteamClient(config=steam_config, client_factory=make_client_factory(handler))

    payload = asyncio.run(client.owned_games())

    assert payload.response.games == []


@pytest.mark.parametrize("status_code", [401, 403, 500])
def test_error_status_raises_fetch_error(steam_config: SteamConfig, status_code: int) -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code)

    client = SteamClient(config=steam_config, client_factory=make_client_factory(handler))

    with pytest.raises(FetchError) as exc:
        asyncio.run(client.owned_games())

    assert exc.value.status_code == status_code
    assert exc.value.source == "Steam library"
    assert str(status_code) in str(exc.value)


def test_malformed_payload_raises_fetch_error(steam_config: SteamConfig) -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>maintenance</html>")

    client = SteamClient(config=steam_config, client_factory=make_client_factory(handler))

    with pytest.raises(FetchError, match="Unexpected Steam wishlist API payload"):
        asyncio.run(client.wishlist())


def test_transport_error_raises_fetch_error(steam_config: SteamConfig) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = SteamClient(config=steam_config, client_factory=make_client_factory(handler))

    with pytest.raises(FetchError, match="request failed"):
        asyncio.run(client.owned_games())


def test_missing_credentials_fail_before_any_request() -> None:
    calls: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, json={"response": {}})

    client = SteamClient(
        config=SteamConfig(api_key="test-key", user_id=None),
        client_factory=make_client_factory(handler),
    )

    with pytest.raises(MissingConfigurationError, match="STEAM_USER_ID_64"):
        asyncio.run(client.owned_games())
    with pytest.raises(MissingConfigurationError):
        asyncio.run(client.wishlist())

    assert calls == []
