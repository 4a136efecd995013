from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
import pytest

from dupefinder.adapters.steam.client import SteamClient
from dupefinder.adapters.steam.fetcher import SteamCatalogFetcher
from dupefinder.domain.errors import FetchError
from dupefinder.domain.model import Source
from tests.helpers.steam import make_client_factory

if TYPE_CHECKING:
    from dupefinder.config.steam import SteamConfig


def test_fetcher_returns_reference_entries(steam_client: SteamClient) -> None:
    fetcher = SteamCatalogFetcher(client=steam_client)

    owned = fetcher.fetch_owned()
    wishlisted = fetcher.fetch_wishlist()

    assert [entry.external_id for entry in owned] == ["70", "400", "620", "1091500"]
    assert {entry.source for entry in owned} == {Source.LIBRARY}
    assert [entry.external_id for entry in wishlisted] == ["1145360", "367520", "620"]
    assert {entry.source for entry in wishlisted} == {Source.WISHLIST}


def test_fetcher_propagates_fetch_errors(steam_config: SteamConfig) -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(503)

    fetcher = SteamCatalogFetcher(
        client=SteamClient(config=steam_config, client_factory=make_client_factory(handler))
    )

    with pytest.raises(FetchError) as exc:
        fetcher.fetch_wishlist()

    assert exc.value.status_code == 503
