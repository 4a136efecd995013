from __future__ import annotations

import pytest

from dupefinder.domain.identifiers import extract_app_id, extract_external_id
from tests.helpers.vault_entries import make_entry


@pytest.mark.parametrize(
    ("refs", "expected"),
    [
        (["https://store.steampowered.com/app/620/Portal_2/"], "620"),
        (["http://store.steampowered.com/app/900"], "900"),
        (["store.steampowered.com/app/12345?snr=1_4_4__129_1"], "12345"),
        (["HTTPS://STORE.STEAMPOWERED.COM/APP/42/"], "42"),
    ],
)
def test_extract_app_id_reads_store_urls(refs: list[str], expected: str) -> None:
    assert extract_app_id(refs) == expected


def test_extract_app_id_returns_first_match_in_order() -> None:
    refs = [
        "https://www.gog.com/game/portal",
        "https://store.steampowered.com/app/400/Portal/",
        "https://store.steampowered.com/app/620/Portal_2/",
    ]

    assert extract_app_id(refs) == "400"


@pytest.mark.parametrize(
    "refs",
    [
        [],
        ["https://www.gog.com/game/portal"],
        ["https://steamcommunity.com/app/620"],
        ["https://store.steampowered.com/app/"],
        ["https://store.steampowered.com/app/abc"],
    ],
)
def test_extract_app_id_returns_none_without_store_url(refs: list[str]) -> None:
    assert extract_app_id(refs) is None


def test_extract_app_id_skips_non_string_references() -> None:
    refs: list[object] = [None, 620, {"url": "x"}, "https://store.steampowered.com/app/70/"]

    assert extract_app_id(refs) == "70"


def test_extract_external_id_uses_entry_references() -> None:
    entry = make_entry(1, "Half-Life", refs=["https://store.steampowered.com/app/70/"])

    assert extract_external_id(entry) == "70"
    assert extract_external_id(make_entry(2, "Half-Life")) is None
