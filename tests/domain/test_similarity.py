from __future__ import annotations

import pytest

from dupefinder.domain.similarity import (
    SIMILARITY_THRESHOLD,
    is_similar,
    normalize_name,
    similarity,
)


@pytest.mark.parametrize(
    "value",
    [
        "The Game: Part Two",
        "the-game-part-two",
        "THE GAME - PART TWO",
        "  the game   part two ",
        "TheGame PartTwo",
        "the_game.part_two",
    ],
)
def test_normalize_name_collapses_cosmetic_differences(value: str) -> None:
    assert normalize_name(value) == "the-game-part-two"


def test_normalize_name_drops_apostrophes() -> None:
    assert normalize_name("Baldur's Gate") == normalize_name("Baldur’s Gate") == "baldurs-gate"


def test_normalize_name_splits_digits_from_letters() -> None:
    assert normalize_name("Portal2") == "portal-2"
    assert normalize_name("Fallout 76") == "fallout-76"


@pytest.mark.parametrize("value", [None, "", "   ", ":::"])
def test_normalize_name_of_blank_values_is_empty(value: str | None) -> None:
    assert normalize_name(value) == ""


def test_similarity_of_identical_normalized_names_is_one() -> None:
    assert similarity("Halo: Combat Evolved", "Halo - Combat Evolved") == 1.0


@pytest.mark.parametrize(
    ("a", "b"),
    [
        ("Tetris", "Chess"),
        ("The Witcher 3", "The Witcher 2"),
        ("Portal", "Portal 2"),
        ("Hollow Knight", "Hollow Knight: Silksong"),
    ],
)
def test_similarity_is_symmetric_and_bounded(a: str, b: str) -> None:
    score = similarity(a, b)

    assert score == similarity(b, a)
    assert 0.0 <= score <= 1.0


def test_similarity_tolerates_small_edits() -> None:
    assert is_similar(similarity("Grand Theft Auto: San Andreas", "Grand Theft Auto San Andrea"))


def test_similarity_rejects_different_titles() -> None:
    assert not is_similar(similarity("Tetris", "Chess"))
    assert not is_similar(similarity("Portal", "Portal 2"))


def test_similarity_of_empty_names_is_zero() -> None:
    assert similarity("", "") == 0.0
    assert similarity(None, "Tetris") == 0.0
    assert similarity("!!!", "???") == 0.0


def test_threshold_is_exclusive() -> None:
    assert SIMILARITY_THRESHOLD == 0.9
    assert not is_similar(0.9)
    assert is_similar(0.9000001)
    assert not is_similar(0.5)
    assert is_similar(1.0)
