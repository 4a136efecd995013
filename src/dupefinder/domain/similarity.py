"""Name normalization and similarity scoring for fuzzy title matching."""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Callable
from typing import Final

from rapidfuzz.distance import Indel

type Scorer = Callable[[str | None, str | None], float]

SIMILARITY_THRESHOLD: Final[float] = 0.9

_APOSTROPHES = re.compile(r"['‘’ʼ]")
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")
_DIGIT_BOUNDARY = re.compile(r"(?<=[^\W\d_])(?=\d)|(?<=\d)(?=[^\W\d_])")
_SEPARATORS = re.compile(r"[\W_]+")


def normalize_name(value: str | None) -> str:
    """Kebab-case a display name so cosmetic differences do not affect scoring.

    ``"The Game: Part Two"``, ``"the-game-part-two"`` and ``"TheGame Part Two"``
    all normalize to ``"the-game-part-two"``.
    """

    if not value:
        return ""
    text = unicodedata.normalize("NFKC", value)
    text = _APOSTROPHES.sub("", text)
    text = _CAMEL_BOUNDARY.sub(" ", text)
    text = _DIGIT_BOUNDARY.sub(" ", text)
    text = text.casefold()
    return "-".join(part for part in _SEPARATORS.split(text) if part)


def similarity(a: str | None, b: str | None) -> float:
    """Score two names in ``[0, 1]`` after normalization.

    Symmetric; identical normalized names score ``1.0``. Names that normalize to
    nothing (blank, punctuation only) score ``0.0`` against everything.
    """

    left = normalize_name(a)
    right = normalize_name(b)
    if not left or not right:
        return 0.0
    if left == right:
        return 1.0
    return float(Indel.normalized_similarity(left, right))


def is_similar(score: float, threshold: float = SIMILARITY_THRESHOLD) -> bool:
    """Strictly greater than: a score equal to the threshold is not a match."""
    return score > threshold
