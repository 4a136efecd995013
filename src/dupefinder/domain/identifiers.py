"""Steam app id extraction from loosely structured vault metadata."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .model import LocalEntry

STORE_APP_URL = re.compile(r"store\.steampowered\.com/app/(\d+)", re.IGNORECASE)


def extract_app_id(refs: Iterable[object]) -> str | None:
    """Return the app id of the first Steam store page URL in ``refs``.

    References are scanned in order; anything that is not a string or does not
    contain a store page URL is skipped.
    """

    for ref in refs:
        if not isinstance(ref, str):
            continue
        match = STORE_APP_URL.search(ref)
        if match is not None:
            return match.group(1)
    return None


def extract_external_id(entry: LocalEntry) -> str | None:
    return extract_app_id(entry.external_refs)
