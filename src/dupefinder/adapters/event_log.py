"""Render duplicate scan events as log records."""

from __future__ import annotations

import logging
from functools import singledispatchmethod
from logging import getLogger

from dupefinder.domain.events import (
    DuplicateFound,
    ScanFailed,
    ScanFinished,
    ScanStarted,
    SnapshotsFetched,
    TagWriteFailed,
)

log = getLogger("dupefinder.scan")


class LoggingEventSink:
    """``EventSink`` that writes one log line per event."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._log = logger or log

    def __call__(self, event: object) -> None:
        self._render(event)

    @singledispatchmethod
    def _render(self, event: object) -> None:
        self._log.debug("Unhandled scan event %r", event)

    @_render.register
    def _(self, event: ScanStarted) -> None:
        self._log.info(
            "Starting duplicate detection (wishlist %s).",
            "included" if event.include_wishlist else "skipped",
        )

    @_render.register
    def _(self, event: SnapshotsFetched) -> None:
        self._log.info(
            "Fetched %s Steam games, %s wishlisted games, and %s vault games.",
            event.owned,
            event.wishlisted,
            event.entries,
        )

    @_render.register
    def _(self, event: DuplicateFound) -> None:
        self._log.info(
            "Found possible duplicate game in %s: vault_id=%s, title=%r, steam_id=%s, match=%s",
            event.source,
            event.entry_id,
            event.title,
            event.external_id or "Unknown",
            event.kind,
        )

    @_render.register
    def _(self, event: TagWriteFailed) -> None:
        self._log.warning(
            "Could not tag vault game %s (%r): %s", event.entry_id, event.title, event.message
        )

    @_render.register
    def _(self, event: ScanFinished) -> None:
        self._log.info(
            "Finished duplicate detection: duplicates_in_library=%s, "
            "duplicates_in_wishlist=%s, tagged=%s/%s, failed=%s",
            event.library_duplicates,
            event.wishlist_duplicates,
            event.writes_applied,
            event.writes_planned,
            event.writes_failed,
        )

    @_render.register
    def _(self, event: ScanFailed) -> None:
        self._log.error("Error during duplicate detection: %s", event.error)
