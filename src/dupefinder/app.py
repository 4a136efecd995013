"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from dupefinder.adapters.event_log import LoggingEventSink
from dupefinder.adapters.sqlalchemy.store import SqlAlchemyVaultStore
from dupefinder.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyVaultUnitOfWork,
    ensure_started,
)
from dupefinder.adapters.steam import SteamCatalogFetcher
from dupefinder.config import get_scan_config
from dupefinder.domain.duplicate_scan import ScanSettings, scan_for_duplicates
from dupefinder.scheduler import ScanScheduler

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from dupefinder.config import ScanConfig
    from dupefinder.domain.duplicate_scan import DuplicateScanResult
    from dupefinder.domain.events import EventSink
    from dupefinder.domain.model import LocalEntry
    from dupefinder.domain.ports import CatalogFetcher, VaultStore, VaultUnitOfWork

    UnitOfWorkFactory = Callable[[], VaultUnitOfWork]


log = getLogger(__name__)


def settings_from_config(config: ScanConfig) -> ScanSettings:
    return ScanSettings(
        sentinel_tag=config.sentinel_tag,
        similarity_threshold=config.similarity_threshold,
        include_wishlist=config.include_wishlist,
    )


def find_duplicates(
    *,
    store: VaultStore | None = None,
    catalog: CatalogFetcher | None = None,
    scan_config: ScanConfig | None = None,
    events: EventSink | None = None,
) -> DuplicateScanResult:
    """Scan the vault against the configured Steam account and tag duplicates."""

    if store is None:
        ensure_started()
    effective_store = store or SqlAlchemyVaultStore()
    effective_catalog = catalog or SteamCatalogFetcher()
    effective_config = scan_config or get_scan_config()

    return scan_for_duplicates(
        store=effective_store,
        catalog=effective_catalog,
        settings=settings_from_config(effective_config),
        events=events or LoggingEventSink(),
    )


def add_vault_entry(
    *,
    title: str | None,
    external_refs: Sequence[str] = (),
    tags: Sequence[str] = (),
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> LocalEntry:
    """Insert a game into the local vault and return it with its assigned id."""

    if unit_of_work_factory is None:
        ensure_started()
    effective_uow = unit_of_work_factory or SqlAlchemyVaultUnitOfWork

    with effective_uow() as uow:
        entry = uow.repositories.entries.add(
            title=title, tags=tags, external_refs=external_refs
        )
        uow.commit()

    log.info("Added vault entry %s (%r)", entry.id, entry.title)
    return entry


def build_scheduler(
    *,
    scan_config: ScanConfig | None = None,
    run: Callable[[], object] | None = None,
) -> ScanScheduler:
    """Create a scheduler that runs ``find_duplicates`` on the configured interval."""

    effective_config = scan_config or get_scan_config()

    def scan() -> object:
        return find_duplicates(scan_config=effective_config)

    return ScanScheduler(
        run or scan,
        interval_minutes=effective_config.interval_minutes,
        initial_delay_seconds=effective_config.initial_delay_seconds,
    )
