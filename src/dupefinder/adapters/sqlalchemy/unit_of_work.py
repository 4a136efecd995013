"""Engine lifecycle and the SQLAlchemy unit of work for the vault database.

The engine is process wide: :func:`startup` creates (or adopts) it and migrates the
schema, :func:`shutdown` disposes it. Each :class:`SqlAlchemyVaultUnitOfWork` opens
its own session, so units of work can be used from worker threads.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Literal, Self

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from dupefinder.adapters.sqlalchemy.migrations import upgrade_head
from dupefinder.adapters.sqlalchemy.repositories import SqlAlchemyVaultEntryRepository
from dupefinder.config.storage import get_database_config
from dupefinder.domain.ports.unit_of_work import VaultRepositories

if TYPE_CHECKING:
    from types import TracebackType

    from sqlalchemy.engine import Engine

log = getLogger(__name__)


class StartupError(RuntimeError):
    """Raised when the vault database is used before :func:`startup` or configured twice."""


class _Database:
    engine: Engine | None = None
    sessions: sessionmaker[Session] | None = None


def startup(
    *,
    engine: Engine | None = None,
    database_uri: str | None = None,
    force: bool = False,
) -> None:
    """Connect to the vault database and bring its schema up to date."""

    if _Database.engine is not None and not force:
        raise StartupError("Vault database already initialised; pass force=True to replace it")

    target = engine or create_engine(database_uri or get_database_config().uri, future=True)
    upgrade_head(engine=target)
    _Database.engine = target
    _Database.sessions = sessionmaker(bind=target, expire_on_commit=False)
    log.debug("Vault database ready at %s", target.url.render_as_string(hide_password=True))


def ensure_started() -> None:
    if _Database.engine is None:
        startup()


def is_started() -> bool:
    return _Database.engine is not None


def configured_engine() -> Engine:
    if _Database.engine is None:
        raise StartupError("Vault database not initialised; call startup() first")
    return _Database.engine


def shutdown() -> None:
    """Dispose the engine and forget it (primarily for tests)."""

    if _Database.engine is not None:
        _Database.engine.dispose()
    _Database.engine = None
    _Database.sessions = None


class SqlAlchemyVaultUnitOfWork:
    """One session and transaction over the vault repositories."""

    def __init__(self) -> None:
        if _Database.sessions is None:
            raise StartupError("Vault database not initialised; call startup() first")
        self._session_factory = _Database.sessions
        self._session: Session | None = None
        self._repositories: VaultRepositories | None = None

    def __enter__(self) -> Self:
        if self._session is not None:
            raise StartupError("Unit of work already entered")
        self._session = self._session_factory()
        self._repositories = VaultRepositories(
            entries=SqlAlchemyVaultEntryRepository(self._session)
        )
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> Literal[False]:
        session = self.session
        try:
            if exc_type is not None:
                session.rollback()
        finally:
            session.close()
            self._session = None
            self._repositories = None
        return False

    @property
    def session(self) -> Session:
        if self._session is None:
            raise StartupError("Unit of work used outside its with-block")
        return self._session

    @property
    def repositories(self) -> VaultRepositories:
        if self._repositories is None:
            raise StartupError("Unit of work used outside its with-block")
        return self._repositories

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()


if TYPE_CHECKING:
    from dupefinder.domain.ports.unit_of_work import VaultUnitOfWork

    _uow_check: VaultUnitOfWork = SqlAlchemyVaultUnitOfWork()
