"""Where the vault database and the HTTP cache live on disk."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .env import optional_env_var

APP_DIR_NAME: Final[str] = "dupefinder"
VAULT_DB_FILENAME: Final[str] = "vault.db"
HTTP_CACHE_FILENAME: Final[str] = "http_cache.db"


@dataclass(frozen=True, slots=True)
class StorageConfig:
    """Files kept under one data directory, created on first use."""

    data_dir: Path

    def _path(self, filename: str, *, ensure: bool) -> Path:
        directory = self.data_dir.expanduser().resolve()
        if ensure:
            directory.mkdir(parents=True, exist_ok=True)
        return directory / filename

    def vault_path(self, *, ensure: bool = True) -> Path:
        return self._path(VAULT_DB_FILENAME, ensure=ensure)

    def http_cache_path(self, *, ensure: bool = True) -> Path:
        return self._path(HTTP_CACHE_FILENAME, ensure=ensure)

    def vault_uri(self) -> str:
        return f"sqlite+pysqlite:///{self.vault_path()}"


@dataclass(frozen=True, slots=True)
class DatabaseConfig:
    """SQLAlchemy URL of the vault database."""

    uri: str


def _platform_data_home() -> Path:
    if os.name == "nt":
        local_app_data = optional_env_var("LOCALAPPDATA")
        return Path(local_app_data) if local_app_data else Path.home() / "AppData" / "Local"
    xdg_data_home = optional_env_var("XDG_DATA_HOME")
    return Path(xdg_data_home) if xdg_data_home else Path.home() / ".local" / "share"


def get_storage_config() -> StorageConfig:
    """Use ``DUPEFINDER_DATA_DIR`` or the platform's per-user data directory."""
    configured = optional_env_var("DUPEFINDER_DATA_DIR")
    data_dir = Path(configured) if configured else _platform_data_home() / APP_DIR_NAME
    return StorageConfig(data_dir=data_dir)


def get_database_config(*, storage: StorageConfig | None = None) -> DatabaseConfig:
    """``DATABASE_URI`` wins; otherwise the vault is a SQLite file in the data directory."""
    uri = optional_env_var("DATABASE_URI")
    if uri is None:
        uri = (storage or get_storage_config()).vault_uri()
    return DatabaseConfig(uri=uri)
