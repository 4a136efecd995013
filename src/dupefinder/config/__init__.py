"""Application configuration helpers."""

from __future__ import annotations

from .env import (
    optional_env_var,
    parse_flag,
    parse_non_negative_number,
    require_env_var,
    require_env_vars,
)
from .errors import ConfigurationError, MissingConfigurationError
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig, RetryPolicy
from .scan import DEFAULT_INTERVAL_MINUTES, ScanConfig, get_scan_config
from .steam import SteamConfig, get_steam_config
from .storage import DatabaseConfig, StorageConfig, get_database_config, get_storage_config

__all__ = [
    "DEFAULT_INTERVAL_MINUTES",
    "CacheConfig",
    "ConfigurationError",
    "DatabaseConfig",
    "MissingConfigurationError",
    "RateLimit",
    "ResilienceConfig",
    "RetryPolicy",
    "ScanConfig",
    "SteamConfig",
    "StorageConfig",
    "get_database_config",
    "get_scan_config",
    "get_steam_config",
    "get_storage_config",
    "optional_env_var",
    "parse_flag",
    "parse_non_negative_number",
    "require_env_var",
    "require_env_vars",
]
