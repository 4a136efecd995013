"""Errors raised while loading or validating configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


class ConfigurationError(RuntimeError):
    """Raised when a configuration value cannot be used.

    A scan that hits this before its snapshots are complete aborts without writing.
    """


class MissingConfigurationError(ConfigurationError):
    """Raised when required environment variables are absent or blank."""

    def __init__(self, message: str, *, names: Iterable[str] = ()) -> None:
        super().__init__(message)
        self.names = tuple(names)

    @classmethod
    def for_names(
        cls, names: Iterable[str], *, context: str | None = None
    ) -> MissingConfigurationError:
        missing = sorted(names)
        prefix = f"{context} not configured" if context else "Missing configuration for"
        return cls(f"{prefix}: {', '.join(missing)}", names=missing)
