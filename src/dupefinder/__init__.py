"""Tag games in a local vault that the configured Steam account already has."""

from __future__ import annotations

from importlib import metadata

__all__ = ["__version__"]

try:
    __version__ = metadata.version(__name__)
except metadata.PackageNotFoundError:
    # running from a source checkout without an installed distribution
    __version__ = "0.0.0+local"
