"""Version utilities for INI Preset Editor."""

from __future__ import annotations

from importlib import metadata

__version__ = "1.0.0"


def load_version() -> str:
    try:
        version = str(metadata.version("ini-preset-editor") or "").strip()
        return version or __version__
    except metadata.PackageNotFoundError:
        return __version__
