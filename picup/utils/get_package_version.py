"""Installed picup version."""

from functools import lru_cache
from importlib import metadata


@lru_cache(maxsize=1)
def get_package_version() -> str:
    """Version from package metadata, ``"unknown"`` for an uninstalled checkout."""
    try:
        return metadata.version("picup")
    except metadata.PackageNotFoundError:
        return "unknown"
