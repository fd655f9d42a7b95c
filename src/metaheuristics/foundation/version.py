"""Installed version of the metaheuristics distribution."""

from __future__ import annotations

from functools import lru_cache
from importlib import metadata


@lru_cache(maxsize=1)
def get_version() -> str:
    try:
        return metadata.version("metaheuristics")
    except metadata.PackageNotFoundError:  # pragma: no cover - source checkout
        return "0.0.0+unknown"


__all__ = ["get_version"]
