"""Helpers for resolving data file locations."""
from __future__ import annotations

import os
from pathlib import Path

DEFINITIONS_ENV_VAR = "ARENA_DEFINITIONS"


def get_package_data_root() -> Path:
    """Return the directory of the data package, where definitions ship."""
    return Path(__file__).resolve().parent


def get_definitions_path(base_path: Path | str | None = None) -> Path:
    """Return the directory containing JSON definition files.

    An explicit ``base_path`` wins, then the ``ARENA_DEFINITIONS`` environment
    variable, then the ``definitions`` directory installed with this package.
    """
    if base_path is not None:
        return Path(base_path)
    override = os.environ.get(DEFINITIONS_ENV_VAR)
    if override:
        return Path(override)
    return get_package_data_root() / "definitions"
