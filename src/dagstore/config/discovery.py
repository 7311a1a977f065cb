"""Locate and read ``dagstore.toml``.

Resolution order: the ``DAGSTORE_CONFIG`` env var, then the nearest
``dagstore.toml`` in the start directory or any of its parents.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click

CONFIG_FILENAME = "dagstore.toml"
CONFIG_ENV_VAR = "DAGSTORE_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies to *start* (default: cwd), if any.

    A ``DAGSTORE_CONFIG`` value wins over the walk-up search; if it names
    no file, no config is used at all.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def read_toml(path: Path) -> dict[str, Any]:
    """Parse *path* as TOML.

    Raises:
        click.ClickException: If the file is not valid TOML.
    """
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise click.ClickException(msg) from exc

