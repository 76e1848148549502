"""Locate the site root and its ``postctl.toml``.

A site root is the nearest directory at or above the working directory
that holds ``postctl.toml`` or a Jekyll ``_config.yml``. ``POSTCTL_CONFIG``
and ``--config`` name a config file directly.
"""

from __future__ import annotations

import os
import tomllib
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import click

CONFIG_FILENAME = "postctl.toml"
CONFIG_ENV_VAR = "POSTCTL_CONFIG"
SITE_MARKERS = (CONFIG_FILENAME, "_config.yml", "_config.yaml")


def _ancestors(start: Path | None) -> Iterator[Path]:
    current = (start or Path.cwd()).resolve()
    yield current
    yield from current.parents


def find_config(start: Path | None = None) -> Path | None:
    """Return the ``postctl.toml`` in effect for *start*, or None.

    ``POSTCTL_CONFIG`` wins when set; a value naming a missing file means
    no config at all rather than falling back to the walk-up.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    for directory in _ancestors(start):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def find_site_root(start: Path | None = None) -> Path | None:
    """Nearest directory at or above *start* holding any of :data:`SITE_MARKERS`."""
    for directory in _ancestors(start):
        if any((directory / marker).is_file() for marker in SITE_MARKERS):
            return directory
    return None


def read_config(path: Path) -> dict[str, Any]:
    """Parse *path* as TOML.

    Raises:
        click.ClickException: the file is not valid TOML.
    """
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise click.ClickException(msg) from exc
