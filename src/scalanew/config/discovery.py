"""Locate the project a command runs in.

A project is anchored by ``scalanew.toml`` when one exists on the way up from
the starting directory. Without one, the nearest directory holding a Scala
build definition (``build.sbt``, ``build.sc``, ``pom.xml``, ...) is the
project root, so an ordinary sbt or Maven checkout works with no config.
``SCALANEW_CONFIG`` pins the config file and skips the walk.
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import click

CONFIG_FILENAME = "scalanew.toml"
CONFIG_ENV_VAR = "SCALANEW_CONFIG"
BUILD_MARKERS = ("build.sbt", "build.sc", "build.mill", "pom.xml", "build.gradle", "build.gradle.kts")


@dataclass(frozen=True)
class ProjectLocation:
    """Where a project lives and which config file, if any, applies to it."""

    root: Path
    config_path: Path | None = None


def locate_project(start: Path | None = None) -> ProjectLocation:
    """Walk up from *start* (default: cwd) to find the project root.

    ``scalanew.toml`` wins over build files further down the tree, so a
    config at the top of a multi-module build covers every module.
    """
    start = (start or Path.cwd()).resolve()

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        if p.is_file():
            return ProjectLocation(p.resolve().parent, p)
        return ProjectLocation(start)

    build_root: Path | None = None
    for current in (start, *start.parents):
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return ProjectLocation(current, candidate)
        if build_root is None and any((current / m).is_file() for m in BUILD_MARKERS):
            build_root = current
    return ProjectLocation(build_root or start)


def read_config(path: Path) -> dict[str, Any]:
    """Parse the TOML config at *path* into its section tables.

    Raises:
        click.ClickException: The file is not valid TOML.
    """
    raw = path.read_text(encoding="utf-8")
    try:
        return tomllib.loads(raw)
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise click.ClickException(msg) from exc
