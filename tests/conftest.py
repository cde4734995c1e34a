"""Shared pytest fixtures and test helpers for scalanew tests."""

from __future__ import annotations

import os
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from scalanew.config.settings import ScalanewSettings
from scalanew.infrastructure.workspace import Workspace
from scalanew.services.telemetry import disable_telemetry


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's SCALANEW_* environment out of the tests."""
    for key in list(os.environ):
        if key.startswith("SCALANEW_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def _reset_telemetry() -> Generator[None]:
    """``-v`` invocations enable telemetry for the whole thread; switch it back off."""
    yield
    disable_telemetry()


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Temporary sbt-style project with main and test source roots.

    This is the single source of truth for the project layout.
    """
    (tmp_path / "src" / "main" / "scala").mkdir(parents=True)
    (tmp_path / "src" / "test" / "scala").mkdir(parents=True)
    return tmp_path


@pytest.fixture
def main_root(project_root: Path) -> Path:
    return project_root / "src" / "main" / "scala"


@pytest.fixture
def settings(project_root: Path) -> ScalanewSettings:
    return ScalanewSettings.from_cli(project_root=project_root)


@pytest.fixture
def workspace(settings: ScalanewSettings) -> Generator[Workspace]:
    """Workspace answering symbol lookups on the calling thread."""
    ws = Workspace(settings, sync_lookup=True)
    try:
        yield ws
    finally:
        ws.close()


@pytest.fixture
def _isolated_project(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to the temp project so the CLI resolves it as the project root.

    Use via ``@pytest.mark.usefixtures("_isolated_project")`` on command test
    classes.
    """
    monkeypatch.chdir(project_root)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def write_source(root: Path, relative: str, content: str = "") -> Path:
    """Write a source file below *root*, creating parent directories."""
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path
