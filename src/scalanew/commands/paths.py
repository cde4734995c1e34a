"""Commands: package-prefix helpers for editors and shells."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from scalanew.commands._base import ScalanewCommand

if TYPE_CHECKING:
    from scalanew.commands._context import AppContext


@click.command(
    "initial-path",
    cls=ScalanewCommand,
    examples="""\
  scalanew initial-path src/main/scala/com/example
  scalanew -q initial-path src/main/scala/com/example/Foo.scala""",
)
@click.argument("path", type=click.Path(path_type=Path))
@click.pass_obj
def initial_path(app: AppContext, path: Path) -> None:
    """Print the package prefix to pre-fill for a file or folder PATH."""
    from scalanew.services.creator import FileCreatorService

    app.emit(FileCreatorService(app.workspace).initial_path(path))


@click.command(
    cls=ScalanewCommand,
    examples="""\
  scalanew complete
  scalanew complete com.ex
  scalanew -q complete COM --folder src/test/scala""",
)
@click.argument("prefix", default="")
@click.option(
    "--folder",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Source folder to list packages from (default: first source root).",
)
@click.pass_obj
def complete(app: AppContext, prefix: str, folder: Path | None) -> None:
    """List packages starting with PREFIX (case-insensitive)."""
    from scalanew.services.creator import FileCreatorService

    app.emit(FileCreatorService(app.workspace).completion_entries(prefix, folder=folder))
