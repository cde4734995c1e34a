"""Command: check whether a name is usable for a new Scala type."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from scalanew.commands._base import ScalanewCommand

if TYPE_CHECKING:
    from scalanew.commands._context import AppContext


@click.command(
    cls=ScalanewCommand,
    examples="""\
  scalanew validate com.example.Foo
  scalanew validate Foo --folder src/test/scala
  scalanew --json validate 'a.b.`my type`'""",
)
@click.argument("name")
@click.option(
    "--folder",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Source folder the file would be created in (default: first source root).",
)
@click.pass_obj
def validate(app: AppContext, name: str, folder: Path | None) -> None:
    """Validate NAME as a fully-qualified Scala type name."""
    from scalanew.services.creator import FileCreatorService

    app.emit(FileCreatorService(app.workspace).validate_name(name, folder=folder))
