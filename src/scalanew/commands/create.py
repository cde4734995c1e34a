"""Command: create a new Scala source file from a template."""

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
  scalanew create com.example.Foo
  scalanew create com.example.Shape --kind trait
  scalanew create com.example.Point --kind case-class
  scalanew create Main --kind app --folder src/main/scala""",
)
@click.argument("name")
@click.option(
    "--folder",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Source folder to create the file in (default: first source root).",
)
@click.option(
    "--kind",
    default=None,
    help="Template kind: class, trait, object, case-class, app, or a custom one.",
)
@click.pass_obj
def create(app: AppContext, name: str, folder: Path | None, kind: str | None) -> None:
    """Create a Scala source file for the type NAME."""
    from scalanew.services.creator import FileCreatorService

    app.emit(FileCreatorService(app.workspace).create_file(name, folder=folder, kind=kind))
