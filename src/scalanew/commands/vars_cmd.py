"""Command: show the template variables derived from a name."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from scalanew.commands._base import ScalanewCommand

if TYPE_CHECKING:
    from scalanew.commands._context import AppContext


@click.command(
    "vars",
    cls=ScalanewCommand,
    examples="""\
  scalanew vars com.example.Foo
  scalanew --json vars Foo""",
)
@click.argument("name")
@click.pass_obj
def vars_cmd(app: AppContext, name: str) -> None:
    """Show package_name and type_name for NAME."""
    from scalanew.services.creator import FileCreatorService

    app.emit(FileCreatorService(app.workspace).template_variables(name))
