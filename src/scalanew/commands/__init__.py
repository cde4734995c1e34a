"""Subcommand modules for scalanew.

Provides register_commands() which uses deferred imports to keep
``scalanew --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from scalanew.commands.create import create
    from scalanew.commands.paths import complete, initial_path
    from scalanew.commands.validate import validate
    from scalanew.commands.vars_cmd import vars_cmd

    cli.add_command(validate)
    cli.add_command(create)
    cli.add_command(initial_path)
    cli.add_command(vars_cmd)
    cli.add_command(complete)
