"""Root CLI group for scalanew with global flags and command registration."""

from __future__ import annotations

import click

from scalanew import __version__
from scalanew.commands import register_commands
from scalanew.commands._base import ScalanewGroup
from scalanew.commands._context import AppContext
from scalanew.config.settings import ScalanewSettings


@click.group(cls=ScalanewGroup, invoke_without_command=True)
@click.version_option(version=__version__, prog_name="scalanew")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with timing spans.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option("--no-lookup", is_flag=True, help="Skip the symbol lookup during validation.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    no_lookup: bool,
) -> None:
    """scalanew — create new Scala source files."""
    ctx.ensure_object(dict)
    settings = ScalanewSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        no_lookup=no_lookup,
    )
    app = AppContext(settings)
    ctx.obj = app
    ctx.call_on_close(app.close)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
