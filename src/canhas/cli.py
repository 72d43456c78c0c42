"""Root CLI group for canhas with global flags and command registration."""

from __future__ import annotations

from typing import Any

import click

from canhas import __version__
from canhas.commands import register_commands
from canhas.commands._context import AppContext
from canhas.config.settings import CanHasSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="canhas")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging to stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option("--parser", default=None, help="URI parser to use (overrides [url] parser).")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    parser: str | None,
) -> None:
    """canhas — URL and write-once validation rules."""
    overrides: dict[str, Any] = {}
    if parser:
        overrides["url"] = {"parser": parser}
    settings = CanHasSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        verbose=verbose,
        log_json=log_json,
        **overrides,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
