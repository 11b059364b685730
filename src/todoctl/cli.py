"""Root CLI group for todoctl with global flags and command registration."""

from __future__ import annotations

from pathlib import Path

import click

from todoctl import __version__
from todoctl.commands import register_commands
from todoctl.commands._context import AppContext
from todoctl.config.settings import TodoSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="todoctl")
@click.option("--json", "json_output", is_flag=True, default=None, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, default=None, help="Minimal output.")
@click.option(
    "-v", "--verbose", is_flag=True, default=None, help="Detailed output with debug info."
)
@click.option(
    "--log-json", is_flag=True, default=None, help="Structured JSON log output to stderr."
)
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "-f",
    "--data-file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Task file to use instead of the configured one.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool | None,
    quiet: bool | None,
    verbose: bool | None,
    log_json: bool | None,
    config_path: str | None,
    data_file: str | None,
) -> None:
    """todoctl — interactive to-do, deadline and event tracker."""
    settings = TodoSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        data_file=Path(data_file).absolute() if data_file else None,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        from todoctl.commands.shell import run_shell

        run_shell(ctx.obj)


register_commands(cli)
