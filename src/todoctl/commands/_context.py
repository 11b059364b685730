"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Opens the task session lazily and centralizes
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from todoctl.output.display import ConsoleDisplay
from todoctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from todoctl.config.settings import TodoSettings
    from todoctl.services.result import ServiceResult
    from todoctl.services.session import TaskSession


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The session (and with it the backing file) is opened on first use, so
    ``--help`` and ``--version`` never touch storage.
    """

    def __init__(self, settings: TodoSettings) -> None:
        self.settings = settings
        self.display = ConsoleDisplay()
        self._session: TaskSession | None = None

        from todoctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    @property
    def session(self) -> TaskSession:
        """The task session (opened lazily on first access)."""
        if self._session is None:
            from todoctl.infrastructure.storage import TaskStorage
            from todoctl.services.session import TaskSession

            storage = TaskStorage(self.settings.resolved_data_file)
            self._session = TaskSession.open(storage, self.display)
        return self._session

    def render(self, result: ServiceResult) -> str:
        return format_result(result, settings=self.output_settings)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        output = self.render(result)
        if result.ok:
            click.echo(output)
            if not self.settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
