"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Owns logging setup, the GraphService and result
emission (stdout/stderr routing and exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dagstore.config.logging import configure_logging
from dagstore.output.formatters import OutputSettings, format_result
from dagstore.services.graph import GraphService

if TYPE_CHECKING:
    from dagstore.config.settings import DagSettings
    from dagstore.services.result import ServiceResult


class AppContext:
    """Settings plus a lazily built GraphService."""

    def __init__(self, settings: DagSettings) -> None:
        self.settings = settings
        self._service: GraphService | None = None
        configure_logging(
            verbose=settings.verbose,
            log_json=settings.log_json,
            quiet=settings.quiet,
        )

    @property
    def service(self) -> GraphService:
        if self._service is None:
            self._service = GraphService(self.settings.codec)
        return self._service

    def emit(self, result: ServiceResult) -> None:
        """Print *result*; failures go to stderr and exit with code 1."""
        output = format_result(
            result,
            settings=OutputSettings(
                json_output=self.settings.json_output,
                quiet=self.settings.quiet,
                verbose=self.settings.verbose,
                color=self.settings.output.color,
                width=self.settings.output.width,
            ),
        )
        if result.ok:
            click.echo(output)
            # render_quiet omits warnings.
            if self.settings.quiet:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
