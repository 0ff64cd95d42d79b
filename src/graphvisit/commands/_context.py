"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Configures logging/telemetry, loads graph documents
and centralizes result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

import click

from graphvisit.output.formatters import OutputSettings, format_result
from graphvisit.services.result import ServiceResult

if TYPE_CHECKING:
    from graphvisit.config.settings import GraphvisitSettings
    from graphvisit.graph.networkx_adapter import NetworkXGraph


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: GraphvisitSettings) -> None:
        self.settings = settings

        from graphvisit.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from graphvisit.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    def load_graph(self, path: str, *, directed: bool | None = None) -> NetworkXGraph:
        """Load a graph document, emitting an ``INVALID_GRAPH`` error on failure."""
        from graphvisit.graph.loader import load_graph

        try:
            return load_graph(
                path,
                default_directed=self.settings.graph.directed,
                directed=directed,
            )
        except ValueError as exc:
            self.fail(ServiceResult.failure("load_graph", "INVALID_GRAPH", str(exc), path=path))

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout. Warnings go to stderr so they don't
          pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        if not result.ok:
            self.fail(result)

        click.echo(format_result(result, settings=self.output_settings))
        # In JSON mode, warnings are already in the serialized payload.
        if not self.settings.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)

    def fail(self, result: ServiceResult) -> NoReturn:
        """Write a failed result to stderr and exit with code 1."""
        click.echo(format_result(result, settings=self.output_settings), err=True)
        raise SystemExit(1)
