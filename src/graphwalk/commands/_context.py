"""AppContext — shared state for one CLI invocation.

Created by the root command. Configures logging, loads the graph once,
and centralizes result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

import click

from graphwalk.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from pathlib import Path

    from graphwalk.config.settings import GraphwalkSettings
    from graphwalk.domain.graph import Graph
    from graphwalk.services.result import ServiceResult


class AppContext:
    """Settings, output mode, and the loaded graph for one invocation."""

    def __init__(self, settings: GraphwalkSettings, graph_file: Path) -> None:
        self.settings = settings
        self.graph_file = graph_file
        self._graph: Graph | None = None

        from graphwalk.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose,
            log_json=settings.log_json,
            graph_file=graph_file,
        )

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            verbose=self.settings.verbose,
            separator=self.settings.query.separator,
        )

    @property
    def graph(self) -> Graph:
        """The loaded graph. A load failure is fatal (exit code 1)."""
        if self._graph is None:
            from graphwalk.domain.errors import GraphLoadError
            from graphwalk.services.loader import LoaderService

            loader = LoaderService(self.graph_file)
            try:
                self._graph = loader.load()
            except GraphLoadError as exc:
                self.fail(LoaderService.error_result(exc, source=loader.source))
        return self._graph

    def emit(self, result: ServiceResult) -> None:
        """Format and output a one-off ServiceResult.

        * Success (``result.ok``): writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        if not result.ok:
            self.fail(result)
        click.echo(format_result(result, settings=self.output_settings))

    def fail(self, result: ServiceResult) -> NoReturn:
        """Write a failed result to stderr and exit with code 1."""
        click.echo(format_result(result, settings=self.output_settings), err=True)
        raise SystemExit(1)
