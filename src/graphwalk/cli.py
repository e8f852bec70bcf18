"""Root CLI command: load a graph file, then answer path queries."""

from __future__ import annotations

from pathlib import Path

import click

from graphwalk import __version__
from graphwalk.commands._context import AppContext
from graphwalk.config.settings import GraphwalkSettings

_EXAMPLES = """\
\b
Examples:
  graphwalk graph.txt
  graphwalk --check graph.txt
  printf 'a d\\nc b\\n' | graphwalk --json graph.txt
  graphwalk -v --dedupe-frontier graph.txt"""


@click.command(epilog=_EXAMPLES)
@click.version_option(version=__version__, prog_name="graphwalk")
@click.argument(
    "graph_file",
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option("--json", "json_output", is_flag=True, help="One JSON result per query.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging to stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option(
    "-c",
    "--config",
    "config_path",
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help="Override config file path.",
)
@click.option("--check", is_flag=True, help="Validate the graph file and exit.")
@click.option(
    "--dedupe-frontier",
    is_flag=True,
    help="Skip neighbors already queued for a visit.",
)
@click.option("--prompt", default=None, help="Prompt printed before each query.")
def cli(
    graph_file: Path,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    check: bool,
    dedupe_frontier: bool,
    prompt: str | None,
) -> None:
    """graphwalk — answer "path from A to B" queries over GRAPH_FILE.

    GRAPH_FILE holds one node per line: the node id followed by the ids
    of its outgoing neighbors, separated by single spaces.
    """
    settings = GraphwalkSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        verbose=verbose,
        log_json=log_json,
        query={"prompt": prompt} if prompt is not None else None,
        search={"frontier": "dedupe"} if dedupe_frontier else None,
    )
    app = AppContext(settings, graph_file)

    if check:
        from graphwalk.services.loader import LoaderService

        app.emit(LoaderService(graph_file).check())
        return

    from graphwalk.commands.repl import run_query_loop

    run_query_loop(app)
