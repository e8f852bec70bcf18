"""Interactive query loop over stdin/stdout.

Protocol, one query per line:

    -> a d
    a b d
    -> c b
    No path from c to b

A line must hold exactly two space-separated ids. Query errors are
reported inline and never end the loop; end of input does.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, TextIO

import click

from graphwalk.output.formatters import format_query
from graphwalk.services.path import PathService
from graphwalk.services.result import ServiceResult

if TYPE_CHECKING:
    from graphwalk.commands._context import AppContext

logger = logging.getLogger(__name__)

BAD_QUERY_MESSAGE = "Must provide only start and end"


def parse_query(line: str) -> tuple[str, str] | None:
    """Split a query line into ``(start, end)``, or None if malformed."""
    tokens = line.rstrip("\r\n").split(" ")
    if len(tokens) != 2:
        return None
    return tokens[0], tokens[1]


def run_query_loop(app: AppContext, stream: TextIO | None = None) -> int:
    """Answer queries from *stream* (default: stdin) until end of input.

    Returns the number of well-formed queries answered.
    """
    if stream is None:
        stream = sys.stdin
    settings = app.output_settings
    prompt = "" if settings.json_output else app.settings.query.prompt
    service = PathService(app.graph, frontier=app.settings.search.frontier)

    answered = 0
    click.echo(prompt, nl=False)
    for line in stream:
        query = parse_query(line)
        if query is None:
            logger.debug("Rejected query line %r", line)
            result = ServiceResult.failure("find_path", "BAD_QUERY", BAD_QUERY_MESSAGE)
        else:
            result = service.find_path(*query)
            answered += 1
        click.echo(format_query(result, settings=settings))
        click.echo(prompt, nl=False)

    logger.debug("Input closed after %d queries", answered)
    return answered
