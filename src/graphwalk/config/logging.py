"""structlog configuration for graphwalk.

Everything goes to stderr so stdout carries only query output.
Two renderers:
- Human (default): console renderer, colored when stderr is a TTY
- JSON (--log-json): one structured JSON object per line

The graph file of the invocation is bound as ``graph_file`` context, so
every load and query event names the graph it ran against.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import structlog

LOGGER_NAME = "graphwalk"


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    graph_file: Path | str | None = None,
) -> None:
    """Configure structlog and route stdlib ``graphwalk.*`` records through it.

    Args:
        verbose: Enable DEBUG-level output for ``graphwalk.*`` loggers.
        log_json: Use the JSON renderer instead of the console renderer.
        graph_file: Graph file bound to every event of this invocation.
    """
    structlog.contextvars.clear_contextvars()
    if graph_file is not None:
        structlog.contextvars.bind_contextvars(graph_file=str(graph_file))

    pre_chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    # Query output owns stdout; only the stderr handler stays on the root.
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger(LOGGER_NAME).setLevel(logging.DEBUG if verbose else logging.WARNING)
