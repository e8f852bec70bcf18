"""PathService — per-query path search against the loaded graph.

Each call allocates fresh search state, so repeated identical queries
return identical results.
"""

from __future__ import annotations

import logging
import time

from graphwalk.domain.graph import Graph
from graphwalk.domain.search import FrontierMode, find_path
from graphwalk.services.base import BaseService
from graphwalk.services.result import ServiceResult

logger = logging.getLogger(__name__)


class PathService(BaseService):
    """Answers "is there a path from A to B" queries."""

    def __init__(self, graph: Graph, *, frontier: FrontierMode = FrontierMode.TRACE) -> None:
        super().__init__(graph)
        self._frontier = FrontierMode(frontier)

    def find_path(self, start: str, end: str) -> ServiceResult:
        """Search for *end* starting from *start*.

        Failure codes:
            NOT_FOUND: *start* is not a node of the graph.
            NO_PATH: *end* is not reachable from *start*.

        Both failures carry the message ``No path from <start> to <end>``.
        """
        message = f"No path from {start} to {end}"
        query = {"start": start, "end": end}

        if start not in self._graph:
            logger.debug("Start node %r not in graph", start)
            return ServiceResult.failure(
                "find_path", "NOT_FOUND", message, data=query, missing=start
            )

        began = time.perf_counter()
        path = find_path(self._graph, start, end, frontier=self._frontier)
        elapsed_ms = round((time.perf_counter() - began) * 1000, 3)
        meta = {"duration_ms": elapsed_ms, "frontier": self._frontier.value}

        if path is None:
            logger.debug("No path %s -> %s (%.3fms)", start, end, elapsed_ms)
            result = ServiceResult.failure("find_path", "NO_PATH", message, data=query)
            return result.model_copy(update={"meta": meta})

        logger.debug("Path %s -> %s visited %d nodes", start, end, len(path))
        return ServiceResult(
            ok=True,
            op="find_path",
            data={**query, "path": path, "visited": len(path)},
            meta=meta,
        )
