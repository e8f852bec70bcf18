"""LoaderService — one-shot graph file load and validation.

``load()`` is the startup path: it returns the Graph or raises
:class:`GraphLoadError`. ``check()`` runs the same load but reports the
outcome as a ServiceResult, for ``--check`` and for callers that must not
raise.
"""

from __future__ import annotations

import logging
from pathlib import Path

from graphwalk.domain.errors import GraphLoadError
from graphwalk.domain.graph import Graph
from graphwalk.domain.loader import load_graph_file
from graphwalk.services.result import ServiceResult

logger = logging.getLogger(__name__)


class LoaderService:
    """Loads a graph description file."""

    def __init__(self, source: Path | str) -> None:
        self._source = Path(source)

    @property
    def source(self) -> Path:
        return self._source

    def load(self) -> Graph:
        """Load and validate the graph file.

        Raises:
            GraphLoadError: Duplicate node, dangling reference, or read error.
        """
        logger.debug("Loading graph from %s", self._source)
        try:
            graph = load_graph_file(self._source)
        except GraphLoadError as exc:
            logger.debug("Graph load failed (%s): %s", exc.code, exc)
            raise
        logger.debug("Loaded %d nodes, %d edges", len(graph), graph.edge_count)
        return graph

    def check(self) -> ServiceResult:
        """Validate the graph file without raising."""
        try:
            graph = self.load()
        except GraphLoadError as exc:
            return self.error_result(exc, source=self._source)
        return ServiceResult(
            ok=True,
            op="load_graph",
            data={
                "source": str(self._source),
                "nodes": len(graph),
                "edges": graph.edge_count,
            },
        )

    @staticmethod
    def error_result(exc: GraphLoadError, *, source: Path | None = None) -> ServiceResult:
        """Convert a load error into a failed ``load_graph`` result."""
        detail = {k: v for k, v in exc.detail.items() if v is not None}
        if source is not None:
            detail.setdefault("source", str(source))
        return ServiceResult.failure("load_graph", exc.code, str(exc), **detail)
