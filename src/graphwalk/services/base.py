"""BaseService — shared foundation for services that query a loaded graph.

Every query service receives the immutable :class:`Graph` at construction
time. The graph is passed explicitly; there is no module-level graph state.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from graphwalk.domain.graph import Graph


class BaseService:
    """Base for graph-backed services.

    Usage::

        class PathService(BaseService):
            def find_path(self, start: str, end: str) -> ServiceResult:
                neighbors = self._graph.neighbors(start)
                ...
    """

    def __init__(self, graph: Graph) -> None:
        self._graph = graph

    @property
    def graph(self) -> Graph:
        return self._graph
