"""Single-source path search over a Graph.

The search is a FIFO frontier walk. The returned path is the visited trace:
every node dequeued before the target was reached, in visit order, ending
with the target. It is *a* path, not the shortest one.
"""

from __future__ import annotations

from collections import deque
from enum import StrEnum

from graphwalk.domain.graph import Graph


class FrontierMode(StrEnum):
    """How neighbors are admitted to the frontier.

    ``trace`` only skips neighbors that were already visited, so a node can
    be queued more than once before it is reached. ``dedupe`` also skips
    neighbors that are already queued. Both yield the same visited trace.
    """

    TRACE = "trace"
    DEDUPE = "dedupe"


def find_path(
    graph: Graph,
    start: str,
    end: str,
    *,
    frontier: FrontierMode = FrontierMode.TRACE,
) -> list[str] | None:
    """Walk from *start* until *end* is reached.

    Returns:
        The visited trace ending with *end*, or None when *start* is not a
        node or *end* cannot be reached along directed edges.
    """
    if start not in graph:
        return None

    todo: deque[str] = deque()
    queued: set[str] = set()
    visited: list[str] = []
    seen: set[str] = set()
    current = start

    while True:
        if current == end:
            visited.append(current)
            return visited

        for neighbor in graph.neighbors(current):
            if neighbor in seen:
                continue
            if frontier is FrontierMode.DEDUPE:
                if neighbor in queued:
                    continue
                queued.add(neighbor)
            todo.append(neighbor)

        if current not in seen:
            seen.add(current)
            visited.append(current)

        if not todo:
            return None
        current = todo.popleft()
