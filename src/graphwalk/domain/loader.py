"""Adjacency-list parsing and validation.

Line format: ``<node> <neighbor1> <neighbor2> ... <neighborN>``.
Tokens are separated by single spaces; a node without neighbors is a line
holding only its id. There is no comment or blank-line syntax.

Validation runs after every line has been consumed. The load is atomic:
either a fully validated Graph is returned or an error is raised.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from graphwalk.domain.errors import (
    DanglingReferenceError,
    DuplicateNodeError,
    GraphReadError,
)
from graphwalk.domain.graph import Graph

_NEWLINE_CHARS = "\r\n"


def parse_line(line: str) -> tuple[str, list[str]]:
    """Split one definition line into ``(node, neighbors)``."""
    tokens = [token.rstrip(_NEWLINE_CHARS) for token in line.split(" ")]
    return tokens[0], tokens[1:]


def load_graph(lines: Iterable[str]) -> Graph:
    """Build a validated Graph from an iterable of definition lines.

    Raises:
        DuplicateNodeError: A node id is defined on more than one line.
        DanglingReferenceError: A neighbor id has no definition.
        GraphReadError: The line source failed while being read.
    """
    entries: list[tuple[int, str, list[str]]] = []
    try:
        for lineno, line in enumerate(lines, start=1):
            node, neighbors = parse_line(line)
            entries.append((lineno, node, neighbors))
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"Unrecoverable error while reading graph: {exc}"
        raise GraphReadError(msg) from exc

    adjacency: dict[str, list[str]] = {}
    for lineno, node, neighbors in entries:
        if node in adjacency:
            raise DuplicateNodeError(node, line=lineno)
        adjacency[node] = neighbors

    for node, neighbors in adjacency.items():
        for neighbor in neighbors:
            if neighbor not in adjacency:
                raise DanglingReferenceError(neighbor, referenced_by=node)

    return Graph(adjacency)


def load_graph_file(path: Path | str) -> Graph:
    """Open *path* as UTF-8 text and load it with :func:`load_graph`."""
    try:
        with open(path, encoding="utf-8") as fh:
            return load_graph(fh)
    except GraphReadError:
        raise
    except OSError as exc:
        msg = f"Cannot read graph file {path}: {exc.strerror or exc}"
        raise GraphReadError(msg, path=str(path)) from exc
