"""Load-time errors raised while building a Graph from adjacency-list text.

Each error carries a stable ``code`` and a ``detail`` dict so the service
layer can turn it into a structured ServiceError without string parsing.
"""

from __future__ import annotations

from typing import Any


class GraphLoadError(Exception):
    """Base class for every failure that makes a graph file unusable."""

    code = "LOAD_ERROR"

    def __init__(self, message: str, **detail: Any) -> None:
        super().__init__(message)
        self.detail: dict[str, Any] = detail


class DuplicateNodeError(GraphLoadError):
    """A node identifier was defined on more than one line."""

    code = "DUPLICATE_NODE"

    def __init__(self, name: str, *, line: int | None = None) -> None:
        super().__init__(f"Duplicate entry: {name}", name=name, line=line)
        self.name = name


class DanglingReferenceError(GraphLoadError):
    """A neighbor identifier has no node definition of its own."""

    code = "DANGLING_REFERENCE"

    def __init__(self, name: str, *, referenced_by: str | None = None) -> None:
        msg = f"Undefined node: {name}"
        if referenced_by is not None:
            msg = f"{msg} (referenced by {referenced_by})"
        super().__init__(msg, name=name, referenced_by=referenced_by)
        self.name = name
        self.referenced_by = referenced_by


class GraphReadError(GraphLoadError, OSError):
    """The underlying line stream could not be read."""

    code = "READ_ERROR"
