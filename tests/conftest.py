"""Shared pytest fixtures for graphwalk tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from graphwalk.domain.graph import Graph
from graphwalk.domain.loader import load_graph

# a -> b, d;  b -> a, d;  c (leaf);  d -> c
SAMPLE_GRAPH = "a b d\nb a d\nc\nd c\n"


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def sample_graph() -> Graph:
    """The four-node graph used across search and service tests."""
    return load_graph(SAMPLE_GRAPH.splitlines(keepends=True))


@pytest.fixture
def graph_file(tmp_path: Path) -> Path:
    """SAMPLE_GRAPH written to a temp file."""
    path = tmp_path / "graph.txt"
    path.write_text(SAMPLE_GRAPH, encoding="utf-8")
    return path


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from a temp dir with no graphwalk config in scope.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")``.
    """
    monkeypatch.chdir(tmp_path)
    for var in ("GRAPHWALK_CONFIG", "GRAPHWALK_JSON_OUTPUT", "GRAPHWALK_VERBOSE"):
        monkeypatch.delenv(var, raising=False)
