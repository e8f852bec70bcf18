"""Tests for adjacency-list parsing and graph validation."""

from __future__ import annotations

import io
from collections.abc import Iterator
from pathlib import Path

import pytest

from graphwalk.domain.errors import (
    DanglingReferenceError,
    DuplicateNodeError,
    GraphLoadError,
    GraphReadError,
)
from graphwalk.domain.loader import load_graph, load_graph_file, parse_line


def _lines(text: str) -> list[str]:
    return text.splitlines(keepends=True)


class TestParseLine:
    def test_node_with_neighbors(self) -> None:
        assert parse_line("a b c\n") == ("a", ["b", "c"])

    def test_node_without_neighbors(self) -> None:
        assert parse_line("leaf\n") == ("leaf", [])

    def test_strips_crlf(self) -> None:
        assert parse_line("a b\r\n") == ("a", ["b"])

    def test_no_trailing_newline(self) -> None:
        assert parse_line("a b") == ("a", ["b"])

    def test_single_space_separator_keeps_empty_tokens(self) -> None:
        assert parse_line("a  b\n") == ("a", ["", "b"])


class TestLoadGraph:
    def test_basic(self) -> None:
        graph = load_graph(_lines("a b\nb"))
        assert graph.to_dict() == {"a": ["b"], "b": []}

    def test_leaf_has_empty_neighbors(self) -> None:
        graph = load_graph(_lines("a b\nb\n"))
        assert graph.neighbors("b") == ()

    def test_neighbor_order_preserved(self) -> None:
        graph = load_graph(_lines("hub z y x\nx\ny\nz\n"))
        assert graph.neighbors("hub") == ("z", "y", "x")

    def test_forward_references_allowed(self) -> None:
        graph = load_graph(_lines("a b\nb c\nc a\n"))
        assert graph.to_dict() == {"a": ["b"], "b": ["c"], "c": ["a"]}

    def test_accepts_text_stream(self) -> None:
        graph = load_graph(io.StringIO("a b\nb\n"))
        assert len(graph) == 2
        assert graph.edge_count == 1

    def test_repeated_neighbor_kept_in_order(self) -> None:
        graph = load_graph(_lines("a b c b\nb\nc\n"))
        assert graph.to_dict()["a"] == ["b", "c", "b"]

    def test_blank_line_defines_empty_node(self) -> None:
        graph = load_graph(["a\n", "\n"])
        assert graph.to_dict() == {"a": [], "": []}

    def test_blank_line_twice_is_duplicate(self) -> None:
        with pytest.raises(DuplicateNodeError) as exc_info:
            load_graph(["\n", "a\n", "\n"])
        assert exc_info.value.name == ""

    def test_empty_input(self) -> None:
        graph = load_graph([])
        assert len(graph) == 0

    def test_duplicate_node(self) -> None:
        with pytest.raises(DuplicateNodeError) as exc_info:
            load_graph(_lines("a b\nb\na c\nc"))
        assert exc_info.value.name == "a"
        assert exc_info.value.detail["line"] == 3
        assert exc_info.value.code == "DUPLICATE_NODE"
        assert "a" in str(exc_info.value)

    def test_duplicate_checked_before_dangling(self) -> None:
        """Validation runs after the whole stream is read."""
        with pytest.raises(DuplicateNodeError):
            load_graph(_lines("a missing\na\n"))

    def test_dangling_reference(self) -> None:
        with pytest.raises(DanglingReferenceError) as exc_info:
            load_graph(_lines("a b c\nb"))
        assert exc_info.value.name == "c"
        assert exc_info.value.referenced_by == "a"
        assert exc_info.value.code == "DANGLING_REFERENCE"

    def test_dangling_reported_in_file_order(self) -> None:
        with pytest.raises(DanglingReferenceError) as exc_info:
            load_graph(_lines("a x\nb y\n"))
        assert exc_info.value.name == "x"

    def test_errors_share_base_class(self) -> None:
        with pytest.raises(GraphLoadError):
            load_graph(_lines("a\na\n"))

    def test_read_failure(self) -> None:
        def broken() -> Iterator[str]:
            yield "a b\n"
            raise OSError("disk went away")

        with pytest.raises(GraphReadError) as exc_info:
            load_graph(broken())
        assert isinstance(exc_info.value, OSError)
        assert exc_info.value.code == "READ_ERROR"

    def test_loaded_graph_satisfies_invariants(self) -> None:
        graph = load_graph(_lines("a b d\nb a d\nc\nd c\n"))
        adjacency = graph.to_dict()
        assert len(adjacency) == len(set(adjacency))
        for neighbors in adjacency.values():
            assert all(n in adjacency for n in neighbors)


class TestLoadGraphFile:
    def test_reads_file(self, graph_file: Path) -> None:
        graph = load_graph_file(graph_file)
        assert graph.neighbors("a") == ("b", "d")

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(GraphReadError) as exc_info:
            load_graph_file(tmp_path / "nope.txt")
        assert exc_info.value.detail["path"] == str(tmp_path / "nope.txt")

    def test_invalid_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.txt"
        path.write_bytes(b"a \xff\xfe\n")
        with pytest.raises(GraphReadError):
            load_graph_file(path)
