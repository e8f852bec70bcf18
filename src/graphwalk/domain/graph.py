"""Graph — immutable directed adjacency structure backed by NetworkX.

Nodes are opaque string ids. Each node keeps its outgoing neighbors exactly
as they were defined, repeats included, so traversals are deterministic.
The DiGraph view is frozen at construction; every instance is read-only.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence

import networkx as nx


class Graph:
    """Read-only directed graph of string node ids."""

    def __init__(self, adjacency: Mapping[str, Sequence[str]]) -> None:
        """Build from a node -> neighbors mapping.

        Every neighbor must already be a key of *adjacency*; the loader
        enforces this before construction.
        """
        self._adjacency: dict[str, tuple[str, ...]] = {}
        g: nx.DiGraph[str] = nx.DiGraph()
        # Add all nodes first so leaf nodes keep their definition order.
        g.add_nodes_from(adjacency)
        for node, neighbors in adjacency.items():
            for neighbor in neighbors:
                if neighbor not in g:
                    msg = f"Neighbor '{neighbor}' of '{node}' is not a node"
                    raise ValueError(msg)
                g.add_edge(node, neighbor)
            self._adjacency[node] = tuple(neighbors)
        self._g = nx.freeze(g)

    @property
    def digraph(self) -> nx.DiGraph[str]:
        """The frozen NetworkX view (raises NetworkXError on mutation).

        Repeated neighbors collapse to a single edge here.
        """
        return self._g

    def neighbors(self, node_id: str) -> tuple[str, ...]:
        """Return the outgoing neighbors of *node_id* in definition order.

        Raises:
            KeyError: If the node does not exist.
        """
        return self._adjacency[node_id]

    @property
    def edge_count(self) -> int:
        return sum(len(neighbors) for neighbors in self._adjacency.values())

    def to_dict(self) -> dict[str, list[str]]:
        """Return a plain ``{node: [neighbors]}`` copy."""
        return {node: list(neighbors) for node, neighbors in self._adjacency.items()}

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._g

    def __iter__(self) -> Iterator[str]:
        return iter(self._g)

    def __len__(self) -> int:
        return self._g.number_of_nodes()

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self)}, edges={self.edge_count})"
