"""NetworkXGraph — expose a NetworkX graph through the query contract."""

from __future__ import annotations

from collections.abc import Hashable, Iterator
from typing import Any

import networkx as nx

from graphvisit.graph.contract import Edge


class NetworkXGraph:
    """Read-only view of a ``nx.Graph`` or ``nx.DiGraph``.

    Vertices are enumerated in node insertion order and neighbours in
    edge insertion order, so traversals over the same graph are
    deterministic. For undirected graphs every incident edge is reported
    with the expanded vertex as ``head``.
    """

    def __init__(self, graph: nx.Graph[Any]) -> None:
        self._graph = graph

    @property
    def nx_graph(self) -> nx.Graph[Any]:
        """The wrapped NetworkX graph."""
        return self._graph

    @property
    def directed(self) -> bool:
        return bool(self._graph.is_directed())

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._graph

    def __len__(self) -> int:
        return int(self._graph.number_of_nodes())

    def number_of_vertices(self) -> int:
        return len(self)

    def vertices(self) -> list[Hashable]:
        return list(self._graph.nodes())

    def edges_of(self, vertex: Hashable) -> Iterator[Edge[Hashable]]:
        for neighbour in self._graph.adj[vertex]:
            yield Edge(head=vertex, tail=neighbour)

    def outbound(self, vertex: Hashable) -> list[Hashable]:
        # DiGraph.adj holds successors only; Graph.adj holds all neighbours.
        return list(self._graph.adj[vertex])

    def __repr__(self) -> str:
        kind = "directed" if self.directed else "undirected"
        return (
            f"NetworkXGraph({kind}, vertices={self._graph.number_of_nodes()}, "
            f"edges={self._graph.number_of_edges()})"
        )
