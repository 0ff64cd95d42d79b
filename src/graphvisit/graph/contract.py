"""Read-only graph query contract consumed by the engines.

The engines never touch storage directly. A graph is anything that can
enumerate its vertices and, for a given vertex, the edges leaving it.
Directed graphs additionally enumerate outbound neighbours, which is all
Tarjan's algorithm needs.

Every enumeration must be finite and stable for the duration of one call.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class Edge[V: Hashable]:
    """An edge as seen from the vertex being expanded.

    Attributes:
        head: The vertex whose edge list produced this edge.
        tail: The far endpoint, the vertex the traversal moves to.
    """

    head: V
    tail: V


class EdgeLike[V: Hashable](Protocol):
    """Anything exposing ``head`` and ``tail`` vertices."""

    @property
    def head(self) -> V: ...

    @property
    def tail(self) -> V: ...


@runtime_checkable
class Graph[V: Hashable, E: EdgeLike[Any]](Protocol):
    """Minimal query surface for BFS/DFS."""

    def vertices(self) -> Iterable[V]:
        """Return every vertex of the graph."""
        ...

    def edges_of(self, vertex: V) -> Iterable[E]:
        """Return the edges departing *vertex*."""
        ...


@runtime_checkable
class DirectedGraph[V: Hashable, E: EdgeLike[Any]](Graph[V, E], Protocol):
    """Graph whose edges have a direction (required by Tarjan's SCC)."""

    def outbound(self, vertex: V) -> Iterable[V]:
        """Return the vertices directly reachable from *vertex*."""
        ...
