"""Tarjan's strongly connected components.

Single depth-first pass assigning each vertex a discovery index and a
low-link value. A vertex whose low-link equals its own index is the root
of a component; everything above it on the vertex stack belongs to that
component.

The recursion of the textbook formulation is simulated with an explicit
stack of ``(vertex, neighbour iterator)`` frames, so the depth of the
graph is bounded by memory rather than by Python's recursion limit. The
index/low-link updates happen in the same order as the recursive version:

* an unindexed neighbour is descended into, and when its frame is popped
  the parent's low-link absorbs the child's low-link;
* an indexed neighbour still on the stack lowers the low-link to its index;
* an indexed neighbour off the stack is in a closed component and ignored.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterator
from dataclasses import dataclass, field
from typing import Any

from graphvisit.errors import require
from graphvisit.graph.contract import DirectedGraph

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _VertexMeta:
    index: int
    lowlink: int


@dataclass
class _TarjanState[V: Hashable]:
    """All bookkeeping for one SCC computation; discarded when it ends."""

    counter: int = 0
    meta: dict[V, _VertexMeta] = field(default_factory=dict)
    stack: list[V] = field(default_factory=list)
    on_stack: set[V] = field(default_factory=set)
    # Components in completion order (sinks of the condensation first).
    completed: list[frozenset[V]] = field(default_factory=list)

    def enter(self, vertex: V) -> _VertexMeta:
        info = _VertexMeta(index=self.counter, lowlink=self.counter)
        self.counter += 1
        self.meta[vertex] = info
        self.stack.append(vertex)
        self.on_stack.add(vertex)
        return info

    def close(self, root: V) -> None:
        members: list[V] = []
        while True:
            vertex = self.stack.pop()
            self.on_stack.discard(vertex)
            members.append(vertex)
            if vertex == root:
                break
        self.completed.append(frozenset(members))


def strongly_connected_components[V: Hashable](
    graph: DirectedGraph[V, Any],
) -> list[frozenset[V]]:
    """Partition *graph* into its maximal strongly connected components.

    Components are returned in reverse order of completion, which is a
    topological order of the condensation graph: if an edge leads from
    component X to component Y, X is listed before Y.

    Raises:
        InvalidArgumentError: If *graph* is None.
    """
    require(graph, "Graph whose strongly connected components are computed can not be None.")

    state: _TarjanState[V] = _TarjanState()
    for vertex in graph.vertices():
        if vertex not in state.meta:
            _strong_connect(graph, vertex, state)

    logger.debug(
        "Found %d strongly connected components over %d vertices",
        len(state.completed),
        state.counter,
    )
    return state.completed[::-1]


def _strong_connect[V: Hashable](
    graph: DirectedGraph[V, Any],
    root: V,
    state: _TarjanState[V],
) -> None:
    state.enter(root)
    frames: list[tuple[V, Iterator[V]]] = [(root, iter(graph.outbound(root)))]

    while frames:
        vertex, neighbours = frames[-1]
        info = state.meta[vertex]

        descended = False
        for adjacent in neighbours:
            adjacent_info = state.meta.get(adjacent)
            if adjacent_info is None:
                state.enter(adjacent)
                frames.append((adjacent, iter(graph.outbound(adjacent))))
                descended = True
                break
            if adjacent in state.on_stack:
                info.lowlink = min(info.lowlink, adjacent_info.index)
        if descended:
            continue

        # Every neighbour examined: return from this frame.
        frames.pop()
        if frames:
            parent = state.meta[frames[-1][0]]
            parent.lowlink = min(parent.lowlink, info.lowlink)

        if info.lowlink == info.index:
            state.close(vertex)


def has_cycle[V: Hashable](graph: DirectedGraph[V, Any]) -> bool:
    """Return True if *graph* contains at least one directed cycle.

    A cycle is a strongly connected component with more than one vertex,
    or a single vertex with an edge to itself.

    Raises:
        InvalidArgumentError: If *graph* is None.
    """
    return bool(cyclic_components(graph))


def cyclic_components[V: Hashable](graph: DirectedGraph[V, Any]) -> list[frozenset[V]]:
    """Return the strongly connected components that contain a cycle."""
    return [c for c in strongly_connected_components(graph) if is_cyclic_component(graph, c)]


def is_cyclic_component[V: Hashable](
    graph: DirectedGraph[V, Any], component: frozenset[V]
) -> bool:
    """Return True if *component* has several vertices or a self-loop."""
    if len(component) > 1:
        return True
    (vertex,) = component
    return any(adjacent == vertex for adjacent in graph.outbound(vertex))
