"""Connected components built on the visit handler capability.

Each component is found by a breadth-first search from the first vertex
not yet claimed by an earlier component. The handler records vertices as
they finish and strikes them from the shared list of untouched vertices.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable
from typing import Any

from graphvisit.errors import require
from graphvisit.graph.contract import Graph
from graphvisit.visit.handler import BaseVisitHandler
from graphvisit.visit.search import breadth_first_search

logger = logging.getLogger(__name__)


class ConnectedComponentHandler[V: Hashable](BaseVisitHandler[V, Any, Any, list[V]]):
    """Collect the vertices of one component.

    Args:
        untouched: Vertices not yet assigned to a component. A finished
            vertex is claimed only if it is still in here, and is then
            removed, so successive searches pick the next seed from what
            is left.
    """

    def __init__(self, untouched: dict[V, None]) -> None:
        self._untouched = untouched
        self._touched: list[V] = []

    def finish_vertex(self, vertex: V) -> bool:
        if vertex in self._untouched:
            del self._untouched[vertex]
            self._touched.append(vertex)
        return False

    def on_completed(self) -> list[V]:
        return self._touched


def connected_components[V: Hashable](graph: Graph[V, Any]) -> list[list[V]]:
    """Split *graph* into connected components, each in BFS discovery order.

    Meant for undirected graphs. On a directed graph each list holds the
    vertices reachable from its seed that no earlier component claimed.

    Raises:
        InvalidArgumentError: If *graph* is None.
    """
    require(graph, "Graph whose connected components are computed can not be None.")

    # dict as an insertion-ordered set: O(1) removal, stable seed order
    untouched: dict[V, None] = dict.fromkeys(graph.vertices())
    components: list[list[V]] = []

    while untouched:
        seed = next(iter(untouched))
        handler = ConnectedComponentHandler(untouched)
        component = breadth_first_search(graph, seed, handler) or []
        components.append(component)

    logger.debug("Found %d connected components", len(components))
    return components
