"""Breadth-first and depth-first traversal.

Both strategies share one expansion loop and differ only in which end of
the frontier the next vertex is taken from (FIFO for BFS, LIFO for DFS).
A vertex enters the frontier at most once: it is marked visited when it is
pushed, not when it is expanded.

Hook order per expanded vertex ``v``::

    discover_vertex(v)
      for each edge e = (v, w) with w not yet visited:
        discover_edge(e); push w; finish_edge(e)
    finish_vertex(v)

wrapped by a single ``discover_graph`` / ``finish_graph`` pair and
followed by ``on_completed``, whose value is returned.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Hashable
from typing import Any

from graphvisit.errors import require
from graphvisit.graph.contract import EdgeLike, Graph
from graphvisit.visit.handler import BaseVisitHandler, VisitHandler

logger = logging.getLogger(__name__)

type _Handler[V, E, G, R] = VisitHandler[V, E, G, R] | BaseVisitHandler[V, E, G, R]


def breadth_first_search[V: Hashable, E: EdgeLike[Any], G: Graph[Any, Any], R](
    graph: G,
    source: V,
    handler: _Handler[V, E, G, R] | None = None,
) -> R | None:
    """Visit every vertex reachable from *source* in breadth-first order.

    Vertices are discovered in non-decreasing edge-count distance from
    *source*.

    Args:
        graph: The graph to visit.
        source: The vertex the search begins from.
        handler: Optional observer; may halt the traversal early.

    Returns:
        The handler's ``on_completed()`` value, or None without a handler.

    Raises:
        InvalidArgumentError: If *graph* or *source* is None.
    """
    require(graph, "Graph to be visited can not be None.")
    require(source, "Root vertex the search begins from can not be None.")
    return _traverse(graph, source, handler, lifo=False)


def depth_first_search[V: Hashable, E: EdgeLike[Any], G: Graph[Any, Any], R](
    graph: G,
    source: V,
    handler: _Handler[V, E, G, R] | None = None,
) -> R | None:
    """Visit every vertex reachable from *source* in depth-first order.

    Iterative DFS: the next vertex expanded is always the one pushed most
    recently, so the last neighbour of a vertex is descended into first.

    Raises:
        InvalidArgumentError: If *graph* or *source* is None.
    """
    require(graph, "Graph to be visited can not be None.")
    require(source, "Root vertex the search begins from can not be None.")
    return _traverse(graph, source, handler, lifo=True)


def _traverse[V: Hashable, E: EdgeLike[Any], G: Graph[Any, Any], R](
    graph: G,
    source: V,
    handler: _Handler[V, E, G, R] | None,
    *,
    lifo: bool,
) -> R | None:
    strategy = "dfs" if lifo else "bfs"
    visitor: _Handler[V, E, G, R] = handler if handler is not None else BaseVisitHandler()

    logger.debug("Starting %s traversal from %r", strategy, source)

    expanded = 0
    halted = visitor.discover_graph(graph)
    if not halted:
        expanded, halted = _expand(graph, source, visitor, lifo=lifo)

    if halted:
        logger.debug("%s traversal halted by handler after %d vertices", strategy, expanded)
    else:
        logger.debug("%s traversal exhausted after %d vertices", strategy, expanded)

    visitor.finish_graph(graph)
    return visitor.on_completed()


def _expand[V: Hashable, E: EdgeLike[Any], G: Graph[Any, Any], R](
    graph: G,
    source: V,
    visitor: _Handler[V, E, G, R],
    *,
    lifo: bool,
) -> tuple[int, bool]:
    """Drain the frontier. Returns ``(expanded_count, halted)``."""
    frontier: deque[V] = deque([source])
    take = frontier.pop if lifo else frontier.popleft
    visited: set[V] = {source}
    expanded = 0

    while frontier:
        vertex = take()
        expanded += 1
        if visitor.discover_vertex(vertex):
            return expanded, True

        for edge in graph.edges_of(vertex):
            target = edge.tail
            if target in visited:
                continue
            visited.add(target)

            if visitor.discover_edge(edge):
                return expanded, True
            frontier.append(target)
            if visitor.finish_edge(edge):
                return expanded, True

        if visitor.finish_vertex(vertex):
            return expanded, True

    return expanded, False
