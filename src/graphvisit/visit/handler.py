"""Visit handlers — observers plugged into BFS/DFS.

Every boolean hook answers the question "should the traversal stop now?".
Returning ``True`` from any hook halts vertex expansion immediately; the
engine still calls :meth:`finish_graph` and :meth:`on_completed` exactly
once so the handler can finalize its result.

Usage::

    class Collector(BaseVisitHandler[str, Edge[str], NetworkXGraph, list[str]]):
        def __init__(self) -> None:
            self.seen: list[str] = []

        def discover_vertex(self, vertex: str) -> bool:
            self.seen.append(vertex)
            return False

        def on_completed(self) -> list[str]:
            return self.seen
"""

from __future__ import annotations

from typing import Protocol


class VisitHandler[V, E, G, R](Protocol):
    """Lifecycle hooks invoked by the traversal engines, in engine order."""

    def discover_graph(self, graph: G) -> bool: ...

    def discover_vertex(self, vertex: V) -> bool: ...

    def discover_edge(self, edge: E) -> bool: ...

    def finish_edge(self, edge: E) -> bool: ...

    def finish_vertex(self, vertex: V) -> bool: ...

    def finish_graph(self, graph: G) -> bool: ...

    def on_completed(self) -> R | None: ...


class BaseVisitHandler[V, E, G, R]:
    """No-op handler: never halts, completes with ``None``.

    Subclass and override only the hooks you need.
    """

    def discover_graph(self, graph: G) -> bool:
        return False

    def discover_vertex(self, vertex: V) -> bool:
        return False

    def discover_edge(self, edge: E) -> bool:
        return False

    def finish_edge(self, edge: E) -> bool:
        return False

    def finish_vertex(self, vertex: V) -> bool:
        return False

    def finish_graph(self, graph: G) -> bool:
        return False

    def on_completed(self) -> R | None:
        return None
