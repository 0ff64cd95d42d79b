"""TraversalService — BFS/DFS, connected components and Tarjan SCC.

Wraps the engines in :mod:`graphvisit.visit`, :mod:`graphvisit.connectivity`
and :mod:`graphvisit.scc`, validates payloads against
:mod:`graphvisit.services.contracts`, and reports failures as
ServiceResult errors:

* ``INVALID_ARGUMENT`` — missing source, bad limit, or an undirected graph
  handed to a directed-only algorithm.
* ``NOT_FOUND`` — the source vertex is not in the graph.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable
from typing import Any

from graphvisit.connectivity import connected_components
from graphvisit.errors import InvalidArgumentError
from graphvisit.graph.contract import Edge
from graphvisit.scc import (
    cyclic_components,
    is_cyclic_component,
    strongly_connected_components,
)
from graphvisit.services.base import BaseService
from graphvisit.services.contracts import (
    ComponentsResultData,
    CycleCheckResultData,
    TraversalResultData,
    dump_validated,
)
from graphvisit.services.result import ServiceResult
from graphvisit.services.telemetry import trace_span, traced
from graphvisit.visit import BaseVisitHandler, breadth_first_search, depth_first_search

type _Search = Callable[..., Any]


class TraversalRecorder(BaseVisitHandler[Hashable, Edge[Hashable], Any, dict[str, Any]]):
    """Record discovery order and tree edges, halting after *limit* vertices."""

    def __init__(self, limit: int | None = None) -> None:
        self.limit = limit
        self.order: list[Hashable] = []
        self.tree_edges: list[dict[str, Hashable]] = []
        self.halted = False

    def discover_vertex(self, vertex: Hashable) -> bool:
        self.order.append(vertex)
        if self.limit is not None and len(self.order) >= self.limit:
            self.halted = True
        return self.halted

    def finish_edge(self, edge: Edge[Hashable]) -> bool:
        self.tree_edges.append({"head": edge.head, "tail": edge.tail})
        return False

    def on_completed(self) -> dict[str, Any]:
        return {
            "count": len(self.order),
            "halted": self.halted,
            "order": self.order,
            "tree_edges": self.tree_edges,
        }


def _sorted_members(component: frozenset[Hashable]) -> list[Hashable]:
    return sorted(component, key=str)


class TraversalService(BaseService):
    """Graph traversal and component analysis."""

    # ------------------------------------------------------------------
    # bfs / dfs
    # ------------------------------------------------------------------

    @traced
    def breadth_first(self, source: Hashable, *, limit: int | None = None) -> ServiceResult:
        """Breadth-first traversal from *source*.

        Args:
            source: Vertex the search begins from.
            limit: Stop after this many vertices have been discovered.
        """
        return self._search("bfs", breadth_first_search, source, limit)

    @traced
    def depth_first(self, source: Hashable, *, limit: int | None = None) -> ServiceResult:
        """Depth-first traversal from *source*.

        Args:
            source: Vertex the search begins from.
            limit: Stop after this many vertices have been discovered.
        """
        return self._search("dfs", depth_first_search, source, limit)

    def _search(
        self,
        op: str,
        search: _Search,
        source: Hashable,
        limit: int | None,
    ) -> ServiceResult:
        if limit is not None and limit < 1:
            return ServiceResult.failure(
                op, "INVALID_ARGUMENT", f"Limit must be at least 1, got {limit}"
            )
        if source is not None and source not in self._graph:
            return ServiceResult.failure(
                op, "NOT_FOUND", f"Vertex '{source}' not found in graph", vertex=str(source)
            )

        recorder = TraversalRecorder(limit=limit)
        with trace_span(op) as span:
            try:
                recorded = search(self._graph, source, recorder)
            except InvalidArgumentError as exc:
                return ServiceResult.failure(op, "INVALID_ARGUMENT", str(exc))
            if span:
                span.annotate("vertices", recorded["count"])
                span.annotate("halted", recorded["halted"])

        warnings: list[str] = []
        if recorder.halted:
            warnings.append(f"Traversal stopped after {limit} vertices (--limit)")

        data = dump_validated(
            TraversalResultData,
            {"strategy": op, "source": source, **recorded},
        )
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

    # ------------------------------------------------------------------
    # components: connected components via BFS
    # ------------------------------------------------------------------

    @traced
    def connected_components(self) -> ServiceResult:
        """Partition the graph into connected components."""
        op = "components"
        warnings: list[str] = []
        if self._graph.directed:
            warnings.append(
                "Graph is directed: components follow edge direction from each seed"
            )

        with trace_span("bfs_sweep") as span:
            components = connected_components(self._graph)
            if span:
                span.annotate("components", len(components))

        data = dump_validated(
            ComponentsResultData,
            {"count": len(components), "components": components},
        )
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

    # ------------------------------------------------------------------
    # scc: Tarjan strongly connected components
    # ------------------------------------------------------------------

    @traced
    def strongly_connected(self) -> ServiceResult:
        """Strongly connected components in topological order of the condensation."""
        op = "scc"
        if not self._graph.directed:
            return self._directed_only(op)

        with trace_span("tarjan") as span:
            components = strongly_connected_components(self._graph)
            flags = [is_cyclic_component(self._graph, c) for c in components]
            if span:
                span.annotate("components", len(components))

        data = dump_validated(
            ComponentsResultData,
            {
                "count": len(components),
                "components": [_sorted_members(c) for c in components],
                "has_cycle": any(flags),
                "cyclic": flags,
            },
        )
        return ServiceResult(ok=True, op=op, data=data)

    @traced
    def cycle_check(self) -> ServiceResult:
        """Report whether the graph has a directed cycle, and where."""
        op = "cycle"
        if not self._graph.directed:
            return self._directed_only(op)

        with trace_span("tarjan"):
            cyclic = cyclic_components(self._graph)

        data = dump_validated(
            CycleCheckResultData,
            {
                "has_cycle": bool(cyclic),
                "cyclic_components": [_sorted_members(c) for c in cyclic],
            },
        )
        return ServiceResult(ok=True, op=op, data=data)

    @staticmethod
    def _directed_only(op: str) -> ServiceResult:
        return ServiceResult.failure(
            op,
            "INVALID_ARGUMENT",
            "Strongly connected components require a directed graph",
        )
