"""Shared pytest fixtures and test helpers for graphvisit tests."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Iterator
from pathlib import Path
from typing import Any

import networkx as nx
import pytest
from click.testing import CliRunner

from graphvisit.graph import Edge, NetworkXGraph
from graphvisit.visit import BaseVisitHandler

type GraphFactory = Callable[..., NetworkXGraph]


class RecordingHandler(BaseVisitHandler[Hashable, Edge[Hashable], Any, list[tuple[str, Any]]]):
    """Record every hook call as ``(hook, item)``; optionally halt on one.

    Edges are recorded as ``(head, tail)`` tuples, graphs as ``"graph"``.
    """

    def __init__(self, halt_on: tuple[str, Any] | None = None) -> None:
        self.halt_on = halt_on
        self.events: list[tuple[str, Any]] = []

    def _record(self, hook: str, item: Any) -> bool:
        self.events.append((hook, item))
        return self.halt_on == (hook, item)

    def discover_graph(self, graph: Any) -> bool:
        return self._record("discover_graph", "graph")

    def discover_vertex(self, vertex: Hashable) -> bool:
        return self._record("discover_vertex", vertex)

    def discover_edge(self, edge: Edge[Hashable]) -> bool:
        return self._record("discover_edge", (edge.head, edge.tail))

    def finish_edge(self, edge: Edge[Hashable]) -> bool:
        return self._record("finish_edge", (edge.head, edge.tail))

    def finish_vertex(self, vertex: Hashable) -> bool:
        return self._record("finish_vertex", vertex)

    def finish_graph(self, graph: Any) -> bool:
        return self._record("finish_graph", "graph")

    def on_completed(self) -> list[tuple[str, Any]]:
        self.events.append(("on_completed", None))
        return self.events

    def items(self, hook: str) -> list[Any]:
        return [item for h, item in self.events if h == hook]


@pytest.fixture
def recorder() -> type[RecordingHandler]:
    """The RecordingHandler class, for tests that build their own."""
    return RecordingHandler


@pytest.fixture
def make_graph() -> GraphFactory:
    """Build a NetworkXGraph from an edge list.

    ``make_graph([("A", "B")], directed=False, vertices=["Z"])``
    """

    def _make(
        edges: Iterable[tuple[Hashable, Hashable]] = (),
        *,
        directed: bool = True,
        vertices: Iterable[Hashable] = (),
    ) -> NetworkXGraph:
        g: nx.Graph[Hashable] = nx.DiGraph() if directed else nx.Graph()
        g.add_nodes_from(vertices)
        g.add_edges_from(edges)
        return NetworkXGraph(g)

    return _make


@pytest.fixture
def diamond(make_graph: GraphFactory) -> NetworkXGraph:
    """A -> B, A -> C, B -> D, C -> D."""
    return make_graph([("A", "B"), ("A", "C"), ("B", "D"), ("C", "D")])


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def write_graph(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write a graph document into tmp_path and return its path."""

    def _write(content: str, name: str = "graph.yaml") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in tmp_path with no graphvisit.toml or GRAPHVISIT_* env leaking in."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("GRAPHVISIT_CONFIG", raising=False)
    monkeypatch.delenv("GRAPHVISIT_GRAPH__DIRECTED", raising=False)
    monkeypatch.delenv("GRAPHVISIT_TRAVERSE__LIMIT", raising=False)


@pytest.fixture
def _reset_app_state() -> Iterator[None]:
    """Undo the logging and telemetry changes AppContext makes."""
    import logging

    from graphvisit.services.telemetry import disable_telemetry

    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    gv_level = logging.getLogger("graphvisit").level
    yield
    root.handlers = handlers
    root.setLevel(level)
    logging.getLogger("graphvisit").setLevel(gv_level)
    disable_telemetry()
