"""Tests for the visit handler capability."""

from __future__ import annotations

from typing import Any

from graphvisit.graph import Edge
from graphvisit.visit import BaseVisitHandler, breadth_first_search


class TestBaseVisitHandler:
    def test_every_hook_continues(self) -> None:
        handler: BaseVisitHandler[str, Edge[str], Any, Any] = BaseVisitHandler()
        edge = Edge("A", "B")
        assert handler.discover_graph(object()) is False
        assert handler.discover_vertex("A") is False
        assert handler.discover_edge(edge) is False
        assert handler.finish_edge(edge) is False
        assert handler.finish_vertex("A") is False
        assert handler.finish_graph(object()) is False

    def test_on_completed_is_none(self) -> None:
        assert BaseVisitHandler().on_completed() is None

    def test_override_only_needed_hooks(self, diamond: Any) -> None:
        class Depths(BaseVisitHandler[str, Edge[str], Any, dict[str, int]]):
            def __init__(self) -> None:
                self.depth = {"A": 0}

            def discover_edge(self, edge: Edge[str]) -> bool:
                self.depth[edge.tail] = self.depth[edge.head] + 1
                return False

            def on_completed(self) -> dict[str, int]:
                return self.depth

        assert breadth_first_search(diamond, "A", Depths()) == {"A": 0, "B": 1, "C": 1, "D": 2}

    def test_duck_typed_handler_accepted(self, make_graph: Any) -> None:
        class Plain:
            """Implements the protocol without inheriting the base."""

            def __init__(self) -> None:
                self.finished: list[str] = []

            def discover_graph(self, graph: Any) -> bool:
                return False

            def discover_vertex(self, vertex: str) -> bool:
                return False

            def discover_edge(self, edge: Any) -> bool:
                return False

            def finish_edge(self, edge: Any) -> bool:
                return False

            def finish_vertex(self, vertex: str) -> bool:
                self.finished.append(vertex)
                return False

            def finish_graph(self, graph: Any) -> bool:
                return False

            def on_completed(self) -> list[str]:
                return self.finished

        graph = make_graph([("A", "B")])
        assert breadth_first_search(graph, "A", Plain()) == ["A", "B"]

    def test_finish_graph_return_value_is_ignored(self, make_graph: Any) -> None:
        class StopAtEnd(BaseVisitHandler[str, Any, Any, str]):
            def finish_graph(self, graph: Any) -> bool:
                return True

            def on_completed(self) -> str:
                return "done"

        assert breadth_first_search(make_graph([("A", "B")]), "A", StopAtEnd()) == "done"
