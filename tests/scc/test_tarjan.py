"""Tests for Tarjan's strongly connected components and has_cycle."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import networkx as nx
import pytest

from graphvisit.errors import InvalidArgumentError
from graphvisit.graph import Edge, NetworkXGraph
from graphvisit.scc import (
    cyclic_components,
    has_cycle,
    is_cyclic_component,
    strongly_connected_components,
)


class CountingGraph:
    """Directed graph that counts outbound() calls per vertex."""

    def __init__(self, adjacency: dict[str, list[str]]) -> None:
        self._adjacency = adjacency
        self.calls: dict[str, int] = {}

    def vertices(self) -> list[str]:
        return list(self._adjacency)

    def edges_of(self, vertex: str) -> Iterator[Edge[str]]:
        for target in self._adjacency[vertex]:
            yield Edge(vertex, target)

    def outbound(self, vertex: str) -> list[str]:
        self.calls[vertex] = self.calls.get(vertex, 0) + 1
        return self._adjacency[vertex]


def _as_sets(components: list[frozenset[Any]]) -> set[frozenset[Any]]:
    return set(components)


class TestExamples:
    def test_three_cycle_is_one_component(self, make_graph: Any) -> None:
        graph = make_graph([("A", "B"), ("B", "C"), ("C", "A")])
        assert strongly_connected_components(graph) == [frozenset("ABC")]
        assert has_cycle(graph) is True

    def test_path_yields_singletons_in_topological_order(self, make_graph: Any) -> None:
        graph = make_graph([("A", "B"), ("B", "C")])
        components = strongly_connected_components(graph)
        assert components == [frozenset("A"), frozenset("B"), frozenset("C")]
        assert has_cycle(graph) is False

    def test_isolated_vertex_is_singleton(self, make_graph: Any) -> None:
        graph = make_graph(vertices=["A"])
        assert strongly_connected_components(graph) == [frozenset("A")]
        assert has_cycle(graph) is False

    def test_self_loop_is_a_cycle(self, make_graph: Any) -> None:
        graph = make_graph([("A", "A"), ("A", "B")])
        assert _as_sets(strongly_connected_components(graph)) == {frozenset("A"), frozenset("B")}
        assert has_cycle(graph) is True
        assert cyclic_components(graph) == [frozenset("A")]

    def test_empty_graph(self, make_graph: Any) -> None:
        graph = make_graph()
        assert strongly_connected_components(graph) == []
        assert has_cycle(graph) is False

    def test_two_cycles_joined_by_bridge(self, make_graph: Any) -> None:
        graph = make_graph(
            [("A", "B"), ("B", "A"), ("B", "C"), ("C", "D"), ("D", "E"), ("E", "C")]
        )
        components = strongly_connected_components(graph)
        assert components == [frozenset("AB"), frozenset("CDE")]

    def test_disconnected_subgraphs_all_covered(self, make_graph: Any) -> None:
        graph = make_graph([("A", "B"), ("B", "A"), ("X", "Y")], vertices=["Q"])
        assert _as_sets(strongly_connected_components(graph)) == {
            frozenset("AB"),
            frozenset("X"),
            frozenset("Y"),
            frozenset("Q"),
        }

    def test_cross_edge_into_closed_component_ignored(self, make_graph: Any) -> None:
        # C is finished (its own component) before B's edge to it is examined.
        graph = make_graph([("A", "C"), ("A", "B"), ("B", "C"), ("B", "A")])
        assert _as_sets(strongly_connected_components(graph)) == {
            frozenset("AB"),
            frozenset("C"),
        }

    def test_undirected_edge_pair_is_strongly_connected(self, make_graph: Any) -> None:
        graph = make_graph([("A", "B")], directed=False)
        assert strongly_connected_components(graph) == [frozenset("AB")]


class TestProperties:
    @pytest.mark.parametrize("seed", [0, 5, 17, 99, 1234])
    def test_matches_networkx_partition(self, seed: int) -> None:
        g = nx.gnp_random_graph(50, 0.05, seed=seed, directed=True)
        ours = strongly_connected_components(NetworkXGraph(g))
        expected = {frozenset(c) for c in nx.strongly_connected_components(g)}
        assert set(ours) == expected

    @pytest.mark.parametrize("seed", [2, 8, 31])
    def test_is_a_partition(self, seed: int) -> None:
        g = nx.gnp_random_graph(40, 0.07, seed=seed, directed=True)
        components = strongly_connected_components(NetworkXGraph(g))
        union: set[int] = set()
        for component in components:
            assert union.isdisjoint(component)
            union |= component
        assert union == set(g.nodes())

    @pytest.mark.parametrize("seed", [4, 12, 77])
    def test_topological_order_of_condensation(self, seed: int) -> None:
        g = nx.gnp_random_graph(40, 0.06, seed=seed, directed=True)
        components = strongly_connected_components(NetworkXGraph(g))
        position = {v: i for i, c in enumerate(components) for v in c}
        for u, v in g.edges():
            assert position[u] <= position[v]

    @pytest.mark.parametrize("seed", [6, 13])
    def test_has_cycle_matches_networkx(self, seed: int) -> None:
        g = nx.gnp_random_graph(15, 0.08, seed=seed, directed=True)
        assert has_cycle(NetworkXGraph(g)) is (not nx.is_directed_acyclic_graph(g))

    def test_deep_chain_cycle_without_recursion(self, make_graph: Any) -> None:
        n = 50_000
        edges = [(i, i + 1) for i in range(n - 1)] + [(n - 1, 0)]
        components = strongly_connected_components(make_graph(edges))
        assert len(components) == 1
        assert len(components[0]) == n

    def test_deep_chain_without_cycle(self, make_graph: Any) -> None:
        n = 50_000
        components = strongly_connected_components(make_graph([(i, i + 1) for i in range(n - 1)]))
        assert len(components) == n
        assert components[0] == frozenset({0})

    def test_outbound_enumerated_once_per_vertex(self) -> None:
        graph = CountingGraph({"A": ["B", "C"], "B": ["C", "A"], "C": ["A"], "D": ["A"]})
        strongly_connected_components(graph)
        assert graph.calls == {"A": 1, "B": 1, "C": 1, "D": 1}

    def test_calls_are_independent(self, make_graph: Any) -> None:
        graph = make_graph([("A", "B"), ("B", "A"), ("B", "C")])
        assert strongly_connected_components(graph) == strongly_connected_components(graph)


class TestErrors:
    def test_none_graph(self) -> None:
        with pytest.raises(InvalidArgumentError):
            strongly_connected_components(None)  # type: ignore[arg-type]

    def test_has_cycle_none_graph(self) -> None:
        with pytest.raises(InvalidArgumentError):
            has_cycle(None)  # type: ignore[arg-type]


class TestIsCyclicComponent:
    def test_multi_vertex(self, make_graph: Any) -> None:
        graph = make_graph([("A", "B"), ("B", "A")])
        assert is_cyclic_component(graph, frozenset("AB")) is True

    def test_singleton_without_loop(self, make_graph: Any) -> None:
        graph = make_graph([("A", "B")])
        assert is_cyclic_component(graph, frozenset("A")) is False
