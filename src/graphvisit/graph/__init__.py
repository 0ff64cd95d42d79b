"""Graph query contract and the adapters that satisfy it."""

from __future__ import annotations

from graphvisit.graph.contract import DirectedGraph, Edge, EdgeLike, Graph
from graphvisit.graph.loader import GraphDocument, load_graph, parse_graph
from graphvisit.graph.networkx_adapter import NetworkXGraph

__all__ = [
    "DirectedGraph",
    "Edge",
    "EdgeLike",
    "Graph",
    "GraphDocument",
    "NetworkXGraph",
    "load_graph",
    "parse_graph",
]
