"""graphvisit — graph traversal and strongly connected component analysis."""

from __future__ import annotations

from graphvisit.connectivity import ConnectedComponentHandler, connected_components
from graphvisit.errors import InvalidArgumentError
from graphvisit.graph import DirectedGraph, Edge, Graph, NetworkXGraph
from graphvisit.scc import has_cycle, strongly_connected_components
from graphvisit.visit import (
    BaseVisitHandler,
    VisitHandler,
    breadth_first_search,
    depth_first_search,
)

__version__ = "0.1.0"

__all__ = [
    "BaseVisitHandler",
    "ConnectedComponentHandler",
    "DirectedGraph",
    "Edge",
    "Graph",
    "InvalidArgumentError",
    "NetworkXGraph",
    "VisitHandler",
    "__version__",
    "breadth_first_search",
    "connected_components",
    "depth_first_search",
    "has_cycle",
    "strongly_connected_components",
]
