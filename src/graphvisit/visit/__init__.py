"""Breadth-first/depth-first traversal and the visit handler capability."""

from __future__ import annotations

from graphvisit.visit.handler import BaseVisitHandler, VisitHandler
from graphvisit.visit.search import breadth_first_search, depth_first_search

__all__ = [
    "BaseVisitHandler",
    "VisitHandler",
    "breadth_first_search",
    "depth_first_search",
]
