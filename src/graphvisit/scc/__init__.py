"""Strongly connected components of directed graphs."""

from __future__ import annotations

from graphvisit.scc.tarjan import (
    cyclic_components,
    has_cycle,
    is_cyclic_component,
    strongly_connected_components,
)

__all__ = [
    "cyclic_components",
    "has_cycle",
    "is_cyclic_component",
    "strongly_connected_components",
]
