"""Typed payload contracts for service results.

Payloads are validated before they leave the service layer so shape
regressions (``order`` vs ``items``, sets leaking into JSON) fail fast.
Vertices are reported as strings or integers, the forms a graph
document can produce.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel

type VertexId = str | int


def dump_validated[T: BaseModel](model_cls: type[T], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a normalized payload dict."""
    model = model_cls.model_validate(data)
    return model.model_dump(mode="python")


class TreeEdge(BaseModel):
    """An edge through which a new vertex was first reached."""

    head: VertexId
    tail: VertexId


class TraversalResultData(BaseModel):
    """Payload contract for ``TraversalService.breadth_first/depth_first``."""

    strategy: Literal["bfs", "dfs"]
    source: VertexId
    count: int
    halted: bool
    order: list[VertexId]
    tree_edges: list[TreeEdge]


class ComponentsResultData(BaseModel):
    """Payload contract for component partitions (connected or strong)."""

    count: int
    components: list[list[VertexId]]
    has_cycle: bool | None = None
    # Per-component cycle flags, parallel to ``components`` (SCC only).
    cyclic: list[bool] | None = None


class CycleCheckResultData(BaseModel):
    """Payload contract for ``TraversalService.cycle_check``."""

    has_cycle: bool
    cyclic_components: list[list[VertexId]]
