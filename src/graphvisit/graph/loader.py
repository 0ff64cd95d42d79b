"""Graph documents — YAML/JSON files describing a graph for the CLI.

A document is a mapping::

    directed: true        # optional, falls back to the configured default
    vertices: [A, B, C]   # optional, keeps isolated vertices and ordering
    edges:
      - [A, B]
      - [B, C]

JSON is a subset of YAML, so both are read with the same safe loader.
Edge endpoints that are not listed under ``vertices`` are added in the
order they first appear.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import networkx as nx
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from graphvisit.graph.networkx_adapter import NetworkXGraph


class GraphDocument(BaseModel):
    """Validated contents of a graph file."""

    model_config = ConfigDict(frozen=True, extra="forbid", coerce_numbers_to_str=True)

    directed: bool | None = None
    vertices: list[str] = Field(default_factory=list)
    edges: list[tuple[str, str]] = Field(default_factory=list)

    def to_networkx(
        self, *, default_directed: bool = True, directed: bool | None = None
    ) -> nx.Graph[str]:
        """Build the NetworkX graph.

        *directed* overrides the document; otherwise the document decides,
        falling back to *default_directed*.
        """
        if directed is None:
            directed = self.directed if self.directed is not None else default_directed
        g: nx.Graph[str] = nx.DiGraph() if directed else nx.Graph()
        g.add_nodes_from(self.vertices)
        g.add_edges_from(self.edges)
        return g


def parse_graph(text: str, *, source: str = "<string>") -> GraphDocument:
    """Parse and validate a graph document from *text*.

    Raises:
        ValueError: If the text is not valid YAML/JSON or does not match
            the document schema. The message names *source*.
    """
    yaml = YAML(typ="safe")
    try:
        raw: Any = yaml.load(text)
    except YAMLError as exc:
        msg = f"Cannot parse graph document {source}: {exc}"
        raise ValueError(msg) from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        msg = f"Graph document {source} must be a mapping, got {type(raw).__name__}"
        raise ValueError(msg)

    try:
        return GraphDocument.model_validate(raw)
    except ValidationError as exc:
        msg = f"Invalid graph document {source}: {exc.error_count()} error(s)\n{exc}"
        raise ValueError(msg) from exc


def load_graph(
    path: Path | str,
    *,
    default_directed: bool = True,
    directed: bool | None = None,
) -> NetworkXGraph:
    """Read the graph document at *path* and wrap it for the engines."""
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except OSError as exc:
        msg = f"Cannot read graph document {p}: {exc.strerror or exc}"
        raise ValueError(msg) from exc

    document = parse_graph(text, source=str(p))
    return NetworkXGraph(document.to_networkx(default_directed=default_directed, directed=directed))
