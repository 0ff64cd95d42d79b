"""Command group: strongly connected components and cycle detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from graphvisit.commands._base import GvGroup, graph_file_argument
from graphvisit.services.traversal import TraversalService

if TYPE_CHECKING:
    from graphvisit.commands._context import AppContext

_SCC_EXAMPLES = """\
  graphvisit scc list graph.yaml
  graphvisit scc cycle graph.yaml
  graphvisit --json scc list graph.yaml"""


@click.group(cls=GvGroup, examples=_SCC_EXAMPLES)
@click.pass_obj
def scc(app: AppContext) -> None:
    """Strongly connected components of a directed graph (Tarjan)."""


@scc.command(
    name="list",
    examples="""\
  graphvisit scc list graph.yaml
  graphvisit -q scc list graph.yaml""",
)
@graph_file_argument
@click.pass_obj
def list_components(app: AppContext, graph_file: str) -> None:
    """List strongly connected components in topological order."""
    graph = app.load_graph(graph_file, directed=True)
    app.emit(TraversalService(graph).strongly_connected())


@scc.command(
    examples="""\
  graphvisit scc cycle graph.yaml
  graphvisit --json scc cycle graph.yaml"""
)
@graph_file_argument
@click.pass_obj
def cycle(app: AppContext, graph_file: str) -> None:
    """Check whether the graph has a directed cycle."""
    graph = app.load_graph(graph_file, directed=True)
    app.emit(TraversalService(graph).cycle_check())
