"""Command group: breadth-first/depth-first traversal and connected components."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from graphvisit.commands._base import GvGroup, direction_option, graph_file_argument
from graphvisit.services.traversal import TraversalService

if TYPE_CHECKING:
    from graphvisit.commands._context import AppContext

_TRAVERSE_EXAMPLES = """\
  graphvisit traverse bfs graph.yaml A
  graphvisit traverse dfs graph.yaml A --limit 10
  graphvisit traverse components graph.yaml --undirected
  graphvisit --json traverse bfs graph.json A"""

_limit_option = click.option(
    "--limit",
    default=None,
    type=click.IntRange(min=1),
    help="Stop after this many vertices have been discovered.",
)


@click.group(cls=GvGroup, examples=_TRAVERSE_EXAMPLES)
@click.pass_obj
def traverse(app: AppContext) -> None:
    """Walk a graph from a source vertex."""


@traverse.command(
    examples="""\
  graphvisit traverse bfs graph.yaml A
  graphvisit traverse bfs graph.yaml A --limit 5
  graphvisit -q traverse bfs graph.yaml A"""
)
@graph_file_argument
@click.argument("source")
@_limit_option
@direction_option
@click.pass_obj
def bfs(
    app: AppContext, graph_file: str, source: str, limit: int | None, directed: bool | None
) -> None:
    """Breadth-first traversal from SOURCE."""
    graph = app.load_graph(graph_file, directed=directed)
    limit = limit if limit is not None else app.settings.traverse.limit
    app.emit(TraversalService(graph).breadth_first(source, limit=limit))


@traverse.command(
    examples="""\
  graphvisit traverse dfs graph.yaml A
  graphvisit traverse dfs graph.yaml A --undirected"""
)
@graph_file_argument
@click.argument("source")
@_limit_option
@direction_option
@click.pass_obj
def dfs(
    app: AppContext, graph_file: str, source: str, limit: int | None, directed: bool | None
) -> None:
    """Depth-first traversal from SOURCE."""
    graph = app.load_graph(graph_file, directed=directed)
    limit = limit if limit is not None else app.settings.traverse.limit
    app.emit(TraversalService(graph).depth_first(source, limit=limit))


@traverse.command(
    examples="""\
  graphvisit traverse components graph.yaml --undirected
  graphvisit --json traverse components graph.yaml"""
)
@graph_file_argument
@direction_option
@click.pass_obj
def components(app: AppContext, graph_file: str, directed: bool | None) -> None:
    """Split the graph into connected components."""
    graph = app.load_graph(graph_file, directed=directed)
    app.emit(TraversalService(graph).connected_components())
