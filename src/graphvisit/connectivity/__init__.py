"""Connected components over undirected graphs."""

from __future__ import annotations

from graphvisit.connectivity.components import ConnectedComponentHandler, connected_components

__all__ = ["ConnectedComponentHandler", "connected_components"]
