"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, graphvisit.toml only holds
overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class GraphConfig(BaseModel):
    """[graph] section."""

    model_config = {"frozen": True}

    # Kind assumed for graph documents that do not declare ``directed``.
    directed: bool = True


class TraverseConfig(BaseModel):
    """[traverse] section."""

    model_config = {"frozen": True}

    # Default --limit for bfs/dfs; None means unlimited.
    limit: int | None = Field(default=None, ge=1)
