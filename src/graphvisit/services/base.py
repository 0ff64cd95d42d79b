"""BaseService — foundation for graphvisit services.

Every service receives the graph it analyzes at construction time.
Services translate engine exceptions into ServiceResult errors; nothing
expected escapes as an exception.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from graphvisit.graph.networkx_adapter import NetworkXGraph

logger = logging.getLogger(__name__)


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class TraversalService(BaseService):
            def breadth_first(self, source: str) -> ServiceResult:
                ...self._graph...
    """

    def __init__(self, graph: NetworkXGraph) -> None:
        self._graph = graph
        logger.debug("%s bound to %r", type(self).__name__, graph)
