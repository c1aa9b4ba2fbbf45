import logging
from contextlib import contextmanager
from typing import Iterable, Iterator, List, Optional

from api.dfs_api.model import Graph, Node

from .errors import GraphLockedError

LOGGER = logging.getLogger(__name__)


class Workspace:
    """
    Graph store for one editing session.

    Responsibilities:
    - Own the append-only graph and its creation order
    - Provide lookup over nodes
    - Refuse edits while a traversal holds the graph frozen
    """

    def __init__(self, graph: Optional[Graph] = None):
        self._graph = graph if graph is not None else Graph()
        self._frozen = False

    # ==========================================================
    # GRAPH STATE MANAGEMENT
    # ==========================================================

    def get_graph(self) -> Graph:
        return self._graph

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    @contextmanager
    def freeze(self) -> Iterator[Graph]:
        """Hold the graph read-only for the duration of the block."""
        if self._frozen:
            raise GraphLockedError("Graph is already frozen by another traversal.")
        self._frozen = True
        try:
            yield self._graph
        finally:
            self._frozen = False

    # ==========================================================
    # NODE OPERATIONS
    # ==========================================================

    def create_node(
        self,
        label: str,
        parent_ids: Iterable[str] = (),
        child_ids: Iterable[str] = (),
    ) -> str:
        if self._frozen:
            LOGGER.warning("Rejected edit of node %r while a traversal is running.", label)
            raise GraphLockedError("Graph cannot be edited while a traversal is running.")
        node_id = self._graph.create_node(label, parent_ids, child_ids)
        LOGGER.debug("Created node %s (%r).", node_id, label)
        return node_id

    def find_node_by_id(self, node_id: str) -> Optional[Node]:
        return self._graph.get_node(node_id)

    def list_nodes(self) -> List[Node]:
        return self._graph.list_nodes()
