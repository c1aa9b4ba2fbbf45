from typing import Dict, Iterable, Iterator, List, Optional, Tuple
from uuid import uuid4

from .node import Node


class Graph:
    """
    Append-only directed graph.

    Links live inside each node as an ordered list of child ids. The
    creation order of ids is kept separately because it is the root order
    of a depth-first run.
    """

    def __init__(self):
        self._nodes: Dict[str, Node] = {}
        self._order: List[str] = []

    # -----------------
    # NODE OPERATIONS
    # -----------------

    def create_node(
        self,
        label: str,
        parent_ids: Iterable[str] = (),
        child_ids: Iterable[str] = (),
    ) -> str:
        label = (label or "").strip()
        if not label:
            raise ValueError("Node label must not be blank.")

        node_id = str(uuid4())
        node = Node(node_id, label, child_ids)
        self._nodes[node_id] = node
        self._order.append(node_id)

        # Unknown parents are ignored, there is nothing to attach to
        for parent_id in parent_ids:
            parent = self._nodes.get(parent_id)
            if parent is not None:
                parent.add_child(node_id)

        return node_id

    def get_node(self, node_id: str) -> Optional[Node]:
        return self._nodes.get(node_id)

    def list_nodes(self) -> List[Node]:
        return [self._nodes[node_id] for node_id in self._order]

    @property
    def node_ids(self) -> List[str]:
        return list(self._order)

    # -----------------
    # EDGE OPERATIONS
    # -----------------

    def iter_edges(self) -> Iterator[Tuple[str, str]]:
        """Yield (parent_id, child_id) for every link whose child exists."""
        for node in self.list_nodes():
            for child_id in node.children_ids:
                if child_id in self._nodes:
                    yield node.node_id, child_id

    def __len__(self) -> int:
        return len(self._order)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def to_dict(self) -> dict:
        return {
            "nodes": [node.to_dict() for node in self.list_nodes()],
            "edges": [
                {"source": source, "target": target}
                for source, target in self.iter_edges()
            ],
        }
