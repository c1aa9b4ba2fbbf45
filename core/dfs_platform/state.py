from typing import Dict, Iterable, Optional, Tuple

from api.dfs_api.model import NodeState

Edge = Tuple[str, str]


class TraversalContext:
    """
    Run-scoped traversal state.

    Holds the three per-node maps (state, discovery time, finish time), the
    shared clock and the highlighted edge. A fresh context is built for every
    run; only the engine that owns it writes to it.
    """

    def __init__(self, node_ids: Iterable[str] = ()):
        self.states: Dict[str, NodeState] = {node_id: NodeState.UNVISITED for node_id in node_ids}
        self.discovery: Dict[str, int] = {}
        self.finish: Dict[str, int] = {}
        self.tempo = 0
        self.highlighted_edge: Optional[Edge] = None

    def state_of(self, node_id: str) -> NodeState:
        return self.states.get(node_id, NodeState.UNVISITED)

    def is_unvisited(self, node_id: str) -> bool:
        return self.state_of(node_id) is NodeState.UNVISITED

    def tick(self) -> int:
        self.tempo += 1
        return self.tempo

    def discover(self, node_id: str) -> int:
        if not self.is_unvisited(node_id):
            raise RuntimeError(f"Node {node_id} was already discovered in this run.")
        self.states[node_id] = NodeState.ACTIVE
        self.discovery[node_id] = self.tick()
        return self.discovery[node_id]

    def complete(self, node_id: str) -> int:
        if self.state_of(node_id) is not NodeState.ACTIVE:
            raise RuntimeError(f"Node {node_id} is not active and cannot be finished.")
        self.states[node_id] = NodeState.DONE
        self.finish[node_id] = self.tick()
        return self.finish[node_id]

    def snapshot(self) -> dict:
        return {
            "tempo": self.tempo,
            "highlighted_edge": list(self.highlighted_edge) if self.highlighted_edge else None,
            "nodes": {
                node_id: {
                    "state": state.value,
                    "discovery": self.discovery.get(node_id),
                    "finish": self.finish.get(node_id),
                }
                for node_id, state in self.states.items()
            },
        }
