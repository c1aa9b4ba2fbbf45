from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class NodeState(str, Enum):
    """Visitation state of a node during one run (white / gray / black)."""

    UNVISITED = "unvisited"
    ACTIVE = "active"
    DONE = "done"


class TimestampKind(str, Enum):
    DISCOVERY = "discovery"
    FINISH = "finish"


@dataclass(frozen=True)
class TraversalEvent:
    """One observable step of a run, as delivered to an event sink."""

    kind: str
    node_id: Optional[str] = None
    state: Optional[NodeState] = None
    timestamp_kind: Optional[TimestampKind] = None
    value: Optional[int] = None
    edge: Optional[Tuple[str, str]] = None

    STATE_CHANGED = "state_changed"
    TIMESTAMP_ASSIGNED = "timestamp_assigned"
    HIGHLIGHT_CHANGED = "highlight_changed"

    def to_dict(self) -> dict:
        return {
            "kind": self.kind,
            "node_id": self.node_id,
            "state": self.state.value if self.state else None,
            "timestamp_kind": self.timestamp_kind.value if self.timestamp_kind else None,
            "value": self.value,
            "edge": list(self.edge) if self.edge else None,
        }
