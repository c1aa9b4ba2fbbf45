from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from ..model import NodeState, TimestampKind, TraversalEvent
from .event_sink import TraversalEventSink


class RecordingEventSink(TraversalEventSink):
    """
    Reference sink.

    Records every event in arrival order and folds them into a view of the
    published state (per-node state, discovery/finish times, highlighted
    edge), which is what a renderer needs to draw a frame.
    """

    def __init__(self):
        self.events: List[TraversalEvent] = []
        self.states: Dict[str, NodeState] = {}
        self.discovery: Dict[str, int] = {}
        self.finish: Dict[str, int] = {}
        self.highlighted_edge: Optional[Tuple[str, str]] = None

    def on_state_changed(self, node_id: str, new_state: NodeState) -> None:
        self.states[node_id] = new_state
        self.events.append(
            TraversalEvent(TraversalEvent.STATE_CHANGED, node_id=node_id, state=new_state)
        )

    def on_timestamp_assigned(self, node_id: str, kind: TimestampKind, value: int) -> None:
        if kind is TimestampKind.DISCOVERY:
            self.discovery[node_id] = value
        else:
            self.finish[node_id] = value
        self.events.append(
            TraversalEvent(
                TraversalEvent.TIMESTAMP_ASSIGNED,
                node_id=node_id,
                timestamp_kind=kind,
                value=value,
            )
        )

    def on_highlight_changed(self, edge: Optional[Tuple[str, str]]) -> None:
        self.highlighted_edge = edge
        self.events.append(TraversalEvent(TraversalEvent.HIGHLIGHT_CHANGED, edge=edge))

    # -----------------
    # VIEW HELPERS
    # -----------------

    def state_of(self, node_id: str) -> NodeState:
        return self.states.get(node_id, NodeState.UNVISITED)

    def times_label(self, node_id: str) -> str:
        """Format times as ``(d / f)`` with ``-`` for unset values."""
        d = self.discovery.get(node_id)
        f = self.finish.get(node_id)
        return f"({d if d is not None else '-'} / {f if f is not None else '-'})"

    def clear(self) -> None:
        self.events.clear()
        self.states.clear()
        self.discovery.clear()
        self.finish.clear()
        self.highlighted_edge = None
