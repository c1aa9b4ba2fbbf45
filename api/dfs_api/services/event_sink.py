"""Event sink interface definitions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Tuple

from ..model import NodeState, TimestampKind


class TraversalEventSink(ABC):
    """Contract for consumers (usually a rendering layer) of traversal events.

    The engine calls these hooks synchronously, in emission order, from
    inside the run. Implementations must not mutate the graph or the
    engine's state.
    """

    @abstractmethod
    def on_state_changed(self, node_id: str, new_state: NodeState) -> None:
        """A node moved to ``active`` or ``done``."""

    @abstractmethod
    def on_timestamp_assigned(self, node_id: str, kind: TimestampKind, value: int) -> None:
        """A discovery or finish time was stamped on a node."""

    @abstractmethod
    def on_highlight_changed(self, edge: Optional[Tuple[str, str]]) -> None:
        """The edge under traversal changed; ``None`` clears the highlight."""
