"""Public API exports for dfs_api model and plugin contracts."""

from .model import Node, Graph, NodeState, TimestampKind, TraversalEvent
from .services import TraversalEventSink, RecordingEventSink, VisualizerPlugin

__all__ = [
    "Node",
    "Graph",
    "NodeState",
    "TimestampKind",
    "TraversalEvent",
    "TraversalEventSink",
    "RecordingEventSink",
    "VisualizerPlugin",
]
