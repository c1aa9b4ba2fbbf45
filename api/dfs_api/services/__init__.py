"""Service-level plugin contracts for dfs_api."""

from .event_sink import TraversalEventSink
from .recording_sink import RecordingEventSink
from .visualizer_plugin import VisualizerPlugin

__all__ = ["TraversalEventSink", "RecordingEventSink", "VisualizerPlugin"]
