"""Visualizer plugin interface definitions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from ..model import Graph
from .recording_sink import RecordingEventSink


class VisualizerPlugin(ABC):
    """Contract for plugins that render a graph and its traversal view to HTML."""

    @property
    @abstractmethod
    def plugin_id(self) -> str:
        """Return a unique, stable plugin identifier."""

    @property
    @abstractmethod
    def display_name(self) -> str:
        """Return a human-readable plugin name for UI and logs."""

    @abstractmethod
    def render(self, graph: Graph, view: RecordingEventSink | None = None, **options: Any) -> str:
        """Render the graph, colored by the view's state, and return HTML output."""
