import asyncio
import logging
from typing import Any, Iterable, List, Optional

from api.dfs_api.model import Node
from api.dfs_api.services import RecordingEventSink, TraversalEventSink, VisualizerPlugin

from .config import TraversalConfig
from .state import TraversalContext
from .traversal import Sleep, TraversalEngine
from .workspace import Workspace

LOGGER = logging.getLogger(__name__)


class GraphEngine:
    """
    High-level orchestration layer.

    Responsibilities:
    - Graph editing through the workspace
    - Running paced traversals
    - Delegation to visualizer plugins
    """

    def __init__(
        self,
        config: Optional[TraversalConfig] = None,
        sleep: Optional[Sleep] = None,
        **options: Any,
    ):
        self.workspace = Workspace()
        self.config = config or TraversalConfig.from_options(**options)
        self.traversal = TraversalEngine(self.workspace, self.config, sleep=sleep)
        # Render-side view kept current by the run's events
        self.view = RecordingEventSink()
        self.traversal.add_sink(self.view)

    # ==========================================================
    # WORKSPACE DELEGATION API
    # ==========================================================

    def create_node(self, label: str, parent_ids: Iterable[str] = (), child_ids: Iterable[str] = ()) -> str:
        return self.workspace.create_node(label, parent_ids, child_ids)

    def find_node(self, node_id: str) -> Optional[Node]:
        return self.workspace.find_node_by_id(node_id)

    def list_nodes(self) -> List[Node]:
        return self.workspace.list_nodes()

    # ==========================================================
    # TRAVERSAL
    # ==========================================================

    def add_sink(self, sink: TraversalEventSink) -> None:
        self.traversal.add_sink(sink)

    async def run_traversal(self) -> TraversalContext:
        if not self.traversal.is_running:
            self.view.clear()
        return await self.traversal.run_traversal()

    def run_traversal_blocking(self) -> TraversalContext:
        """Run a traversal to completion from synchronous code."""
        return asyncio.run(self.run_traversal())

    def snapshot(self) -> dict:
        return self.traversal.snapshot()

    # ==========================================================
    # RENDERING
    # ==========================================================

    def render(self, visualizer: VisualizerPlugin, view: Optional[RecordingEventSink] = None, **options: Any) -> str:
        LOGGER.debug("Rendering frame with %s.", visualizer.display_name)
        return visualizer.render(self.workspace.get_graph(), view or self.view, **options)
