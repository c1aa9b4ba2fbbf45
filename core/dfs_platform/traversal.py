import asyncio
import logging
from typing import Awaitable, Callable, Iterable, Iterator, List, Optional, Tuple

from api.dfs_api.model import Graph, Node, NodeState, TimestampKind
from api.dfs_api.services import TraversalEventSink

from .config import TraversalConfig
from .errors import TraversalInProgressError
from .state import TraversalContext
from .workspace import Workspace

LOGGER = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[None]]


class TraversalEngine:
    """
    Paced depth-first traversal over a workspace graph.

    Every node goes unvisited -> active -> done exactly once per run. Each
    transition stamps a time from a shared clock and is reported to the
    attached sinks, with a pause after discovery and after finish so a
    renderer can animate the walk. Roots are taken in creation order, so
    every node is reached whatever the connectivity.
    """

    def __init__(
        self,
        workspace: Workspace,
        config: Optional[TraversalConfig] = None,
        sleep: Optional[Sleep] = None,
        sinks: Iterable[TraversalEventSink] = (),
    ):
        self._workspace = workspace
        self._config = config or TraversalConfig()
        self._sleep = sleep or asyncio.sleep
        self._sinks: List[TraversalEventSink] = list(sinks)
        self._context = TraversalContext()
        self._running = False

    @property
    def config(self) -> TraversalConfig:
        return self._config

    def add_sink(self, sink: TraversalEventSink) -> None:
        self._sinks.append(sink)

    def remove_sink(self, sink: TraversalEventSink) -> None:
        self._sinks.remove(sink)

    # ==========================================================
    # PUBLISHED STATE (safe to poll at any time)
    # ==========================================================

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def context(self) -> TraversalContext:
        return self._context

    @property
    def tempo(self) -> int:
        return self._context.tempo

    @property
    def highlighted_edge(self) -> Optional[Tuple[str, str]]:
        return self._context.highlighted_edge

    def state_of(self, node_id: str) -> NodeState:
        return self._context.state_of(node_id)

    def discovery_time(self, node_id: str) -> Optional[int]:
        return self._context.discovery.get(node_id)

    def finish_time(self, node_id: str) -> Optional[int]:
        return self._context.finish.get(node_id)

    def snapshot(self) -> dict:
        return self._context.snapshot()

    # ==========================================================
    # RUN
    # ==========================================================

    async def run_traversal(self) -> TraversalContext:
        if self._running:
            LOGGER.warning("Rejected traversal start: a run is already in progress.")
            raise TraversalInProgressError("A traversal is already running on this engine.")

        self._running = True
        try:
            with self._workspace.freeze() as graph:
                self._context = TraversalContext(graph.node_ids)
                if not len(graph):
                    LOGGER.info("Traversal skipped: graph is empty.")
                    return self._context

                LOGGER.info("Traversal started over %d nodes.", len(graph))
                for root in graph.list_nodes():
                    if self._context.is_unvisited(root.node_id):
                        await self._visit(graph, root)
                LOGGER.info("Traversal finished at tempo %d.", self._context.tempo)
        finally:
            self._running = False

        return self._context

    async def _visit(self, graph: Graph, root: Node) -> None:
        """Walk everything reachable from ``root``, depth first.

        Frames are (node, remaining children) pairs on an explicit stack; no
        coroutine nests inside another.
        """
        if not self._context.is_unvisited(root.node_id):
            return

        stack: List[Tuple[Node, Iterator[str]]] = []
        await self._enter(root, None, stack)

        while stack:
            node, children = stack[-1]
            child = self._next_unvisited_child(graph, node, children)
            if child is not None:
                await self._enter(child, node.node_id, stack)
                continue
            stack.pop()
            await self._leave(node)

    async def _enter(self, node: Node, parent_id: Optional[str], stack: list) -> None:
        self._set_highlight((parent_id, node.node_id) if parent_id is not None else None)

        discovered = self._context.discover(node.node_id)
        LOGGER.debug("Discovered %s (%s) at %d.", node.node_id, node.label, discovered)
        self._emit_state(node.node_id, NodeState.ACTIVE)
        self._emit_timestamp(node.node_id, TimestampKind.DISCOVERY, discovered)
        stack.append((node, iter(node.children_ids)))
        await self._pause(self._config.enter_delay)

    async def _leave(self, node: Node) -> None:
        finished = self._context.complete(node.node_id)
        LOGGER.debug("Finished %s (%s) at %d.", node.node_id, node.label, finished)
        self._emit_state(node.node_id, NodeState.DONE)
        self._emit_timestamp(node.node_id, TimestampKind.FINISH, finished)
        await self._pause(self._config.exit_delay)

        self._set_highlight(None)

    def _next_unvisited_child(self, graph: Graph, node: Node, children: Iterator[str]) -> Optional[Node]:
        # State is read when the child comes up, not when the parent was entered
        for child_id in children:
            child = graph.get_node(child_id)
            if child is None:
                LOGGER.debug("Skipping dangling child %s of %s.", child_id, node.node_id)
                continue
            if self._context.is_unvisited(child_id):
                return child
        return None

    async def _pause(self, delay_ms: float) -> None:
        await self._sleep(delay_ms / 1000.0)

    # ==========================================================
    # EMISSION
    # ==========================================================

    def _set_highlight(self, edge: Optional[Tuple[str, str]]) -> None:
        self._context.highlighted_edge = edge
        for sink in self._sinks:
            sink.on_highlight_changed(edge)

    def _emit_state(self, node_id: str, state: NodeState) -> None:
        for sink in self._sinks:
            sink.on_state_changed(node_id, state)

    def _emit_timestamp(self, node_id: str, kind: TimestampKind, value: int) -> None:
        for sink in self._sinks:
            sink.on_timestamp_assigned(node_id, kind, value)
