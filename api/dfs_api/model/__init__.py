"""
Core traversal domain model (Node, Graph, traversal events).
"""

from .node import Node
from .graph import Graph
from .events import NodeState, TimestampKind, TraversalEvent

__all__ = ["Node", "Graph", "NodeState", "TimestampKind", "TraversalEvent"]
