"""Traversal platform: graph workspace, paced DFS engine and orchestration."""

from .config import TraversalConfig
from .engine import GraphEngine
from .errors import DfsPlatformError, GraphLockedError, TraversalInProgressError
from .state import TraversalContext
from .traversal import TraversalEngine
from .workspace import Workspace

__all__ = [
    "TraversalConfig",
    "GraphEngine",
    "DfsPlatformError",
    "GraphLockedError",
    "TraversalInProgressError",
    "TraversalContext",
    "TraversalEngine",
    "Workspace",
]
