import pytest

from api.dfs_api.services import RecordingEventSink
from core.dfs_platform import TraversalEngine, Workspace


class RecordingSleeper:
    """Stands in for asyncio.sleep; records the requested seconds and returns at once."""

    def __init__(self):
        self.calls = []

    async def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


@pytest.fixture
def sleeper() -> RecordingSleeper:
    return RecordingSleeper()


@pytest.fixture
def sink() -> RecordingEventSink:
    return RecordingEventSink()


@pytest.fixture
def example_workspace():
    """A(children=[B, C]), B(children=[]), C(children=[B]), created in that order."""
    workspace = Workspace()
    a = workspace.create_node("A")
    b = workspace.create_node("B", parent_ids=[a])
    c = workspace.create_node("C", parent_ids=[a], child_ids=[b])
    return workspace, {"A": a, "B": b, "C": c}


@pytest.fixture
def make_engine(sleeper, sink):
    def _make(workspace, **kwargs):
        return TraversalEngine(workspace, sleep=sleeper, sinks=[sink], **kwargs)
    return _make
