"""
Pytest configuration and shared fixtures for the Actuator test suite.

Provides sample handler classes, request builders and recording binders
used across the test modules.
"""

import sys
from pathlib import Path
from typing import Any, Dict, List, Tuple

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from actuator import (  # noqa: E402
    ActionRegistry,
    Controller,
    Handler,
    Params,
    Request,
    WebSocket,
)
from infrastructure.configuration import Settings  # noqa: E402
from infrastructure.monitoring import clear_traces, reset_metrics  # noqa: E402


# ============================================================================
# Helpers
# ============================================================================

class RecordingParams(Params):
    """Binder returning canned values and recording each lookup."""

    def __init__(self, canned: Dict[str, Any] | None = None) -> None:
        super().__init__()
        self.canned = dict(canned or {})
        self.calls: List[Tuple[str, Any]] = []

    def bind(self, name: str, tp: Any) -> Any:
        self.calls.append((name, tp))
        return self.canned.get(name)


class Greeter(Handler):
    """Handler exercising the common signature shapes."""

    calls: List[Tuple[str, tuple]] = []

    def greet(self, name: str, times: int):
        Greeter.calls.append(("greet", (name, times)))
        return self.render_text("%s x%d", name, times)

    def echo(self, word: str) -> str:
        Greeter.calls.append(("echo", (word,)))
        return word

    def stream(self, conn: WebSocket):
        Greeter.calls.append(("stream", (conn,)))
        if conn is not None:
            conn.send_text("hello")
        return None

    def log_all(self, *tags: str):
        Greeter.calls.append(("log_all", tags))
        return self.render_json({"tags": list(tags)})

    def prefixed(self, prefix: str, *nums: int):
        Greeter.calls.append(("prefixed", (prefix, *nums)))
        return self.render_json({"prefix": prefix, "total": sum(nums)})


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture(autouse=True)
def reset_state():
    """Clear handler call logs, metrics and spans between tests."""
    Greeter.calls = []
    reset_metrics()
    clear_traces()
    yield


@pytest.fixture
def settings() -> Settings:
    """Provide development settings with lenient binding."""
    return Settings(environment="dev", debug=False)


@pytest.fixture
def registry() -> ActionRegistry:
    """Provide a registry with :class:`Greeter` registered."""
    reg = ActionRegistry()
    reg.register(Greeter)
    return reg


@pytest.fixture
def make_controller(registry: ActionRegistry):
    """Build a controller resolved to *action* with a recording binder."""

    def _make(
        action: str,
        canned: Dict[str, Any] | None = None,
        websocket: WebSocket | None = None,
    ) -> Controller:
        controller = Controller(Request(websocket=websocket))
        controller.set_action(registry, action)
        controller.params = RecordingParams(canned)
        return controller

    return _make


@pytest.fixture
def websocket() -> WebSocket:
    """Provide an accepted in-memory connection."""
    ws = WebSocket()
    ws.accept()
    return ws
