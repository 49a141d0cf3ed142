"""In-memory live connection handle."""

import pytest

from actuator import WebSocket


def test_send_receive_and_close() -> None:
    closed: list[WebSocket] = []
    ws = WebSocket(on_close=closed.append)
    ws.accept()
    ws.feed("a", "b")
    assert ws.receive_text() == "a"
    ws.send_text("x")
    ws.close()
    ws.close()
    assert ws.sent == ["x"]
    assert ws.received == ["b"]
    assert closed == [ws]


def test_errors() -> None:
    ws = WebSocket()
    with pytest.raises(RuntimeError):
        ws.receive_text()
    ws.close()
    with pytest.raises(RuntimeError):
        ws.send_text("late")
