"""In-memory live connection handle attached to upgraded requests."""

from __future__ import annotations

from typing import Any, Callable


class WebSocket:
    """Duplex connection an action may accept as a parameter.

    Actions run synchronously, so sends and receives are plain calls. The
    transport layer owns the connection; actions only use it.
    """

    def __init__(
        self, on_close: Callable[["WebSocket"], Any] | None = None
    ) -> None:
        self.accepted = False
        self.sent: list[str] = []
        self.received: list[str] = []
        self.closed = False
        self._close_callbacks: list[Callable[["WebSocket"], Any]] = []
        if on_close is not None:
            self._close_callbacks.append(on_close)

    def add_close_callback(
        self, callback: Callable[["WebSocket"], Any]
    ) -> None:
        """Register *callback* to be invoked when closed."""

        self._close_callbacks.append(callback)

    def accept(self) -> None:
        self.accepted = True

    def send_text(self, data: str) -> None:
        if self.closed:
            raise RuntimeError("connection is closed")
        self.sent.append(data)

    def receive_text(self) -> str:
        if not self.received:
            raise RuntimeError("no messages to receive")
        return self.received.pop(0)

    def feed(self, *messages: str) -> None:
        """Queue *messages* as if the peer had sent them."""

        self.received.extend(messages)

    def close(self) -> None:
        if self.closed:
            return
        self.closed = True
        for cb in list(self._close_callbacks):
            cb(self)


__all__ = ["WebSocket"]
