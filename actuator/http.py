"""Request and response containers handed to controllers."""

from __future__ import annotations

import json
from http.cookies import SimpleCookie
from types import SimpleNamespace
from typing import TYPE_CHECKING, Any, Mapping
from urllib.parse import parse_qs, urlsplit

if TYPE_CHECKING:  # pragma: no cover
    from .websockets import WebSocket


def _flatten(items: Mapping[str, list[str]]) -> dict[str, str | list[str]]:
    return {k: (v[0] if len(v) == 1 else v) for k, v in items.items()}


class Request:
    """Represent an incoming HTTP request.

    ``websocket`` carries the live connection when the request was upgraded;
    it is ``None`` for plain HTTP requests.
    """

    def __init__(
        self,
        method: str = "GET",
        url: str = "/",
        body: bytes = b"",
        headers: Mapping[str, str] | None = None,
        path_params: Mapping[str, str] | None = None,
        websocket: "WebSocket | None" = None,
    ) -> None:
        self.method = method.upper()
        self.url = url
        self._body = body
        self.headers = {k.lower(): v for k, v in (headers or {}).items()}
        self.path_params = dict(path_params or {})
        parts = urlsplit(url)
        self.path = parts.path or "/"
        self.query_params = _flatten(parse_qs(parts.query, keep_blank_values=True))
        self.websocket = websocket
        self._cookies: dict[str, str] | None = None
        self._form_data: dict[str, Any] | None = None
        self.state: SimpleNamespace = SimpleNamespace()

    @property
    def body(self) -> bytes:
        """Return the raw request body."""
        return self._body

    @property
    def content_type(self) -> str:
        return self.headers.get("content-type", "").split(";", 1)[0].strip().lower()

    def json(self) -> Any:
        """Return the JSON-decoded body if present."""
        if not self._body:
            return None
        return json.loads(self._body.decode())

    def form(self) -> dict[str, Any]:
        """Return urlencoded form data parsed from the body."""

        if self._form_data is not None:
            return self._form_data
        if self.content_type == "application/x-www-form-urlencoded" and self._body:
            self._form_data = _flatten(
                parse_qs(self._body.decode(), keep_blank_values=True)
            )
        else:
            self._form_data = {}
        return self._form_data

    @property
    def cookies(self) -> dict[str, str]:
        """Lazily parse cookies from the request headers."""
        if self._cookies is None:
            raw = self.headers.get("cookie", "")
            jar: SimpleCookie = SimpleCookie()
            jar.load(raw)
            self._cookies = {k: morsel.value for k, morsel in jar.items()}
        return self._cookies

    def accepts_json(self) -> bool:
        return "application/json" in self.headers.get("accept", "")


class Response:
    """HTTP response container with header and cookie management."""

    def __init__(self, status_code: int = 200) -> None:
        self.status_code = status_code
        self.headers: dict[str, str] = {}
        self.body = b""
        self._cookies: SimpleCookie = SimpleCookie()

    @property
    def content_type(self) -> str | None:
        return self.headers.get("content-type")

    def set_header(self, key: str, value: str) -> None:
        """Set or replace a header."""
        self.headers[key.lower()] = value

    def set_cookie(self, key: str, value: str, **params: Any) -> None:
        """Attach a cookie to the response."""
        self._cookies[key] = value
        for k, v in params.items():
            self._cookies[key][k.replace("_", "-")] = str(v)

    def write(
        self,
        content: str | bytes,
        *,
        status_code: int | None = None,
        media_type: str | None = None,
    ) -> None:
        """Replace the body, optionally updating status and content type."""
        self.body = content.encode() if isinstance(content, str) else content
        if status_code is not None:
            self.status_code = status_code
        if media_type is not None:
            self.headers["content-type"] = media_type

    def serialize(self) -> tuple[int, bytes, dict[str, str]]:
        """Return ``(status_code, body, headers)`` for transmission."""
        headers = self.headers.copy()
        if self._cookies:
            headers["set-cookie"] = self._cookies.output(
                header="",
                sep="; ",
            ).strip()
        return self.status_code, self.body, headers


__all__ = ["Request", "Response"]
