"""Results returned from actions and applied to the outgoing response."""

from __future__ import annotations

import json
import mimetypes
import os
from abc import ABC, abstractmethod
from dataclasses import asdict, is_dataclass
from typing import Any, Mapping

from pydantic import BaseModel

from .http import Request, Response

HTTP_200_OK = 200
HTTP_302_FOUND = 302
HTTP_400_BAD_REQUEST = 400
HTTP_403_FORBIDDEN = 403
HTTP_404_NOT_FOUND = 404
HTTP_500_INTERNAL_SERVER_ERROR = 500


class Result(ABC):
    """Anything an action can return to produce a response."""

    @abstractmethod
    def apply(self, request: Request, response: Response) -> None:
        """Write this result into *response*."""


class PlainTextResult(Result):
    """Return plain text content."""

    def __init__(self, content: str, *, status_code: int = HTTP_200_OK) -> None:
        self.content = content
        self.status_code = status_code

    def apply(self, request: Request, response: Response) -> None:
        response.write(
            self.content,
            status_code=self.status_code,
            media_type="text/plain; charset=utf-8",
        )


class HTMLResult(PlainTextResult):
    """Return HTML content."""

    def apply(self, request: Request, response: Response) -> None:
        response.write(
            self.content,
            status_code=self.status_code,
            media_type="text/html; charset=utf-8",
        )


def _jsonable(content: Any) -> Any:
    if isinstance(content, BaseModel):
        return content.model_dump(mode="json")
    if is_dataclass(content) and not isinstance(content, type):
        return asdict(content)
    return content


class JSONResult(Result):
    """Serialize content to JSON."""

    def __init__(
        self,
        content: Any,
        *,
        status_code: int = HTTP_200_OK,
        indent: int | None = None,
    ) -> None:
        self.content = content
        self.status_code = status_code
        self.indent = indent

    def render(self) -> str:
        return json.dumps(_jsonable(self.content), indent=self.indent)

    def apply(self, request: Request, response: Response) -> None:
        response.write(
            self.render(),
            status_code=self.status_code,
            media_type="application/json",
        )


class RedirectResult(Result):
    """Redirect to a different URL."""

    def __init__(self, url: str, *, status_code: int = HTTP_302_FOUND) -> None:
        self.url = url
        self.status_code = status_code

    def apply(self, request: Request, response: Response) -> None:
        response.set_header("location", self.url)
        response.write(b"", status_code=self.status_code)


class BinaryResult(Result):
    """Send raw bytes or the contents of a file."""

    def __init__(
        self,
        content: bytes | str,
        *,
        name: str | None = None,
        media_type: str | None = None,
        attachment: bool = False,
    ) -> None:
        if isinstance(content, str):
            if not os.path.exists(content):
                raise FileNotFoundError(content)
            name = name or os.path.basename(content)
        self.content = content
        self.name = name
        self.media_type = media_type
        self.attachment = attachment

    def _read(self) -> bytes:
        if isinstance(self.content, bytes):
            return self.content
        with open(self.content, "rb") as f:
            return f.read()

    def apply(self, request: Request, response: Response) -> None:
        data = self._read()
        # fmt: off
        mt = (
            self.media_type
            or (self.name and mimetypes.guess_type(self.name)[0])
            or "application/octet-stream"
        )
        # fmt: on
        if self.name:
            disposition = "attachment" if self.attachment else "inline"
            response.set_header(
                "content-disposition", f'{disposition}; filename="{self.name}"'
            )
        response.set_header("content-length", str(len(data)))
        response.write(data, status_code=HTTP_200_OK, media_type=mt)


class ErrorResult(Result):
    """Report an error, as JSON when the client asks for it."""

    def __init__(
        self,
        status_code: int = HTTP_500_INTERNAL_SERVER_ERROR,
        message: str = "Internal Server Error",
        *,
        details: Mapping[str, Any] | None = None,
    ) -> None:
        self.status_code = status_code
        self.message = message
        self.details = dict(details or {})

    def apply(self, request: Request, response: Response) -> None:
        if request.accepts_json():
            payload = {"error": self.message, **self.details}
            response.write(
                json.dumps(payload),
                status_code=self.status_code,
                media_type="application/json",
            )
            return
        response.write(
            self.message,
            status_code=self.status_code,
            media_type="text/plain; charset=utf-8",
        )


__all__ = [
    "BinaryResult",
    "ErrorResult",
    "HTMLResult",
    "JSONResult",
    "PlainTextResult",
    "RedirectResult",
    "Result",
    "HTTP_200_OK",
    "HTTP_302_FOUND",
    "HTTP_400_BAD_REQUEST",
    "HTTP_403_FORBIDDEN",
    "HTTP_404_NOT_FOUND",
    "HTTP_500_INTERNAL_SERVER_ERROR",
]
