"""Per-request handler context and the base class for handler types."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .descriptor import MethodDescriptor
from .http import Request, Response
from .params import Params
from .results import (
    HTTP_403_FORBIDDEN,
    HTTP_404_NOT_FOUND,
    HTTP_500_INTERNAL_SERVER_ERROR,
    BinaryResult,
    ErrorResult,
    HTMLResult,
    JSONResult,
    PlainTextResult,
    RedirectResult,
    Result,
)

if TYPE_CHECKING:  # pragma: no cover
    from .registry import ActionRegistry


class Controller:
    """State shared by the filters processing one request.

    ``app_controller`` is the handler instance whose method is invoked,
    ``method_type`` its descriptor and ``result`` the slot the invoker fills.
    """

    def __init__(self, request: Request, response: Response | None = None) -> None:
        self.request = request
        self.response = response if response is not None else Response()
        self.name = ""
        self.action = ""
        self.app_controller: Any = None
        self.method_type: MethodDescriptor | None = None
        self.params = Params()
        self.result: Result | None = None
        self.args: dict[str, Any] = {}

    def set_action(self, registry: "ActionRegistry", action: str) -> None:
        """Resolve *action* and instantiate its handler for this request."""

        cls, descriptor = registry.lookup(action)
        self.name = registry.name_of(cls)
        self.method_type = descriptor
        self.action = f"{self.name}.{descriptor.name}"
        self.app_controller = cls(self)


class Handler:
    """Base class for types exposing actions."""

    def __init__(self, controller: Controller) -> None:
        self.controller = controller

    @property
    def request(self) -> Request:
        return self.controller.request

    @property
    def response(self) -> Response:
        return self.controller.response

    @property
    def params(self) -> Params:
        return self.controller.params

    def render_text(self, text: str, *args: Any) -> PlainTextResult:
        if args:
            text = text % args
        return PlainTextResult(text)

    def render_html(self, html: str) -> HTMLResult:
        return HTMLResult(html)

    def render_json(self, obj: Any) -> JSONResult:
        return JSONResult(obj)

    def render_file(self, path: str, *, attachment: bool = False) -> BinaryResult:
        return BinaryResult(path, attachment=attachment)

    def redirect(self, url: str, *args: Any) -> RedirectResult:
        if args:
            url = url % args
        return RedirectResult(url)

    def not_found(self, message: str = "Not Found") -> ErrorResult:
        return ErrorResult(HTTP_404_NOT_FOUND, message)

    def forbidden(self, message: str = "Forbidden") -> ErrorResult:
        return ErrorResult(HTTP_403_FORBIDDEN, message)

    def render_error(self, exc: BaseException) -> ErrorResult:
        return ErrorResult(HTTP_500_INTERNAL_SERVER_ERROR, str(exc) or type(exc).__name__)


__all__ = ["Controller", "Handler"]
