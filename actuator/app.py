"""Application object tying handlers, filters and the invoker together."""

from __future__ import annotations

import logging
import time
from typing import Any, Iterable, Optional

from infrastructure.configuration import Settings, configure_logging, load_settings
from infrastructure.monitoring import increment_metric, record_latency

from .controller import Controller
from .filters import Filter, ParamsFilter, panic_filter, run_chain
from .http import Request, Response
from .invoker import action_invoker
from .registry import ActionRegistry
from .results import HTTP_404_NOT_FOUND, HTTP_500_INTERNAL_SERVER_ERROR, ErrorResult

_LOGGER = logging.getLogger("actuator")

#: Latency key shared by every request naming an unregistered action.
UNKNOWN_ACTION = "<unknown>"


class ActuatorApp:
    """Register handlers and run requests through the filter chain."""

    def __init__(
        self,
        settings: Settings | None = None,
        filters: Iterable[Filter] | None = None,
    ) -> None:
        self.settings = settings or load_settings()
        configure_logging(self.settings)
        self.registry = ActionRegistry()
        if filters is None:
            filters = [
                panic_filter,
                ParamsFilter(strict=self.settings.strict_binding),
                action_invoker,
            ]
        self.filters: list[Filter] = list(filters)

    def handler(
        self, cls: type | None = None, *, name: Optional[str] = None
    ) -> Any:
        """Register a handler class, usable bare or with ``name=``."""

        def decorator(target: type) -> type:
            return self.registry.register(target, name)

        if cls is not None:
            return decorator(cls)
        return decorator

    def add_filter(self, flt: Filter) -> None:
        """Insert *flt* just before the invoker, which always runs last."""

        if self.filters and self.filters[-1] is action_invoker:
            self.filters.insert(len(self.filters) - 1, flt)
        else:
            self.filters.append(flt)

    def handle(self, request: Request, action: str) -> Response:
        """Run *action* for *request* and return the rendered response."""

        start = time.perf_counter()
        controller = Controller(request)
        try:
            controller.set_action(self.registry, action)
        except LookupError:
            controller.result = ErrorResult(HTTP_404_NOT_FOUND, "Not Found")
        else:
            run_chain(controller, self.filters)

        if controller.result is not None:
            self._apply(controller)
        duration_ms = (time.perf_counter() - start) * 1000
        record_latency(controller.action or UNKNOWN_ACTION, duration_ms)
        increment_metric("requests_total")
        return controller.response

    def _apply(self, controller: Controller) -> None:
        result = controller.result
        try:
            result.apply(controller.request, controller.response)  # type: ignore[union-attr]
        except Exception:  # noqa: BLE001 - rendering failures become a 500
            _LOGGER.error(
                "Result %r for %s could not be applied",
                result,
                controller.action,
                exc_info=True,
            )
            controller.response = Response()
            ErrorResult(HTTP_500_INTERNAL_SERVER_ERROR).apply(
                controller.request, controller.response
            )


__all__ = ["ActuatorApp", "UNKNOWN_ACTION"]
