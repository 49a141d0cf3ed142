"""Filters run in order around every action.

A filter receives the controller and the filters still to run, and
continues by calling ``chain[0](controller, chain[1:])``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, List

from infrastructure.monitoring import increment_metric

from .exceptions import ActuatorError, BindingError
from .invoker import action_invoker
from .params import Params
from .results import HTTP_400_BAD_REQUEST, HTTP_500_INTERNAL_SERVER_ERROR, ErrorResult

if TYPE_CHECKING:  # pragma: no cover
    from .controller import Controller

logger = logging.getLogger("actuator.filters")

Filter = Callable[["Controller", List["Filter"]], None]


def run_chain(controller: "Controller", filters: List[Filter]) -> None:
    """Run *filters* against *controller*."""

    if filters:
        filters[0](controller, filters[1:])


def panic_filter(controller: "Controller", chain: List[Filter]) -> None:
    """Turn exceptions raised further down the chain into error results."""

    try:
        run_chain(controller, chain)
    except BindingError as exc:
        logger.warning("Binding failed for %s: %s", controller.action, exc.message)
        increment_metric("binding_errors")
        controller.result = ErrorResult(
            HTTP_400_BAD_REQUEST, exc.message, details={"param": exc.name}
        )
    except Exception as exc:  # noqa: BLE001 - every failure becomes a 500
        logger.error(
            "Action %s raised an exception", controller.action, exc_info=True
        )
        increment_metric("action_errors")
        details = {"code": exc.code} if isinstance(exc, ActuatorError) else None
        controller.result = ErrorResult(
            HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error", details=details
        )


class ParamsFilter:
    """Parse request values into ``controller.params``."""

    def __init__(self, strict: bool = False) -> None:
        self.strict = strict

    def __call__(self, controller: "Controller", chain: List[Filter]) -> None:
        controller.params = Params.from_request(controller.request, strict=self.strict)
        run_chain(controller, chain)


params_filter = ParamsFilter()

DEFAULT_FILTERS: List[Filter] = [panic_filter, params_filter, action_invoker]

__all__ = [
    "DEFAULT_FILTERS",
    "Filter",
    "ParamsFilter",
    "panic_filter",
    "params_filter",
    "run_chain",
]
