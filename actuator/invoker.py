"""Terminal filter binding arguments and calling the routed action."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable, List

from infrastructure.monitoring import start_span

from .exceptions import InvocationError
from .results import Result
from .websockets import WebSocket

if TYPE_CHECKING:  # pragma: no cover
    from .controller import Controller

logger = logging.getLogger("actuator.invoker")


class ActionInvoker:
    """Bind params and invoke the action described by ``method_type``.

    This is always the last filter: ``chain`` is accepted so it can sit in
    a filter list, and is never called.
    """

    def __call__(self, controller: "Controller", chain: List[Callable[..., Any]]) -> None:
        descriptor = controller.method_type
        action = controller.action or getattr(descriptor, "name", "?")
        if descriptor is None:
            raise InvocationError(action, "no action resolved for request")
        try:
            method = getattr(controller.app_controller, descriptor.name)
        except AttributeError as exc:
            raise InvocationError(action, "method not found on handler") from exc

        args: List[Any] = []
        for arg in descriptor.args:
            # Connections never come from request data.
            if arg.type is WebSocket:
                value = controller.request.websocket
            else:
                logger.debug("Binding: %s as %r", arg.name, arg.type)
                value = controller.params.bind(arg.name, arg.type)
            args.append(value)

        with start_span(f"action.invoke:{action}"):
            result = descriptor.call(method, args)
        if result is not None and isinstance(result, Result):
            controller.result = result


action_invoker = ActionInvoker()

__all__ = ["ActionInvoker", "action_invoker"]
