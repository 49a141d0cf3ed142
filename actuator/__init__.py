"""Controller action invocation for Actuator applications."""

__version__ = "0.1.0"

from .app import ActuatorApp
from .controller import Controller, Handler
from .descriptor import MethodArg, MethodDescriptor, describe_action
from .exceptions import ActuatorError, BindingError, InvocationError, RegistrationError
from .filters import DEFAULT_FILTERS, ParamsFilter, panic_filter, params_filter, run_chain
from .http import Request, Response
from .invoker import ActionInvoker, action_invoker
from .params import Params, register_binder
from .registry import ActionRegistry
from .results import (
    BinaryResult,
    ErrorResult,
    HTMLResult,
    JSONResult,
    PlainTextResult,
    RedirectResult,
    Result,
)
from .websockets import WebSocket

__all__ = [
    "__version__",
    "ActionInvoker",
    "ActionRegistry",
    "ActuatorApp",
    "ActuatorError",
    "BinaryResult",
    "BindingError",
    "Controller",
    "DEFAULT_FILTERS",
    "ErrorResult",
    "HTMLResult",
    "Handler",
    "InvocationError",
    "JSONResult",
    "MethodArg",
    "MethodDescriptor",
    "Params",
    "ParamsFilter",
    "PlainTextResult",
    "RedirectResult",
    "RegistrationError",
    "Request",
    "Response",
    "Result",
    "WebSocket",
    "action_invoker",
    "describe_action",
    "panic_filter",
    "params_filter",
    "register_binder",
    "run_chain",
]
