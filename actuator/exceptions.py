"""Error hierarchy raised while binding and invoking actions."""

from typing import Any, Optional


class ActuatorError(Exception):
    """BASE ERROR CLASS."""

    def __init__(self, code: str, message: str):
        self.code = code
        self.message = message
        super().__init__(f"{code}: {message}")


class BindingError(ActuatorError):
    """A request value could not be converted to the declared type."""

    def __init__(self, name: str, tp: Any, value: Any = None, reason: Optional[str] = None):
        message = f"{name}: cannot bind {value!r} as {_type_name(tp)}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__("BINDING_ERROR", message)
        self.name = name
        self.type = tp
        self.value = value


class InvocationError(ActuatorError):
    """The action method could not be resolved or called."""

    def __init__(self, action: str, message: str):
        super().__init__("INVOCATION_ERROR", f"{action}: {message}")
        self.action = action


class RegistrationError(ActuatorError):
    """A handler class or action could not be described."""

    def __init__(self, message: str):
        super().__init__("REGISTRATION_ERROR", message)


def _type_name(tp: Any) -> str:
    return getattr(tp, "__name__", None) or repr(tp)


__all__ = ["ActuatorError", "BindingError", "InvocationError", "RegistrationError"]
