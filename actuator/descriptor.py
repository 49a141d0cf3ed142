"""Action signatures captured once at registration time."""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import Any, Callable, List, get_type_hints

from .exceptions import InvocationError, RegistrationError


@dataclass(frozen=True)
class MethodArg:
    """One declared action parameter."""

    name: str
    type: Any


@dataclass(frozen=True)
class MethodDescriptor:
    """Name, ordered parameters and variadic flag of an action method.

    Instances are shared by every request routed to the action and are never
    mutated after registration. When ``variadic`` is set the last entry of
    ``args`` describes the ``*args`` parameter and its type is ``list[T]``.
    """

    name: str
    args: tuple[MethodArg, ...] = ()
    variadic: bool = False

    def call(self, method: Callable[..., Any], args: List[Any]) -> Any:
        """Call *method* with *args*, spreading the tail when variadic."""

        if self.variadic:
            if not args:
                raise InvocationError(self.name, "variadic action bound no arguments")
            *fixed, tail = args
            if isinstance(tail, (str, bytes)) or not isinstance(tail, (list, tuple)):
                raise InvocationError(
                    self.name,
                    f"variadic argument must be a sequence, got {type(tail).__name__}",
                )
            positional = [*fixed, *tail]
        else:
            positional = list(args)
        try:
            return method(*positional)
        except TypeError as exc:
            if not _accepts(method, positional):
                raise InvocationError(self.name, str(exc)) from exc
            raise


def _accepts(method: Callable[..., Any], positional: List[Any]) -> bool:
    """Whether *positional* fits the signature of *method*, following wrappers."""

    try:
        inspect.signature(method).bind(*positional)
    except TypeError:
        return False
    except ValueError:
        return True
    return True


def describe_action(cls: type, name: str) -> MethodDescriptor:
    """Build the descriptor for method *name* of *cls*."""

    attr = inspect.getattr_static(cls, name, None)
    method = getattr(cls, name, None)
    if attr is None or not callable(method):
        raise RegistrationError(f"{cls.__name__} has no action {name!r}")
    if inspect.iscoroutinefunction(method) or inspect.isasyncgenfunction(method):
        raise RegistrationError(f"{cls.__name__}.{name}: actions must be synchronous")
    try:
        sig = inspect.signature(method)
        hints = get_type_hints(method)
    except (NameError, TypeError, ValueError) as exc:
        raise RegistrationError(f"cannot describe {cls.__name__}.{name}: {exc}") from exc

    params = list(sig.parameters.values())
    if not isinstance(attr, (staticmethod, classmethod)) and params:
        params = params[1:]

    args: list[MethodArg] = []
    variadic = False
    for param in params:
        tp = hints.get(param.name, str)
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            args.append(MethodArg(param.name, list[tp]))  # type: ignore[valid-type]
            variadic = True
        elif param.kind in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
        ):
            args.append(MethodArg(param.name, tp))
        else:
            raise RegistrationError(
                f"{cls.__name__}.{name}: parameter {param.name!r} must be positional"
            )
    return MethodDescriptor(name=name, args=tuple(args), variadic=variadic)


__all__ = ["MethodArg", "MethodDescriptor", "describe_action"]
