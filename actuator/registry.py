"""Dispatch table mapping ``Handler.action`` names to descriptors."""

from __future__ import annotations

import inspect
import logging
from typing import Dict, List, Optional, Tuple

from .controller import Handler
from .descriptor import MethodDescriptor, describe_action
from .exceptions import RegistrationError

logger = logging.getLogger("actuator.registry")


class ActionRegistry:
    """Handler types and their action descriptors, keyed case-insensitively."""

    def __init__(self) -> None:
        self._actions: Dict[str, Tuple[type, MethodDescriptor]] = {}
        self._names: Dict[type, str] = {}

    def register(self, cls: type, name: Optional[str] = None) -> type:
        """Describe every public method of *cls* and add it to the table."""
        if not (inspect.isclass(cls) and issubclass(cls, Handler)):
            raise RegistrationError(f"{cls!r} is not a Handler subclass")
        name = name or cls.__name__
        count = 0
        for attr in dir(cls):
            if attr.startswith("_") or hasattr(Handler, attr):
                continue
            member = getattr(cls, attr)
            if not (inspect.isfunction(member) or inspect.ismethod(member)):
                continue
            descriptor = describe_action(cls, attr)
            self._actions[f"{name}.{attr}".lower()] = (cls, descriptor)
            count += 1
        self._names[cls] = name
        logger.info("Handler registered: %s (%d actions)", name, count)
        return cls

    def lookup(self, action: str) -> Tuple[type, MethodDescriptor]:
        """Return the handler type and descriptor for ``"Name.method"``."""
        try:
            return self._actions[action.lower()]
        except KeyError:
            logger.warning("Action not found: %s", action)
            raise LookupError(f"unknown action {action!r}") from None

    def name_of(self, cls: type) -> str:
        return self._names.get(cls, cls.__name__)

    def actions(self) -> List[str]:
        """Return the registered action keys."""
        return sorted(self._actions)

    def __contains__(self, action: str) -> bool:
        return action.lower() in self._actions


__all__ = ["ActionRegistry"]
