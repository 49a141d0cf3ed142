"""Bind raw request values to typed action arguments."""

from __future__ import annotations

import inspect
import logging
import re
from dataclasses import is_dataclass
from typing import Any, Callable, Dict, List, Mapping, Tuple, get_args, get_origin

from pydantic import BaseModel, TypeAdapter, ValidationError

from .exceptions import BindingError
from .http import Request

_LOGGER = logging.getLogger("actuator.params")

BinderFunc = Callable[["Params", str, Any], Any]

#: Binders consulted before the built-in coercion, keyed by exact type.
TYPE_BINDERS: Dict[Any, BinderFunc] = {}

_TYPE_ADAPTER_CACHE: dict[Any, TypeAdapter | None] = {}


def register_binder(tp: Any, binder: BinderFunc) -> None:
    """Use *binder* for every parameter declared as *tp*."""

    TYPE_BINDERS[tp] = binder


def _get_type_adapter(tp: Any) -> TypeAdapter | None:
    """Return a cached ``TypeAdapter`` for *tp* when one can be built."""

    if tp in _TYPE_ADAPTER_CACHE:
        return _TYPE_ADAPTER_CACHE[tp]
    try:
        adapter: TypeAdapter | None = TypeAdapter(tp)
    except Exception:  # noqa: BLE001 - schema generation failed, use constructor
        adapter = None
    _TYPE_ADAPTER_CACHE[tp] = adapter
    return adapter


def _is_sequence_type(tp: Any) -> bool:
    return tp in (list, tuple) or get_origin(tp) in (list, List, tuple, Tuple)


def _is_model_type(tp: Any) -> bool:
    if not inspect.isclass(tp):
        return False
    return is_dataclass(tp) or issubclass(tp, BaseModel)


def zero_value(tp: Any) -> Any:
    """Return the value bound when the request carries nothing for *tp*."""

    if tp is bool:
        return False
    if tp is int:
        return 0
    if tp is float:
        return 0.0
    if tp is str:
        return ""
    if tp is bytes:
        return b""
    origin = get_origin(tp)
    if tp is list or origin in (list, List):
        return []
    if tp is tuple or origin in (tuple, Tuple):
        return ()
    if tp is dict or origin is dict:
        return {}
    return None


class Params:
    """Request values addressable by name.

    Values are raw strings, or lists of strings for repeated keys. A JSON
    body is kept separately and binds to model-typed parameters.
    """

    def __init__(
        self,
        values: Mapping[str, Any] | None = None,
        *,
        json_body: Any = None,
        strict: bool = False,
        binders: Mapping[Any, BinderFunc] | None = None,
    ) -> None:
        self.values: dict[str, Any] = dict(values or {})
        self.json = json_body
        self.strict = strict
        self.errors: dict[str, str] = {}
        self._binders: dict[Any, BinderFunc] = dict(binders or {})

    @classmethod
    def from_request(cls, request: Request, *, strict: bool = False) -> "Params":
        """Merge query, form and path values; later sources win."""

        values: dict[str, Any] = {}
        values.update(request.query_params)
        try:
            values.update(request.form())
        except UnicodeDecodeError as exc:
            if strict:
                raise BindingError("body", dict, request.body, "invalid form encoding") from exc
            _LOGGER.warning("Ignoring undecodable form body: %s", exc)
        values.update(request.path_params)
        json_body = None
        if request.content_type == "application/json":
            try:
                json_body = request.json()
            except ValueError as exc:
                if strict:
                    raise BindingError("body", dict, request.body, "invalid JSON") from exc
                _LOGGER.warning("Ignoring malformed JSON body: %s", exc)
        return cls(values, json_body=json_body, strict=strict)

    def __contains__(self, name: str) -> bool:
        return name in self.values

    def get(self, name: str, default: Any = None) -> Any:
        return self.values.get(name, default)

    def register_binder(self, tp: Any, binder: BinderFunc) -> None:
        """Override binding of *tp* for this request only."""

        self._binders[tp] = binder

    def bind(self, name: str, tp: Any) -> Any:
        """Return the value named *name* converted to *tp*."""

        binder = self._binders.get(tp) or TYPE_BINDERS.get(tp)
        if binder is not None:
            return binder(self, name, tp)
        if _is_sequence_type(tp):
            items = self._collect(name)
            if not items:
                return zero_value(tp)
            return self._convert(name, tp, items)
        if name in self.values:
            raw = self.values[name]
            if isinstance(raw, list):
                raw = raw[0] if raw else None
            return self._convert(name, tp, raw)
        if self.json is not None and _is_model_type(tp):
            return self._convert(name, tp, self.json)
        return zero_value(tp)

    def _collect(self, name: str) -> list[Any]:
        """Gather ``name``, ``name[]`` and ``name[N]`` values in order."""

        items: list[Any] = []
        for key in (name, f"{name}[]"):
            raw = self.values.get(key)
            if raw is None:
                continue
            items.extend(raw if isinstance(raw, list) else [raw])
        pattern = re.compile(rf"^{re.escape(name)}\[(\d+)\]$")
        indexed: list[tuple[int, Any]] = []
        for key, raw in self.values.items():
            match = pattern.match(key)
            if match:
                indexed.append((int(match.group(1)), raw))
        for _, raw in sorted(indexed, key=lambda pair: pair[0]):
            items.extend(raw if isinstance(raw, list) else [raw])
        return items

    def _convert(self, name: str, tp: Any, raw: Any) -> Any:
        adapter = _get_type_adapter(tp)
        try:
            if adapter is not None:
                return adapter.validate_python(raw)
            if isinstance(raw, tp):
                return raw
            return tp(raw)
        except ValidationError as exc:
            errors = exc.errors()
            reason = errors[0].get("msg", str(exc)) if errors else str(exc)
            return self._fail(name, tp, raw, reason, exc)
        except (TypeError, ValueError) as exc:
            return self._fail(name, tp, raw, str(exc), exc)

    def _fail(self, name: str, tp: Any, raw: Any, reason: str, exc: Exception) -> Any:
        if self.strict:
            raise BindingError(name, tp, raw, reason) from exc
        _LOGGER.warning("Failed to bind %s as %r: %s", name, tp, reason)
        self.errors[name] = reason
        return zero_value(tp)


__all__ = ["BinderFunc", "Params", "TYPE_BINDERS", "register_binder", "zero_value"]
