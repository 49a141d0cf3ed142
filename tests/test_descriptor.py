"""Descriptors built from handler method signatures."""

import dataclasses

import pytest

from actuator import Handler, InvocationError, MethodArg, MethodDescriptor, RegistrationError, WebSocket
from actuator.descriptor import describe_action


class Sample(Handler):
    def fixed(self, name: str, count: int):
        return name, count

    def untyped(self, value):
        return value

    def spread(self, head: int, *rest: float):
        return head, rest

    def untyped_spread(self, *items):
        return items

    def socket(self, conn: WebSocket, room: str):
        return conn, room

    @staticmethod
    def static(a: int):
        return a

    @classmethod
    def klass(cls, b: bool):
        return b

    def keyword_only(self, *, a: int):
        return a

    def kwargs(self, **extra):
        return extra


def test_fixed_signature() -> None:
    descriptor = describe_action(Sample, "fixed")
    assert descriptor == MethodDescriptor(
        "fixed", (MethodArg("name", str), MethodArg("count", int)), False
    )


def test_unannotated_defaults_to_str() -> None:
    assert describe_action(Sample, "untyped").args == (MethodArg("value", str),)
    assert describe_action(Sample, "untyped_spread").args == (
        MethodArg("items", list[str]),
    )


def test_variadic_signature() -> None:
    descriptor = describe_action(Sample, "spread")
    assert descriptor.variadic is True
    assert descriptor.args == (MethodArg("head", int), MethodArg("rest", list[float]))


def test_websocket_type_kept_verbatim() -> None:
    descriptor = describe_action(Sample, "socket")
    assert descriptor.args[0].type is WebSocket


def test_static_and_class_methods_keep_first_parameter() -> None:
    assert describe_action(Sample, "static").args == (MethodArg("a", int),)
    assert describe_action(Sample, "klass").args == (MethodArg("b", bool),)


@pytest.mark.parametrize("name", ["keyword_only", "kwargs", "missing"])
def test_unsupported_signatures_rejected(name: str) -> None:
    with pytest.raises(RegistrationError):
        describe_action(Sample, name)


def test_descriptor_is_immutable() -> None:
    descriptor = describe_action(Sample, "fixed")
    with pytest.raises(dataclasses.FrozenInstanceError):
        descriptor.name = "other"  # type: ignore[misc]


def test_call_spreads_only_when_variadic() -> None:
    received: list[tuple] = []

    def target(*args):
        received.append(args)

    MethodDescriptor("t", (MethodArg("xs", list[int]),), variadic=True).call(
        target, [[1, 2]]
    )
    MethodDescriptor("t", (MethodArg("xs", list[int]),)).call(target, [[1, 2]])
    assert received == [(1, 2), ([1, 2],)]


def test_call_variadic_without_arguments() -> None:
    with pytest.raises(InvocationError):
        MethodDescriptor("t", (), variadic=True).call(lambda *a: a, [])
