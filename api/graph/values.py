"""
Argument literals and their coercion.

A literal from the parsed document is first read into a `DocumentValue`
(Int, String, Null, Missing or Other), then coerced by the function registered
for the argument's declared scalar type. Coercion either returns a typed value
or raises `ArgumentError`; it never lets a bad literal reach a resolver.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable

from graphql import IntValueNode, NullValueNode, StringValueNode, ValueNode, print_ast

from .errors import ArgumentError

if TYPE_CHECKING:
    from .types import Argument

MAX_INT = 2**31 - 1
MIN_INT = -(2**31)


class ValueKind(enum.Enum):
    INT = "Int"
    STRING = "String"
    NULL = "Null"
    MISSING = "Missing"
    OTHER = "Other"


@dataclass(frozen=True)
class DocumentValue:
    kind: ValueKind
    value: Any = None
    literal: str = ""


MISSING = DocumentValue(ValueKind.MISSING)


class _Unset:
    """
    Marker for an optional argument the caller did not supply.
    """

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


def is_supplied(value: Any) -> bool:
    """
    True when an optional argument carries a usable value (not UNSET, not null).
    """
    return value is not UNSET and value is not None


def read_literal(node: ValueNode | None) -> DocumentValue:
    if node is None:
        return MISSING
    literal = print_ast(node)
    if isinstance(node, IntValueNode):
        return DocumentValue(ValueKind.INT, int(node.value), literal)
    if isinstance(node, StringValueNode):
        return DocumentValue(ValueKind.STRING, node.value, literal)
    if isinstance(node, NullValueNode):
        return DocumentValue(ValueKind.NULL, None, literal)
    return DocumentValue(ValueKind.OTHER, None, literal)


def coerce_int(value: DocumentValue) -> int:
    if value.kind is not ValueKind.INT:
        raise ArgumentError(f"Int cannot represent non-integer value: {value.literal}")
    if not MIN_INT <= value.value <= MAX_INT:
        raise ArgumentError(f"Int cannot represent non 32-bit signed integer value: {value.literal}")
    return value.value


def coerce_string(value: DocumentValue) -> str:
    if value.kind is not ValueKind.STRING:
        raise ArgumentError(f"String cannot represent a non string value: {value.literal}")
    return value.value


SCALAR_COERCERS: dict[str, Callable[[DocumentValue], Any]] = {
    "Int": coerce_int,
    "String": coerce_string,
}


def coerce_argument(argument: Argument, value: DocumentValue, *, field_name: str) -> Any:
    """
    Coerce one argument literal to its declared type.

    Missing optional arguments become UNSET and explicit nulls become None, so
    resolvers can tell "not supplied" apart from "supplied empty".
    """
    type_label = f"{argument.type}!" if argument.required else argument.type

    if value.kind is ValueKind.MISSING:
        if argument.required:
            raise ArgumentError(
                f'Field "{field_name}" argument "{argument.name}" of type "{type_label}" is required, '
                "but it was not provided."
            )
        return UNSET

    if value.kind is ValueKind.NULL:
        if argument.required:
            raise ArgumentError(
                f'Argument "{argument.name}" of non-null type "{type_label}" must not be null.'
            )
        return None

    try:
        return SCALAR_COERCERS[argument.type](value)
    except ArgumentError as exc:
        if argument.lenient:
            return UNSET
        raise ArgumentError(f'Argument "{argument.name}" has invalid value {value.literal}. {exc.message}') from exc
