"""
Type registry for the query/mutation surface.

Types here are plain structural declarations. `validate_schema` checks the
whole graph once at startup and raises `SchemaError` if anything is malformed.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Union

from .errors import SchemaError
from .values import SCALAR_COERCERS

# (coerced arguments, data-access handle) -> resolved value
Resolver = Callable[[dict[str, Any], Any], Awaitable[Any]]


@dataclass(frozen=True)
class ObjectType:
    name: str
    fields: Mapping[str, str]


@dataclass(frozen=True)
class ListType:
    of_type: ObjectType

    @property
    def name(self) -> str:
        return f"[{self.of_type.name}]"


OutputType = Union[ObjectType, ListType]


@dataclass(frozen=True)
class Argument:
    name: str
    type: str
    required: bool = False
    # An uncoercible literal is treated as not supplied instead of an error.
    lenient: bool = False


@dataclass(frozen=True)
class Field:
    name: str
    type: OutputType
    resolver: Resolver
    args: tuple[Argument, ...] = ()
    description: str = ""

    def argument(self, name: str) -> Argument | None:
        for arg in self.args:
            if arg.name == name:
                return arg
        return None


@dataclass(frozen=True)
class RootType:
    name: str
    fields: Mapping[str, Field] = field(default_factory=dict)


@dataclass(frozen=True)
class Schema:
    query: RootType
    mutation: RootType

    def root_for(self, operation: str) -> RootType | None:
        if operation == "query":
            return self.query
        if operation == "mutation":
            return self.mutation
        return None


def named_type(type_: OutputType) -> ObjectType:
    return type_.of_type if isinstance(type_, ListType) else type_


ITEM_TYPE = ObjectType(
    name="Item",
    fields={
        "id": "Int",
        "name": "String",
        "description": "String",
        "quality": "String",
    },
)


def _validate_object(obj: ObjectType) -> None:
    if not obj.fields:
        raise SchemaError(f"Type {obj.name} must define one or more fields.")
    for field_name, scalar in obj.fields.items():
        if scalar not in SCALAR_COERCERS:
            raise SchemaError(f"{obj.name}.{field_name} has unknown scalar type {scalar}.")


def _validate_root(root: RootType) -> None:
    for key, fld in root.fields.items():
        where = f"{root.name}.{key}"
        if key != fld.name:
            raise SchemaError(f"{where} is registered under a different name ({fld.name}).")
        if not isinstance(fld.type, (ObjectType, ListType)):
            raise SchemaError(f"{where} must return an object type or a list of object types.")
        if not callable(fld.resolver):
            raise SchemaError(f"{where} has no resolver.")
        _validate_object(named_type(fld.type))

        seen: set[str] = set()
        for arg in fld.args:
            if arg.name in seen:
                raise SchemaError(f"{where} declares argument {arg.name} more than once.")
            seen.add(arg.name)
            if arg.type not in SCALAR_COERCERS:
                raise SchemaError(f"{where}({arg.name}:) has unknown scalar type {arg.type}.")
            if arg.required and arg.lenient:
                raise SchemaError(f"{where}({arg.name}:) cannot be both required and lenient.")


def validate_schema(schema: Schema) -> Schema:
    _validate_root(schema.query)
    _validate_root(schema.mutation)
    return schema
