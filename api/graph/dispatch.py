"""
Resolver dispatch for one root field of a parsed document.

Every failure is caught here and turned into a `ResolutionError` for that
field only, so one bad field never unwinds the rest of the document.

Order of work for a field:
- look the field up on the root type
- check the requested sub-selection against the type registry
- coerce the arguments
- await the resolver with the data-access handle
- project the value down to the requested sub-fields
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from graphql import FieldNode, print_ast

from items.repository import ItemNotFoundError, ItemStore

from .errors import ArgumentError, FieldError, SelectionError
from .types import Field, ObjectType, RootType, named_type
from .values import MISSING, coerce_argument, read_literal

TYPENAME = "__typename"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolutionError:
    message: str
    path: tuple[str, ...] = ()

    def formatted(self) -> dict[str, Any]:
        out: dict[str, Any] = {"message": self.message}
        if self.path:
            out["path"] = list(self.path)
        return out


@dataclass(frozen=True)
class Projection:
    key: str
    name: str


def response_key(node: FieldNode) -> str:
    return node.alias.value if node.alias is not None else node.name.value


def field_signature(node: FieldNode) -> tuple:
    """
    Name, arguments and sub-selection of a field; equal signatures may share a response key.
    """
    args = tuple(sorted((a.name.value, print_ast(a.value)) for a in node.arguments or ()))
    selection = print_ast(node.selection_set) if node.selection_set is not None else None
    return node.name.value, args, selection


def conflict_message(key: str) -> str:
    return f'Fields "{key}" conflict because they select different fields or arguments. Use different aliases.'


def reject_directives(node: FieldNode) -> None:
    if node.directives:
        raise SelectionError(
            f'Directive "@{node.directives[0].name.value}" is not supported on field "{node.name.value}".'
        )


def plan_selection(fld: Field, node: FieldNode) -> list[Projection]:
    obj = named_type(fld.type)
    selections = node.selection_set.selections if node.selection_set is not None else ()
    if not selections:
        raise SelectionError(
            f'Field "{fld.name}" of type "{fld.type.name}" must have a selection of subfields.'
        )

    plan: list[Projection] = []
    seen: dict[str, str] = {}
    for selection in selections:
        if not isinstance(selection, FieldNode):
            raise SelectionError(f'Fragments are not supported in the selection of "{fld.name}".')
        reject_directives(selection)
        name = selection.name.value
        if name != TYPENAME and name not in obj.fields:
            raise SelectionError(f'Cannot query field "{name}" on type "{obj.name}".')
        if selection.selection_set is not None:
            scalar = obj.fields.get(name, "String")
            raise SelectionError(
                f'Field "{name}" must not have a selection since type "{scalar}" has no subfields.'
            )
        if selection.arguments:
            raise ArgumentError(
                f'Unknown argument "{selection.arguments[0].name.value}" on field "{obj.name}.{name}".'
            )
        key = response_key(selection)
        if key in seen:
            if seen[key] != name:
                raise SelectionError(conflict_message(key))
            continue
        seen[key] = name
        plan.append(Projection(key=key, name=name))
    return plan


def coerce_arguments(root: RootType, fld: Field, node: FieldNode) -> dict[str, Any]:
    supplied = {}
    for arg_node in node.arguments or ():
        name = arg_node.name.value
        if fld.argument(name) is None:
            raise ArgumentError(f'Unknown argument "{name}" on field "{root.name}.{fld.name}".')
        if name in supplied:
            raise ArgumentError(f'There can be only one argument named "{name}".')
        supplied[name] = read_literal(arg_node.value)

    return {
        arg.name: coerce_argument(arg, supplied.get(arg.name, MISSING), field_name=f"{root.name}.{fld.name}")
        for arg in fld.args
    }


def _project_object(value: dict[str, Any], plan: list[Projection], obj: ObjectType) -> dict[str, Any]:
    return {p.key: obj.name if p.name == TYPENAME else value.get(p.name) for p in plan}


def project(value: Any, plan: list[Projection], obj: ObjectType) -> Any:
    if value is None:
        return None
    if isinstance(value, list):
        return [None if v is None else _project_object(v, plan, obj) for v in value]
    return _project_object(value, plan, obj)


async def resolve_field(
    root: RootType,
    node: FieldNode,
    store: ItemStore,
) -> tuple[Any, ResolutionError | None]:
    """
    Resolve one root field into `(value, error)`; exactly one of them is meaningful.
    """
    name = node.name.value
    path = (response_key(node),)

    fld = root.fields.get(name)
    try:
        reject_directives(node)
        if name == TYPENAME:
            return root.name, None
        if fld is None:
            raise SelectionError(f'Cannot query field "{name}" on type "{root.name}".')
        plan = plan_selection(fld, node)
        args = coerce_arguments(root, fld, node)
        value = await fld.resolver(args, store)
        return project(value, plan, named_type(fld.type)), None
    except (FieldError, ItemNotFoundError) as exc:
        return None, ResolutionError(str(exc), path)
    except Exception as exc:
        logger.exception("resolver_failed field=%s.%s", root.name, name)
        return None, ResolutionError(str(exc) or exc.__class__.__name__, path)
