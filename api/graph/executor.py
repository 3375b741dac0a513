"""
Entry point of the query/mutation surface.

`execute` parses a document with graphql-core's parser, picks the operation to
run and resolves its root fields one after another in document order. It never
raises: every failure ends up in `QueryResult.errors`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from graphql import FieldNode, GraphQLSyntaxError, OperationDefinitionNode, parse

from items.repository import ItemStore

from .dispatch import ResolutionError, conflict_message, field_signature, resolve_field, response_key
from .schema import schema as default_schema
from .types import Schema

logger = logging.getLogger(__name__)


@dataclass
class QueryResult:
    data: dict[str, Any] | None
    errors: list[ResolutionError] = field(default_factory=list)

    @property
    def formatted(self) -> dict[str, Any]:
        return {
            "data": self.data,
            "errors": [error.formatted() for error in self.errors],
        }


def _failed(message: str) -> QueryResult:
    logger.warning("query_failed message=%s", message)
    return QueryResult(data=None, errors=[ResolutionError(message)])


def _select_operation(
    operations: list[OperationDefinitionNode],
    operation_name: str | None,
) -> OperationDefinitionNode | str:
    """
    Return the operation to run, or an error message.
    """
    if not operations:
        return "Must provide an operation."
    if operation_name is None:
        if len(operations) > 1:
            return "Must provide operation name if query contains multiple operations."
        return operations[0]
    for operation in operations:
        if operation.name is not None and operation.name.value == operation_name:
            return operation
    return f'Unknown operation named "{operation_name}".'


async def execute(
    query: str,
    store: ItemStore,
    *,
    operation_name: str | None = None,
    schema: Schema = default_schema,
) -> QueryResult:
    if not isinstance(query, str):
        return _failed("Must provide query string.")

    try:
        document = parse(query)
    except GraphQLSyntaxError as exc:
        return _failed(exc.message)
    except RecursionError:
        return _failed("Document is nested too deeply.")

    operations = [d for d in document.definitions if isinstance(d, OperationDefinitionNode)]
    selected = _select_operation(operations, operation_name)
    if isinstance(selected, str):
        return _failed(selected)

    kind = selected.operation.value
    root = schema.root_for(kind)
    if root is None:
        return _failed(f"Schema is not configured to execute {kind} operation.")

    data: dict[str, Any] = {}
    errors: list[ResolutionError] = []
    signatures: dict[str, tuple] = {}
    for selection in selected.selection_set.selections:
        if not isinstance(selection, FieldNode):
            errors.append(ResolutionError(f"Fragments are not supported on type {root.name}."))
            continue
        key = response_key(selection)
        signature = field_signature(selection)
        if key in signatures:
            # Identical repeats merge into the first result; anything else conflicts.
            if signatures[key] != signature:
                errors.append(ResolutionError(conflict_message(key), (key,)))
            continue
        signatures[key] = signature
        value, error = await resolve_field(root, selection, store)
        data[key] = value
        if error is not None:
            errors.append(error)

    if errors:
        logger.warning(
            "query_errors operation=%s count=%s messages=%s",
            kind,
            len(errors),
            [e.message for e in errors],
        )
    return QueryResult(data=data, errors=errors)
