"""
The item schema: Query and Mutation roots bound to their resolvers.

`schema` is built and validated once at import time and treated as read-only
afterwards, so concurrent requests share it without locking.
"""

from __future__ import annotations

from . import resolvers
from .types import ITEM_TYPE, Argument, Field, ListType, RootType, Schema, validate_schema


def build_schema() -> Schema:
    query = RootType(
        name="Query",
        fields={
            "item": Field(
                name="item",
                type=ITEM_TYPE,
                resolver=resolvers.resolve_item,
                args=(Argument("id", "Int", lenient=True),),
                description="Get item by id",
            ),
            "list": Field(
                name="list",
                type=ListType(ITEM_TYPE),
                resolver=resolvers.resolve_list,
                description="Get item list",
            ),
        },
    )
    mutation = RootType(
        name="Mutation",
        fields={
            "create": Field(
                name="create",
                type=ITEM_TYPE,
                resolver=resolvers.resolve_create,
                args=(
                    Argument("name", "String", required=True),
                    Argument("description", "String"),
                    Argument("quality", "String"),
                ),
                description="Create new item",
            ),
            "update": Field(
                name="update",
                type=ITEM_TYPE,
                resolver=resolvers.resolve_update,
                args=(
                    Argument("id", "Int", required=True),
                    Argument("name", "String"),
                    Argument("description", "String"),
                    Argument("quality", "String"),
                ),
                description="Update item by id",
            ),
            "delete": Field(
                name="delete",
                type=ITEM_TYPE,
                resolver=resolvers.resolve_delete,
                args=(Argument("id", "Int", required=True),),
                description="Delete item by id",
            ),
        },
    )
    return validate_schema(Schema(query=query, mutation=mutation))


schema = build_schema()
