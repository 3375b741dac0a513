"""
Resolvers bound to the Query and Mutation root fields.

Each resolver receives the coerced arguments and the data-access handle
explicitly; nothing is pulled from a request context.
"""

from __future__ import annotations

from typing import Any

from items.repository import LIST_LIMIT, ItemNotFoundError, ItemStore

from .errors import ArgumentError
from .values import is_supplied

OVERLAY_FIELDS = ("name", "description", "quality")


def _require_name(name: Any) -> str:
    if not isinstance(name, str) or not name.strip():
        raise ArgumentError('Argument "name" must be a non-empty string.')
    return name


async def resolve_item(args: dict[str, Any], store: ItemStore) -> dict[str, Any] | None:
    item_id = args["id"]
    if not is_supplied(item_id):
        return None
    return await store.get_item(item_id)


async def resolve_list(args: dict[str, Any], store: ItemStore) -> list[dict[str, Any]]:
    return await store.list_items(limit=LIST_LIMIT)


async def resolve_create(args: dict[str, Any], store: ItemStore) -> dict[str, Any]:
    description = args["description"]
    quality = args["quality"]
    return await store.create_item(
        name=_require_name(args["name"]),
        description=description if is_supplied(description) else "",
        quality=quality if is_supplied(quality) else "",
    )


async def resolve_update(args: dict[str, Any], store: ItemStore) -> dict[str, Any]:
    item_id = args["id"]
    if is_supplied(args["name"]):
        _require_name(args["name"])

    current = await store.get_item(item_id)
    if current is None:
        raise ItemNotFoundError(item_id)

    # Partial update: only arguments present in the document replace stored values.
    merged = dict(current)
    for key in OVERLAY_FIELDS:
        if is_supplied(args[key]):
            merged[key] = args[key]

    await store.update_item(merged)
    return merged


async def resolve_delete(args: dict[str, Any], store: ItemStore) -> dict[str, Any]:
    item_id = args["id"]
    await store.delete_item(item_id)
    return {"id": item_id}
