"""
Item business logic for the REST surface.

The store is passed in explicitly; the router resolves it via `get_item_store`.
"""

from __future__ import annotations

from fastapi import HTTPException, status

from . import repository, schemas

_repository = repository.ItemRepository()


def get_item_store() -> repository.ItemStore:
    """
    FastAPI dependency returning the shared Postgres-backed store.
    """
    return _repository


def _to_item_response(row: dict) -> schemas.ItemResponse:
    return schemas.ItemResponse(
        id=int(row["id"]),
        name=str(row["name"]),
        description=str(row["description"] or ""),
        quality=str(row["quality"] or ""),
    )


def _not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Item not found.",
    )


async def list_items(store: repository.ItemStore) -> list[schemas.ItemResponse]:
    rows = await store.list_items(limit=repository.LIST_LIMIT)
    return [_to_item_response(row) for row in rows]


async def get_item(store: repository.ItemStore, item_id: int) -> schemas.ItemResponse:
    row = await store.get_item(item_id)
    if row is None:
        raise _not_found()
    return _to_item_response(row)


async def create_item(store: repository.ItemStore, payload: schemas.ItemCreateRequest) -> schemas.ItemResponse:
    name = payload.name.strip()
    if not name:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Item name is required.",
        )
    row = await store.create_item(
        name=name,
        description=payload.description,
        quality=payload.quality,
    )
    return _to_item_response(row)


async def update_item(
    store: repository.ItemStore,
    item_id: int,
    payload: schemas.ItemUpdateRequest,
) -> schemas.ItemResponse:
    name = payload.name.strip()
    if not name:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Item name is required.",
        )
    try:
        row = await store.update_item(
            {
                "id": item_id,
                "name": name,
                "description": payload.description,
                "quality": payload.quality,
            }
        )
    except repository.ItemNotFoundError as exc:
        raise _not_found() from exc
    return _to_item_response(row)


async def delete_item(store: repository.ItemStore, item_id: int) -> schemas.ItemResponse:
    row = await store.get_item(item_id)
    if row is None:
        raise _not_found()
    try:
        await store.delete_item(item_id)
    except repository.ItemNotFoundError as exc:
        raise _not_found() from exc
    return _to_item_response(row)
