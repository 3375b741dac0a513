"""
REST endpoints for items.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from . import repository, schemas, service

router = APIRouter()


@router.get("/items")
async def list_items(
    store: repository.ItemStore = Depends(service.get_item_store),
) -> list[schemas.ItemResponse]:
    """
    List items (capped at the store's fixed row limit).
    """
    return await service.list_items(store)


@router.post("/item", status_code=status.HTTP_201_CREATED)
async def create_item(
    request: schemas.ItemCreateRequest,
    store: repository.ItemStore = Depends(service.get_item_store),
) -> schemas.ItemResponse:
    return await service.create_item(store, request)


@router.get("/item/{item_id}")
async def get_item(
    item_id: int,
    store: repository.ItemStore = Depends(service.get_item_store),
) -> schemas.ItemResponse:
    return await service.get_item(store, item_id)


@router.put("/item/{item_id}")
async def update_item(
    item_id: int,
    request: schemas.ItemUpdateRequest,
    store: repository.ItemStore = Depends(service.get_item_store),
) -> schemas.ItemResponse:
    return await service.update_item(store, item_id, request)


@router.delete("/item/{item_id}")
async def delete_item(
    item_id: int,
    store: repository.ItemStore = Depends(service.get_item_store),
) -> schemas.ItemResponse:
    return await service.delete_item(store, item_id)
