"""
Pydantic schemas for the item REST endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class ItemCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    description: str = Field(default="", max_length=2000)
    quality: str = Field(default="", max_length=100)


class ItemUpdateRequest(ItemCreateRequest):
    """
    PUT replaces the whole row; omitted optional fields are reset to empty.
    """


class ItemResponse(BaseModel):
    id: int
    name: str
    description: str
    quality: str
