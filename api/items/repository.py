"""
Item persistence (raw SQL).

`ItemStore` is the data-access contract both the REST handlers and the
query/mutation engine depend on. `ItemRepository` is the Postgres
implementation running over the shared pool in `core.db`.
"""

from __future__ import annotations

from typing import Any, Protocol

from core import db

LIST_LIMIT = 1000

TABLE_CREATION_SQL = """
CREATE TABLE IF NOT EXISTS items
(
    id SERIAL,
    name TEXT NOT NULL,
    description TEXT NOT NULL,
    quality TEXT NOT NULL,
    CONSTRAINT items_pkey PRIMARY KEY (id)
)
"""


class ItemNotFoundError(LookupError):
    def __init__(self, item_id: int) -> None:
        super().__init__("Item not found.")
        self.item_id = item_id


class ItemStore(Protocol):
    async def get_item(self, item_id: int) -> dict[str, Any] | None: ...

    async def list_items(self, *, limit: int = LIST_LIMIT) -> list[dict[str, Any]]: ...

    async def create_item(self, *, name: str, description: str = "", quality: str = "") -> dict[str, Any]: ...

    async def update_item(self, item: dict[str, Any]) -> dict[str, Any]: ...

    async def delete_item(self, item_id: int) -> None: ...


async def ensure_schema() -> None:
    await db.execute(TABLE_CREATION_SQL)


class ItemRepository:
    """
    Postgres-backed `ItemStore`.

    Holds no state of its own; every call borrows a connection from the pool.
    """

    async def get_item(self, item_id: int) -> dict[str, Any] | None:
        return await db.fetch_one(
            """
            SELECT id, name, description, quality
            FROM items
            WHERE id = $1
            """,
            item_id,
        )

    async def list_items(self, *, limit: int = LIST_LIMIT) -> list[dict[str, Any]]:
        return await db.fetch_all(
            """
            SELECT id, name, description, quality
            FROM items
            ORDER BY id ASC
            LIMIT $1
            """,
            max(0, min(limit, LIST_LIMIT)),
        )

    async def create_item(self, *, name: str, description: str = "", quality: str = "") -> dict[str, Any]:
        row = await db.fetch_one(
            """
            INSERT INTO items (name, description, quality)
            VALUES ($1, $2, $3)
            RETURNING id, name, description, quality
            """,
            name,
            description,
            quality,
        )
        if row is None:
            raise RuntimeError("Failed to create item.")
        return row

    async def update_item(self, item: dict[str, Any]) -> dict[str, Any]:
        row = await db.fetch_one(
            """
            UPDATE items
            SET name = $1,
                description = $2,
                quality = $3
            WHERE id = $4
            RETURNING id, name, description, quality
            """,
            item["name"],
            item["description"],
            item["quality"],
            int(item["id"]),
        )
        if row is None:
            raise ItemNotFoundError(int(item["id"]))
        return row

    async def delete_item(self, item_id: int) -> None:
        row = await db.fetch_one(
            """
            DELETE FROM items
            WHERE id = $1
            RETURNING id
            """,
            item_id,
        )
        if row is None:
            raise ItemNotFoundError(item_id)
