"""Shared fixtures: in-memory item store + FastAPI test client.

Invariants:
    - No test touches Postgres; the store dependency is overridden per test
    - Every test gets a fresh store whose ids start at 1
"""

import itertools

import pytest
from httpx import ASGITransport, AsyncClient

from items.repository import LIST_LIMIT, ItemNotFoundError


class InMemoryItemStore:
    """Dict-backed stand-in for ItemRepository."""

    def __init__(self):
        self.rows = {}
        self.calls = []
        self._ids = itertools.count(1)

    async def get_item(self, item_id):
        self.calls.append(("get_item", item_id))
        row = self.rows.get(item_id)
        return dict(row) if row is not None else None

    async def list_items(self, *, limit=LIST_LIMIT):
        self.calls.append(("list_items", limit))
        return [dict(self.rows[k]) for k in sorted(self.rows)][:limit]

    async def create_item(self, *, name, description="", quality=""):
        self.calls.append(("create_item", name))
        item_id = next(self._ids)
        self.rows[item_id] = {
            "id": item_id,
            "name": name,
            "description": description,
            "quality": quality,
        }
        return dict(self.rows[item_id])

    async def update_item(self, item):
        self.calls.append(("update_item", item["id"]))
        if item["id"] not in self.rows:
            raise ItemNotFoundError(item["id"])
        self.rows[item["id"]] = {k: item[k] for k in ("id", "name", "description", "quality")}
        return dict(self.rows[item["id"]])

    async def delete_item(self, item_id):
        self.calls.append(("delete_item", item_id))
        if self.rows.pop(item_id, None) is None:
            raise ItemNotFoundError(item_id)


class BrokenItemStore(InMemoryItemStore):
    """Every operation fails the way a lost connection would."""

    async def get_item(self, item_id):
        raise ConnectionError("connection to server was lost")

    async def list_items(self, *, limit=LIST_LIMIT):
        raise ConnectionError("connection to server was lost")

    async def create_item(self, *, name, description="", quality=""):
        raise ConnectionError("connection to server was lost")


@pytest.fixture
def store():
    return InMemoryItemStore()


@pytest.fixture
def broken_store():
    return BrokenItemStore()


@pytest.fixture
async def client(store):
    """FastAPI test client with the item store dependency overridden."""
    from items.service import get_item_store
    from main import app

    app.dependency_overrides[get_item_store] = lambda: store

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
