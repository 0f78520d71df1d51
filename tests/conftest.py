"""Shared fixtures: in-memory dog store + FastAPI test client.

The app is built through `create_app(repository=...)`, so no Postgres pool
is opened; every test gets a fresh store.
"""

from __future__ import annotations

import itertools

import pytest
from httpx import ASGITransport, AsyncClient

from main import create_app


class StoreDown(RuntimeError):
    pass


class InMemoryDogStore:
    """Dict-backed stand-in for DogRepository.

    Put a method name in `failing` to make that call raise.
    """

    def __init__(self) -> None:
        self.rows: dict[int, dict] = {}
        self.failing: set[str] = set()
        self._ids = itertools.count(1)

    def _maybe_fail(self, name: str) -> None:
        if name in self.failing:
            raise StoreDown(f"{name} unavailable")

    async def create(self, fields: dict) -> dict:
        self._maybe_fail("create")
        dog_id = next(self._ids)
        row = {"id": dog_id, **fields}
        self.rows[dog_id] = row
        return dict(row)

    async def find_by_id(self, dog_id: int) -> dict | None:
        self._maybe_fail("find_by_id")
        row = self.rows.get(dog_id)
        return dict(row) if row is not None else None

    async def find_all(self) -> list[dict]:
        self._maybe_fail("find_all")
        return [dict(self.rows[k]) for k in sorted(self.rows)]

    async def update(self, dog_id: int, fields: dict) -> dict | None:
        self._maybe_fail("update")
        row = self.rows.get(dog_id)
        if row is None:
            return None
        row.update(fields)
        return dict(row)

    async def delete(self, dog_id: int) -> dict | None:
        self._maybe_fail("delete")
        row = self.rows.pop(dog_id, None)
        return dict(row) if row is not None else None


REX = {"name": "Rex", "age": 3, "description": "friendly", "breed": "lab"}


@pytest.fixture
def store():
    return InMemoryDogStore()


@pytest.fixture
def app(store):
    return create_app(repository=store)


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
async def rex(store):
    """Insert Rex directly into the store."""
    return await store.create(dict(REX))
