"""
Dog persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from core.db import Database

from .schemas import FIELDS

_COLUMNS = "id, name, age, description, breed"


@runtime_checkable
class DogGateway(Protocol):
    """
    What the service needs from a dog store.

    `update` and `delete` return None when no record has the given id.
    Any method may raise on store failure.
    """

    async def create(self, fields: dict[str, Any]) -> dict: ...

    async def find_by_id(self, dog_id: int) -> dict | None: ...

    async def find_all(self) -> list[dict]: ...

    async def update(self, dog_id: int, fields: dict[str, Any]) -> dict | None: ...

    async def delete(self, dog_id: int) -> dict | None: ...


class DogRepository:
    def __init__(self, db: Database) -> None:
        self.db = db

    async def ensure_schema(self) -> None:
        await self.db.execute(
            """
            CREATE TABLE IF NOT EXISTS dogs (
                id SERIAL PRIMARY KEY,
                name TEXT NOT NULL,
                age INTEGER NOT NULL,
                description TEXT NOT NULL,
                breed TEXT NOT NULL
            )
            """
        )

    async def create(self, fields: dict[str, Any]) -> dict:
        row = await self.db.fetch_one(
            f"""
            INSERT INTO dogs (name, age, description, breed)
            VALUES ($1, $2, $3, $4)
            RETURNING {_COLUMNS}
            """,
            fields["name"],
            fields["age"],
            fields["description"],
            fields["breed"],
        )
        if row is None:
            raise RuntimeError("Failed to create dog.")
        return row

    async def find_by_id(self, dog_id: int) -> dict | None:
        return await self.db.fetch_one(
            f"""
            SELECT {_COLUMNS}
            FROM dogs
            WHERE id = $1
            """,
            dog_id,
        )

    async def find_all(self) -> list[dict]:
        return await self.db.fetch_all(
            f"""
            SELECT {_COLUMNS}
            FROM dogs
            ORDER BY id ASC
            """
        )

    async def update(self, dog_id: int, fields: dict[str, Any]) -> dict | None:
        # Column names come from FIELDS only; values are always bound.
        names = [name for name in FIELDS if name in fields]
        if not names:
            return await self.find_by_id(dog_id)

        assignments = ", ".join(f"{name} = ${i}" for i, name in enumerate(names, start=2))
        return await self.db.fetch_one(
            f"""
            UPDATE dogs
            SET {assignments}
            WHERE id = $1
            RETURNING {_COLUMNS}
            """,
            dog_id,
            *(fields[name] for name in names),
        )

    async def delete(self, dog_id: int) -> dict | None:
        return await self.db.fetch_one(
            f"""
            DELETE FROM dogs
            WHERE id = $1
            RETURNING {_COLUMNS}
            """,
            dog_id,
        )
