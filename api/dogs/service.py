"""
Dogs "service layer".

Sits between the router and the store. Store calls that the HTTP layer must
survive (create, update, delete) are wrapped so a failure comes back as a
`StoreResult` instead of an exception; the router decides the status code.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .repository import DogGateway
from .schemas import DogCreate, DogUpdate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StoreResult:
    record: dict | None = None
    error: Exception | None = None

    @property
    def found(self) -> bool:
        return self.record is not None

    @property
    def failed(self) -> bool:
        return self.error is not None


class DogService:
    def __init__(self, repository: DogGateway) -> None:
        self.repository = repository

    async def create(self, dog: DogCreate) -> StoreResult:
        try:
            record = await self.repository.create(dog.model_dump())
        except Exception as exc:
            logger.exception("dog_create_failed name=%s", dog.name)
            return StoreResult(error=exc)
        return StoreResult(record=record)

    async def get(self, dog_id: int) -> dict | None:
        return await self.repository.find_by_id(dog_id)

    async def list_all(self) -> list[dict]:
        return await self.repository.find_all()

    async def update(self, dog_id: int, changes: DogUpdate) -> StoreResult:
        try:
            record = await self.repository.update(dog_id, changes.changes())
        except Exception as exc:
            logger.warning("dog_update_failed dog_id=%s error=%s", dog_id, exc)
            return StoreResult(error=exc)
        return StoreResult(record=record)

    async def delete(self, dog_id: int) -> StoreResult:
        try:
            record = await self.repository.delete(dog_id)
        except Exception as exc:
            logger.warning("dog_delete_failed dog_id=%s error=%s", dog_id, exc)
            return StoreResult(error=exc)
        return StoreResult(record=record)
