"""
Pydantic models for the dogs resource.

Request bodies are checked by `dogs.validation` (which produces the exact
error messages clients see); these models are the typed values it hands on.
"""

from __future__ import annotations

from pydantic import BaseModel

FIELDS = ("age", "name", "description", "breed")


class DogCreate(BaseModel):
    name: str
    age: int | float
    description: str
    breed: str


class DogUpdate(BaseModel):
    name: str | None = None
    age: int | float | None = None
    description: str | None = None
    breed: str | None = None

    def changes(self) -> dict:
        # Only the fields the client actually sent.
        return self.model_dump(exclude_unset=True)


class Dog(BaseModel):
    id: int
    name: str
    age: int
    description: str
    breed: str
