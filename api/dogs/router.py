"""
FastAPI router for the dogs endpoints.

Bodies are read as raw JSON and checked by `dogs.validation` rather than by
FastAPI's pydantic binding, because clients rely on the exact 400 payloads
produced there.

Not-found handling differs per route (204 on read and delete, 404 on update).
Existing clients depend on it; keep it.
"""

from __future__ import annotations

import json
from typing import Any

from fastapi import APIRouter, Request, Response, status
from fastapi.responses import JSONResponse

from . import schemas, validation
from .service import DogService

NOT_FOUND = {"error": "Dog not Found"}


class MalformedBody(ValueError):
    pass


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def _is_json(request: Request) -> bool:
    media_type = request.headers.get("content-type", "").split(";", 1)[0]
    return media_type.strip().lower() == "application/json"


async def _read_json(request: Request) -> Any:
    """
    Parse an application/json body. Other content types and empty bodies
    read as `{}`.
    """
    if not _is_json(request):
        return {}
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        return json.loads(raw, parse_constant=_reject_constant)
    except ValueError as exc:
        raise MalformedBody(str(exc)) from exc


def _record(row: dict) -> dict:
    return schemas.Dog.model_validate(row).model_dump()


def _bad_id() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": validation.ID_MESSAGE},
    )


def _bad_body(errors: list[str]) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"errors": errors},
    )


def build_router(service: DogService) -> APIRouter:
    """
    Register the dog routes against an explicitly constructed service.
    """
    router = APIRouter()

    @router.post("/dogs")
    async def create_dog(request: Request) -> Response:
        try:
            payload = await _read_json(request)
        except MalformedBody:
            return _bad_body(["Malformed JSON body"])

        body = validation.validate_create_body(payload)
        if isinstance(body, validation.Invalid):
            return _bad_body(body.errors)

        result = await service.create(body.value)
        if result.failed or not result.found:
            return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
        return JSONResponse(status_code=status.HTTP_201_CREATED, content=_record(result.record))

    @router.get("/dogs/{dog_id}")
    async def get_dog(dog_id: str) -> Response:
        parsed = validation.validate_id(dog_id)
        if isinstance(parsed, validation.Invalid):
            return _bad_id()

        row = await service.get(parsed.value)
        if row is None:
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        return JSONResponse(status_code=status.HTTP_200_OK, content=_record(row))

    @router.get("/dogs")
    async def list_dogs() -> Response:
        rows = await service.list_all()
        return JSONResponse(status_code=status.HTTP_200_OK, content=[_record(r) for r in rows])

    @router.patch("/dogs/{dog_id}")
    async def update_dog(dog_id: str, request: Request) -> Response:
        parsed = validation.validate_id(dog_id)
        if isinstance(parsed, validation.Invalid):
            return _bad_id()

        try:
            payload = await _read_json(request)
        except MalformedBody:
            return _bad_body(["Malformed JSON body"])

        body = validation.validate_update_body(payload)
        if isinstance(body, validation.Invalid):
            return _bad_body(body.errors)

        result = await service.update(parsed.value, body.value)
        if not result.found:
            return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=NOT_FOUND)
        return JSONResponse(status_code=status.HTTP_201_CREATED, content=_record(result.record))

    @router.delete("/dogs/{dog_id}")
    async def delete_dog(dog_id: str) -> Response:
        parsed = validation.validate_id(dog_id)
        if isinstance(parsed, validation.Invalid):
            return _bad_id()

        result = await service.delete(parsed.value)
        if not result.found:
            # 204 carries no body, so the not-found payload is dropped.
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        return JSONResponse(status_code=status.HTTP_200_OK, content=_record(result.record))

    return router
