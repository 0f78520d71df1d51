"""
Input validators for the dogs endpoints.

Every validator is a pure function returning either `Valid(value)` or
`Invalid(errors)`; nothing here raises. The error strings are part of the
HTTP contract, so keep them stable.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar, Union

from .schemas import FIELDS, DogCreate, DogUpdate

T = TypeVar("T")

ID_MESSAGE = "id should be a number"

_ID_RE = re.compile(r"[+-]?[0-9]+")

_FIELD_MESSAGES = {
    "age": "age should be a number",
    "name": "name should be a string",
    "description": "description should be a string",
    "breed": "breed should be a string",
}


@dataclass(frozen=True)
class Valid(Generic[T]):
    value: T


@dataclass(frozen=True)
class Invalid:
    errors: list[str] = field(default_factory=list)


Validation = Union[Valid[T], Invalid]


def validate_id(raw: str) -> Validation[int]:
    text = (raw or "").strip()
    if not _ID_RE.fullmatch(text):
        return Invalid([ID_MESSAGE])
    return Valid(int(text))


def _kind(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    return "object"


def _is_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and math.isfinite(value)


def _check_field(name: str, value: Any) -> bool:
    if name == "age":
        return _is_number(value)
    return isinstance(value, str)


def _normalize(name: str, value: Any) -> Any:
    if name == "age" and isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _check_body(body: Any, *, partial: bool) -> Validation[dict]:
    if not isinstance(body, dict):
        return Invalid([f"Expected object, received {_kind(body)}"])

    errors: list[str] = []
    data: dict[str, Any] = {}
    for name in FIELDS:
        if name not in body:
            if not partial:
                errors.append(_FIELD_MESSAGES[name])
            continue
        value = body[name]
        if not _check_field(name, value):
            errors.append(_FIELD_MESSAGES[name])
            continue
        data[name] = _normalize(name, value)

    for key in body:
        if key not in FIELDS:
            errors.append(f"'{key}' is not a valid key")

    if errors:
        return Invalid(errors)
    return Valid(data)


def validate_create_body(body: Any) -> Validation[DogCreate]:
    """
    All four fields required, correctly typed, and nothing else.

    Field errors come first (in `FIELDS` order), then one entry per
    unrecognized key.
    """
    result = _check_body(body, partial=False)
    if isinstance(result, Invalid):
        return result
    return Valid(DogCreate(**result.value))


def validate_update_body(body: Any) -> Validation[DogUpdate]:
    """
    Same typing as creation but every field optional.
    """
    result = _check_body(body, partial=True)
    if isinstance(result, Invalid):
        return result
    return Valid(DogUpdate(**result.value))
