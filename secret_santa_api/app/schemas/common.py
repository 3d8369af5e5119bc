"""Shared field types and response models."""

import re
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, Field

from secret_santa_api.app.core.errors import ErrorKind

_DIGITS = re.compile(r"[0-9]+")


def _parse_id(value: Any) -> int:
    """Accept a JSON integer or a string of ASCII digits.

    Booleans, floats (even ``1.0``) and any other string are refused, so
    they never turn into a real user or group id.
    """
    if isinstance(value, bool):
        raise ValueError("id must be an integer, not a boolean")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _DIGITS.fullmatch(value):
        return int(value)
    raise ValueError("id must be an integer or a string of digits")


# Identifier of a user or group as sent by clients.
EntityId = Annotated[int, BeforeValidator(_parse_id), Field(ge=0)]


class ErrorDetail(BaseModel):
    """Shape of the ``detail`` field of every rejected command."""

    error: str = Field(..., examples=["group is closed"])
    kind: ErrorKind


class ErrorResponse(BaseModel):
    detail: ErrorDetail
