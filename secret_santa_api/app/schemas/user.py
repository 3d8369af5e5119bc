"""
Pydantic models for user payloads.

Identifiers are non-negative integers (``EntityId``).  Older clients send
them as JSON strings (``"3"``); digit strings are converted to ``int``
and anything else is rejected with a 422 response before the service is
called.
"""

from pydantic import BaseModel, Field

from secret_santa_api.app.schemas.common import EntityId


class UserCreate(BaseModel):
    """Schema for registering a user.

    ``name`` may be sent empty; the service rejects it with a
    ``validation`` error rather than the schema, so the message matches
    what existing clients expect.
    """

    name: str = Field(..., examples=["Alice"])


class UserCreated(BaseModel):
    id: int


class UserDelete(BaseModel):
    user_id: EntityId = Field(..., examples=["0"])
