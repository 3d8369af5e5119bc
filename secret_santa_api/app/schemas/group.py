"""
Pydantic models for group payloads.

Each command gets its own request model so the service layer only
ever sees typed, validated identifiers.
"""

from pydantic import BaseModel, Field

from secret_santa_api.app.schemas.common import EntityId


class GroupCreate(BaseModel):
    creator_id: EntityId = Field(..., examples=["0"], description="User who becomes the group's admin")


class GroupCreated(BaseModel):
    group_id: int


class GroupJoin(BaseModel):
    user_id: EntityId = Field(..., examples=["1"])
    group_id: EntityId = Field(..., examples=["0"])


class GroupAdminAction(BaseModel):
    """Payload for commands performed by a group admin.

    Used by both demotion and deletion.  ``admin_id`` is taken at face
    value; there is no authentication in front of it.
    """

    admin_id: EntityId = Field(..., examples=["0"])
    group_id: EntityId = Field(..., examples=["0"])
