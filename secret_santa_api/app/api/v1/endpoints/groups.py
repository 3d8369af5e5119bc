"""
Group endpoints for API v1.

These routes create groups, let users join them and let group admins
step down or delete the group.  Admin commands carry the acting
admin's id in the body; the ``GroupService`` checks that this user is
actually an admin of the group before anything changes.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from secret_santa_api.app.core.errors import ServiceError, http_error
from secret_santa_api.app.core.store import DataStore, get_store
from secret_santa_api.app.schemas.common import ErrorResponse
from secret_santa_api.app.schemas.group import GroupAdminAction, GroupCreate, GroupCreated, GroupJoin
from secret_santa_api.app.services.group_service import GroupService


router = APIRouter()


def get_group_service(store: DataStore = Depends(get_store)) -> GroupService:
    return GroupService(store)


@router.get("/groups", response_model=Dict[int, bool])
async def list_groups(service: GroupService = Depends(get_group_service)) -> Dict[int, bool]:
    """Return every group as a mapping of id to its ``is_closed`` flag."""
    return await service.list_groups()


@router.post(
    "/group/create",
    response_model=GroupCreated,
    responses={404: {"model": ErrorResponse}},
)
async def create_group(body: GroupCreate, service: GroupService = Depends(get_group_service)) -> GroupCreated:
    """Create an open group.  The creator becomes its only admin."""
    try:
        group_id = await service.create_group(body.creator_id)
    except ServiceError as e:
        raise http_error(e)
    return GroupCreated(group_id=group_id)


@router.post(
    "/group/join",
    response_model=Dict[str, Any],
    responses={404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def join_group(body: GroupJoin, service: GroupService = Depends(get_group_service)) -> Dict[str, Any]:
    """Join an open group as a plain member."""
    try:
        await service.join_group(body.user_id, body.group_id)
    except ServiceError as e:
        raise http_error(e)
    return {}


@router.post(
    "/group/unadmin",
    response_model=Dict[str, Any],
    responses={403: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def demote_admin(body: GroupAdminAction, service: GroupService = Depends(get_group_service)) -> Dict[str, Any]:
    """Give up admin rights in a group.

    The last remaining admin of a group cannot step down.
    """
    try:
        await service.demote_admin(body.admin_id, body.group_id)
    except ServiceError as e:
        raise http_error(e)
    return {}


@router.post(
    "/group/delete",
    response_model=Dict[str, Any],
    responses={403: {"model": ErrorResponse}},
)
async def delete_group(body: GroupAdminAction, service: GroupService = Depends(get_group_service)) -> Dict[str, Any]:
    """Delete a group together with all of its memberships.

    Only an admin of the group may do this.
    """
    try:
        await service.delete_group(body.admin_id, body.group_id)
    except ServiceError as e:
        raise http_error(e)
    return {}
