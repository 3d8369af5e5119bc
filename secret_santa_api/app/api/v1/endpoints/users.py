"""
User endpoints for API v1.

Provide registration, listing and deletion of users.  Paths keep the
verb-style names (``/user/create``, ``/user/delete``) used by existing
clients.  There is no authentication: callers identify users by id.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from secret_santa_api.app.core.errors import ServiceError, http_error
from secret_santa_api.app.core.store import DataStore, get_store
from secret_santa_api.app.schemas.common import ErrorResponse
from secret_santa_api.app.schemas.user import UserCreate, UserCreated, UserDelete
from secret_santa_api.app.services.user_service import UserService


router = APIRouter()


def get_user_service(store: DataStore = Depends(get_store)) -> UserService:
    return UserService(store)


@router.get("/users", response_model=Dict[int, str])
async def list_users(service: UserService = Depends(get_user_service)) -> Dict[int, str]:
    """Return every registered user as a mapping of id to name."""
    return await service.list_users()


@router.post(
    "/user/create",
    response_model=UserCreated,
    responses={400: {"model": ErrorResponse}},
)
async def create_user(body: UserCreate, service: UserService = Depends(get_user_service)) -> UserCreated:
    """Register a new user.

    The name must not be empty.  Ids are allocated in increasing order
    and are never handed out twice, even after the user is deleted.
    """
    try:
        user_id = await service.create_user(body.name)
    except ServiceError as e:
        raise http_error(e)
    return UserCreated(id=user_id)


@router.post(
    "/user/delete",
    response_model=Dict[str, Any],
    responses={404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def delete_user(body: UserDelete, service: UserService = Depends(get_user_service)) -> Dict[str, Any]:
    """Delete a user and their memberships.

    Refused (with nothing removed) while the user is in a closed group
    or is the only admin of an open group; the error lists the
    blocking groups in the latter case.
    """
    try:
        await service.delete_user(body.user_id)
    except ServiceError as e:
        raise http_error(e)
    return {}
