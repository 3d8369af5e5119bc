"""
Top-level router for version 1 of the API.

This router aggregates the domain routers (users, groups) under a
unified prefix.  When new domains are introduced, include their
routers here.
"""

from fastapi import APIRouter

from .endpoints import groups, users

# The endpoint modules define full paths themselves (``/users``,
# ``/user/create``), so no per-domain prefix is added here.
router = APIRouter()

router.include_router(users.router, tags=["users"])
router.include_router(groups.router, tags=["groups"])
