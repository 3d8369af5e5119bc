"""
Service layer for groups and group membership.

A group is created by an existing user, who becomes its only admin.
Other users join open groups as plain members.  Admins may step down
to plain membership as long as another admin remains, and may delete
the group, which removes every membership along with it.

There is no way to promote a member to admin; ``GroupService``
nevertheless counts admins instead of assuming there is exactly one.
"""

import logging
from typing import Dict

from secret_santa_api.app.core.errors import AuthorizationError, ConflictError, NotFoundError
from secret_santa_api.app.core.store import AccessLevel, DataStore, Membership


class GroupService:
    """Service for creating, joining and administering groups."""

    def __init__(self, store: DataStore) -> None:
        self.store = store

    async def create_group(self, creator_id: int) -> int:
        """Create an open group administered by ``creator_id``."""
        logger = logging.getLogger(__name__)
        with self.store.locked() as db:
            if creator_id not in db.users:
                raise NotFoundError("bad creator_id")
            group_id = db.groups.add()
            db.memberships.add(creator_id, group_id, AccessLevel.ADMIN)
        logger.info("Group %s created by user %s", group_id, creator_id)
        return group_id

    async def list_groups(self) -> Dict[int, bool]:
        """Return a snapshot mapping group id to its ``is_closed`` flag."""
        with self.store.locked() as db:
            return dict(db.groups.closed)

    async def join_group(self, user_id: int, group_id: int) -> None:
        """Add ``user_id`` to ``group_id`` as a plain member.

        Checks run in a fixed order: the group must exist and be open,
        then the user must exist and not already be a member.
        """
        logger = logging.getLogger(__name__)
        with self.store.locked() as db:
            if group_id not in db.groups:
                raise NotFoundError("no such group")
            if db.groups.is_closed(group_id):
                raise ConflictError("group is closed")
            if user_id not in db.users:
                raise NotFoundError("no such user")
            if db.memberships.get(user_id, group_id) is not None:
                raise ConflictError("user already in group")
            db.memberships.add(user_id, group_id)
        logger.info("User %s joined group %s", user_id, group_id)

    async def count_admins(self, group_id: int) -> int:
        with self.store.locked() as db:
            return db.memberships.count_admins(group_id)

    async def demote_admin(self, admin_id: int, group_id: int) -> None:
        """Turn the admin membership of ``admin_id`` into a plain one.

        Refused when it would leave the group without an admin.
        """
        logger = logging.getLogger(__name__)
        with self.store.locked() as db:
            membership = _require_admin(db, admin_id, group_id)
            if db.memberships.count_admins(group_id) < 2:
                raise ConflictError("cannot remove last admin")
            membership.access_level = AccessLevel.USER
        logger.info("User %s is no longer an admin of group %s", admin_id, group_id)

    async def delete_group(self, admin_id: int, group_id: int) -> None:
        """Delete a group and all of its memberships on behalf of an admin."""
        logger = logging.getLogger(__name__)
        with self.store.locked() as db:
            _require_admin(db, admin_id, group_id)
            removed = db.memberships.remove_group(group_id)
            db.groups.remove(group_id)
        logger.info("Group %s deleted by user %s (%s memberships removed)", group_id, admin_id, removed)


def _require_admin(db: DataStore, user_id: int, group_id: int) -> Membership:
    # Caller must hold the store lock.
    membership = db.memberships.get(user_id, group_id)
    if membership is None:
        raise AuthorizationError("user does not belong to this group")
    if membership.access_level is not AccessLevel.ADMIN:
        raise AuthorizationError("not an admin")
    return membership
