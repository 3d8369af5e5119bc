"""
Business logic for users.

``UserService`` registers users, lists them and deletes them together
with their memberships.  Deleting a user is all-or-nothing: it is
refused while the user belongs to a closed group or is the only admin
of an open group, and in that case nothing at all is removed.
"""

import logging
from typing import Dict, List

from secret_santa_api.app.core.errors import ConflictError, NotFoundError, ValidationError
from secret_santa_api.app.core.store import AccessLevel, DataStore


class UserService:
    """Service for registering and removing users."""

    def __init__(self, store: DataStore) -> None:
        self.store = store

    async def create_user(self, name: str) -> int:
        """Register a user and return the newly allocated id.

        Raises ``ValidationError`` when ``name`` is empty.
        """
        if not name:
            raise ValidationError("bad name")
        logger = logging.getLogger(__name__)
        with self.store.locked() as db:
            user_id = db.users.add(name)
        logger.info("User %s registered as %r", user_id, name)
        return user_id

    async def list_users(self) -> Dict[int, str]:
        """Return a snapshot of every user, keyed by id."""
        with self.store.locked() as db:
            return dict(db.users.names)

    async def delete_user(self, user_id: int) -> None:
        """Delete a user and every membership they hold.

        The deletion is refused with ``ConflictError`` when the user is
        a member of any closed group, or when they are the only admin
        of an open group.  Memberships in open groups are otherwise
        removed whatever the access level, as long as another admin
        remains in the group.
        """
        logger = logging.getLogger(__name__)
        with self.store.locked() as db:
            if user_id not in db.users:
                raise NotFoundError("no such user")

            memberships = db.memberships.groups_of(user_id)
            if any(db.groups.is_closed(group_id) for group_id, _ in memberships):
                raise ConflictError("user belongs to a closed group, nothing was removed")

            removable: List[int] = []
            blocking: List[int] = []
            for group_id, membership in memberships:
                if membership.access_level is AccessLevel.USER or db.memberships.count_admins(group_id) > 1:
                    removable.append(group_id)
                else:
                    blocking.append(group_id)
            if blocking:
                groups = ", ".join(str(group_id) for group_id in sorted(blocking))
                raise ConflictError(f"user is the only admin of groups: {groups}")

            for group_id in removable:
                db.memberships.remove(user_id, group_id)
            db.users.remove(user_id)
        logger.info("User %s deleted, left groups %s", user_id, sorted(removable))
