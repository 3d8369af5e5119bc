"""
In-memory data store and its locking discipline.

The store holds three maps: users (id -> name), groups (id -> closed
flag) and memberships ((user id, group id) -> access level and santa
assignment).  Nothing is persisted; a restart starts from an empty
store (or from the demo fixture, see ``DataStore.seed_demo_data``).

All three maps are guarded by a single lock.  Services open a
``DataStore.locked()`` block for the whole read-validate-mutate
sequence of one command, which gives every command atomicity and a
total order over all state changes.  Code inside the block must not
await or perform I/O.

Identifiers are allocated from per-registry counters and are never
reused, even after the entity holding them has been deleted.
"""

import threading
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple

from fastapi import Request


# Placeholder stored in ``Membership.santa_id`` until recipients are drawn.
UNASSIGNED_SANTA: Optional[int] = None


class AccessLevel(str, Enum):
    USER = "user"
    ADMIN = "admin"


@dataclass
class Membership:
    access_level: AccessLevel = AccessLevel.USER
    santa_id: Optional[int] = UNASSIGNED_SANTA


MembershipKey = Tuple[int, int]


class UserRegistry:
    """Users keyed by id, with a monotonically increasing id counter."""

    def __init__(self) -> None:
        self.names: Dict[int, str] = {}
        self.next_id = 0

    def add(self, name: str) -> int:
        user_id = self.next_id
        self.names[user_id] = name
        self.next_id += 1
        return user_id

    def insert(self, user_id: int, name: str) -> None:
        """Store a user under a fixed id, moving the counter past it."""
        self.names[user_id] = name
        self.next_id = max(self.next_id, user_id + 1)

    def remove(self, user_id: int) -> None:
        del self.names[user_id]

    def __contains__(self, user_id: int) -> bool:
        return user_id in self.names


class GroupRegistry:
    """Groups keyed by id.  The value is the ``is_closed`` flag."""

    def __init__(self) -> None:
        self.closed: Dict[int, bool] = {}
        self.next_id = 0

    def add(self) -> int:
        group_id = self.next_id
        self.closed[group_id] = False
        self.next_id += 1
        return group_id

    def insert(self, group_id: int, is_closed: bool = False) -> None:
        self.closed[group_id] = is_closed
        self.next_id = max(self.next_id, group_id + 1)

    def is_closed(self, group_id: int) -> bool:
        return self.closed[group_id]

    def remove(self, group_id: int) -> None:
        del self.closed[group_id]

    def __contains__(self, group_id: int) -> bool:
        return group_id in self.closed


class MembershipTable:
    """Many-to-many relation between users and groups."""

    def __init__(self) -> None:
        self.rows: Dict[MembershipKey, Membership] = {}

    def get(self, user_id: int, group_id: int) -> Optional[Membership]:
        return self.rows.get((user_id, group_id))

    def add(self, user_id: int, group_id: int, access_level: AccessLevel = AccessLevel.USER) -> Membership:
        membership = Membership(access_level=access_level)
        self.rows[(user_id, group_id)] = membership
        return membership

    def remove(self, user_id: int, group_id: int) -> None:
        del self.rows[(user_id, group_id)]

    def count_admins(self, group_id: int) -> int:
        return sum(
            1
            for (_, gid), membership in self.rows.items()
            if gid == group_id and membership.access_level is AccessLevel.ADMIN
        )

    def groups_of(self, user_id: int) -> List[Tuple[int, Membership]]:
        """Return ``(group_id, membership)`` pairs for one user."""
        return [(gid, m) for (uid, gid), m in self.rows.items() if uid == user_id]

    def remove_group(self, group_id: int) -> int:
        """Drop every membership of a group and return how many were removed."""
        keys = [key for key in self.rows if key[1] == group_id]
        for key in keys:
            del self.rows[key]
        return len(keys)


class DataStore:
    """The whole mutable state of the service behind one lock."""

    def __init__(self) -> None:
        self.users = UserRegistry()
        self.groups = GroupRegistry()
        self.memberships = MembershipTable()
        self._lock = threading.Lock()

    @contextmanager
    def locked(self) -> Iterator["DataStore"]:
        """Hold the store lock for the duration of the ``with`` block."""
        with self._lock:
            yield self

    def seed_demo_data(self) -> None:
        """Load a small fixture for manual testing.

        Two users (``0`` and ``2``) each administer one open group.
        User id ``1`` is deliberately left unused, so the next user
        created through the API receives id ``3``.
        """
        with self.locked():
            self.users.insert(0, "Ilya")
            self.users.insert(2, "Stepan")
            self.groups.insert(0)
            self.groups.insert(1)
            self.memberships.add(0, 0, AccessLevel.ADMIN)
            self.memberships.add(2, 1, AccessLevel.ADMIN)


def get_store(request: Request) -> DataStore:
    """FastAPI dependency returning the store attached to the application."""
    return request.app.state.store
