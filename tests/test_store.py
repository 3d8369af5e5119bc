"""
Unit tests for the in-memory data store.

Tests cover:
- Id allocation and non-reuse
- Membership bookkeeping
- Demo fixture
- Lock scoping
"""

import threading

from secret_santa_api.app.core.store import UNASSIGNED_SANTA, AccessLevel, DataStore


class TestRegistries:
    """Tests for user and group registries."""

    def test_user_ids_increase(self):
        store = DataStore()
        assert [store.users.add(name) for name in ("a", "b", "c")] == [0, 1, 2]

    def test_user_ids_not_reused_after_removal(self):
        """Removing the highest id does not free it."""
        store = DataStore()
        store.users.add("a")
        last = store.users.add("b")
        store.users.remove(last)
        assert store.users.add("c") == last + 1

    def test_groups_created_open(self):
        store = DataStore()
        group_id = store.groups.add()
        assert store.groups.is_closed(group_id) is False
        assert group_id in store.groups

    def test_group_counter_independent_of_users(self):
        store = DataStore()
        store.users.add("a")
        store.users.add("b")
        assert store.groups.add() == 0


class TestMembershipTable:
    """Tests for the membership relation."""

    def test_new_membership_has_no_santa(self):
        store = DataStore()
        membership = store.memberships.add(0, 0)
        assert membership.access_level is AccessLevel.USER
        assert membership.santa_id is UNASSIGNED_SANTA

    def test_count_admins_per_group(self):
        table = DataStore().memberships
        table.add(0, 0, AccessLevel.ADMIN)
        table.add(1, 0, AccessLevel.ADMIN)
        table.add(2, 0)
        table.add(0, 1, AccessLevel.ADMIN)
        assert table.count_admins(0) == 2
        assert table.count_admins(1) == 1
        assert table.count_admins(5) == 0

    def test_groups_of_user(self):
        table = DataStore().memberships
        table.add(0, 0)
        table.add(0, 3, AccessLevel.ADMIN)
        table.add(1, 0)
        assert sorted(gid for gid, _ in table.groups_of(0)) == [0, 3]

    def test_remove_group_drops_only_that_group(self):
        table = DataStore().memberships
        table.add(0, 0)
        table.add(1, 0)
        table.add(1, 1)
        assert table.remove_group(0) == 2
        assert list(table.rows) == [(1, 1)]


class TestDemoData:
    """Tests for the demo fixture."""

    def test_seed_contents(self):
        store = DataStore()
        store.seed_demo_data()
        assert store.users.names == {0: "Ilya", 2: "Stepan"}
        assert store.groups.closed == {0: False, 1: False}
        assert store.memberships.get(0, 0).access_level is AccessLevel.ADMIN
        assert store.memberships.get(2, 1).access_level is AccessLevel.ADMIN

    def test_counters_continue_after_seed(self):
        store = DataStore()
        store.seed_demo_data()
        assert store.users.add("new") == 3
        assert store.groups.add() == 2


class TestLocking:
    """Tests for the store lock."""

    def test_lock_released_after_exception(self):
        store = DataStore()
        try:
            with store.locked():
                raise RuntimeError("boom")
        except RuntimeError:
            pass
        acquired = store._lock.acquire(blocking=False)
        assert acquired
        store._lock.release()

    def test_concurrent_allocation_unique(self):
        """Threads allocating under the lock never share an id."""
        store = DataStore()
        ids = []

        def worker():
            for _ in range(200):
                with store.locked() as db:
                    ids.append(db.users.add("x"))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len(ids) == 1600
        assert len(set(ids)) == 1600
