import pytest
from fastapi.testclient import TestClient

from secret_santa_api.app.core.store import AccessLevel, DataStore
from secret_santa_api.app.main import create_app
from secret_santa_api.app.services.group_service import GroupService
from secret_santa_api.app.services.user_service import UserService

API = "/api/v1"


@pytest.fixture(name="store")
def store_fixture():
    """A fresh, empty store per test."""
    return DataStore()


@pytest.fixture(name="users")
def users_fixture(store):
    return UserService(store)


@pytest.fixture(name="groups")
def groups_fixture(store):
    return GroupService(store)


@pytest.fixture(name="client")
def client_fixture(store):
    """HTTP client for an app wired to the test's store."""
    app = create_app(store)
    with TestClient(app) as client:
        yield client


def add_admin(store: DataStore, user_id: int, group_id: int) -> None:
    """Make ``user_id`` an admin of ``group_id`` directly in the store.

    The API has no promotion command, so tests needing several admins
    in one group set them up here.
    """
    with store.locked() as db:
        membership = db.memberships.get(user_id, group_id)
        if membership is None:
            db.memberships.add(user_id, group_id, AccessLevel.ADMIN)
        else:
            membership.access_level = AccessLevel.ADMIN


def close_group(store: DataStore, group_id: int) -> None:
    with store.locked() as db:
        db.groups.closed[group_id] = True
