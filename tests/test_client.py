"""
Tests for the SecretSantaAPI client.

The client is pointed at the application through FastAPI's
``TestClient``, which stands in for the requests session.
"""

import pytest
import requests
from fastapi.testclient import TestClient

from secret_santa_client import SecretSantaAPI
from tests.conftest import close_group


@pytest.fixture(name="api")
def api_fixture(client: TestClient):
    return SecretSantaAPI(base_url="http://testserver", session=client)


class TestClientOperations:
    """Happy paths through the client."""

    def test_users_and_groups(self, api):
        alice, error = api.create_user("Alice")
        assert error is None
        bob, _ = api.create_user("Bob")
        group_id, error = api.create_group(alice)
        assert error is None

        assert api.join_group(bob, group_id) == (True, None)
        assert api.list_users() == ({alice: "Alice", bob: "Bob"}, None)
        assert api.list_groups() == ({group_id: False}, None)

        assert api.delete_group(alice, group_id) == (True, None)
        assert api.delete_user(bob) == (True, None)
        assert api.list_users() == ({alice: "Alice"}, None)


class TestClientErrors:
    """Failures are reported as error dictionaries."""

    def test_service_error(self, api):
        user_id, error = api.create_user("")
        assert user_id is None
        assert error == {"status_code": 400, "message": "bad name", "kind": "validation"}

    def test_last_admin(self, api):
        alice, _ = api.create_user("Alice")
        group_id, _ = api.create_group(alice)
        ok, error = api.demote_admin(alice, group_id)
        assert ok is False
        assert error["status_code"] == 409
        assert error["message"] == "cannot remove last admin"
        assert error["kind"] == "conflict"

    def test_closed_group(self, api, store):
        alice, _ = api.create_user("Alice")
        group_id, _ = api.create_group(alice)
        close_group(store, group_id)
        ok, error = api.join_group(alice, group_id)
        assert ok is False
        assert error["message"] == "group is closed"

    def test_request_validation_error(self, api):
        ok, error = api.join_group(-1, 0)
        assert ok is False
        assert error["status_code"] == 422
        assert error["kind"] == "validation"

    def test_transport_error(self):
        class FailingSession:
            def request(self, *args, **kwargs):
                raise requests.ConnectionError("connection refused")

        api = SecretSantaAPI(base_url="http://santa.invalid", session=FailingSession())
        users, error = api.list_users()
        assert users == {}
        assert error == {"status_code": None, "message": "connection refused", "kind": None}
