"""Secret Santa API client.

This module defines a small client wrapper around the REST API served
by ``secret_santa_api``.  It uses the ``requests`` library internally
and exposes one method per operation:

* :meth:`list_users` / :meth:`list_groups` – read the registries.
* :meth:`create_user` / :meth:`delete_user` – manage users.
* :meth:`create_group` / :meth:`join_group` – create and join groups.
* :meth:`demote_admin` / :meth:`delete_group` – admin commands.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``.  On failure ``data`` is ``None`` (or an empty mapping for
the list methods) and ``error`` is a dictionary with the keys
``status_code``, ``message`` and ``kind``.  ``kind`` mirrors the error
kinds of the server (``validation``, ``not_found``, ``conflict``,
``authorization``) and is ``None`` for transport failures.

Identifiers are sent as JSON strings, which is the format the first
clients of the service used and which the server still accepts.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


@dataclass(frozen=True)
class ApiEndpoint:
    """An operation of the API.

    Attributes:
        path: Path relative to the API prefix, e.g. ``/group/join``.
        method: The HTTP method in upper case (``GET`` or ``POST``).
    """

    path: str
    method: str


ENDPOINTS: Dict[str, ApiEndpoint] = {
    "list_users": ApiEndpoint("/users", "GET"),
    "list_groups": ApiEndpoint("/groups", "GET"),
    "create_user": ApiEndpoint("/user/create", "POST"),
    "delete_user": ApiEndpoint("/user/delete", "POST"),
    "create_group": ApiEndpoint("/group/create", "POST"),
    "join_group": ApiEndpoint("/group/join", "POST"),
    "demote_admin": ApiEndpoint("/group/unadmin", "POST"),
    "delete_group": ApiEndpoint("/group/delete", "POST"),
}


class SecretSantaAPI:
    """Client for the Secret Santa API."""

    def __init__(
        self,
        *,
        base_url: str,
        api_prefix: str = "/api/v1",
        session: Optional[Any] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://127.0.0.1:8080``.
            api_prefix: Prefix the versioned routes are mounted under.
            session: Optional requests session.  Anything with a
                compatible ``request()`` method works, which lets tests
                pass FastAPI's ``TestClient``.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/") + api_prefix.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(self, operation: str, json_body: Any | None = None) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform the HTTP request for ``operation``.

        Returns:
            A tuple ``(data, error)``.  ``data`` holds the parsed JSON
            response on success.
        """
        ep = ENDPOINTS[operation]
        url = f"{self.base_url}{ep.path}"
        try:
            logger.debug("Sending %s request to %s", ep.method, url)
            response = self.session.request(ep.method, url, json=json_body, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc), "kind": None}

        if response.status_code >= 400:
            error = _parse_error(response)
            logger.warning("API request %s failed (%s): %s", operation, error["status_code"], error["message"])
            return None, error
        if response.content:
            return response.json(), None
        return None, None

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------
    def list_users(self) -> Tuple[Dict[int, str], Optional[Error]]:
        data, error = self._request("list_users")
        if error:
            return {}, error
        return {int(user_id): name for user_id, name in (data or {}).items()}, None

    def create_user(self, name: str) -> Tuple[Optional[int], Optional[Error]]:
        """Register a user and return its id."""
        data, error = self._request("create_user", {"name": name})
        if error:
            return None, error
        return int(data["id"]), None

    def delete_user(self, user_id: int) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("delete_user", {"user_id": str(user_id)})
        return error is None, error

    # ------------------------------------------------------------------
    # Groups
    # ------------------------------------------------------------------
    def list_groups(self) -> Tuple[Dict[int, bool], Optional[Error]]:
        """Return a mapping of group id to its ``is_closed`` flag."""
        data, error = self._request("list_groups")
        if error:
            return {}, error
        return {int(group_id): closed for group_id, closed in (data or {}).items()}, None

    def create_group(self, creator_id: int) -> Tuple[Optional[int], Optional[Error]]:
        data, error = self._request("create_group", {"creator_id": str(creator_id)})
        if error:
            return None, error
        return int(data["group_id"]), None

    def join_group(self, user_id: int, group_id: int) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("join_group", {"user_id": str(user_id), "group_id": str(group_id)})
        return error is None, error

    def demote_admin(self, admin_id: int, group_id: int) -> Tuple[bool, Optional[Error]]:
        """Step down from admin to plain member of a group."""
        _, error = self._request("demote_admin", {"admin_id": str(admin_id), "group_id": str(group_id)})
        return error is None, error

    def delete_group(self, admin_id: int, group_id: int) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("delete_group", {"admin_id": str(admin_id), "group_id": str(group_id)})
        return error is None, error


def _parse_error(response: Any) -> Error:
    """Extract message and kind from an error response.

    Service failures carry ``{"detail": {"error": ..., "kind": ...}}``;
    request validation failures carry FastAPI's list of problems under
    ``detail`` and are reported with kind ``validation``.
    """
    message = ""
    kind = None
    try:
        body = response.json()
    except ValueError:
        body = None
    detail = body.get("detail") if isinstance(body, dict) else None
    if isinstance(detail, dict):
        message = detail.get("error") or ""
        kind = detail.get("kind")
    elif isinstance(detail, list):
        message = "; ".join(str(item.get("msg", item)) for item in detail if isinstance(item, dict))
        kind = "validation"
    if not message:
        message = response.text or f"HTTP {response.status_code}"
    return {"status_code": response.status_code, "message": message, "kind": kind}
