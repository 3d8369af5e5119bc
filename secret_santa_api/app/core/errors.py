"""
Failure types raised by the service layer.

Every rejected command raises a subclass of ``ServiceError``.  The
exception carries a human readable ``message`` (kept identical to the
texts clients already rely on) and a stable ``kind`` so callers can
branch without parsing the message.  Endpoints translate these into
HTTP responses; the data store is never left half-modified when one is
raised.
"""

import logging
from enum import Enum
from typing import Dict

from fastapi import HTTPException, status

logger = logging.getLogger(__name__)


class ErrorKind(str, Enum):
    """Machine readable failure category."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    AUTHORIZATION = "authorization"


class ServiceError(Exception):
    """Base class for all command failures."""

    kind: ErrorKind
    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def as_detail(self) -> Dict[str, str]:
        """Payload placed in the ``detail`` field of the HTTP error."""
        return {"error": self.message, "kind": self.kind.value}


class ValidationError(ServiceError):
    """An input field is present but unusable (e.g. an empty name)."""

    kind = ErrorKind.VALIDATION
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(ServiceError):
    """A referenced user or group does not exist."""

    kind = ErrorKind.NOT_FOUND
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(ServiceError):
    """The command clashes with the current state of the store."""

    kind = ErrorKind.CONFLICT
    status_code = status.HTTP_409_CONFLICT


class AuthorizationError(ServiceError):
    """The acting user is not allowed to administer the group."""

    kind = ErrorKind.AUTHORIZATION
    status_code = status.HTTP_403_FORBIDDEN


def http_error(exc: ServiceError) -> HTTPException:
    """Translate a service failure into the HTTP error returned to clients."""
    logger.info("Request rejected (%s): %s", exc.kind.value, exc.message)
    return HTTPException(status_code=exc.status_code, detail=exc.as_detail())
