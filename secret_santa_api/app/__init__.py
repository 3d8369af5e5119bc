"""
Application package initializer.

The application is split by concern: ``core`` holds configuration,
logging, errors and the data store; ``services`` holds the business
rules for users and groups; ``schemas`` the request and response
models; ``api`` the versioned HTTP routes.
"""

from .main import app  # noqa: F401
