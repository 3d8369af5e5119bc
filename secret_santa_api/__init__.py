"""
Top-level package for the Secret Santa API.

All functionality lives in submodules under ``app``: the in-memory
store and error types in ``app.core``, the membership rules in
``app.services`` and the HTTP routes in ``app.api``.
"""

__all__ = []
