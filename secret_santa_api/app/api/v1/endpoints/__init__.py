"""
Endpoint subpackage for API v1.

Each module defines an ``APIRouter`` for one domain.  The routers are
aggregated in ``router.py`` one level up.
"""
