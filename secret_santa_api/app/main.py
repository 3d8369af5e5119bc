"""
Main entrypoint for the Secret Santa API.

This module assembles the FastAPI application, sets up logging,
attaches the in-memory data store and includes versioned routers.
The ``create_app`` function builds and configures the app, which is
then instantiated at module import time as ``app``, e.g.::

    uvicorn secret_santa_api.app.main:app --reload

Tests build their own application around a fresh store with
``create_app(store)``.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.logging_config import setup_logging
from .core.store import DataStore


def create_app(store: Optional[DataStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[DataStore]
        Store shared by all requests.  A new, empty store is created
        when omitted; it is seeded with demo data if
        ``settings.seed_demo_data`` is enabled.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the steps below
    # can log.
    setup_logging(settings.log_level, settings.log_file)
    logger = logging.getLogger(__name__)

    if store is None:
        store = DataStore()
        if settings.seed_demo_data:
            store.seed_demo_data()
            logger.info("Demo data loaded")

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.store = store

    # Mount versioned routes under /api/v1.
    app.include_router(v1_router, prefix="/api/v1")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
