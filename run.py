"""Entry point for the Secret Santa API server.

Starts the FastAPI application under Uvicorn.  It is intended to be
executed from the project root, for example inside Docker, where you
only specify a single Python file to run.

Host, port, log level and demo data are configured through environment
variables (``HOST``, ``PORT``, ``LOG_LEVEL``, ``SEED_DEMO_DATA``); see
``secret_santa_api/app/core/config.py``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from secret_santa_api.app.core.config import settings
from secret_santa_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    logging.getLogger(__name__).info("Starting %s on %s:%s", settings.project_name, settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
