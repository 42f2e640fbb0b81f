"""Entry point for the CRUD Dashboard API.

Launches the FastAPI application with Uvicorn.  Host, port and log
level come from the same environment variables the application reads
(``HOST``, ``PORT``, ``LOG_LEVEL``); see ``crud_dashboard/app/core/config.py``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from crud_dashboard.app.core.config import settings
from crud_dashboard.app.main import app


async def run_api() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info(
        "API available at http://%s:%s%s (docs at %s/docs)",
        settings.host,
        settings.port,
        settings.api_prefix,
        settings.api_prefix,
    )
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass
