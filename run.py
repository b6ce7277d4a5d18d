"""Entry point for the fundraiser tracker API.

Serves the FastAPI application with Uvicorn on ``HOST:PORT`` (by
default ``0.0.0.0:3000``).  Configuration such as ``ADMIN_TOKEN``,
``DATA_FILE`` or ``LOG_LEVEL`` is read from the environment; see
``fundraiser_api/app/core/config.py`` for the full list.

Usage:
    ADMIN_TOKEN=... python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from fundraiser_api.app.core.config import settings
from fundraiser_api.app.main import app


async def main() -> None:
    """Start the API server and run until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("Server stopped")
