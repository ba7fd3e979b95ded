"""Entry point for the User Store API.

Starts the FastAPI application under Uvicorn.  Host and port are taken
from ``HOST`` and ``PORT`` (defaults ``0.0.0.0`` and ``8000``); see
``user_store_api/app/core/config.py`` for the other variables.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from user_store_api.app.core.config import settings
from user_store_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger("user_store_api.run").info("User store API listening on port %s", settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
