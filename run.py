"""Entry point for the User Registry API.

Serves the FastAPI application with Uvicorn.  Host, port and the rest
of the configuration come from environment variables; see
``users_api/app/core/config.py`` for the supported names.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from users_api.app.core.config import settings
from users_api.app.core.logging_config import resolve_level
from users_api.app.main import app


async def run_api() -> None:
    """Start the API using Uvicorn on ``HOST``:``PORT`` (default ``0.0.0.0:8080``)."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=resolve_level(settings.log_level).lower(),
    )
    server = Server(config)
    await server.serve()


async def main() -> None:
    logging.getLogger(__name__).info("Serving on %s:%d", settings.host, settings.port)
    await run_api()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
