"""Entry point for the Recipe Catalog API.

Serves the FastAPI application with Uvicorn on the host and port from
settings (``HOST`` and ``PORT`` environment variables, defaulting to
``0.0.0.0:8080``).

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from recipe_catalog_api.app.core.config import settings
from recipe_catalog_api.app.main import create_app


async def main() -> None:
    """Start the API using Uvicorn."""
    app = create_app()
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info("Listening on %s:%s", settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
