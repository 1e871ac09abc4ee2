"""Entry point for the Pessoas API.

Starts the FastAPI application under uvicorn.  Host and port come from
``Settings`` (``HOST`` and ``PORT`` environment variables, defaulting
to ``0.0.0.0:9999``).

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from pessoas_api.app.core.config import settings
from pessoas_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    logging.getLogger(__name__).info("Listening on %s:%s", settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass
