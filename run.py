"""Entry point for the News Headlines API server.

Starts the FastAPI application under Uvicorn.  Host and port come from
the ``HOST`` and ``PORT`` environment variables (defaults ``0.0.0.0``
and ``3001``); see ``news_headlines_api/app/core/config.py`` for the
other supported variables.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from news_headlines_api.app.core.config import settings
from news_headlines_api.app.main import app

logger = logging.getLogger(__name__)


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level="info")
    server = Server(config)
    logger.info("News API server running at http://localhost:%s", settings.port)
    logger.info("API documentation available at http://localhost:%s/api", settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
