"""
Process entry point - serves the API with uvicorn.

Usage:
    user-registry
    python -m src.api.server

Host, port and log level come from Settings (HOST, PORT, LOG_LEVEL).
"""

import logging
import sys

from uvicorn import Config, Server

from src.api.main import app
from src.config.logging_config import setup_logging
from src.config.settings import get_settings

logger = logging.getLogger(__name__)


def main() -> None:
    """Configure logging and serve the app until shut down."""
    settings = get_settings()
    setup_logging(settings.log_level)

    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)

    logger.info("Listening on %s:%d", settings.host, settings.port)
    server.run()

    # uvicorn exits on its own when the socket can't be bound, but a failed
    # lifespan startup returns normally
    if not server.started:
        logger.critical("Server failed to start on %s:%d", settings.host, settings.port)
        sys.exit(1)


if __name__ == "__main__":
    main()
