"""Main entry point for the charsheet HTTP server."""

import sys

import structlog
import uvicorn

from charsheet.api import create_app
from charsheet.config import get_settings
from charsheet.logging_config import setup_logging

logger = structlog.get_logger(__name__)


def run() -> None:
    """
    Configure logging and serve the API with uvicorn.

    This is the function that should be called from the command line.
    """
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)

    logger.info("server_starting", host=settings.host, port=settings.port)
    try:
        uvicorn.run(
            create_app(settings),
            host=settings.host,
            port=settings.port,
            log_config=None,
        )
    except Exception as e:
        logger.error(
            "server_fatal_error",
            error=str(e),
            exc_info=True,
        )
        sys.exit(1)


if __name__ == "__main__":
    run()
