"""
Contact Book Backend — Process Runner
=======================================

What:  `python -m app` / `contactbook` entry point.
How:   Loads configuration and builds the engine by importing the
       application, then hands it to uvicorn on HOST:PORT.

Any failure while loading configuration or opening the database (invalid
settings, an unparsable .env line, malformed URL, missing driver) is logged as CRITICAL and the
process exits with status 1. A port that cannot be bound makes uvicorn exit
the process as well.
"""

import logging
import sys

import uvicorn

logger = logging.getLogger("app")


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        from app.config import settings
        from app.main import app, setup_logging
    except Exception as e:
        logger.critical("Startup failed: %s", e)
        sys.exit(1)

    setup_logging(settings.log_level)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_config=None,  # keep the logging configured above
    )


if __name__ == "__main__":
    main()
