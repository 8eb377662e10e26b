"""Logging configuration for the task board service."""

import logging
import sys

from ..config import get_config

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def setup_logging() -> None:
    """Configure logging from the ``logging.level`` setting (unknown levels mean info)."""
    config = get_config()
    level = LEVELS.get(config.logging.level.lower(), logging.INFO)

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    logging.getLogger("taskboard").setLevel(level)
    logging.getLogger("uvicorn").setLevel(level)
    # Request lines only at debug; board changes are logged by the services
    logging.getLogger("uvicorn.access").setLevel(
        logging.DEBUG if level == logging.DEBUG else logging.WARNING
    )

    logging.getLogger(__name__).info(f"Logging configured at level: {config.logging.level}")
