"""Logging configuration for the command-line tool."""

import logging
import sys

from credgen.config import Settings


def setup_logging(settings: Settings) -> None:
    """Configure application logging.

    Logs go to stderr so that stdout only ever carries the generated
    credentials (``--json`` output must stay parseable).

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,  # Override any existing configuration
    )

    logging.getLogger("credgen").setLevel(level)

    logger = logging.getLogger(__name__)
    logger.debug(
        f"Logging configured: environment={settings.environment}, level={logging.getLevelName(level)}"
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
