"""
loguru configuration shared by every entry point.

Logs always go to stderr: the MCP stdio transport owns stdout.
"""

import sys

from loguru import logger

from src.infrastructure.config.settings import GatewaySettings

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}:{function}:{line}</cyan> - <level>{message}</level>"
)


def configure_logging(settings: GatewaySettings) -> None:
    """Replace loguru's default sink with a single stderr sink at the configured level."""
    logger.remove()
    if settings.log_format == "json":
        logger.add(sys.stderr, level=settings.log_level.upper(), serialize=True)
    else:
        logger.add(sys.stderr, level=settings.log_level.upper(), format=CONSOLE_FORMAT)
