"""
Klondike - Logging Setup

Root logger configuration for applications embedding the engine.
"""

import logging
import sys


def configure_logging(level: str | None = None) -> None:
    """Configure logging for the application.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR).
            Defaults to the configured log_level, or DEBUG when debug is on.
    """
    if level is None:
        from klondike.config.settings import get_settings

        settings = get_settings()
        level = "DEBUG" if settings.debug else settings.log_level

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
    )
