"""
Klondike Configuration.

Environment variables, settings, and logging configuration.
"""

from klondike.config.log import configure_logging
from klondike.config.settings import Settings, get_settings

__all__ = ["Settings", "configure_logging", "get_settings"]
