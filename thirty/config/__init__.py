"""
Thirty Configuration.

Environment variables, settings, and logging configuration.
"""

from thirty.config.log_setup import configure_logging
from thirty.config.settings import Settings, get_settings

__all__ = ["Settings", "configure_logging", "get_settings"]
