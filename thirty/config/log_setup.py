"""
Thirty - Logging Configuration

Applies the configured log level to the ``thirty`` logger hierarchy once per
process. Streamlit reruns the script on every interaction, so repeated calls
must be harmless.
"""

import logging

from thirty.config.settings import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_configured = False


def configure_logging(settings: Settings | None = None) -> logging.Logger:
    """Attach a stream handler to the ``thirty`` logger at the configured level."""
    global _configured
    settings = settings or get_settings()

    logger = logging.getLogger("thirty")
    level = "DEBUG" if settings.debug else settings.log_level
    logger.setLevel(level)

    if not _configured:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        _configured = True

    return logger
