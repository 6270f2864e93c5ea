"""
Logging setup for applications embedding pixelflow.

The library only creates module loggers; handlers are installed by the
application calling configure_logging once at startup.
"""

import logging
from typing import Optional

from pixelflow.config import Settings, get_settings


def configure_logging(settings: Optional[Settings] = None) -> None:
    """
    Configure root logging from settings.

    Args:
        settings: Settings to use (defaults to get_settings())
    """
    settings = settings or get_settings()

    logging.basicConfig(
        level=settings.log_level_value,
        format=settings.system.log_format,
    )
    if settings.system.debug:
        logging.getLogger("pixelflow").setLevel(logging.DEBUG)

    # Pillow logs every font and plugin lookup at DEBUG
    logging.getLogger("PIL").setLevel(logging.WARNING)

    logger = logging.getLogger(__name__)
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Debug mode: {settings.system.debug}")
