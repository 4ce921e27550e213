"""Logging setup shared by the CLI and the API."""

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure console logging for the application.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR).
               Defaults to the LOG_LEVEL setting.
    """
    if level is None:
        from travel_booking.config import settings
        level = settings.LOG_LEVEL

    log_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Leave handlers installed by a host (uvicorn, pytest) alone
    if root_logger.handlers:
        return

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(console_handler)
