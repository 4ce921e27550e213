"""Configuration for the travel booking cost calculator."""

import logging
import math
import os

from dotenv import load_dotenv

from travel_booking import __version__

load_dotenv()

logger = logging.getLogger(__name__)

# Regional multiplier applied by the reference booking shell
FALLBACK_REGIONAL_COEFFICIENT = 1.1


def _read_regional_coefficient() -> float:
    """Read REGIONAL_COEFFICIENT from the environment, falling back to 1.1."""
    raw = os.getenv("REGIONAL_COEFFICIENT")
    if raw is None or raw.strip() == "":
        return FALLBACK_REGIONAL_COEFFICIENT

    try:
        value = float(raw)
    except ValueError:
        logger.warning(
            "Ignoring non-numeric REGIONAL_COEFFICIENT=%r, using %s",
            raw, FALLBACK_REGIONAL_COEFFICIENT
        )
        return FALLBACK_REGIONAL_COEFFICIENT

    if not math.isfinite(value) or value <= 0:
        logger.warning(
            "Ignoring non-positive or non-finite REGIONAL_COEFFICIENT=%r, using %s",
            raw, FALLBACK_REGIONAL_COEFFICIENT
        )
        return FALLBACK_REGIONAL_COEFFICIENT

    return value


class Settings:
    """Application settings."""

    # API Settings
    API_TITLE = "Travel Booking Cost Calculator"
    API_VERSION = __version__
    API_DESCRIPTION = (
        "Cost calculation for plane, train and bus bookings"
    )

    # CORS Settings
    CORS_ORIGINS = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:8000",
        "http://127.0.0.1:8000",
    ]

    # Pricing
    DEFAULT_REGIONAL_COEFFICIENT = _read_regional_coefficient()

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    @classmethod
    def reload(cls):
        """Re-read environment-driven values (used after env changes)."""
        cls.DEFAULT_REGIONAL_COEFFICIENT = _read_regional_coefficient()
        cls.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


settings = Settings()
