"""Errors raised by the travel booking core."""

from typing import Sequence


class TravelBookingError(Exception):
    """Base class for travel booking errors."""


class InvalidRequestError(TravelBookingError, ValueError):
    """Travel request data failed validation."""

    def __init__(self, message: str, fields: Sequence[str] = ()):
        self.fields = tuple(fields)
        super().__init__(message)


class NoPolicySelectedError(TravelBookingError, RuntimeError):
    """Cost computation was requested before a pricing policy was chosen."""

    def __init__(self):
        super().__init__("No pricing policy selected. Choose a transport mode first.")
