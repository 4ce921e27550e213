#!/usr/bin/env python3
"""
Interactive travel cost calculator.

Usage:
    travel-booking          - Choose a transport and enter trip details
    python -m travel_booking.cli
"""

import logging
import math
import sys

from travel_booking.config import settings
from travel_booking.exceptions import InvalidRequestError
from travel_booking.logging_config import configure_logging
from travel_booking.models import ServiceClass, TransportMode, TravelRequest
from travel_booking.services import TravelBookingContext

logger = logging.getLogger(__name__)

TRUE_WORDS = {"true", "yes", "y", "1"}
FALSE_WORDS = {"false", "no", "n", "0"}


class InputError(ValueError):
    """User typed something that could not be parsed."""


def parse_bool(raw: str) -> bool:
    value = raw.strip().lower()
    if value in TRUE_WORDS:
        return True
    if value in FALSE_WORDS:
        return False
    raise InputError(f"Expected true/false, got {raw!r}")


def parse_float(raw: str) -> float:
    try:
        return float(raw.strip())
    except ValueError:
        raise InputError(f"Expected a number, got {raw!r}")


def parse_int(raw: str) -> int:
    try:
        return int(raw.strip())
    except ValueError:
        raise InputError(f"Expected a whole number, got {raw!r}")


def parse_service_class(raw: str) -> ServiceClass:
    """2 means business, any other number means economy."""
    return ServiceClass.BUSINESS if parse_int(raw) == 2 else ServiceClass.ECONOMY


def show_menu():
    print("Choose transport:")
    print("1 - Plane")
    print("2 - Train")
    print("3 - Bus")


def read_transport_mode() -> TransportMode:
    choice = parse_int(input())
    try:
        return TransportMode(choice)
    except ValueError:
        raise InputError(f"Unknown transport choice: {choice}")


def read_travel_request() -> TravelRequest:
    """Prompt for trip details and build the request."""
    distance = parse_float(input("Distance: "))
    passengers = parse_int(input("Passengers: "))
    service_class = parse_service_class(input("Class (1 - economy, 2 - business): "))
    has_baggage = parse_bool(input("Baggage? (true/false): "))
    is_child = parse_bool(input("Child? (true/false): "))
    is_senior = parse_bool(input("Senior? (true/false): "))

    return TravelRequest.create(
        distance=distance,
        passengers=passengers,
        service_class=service_class,
        has_baggage=has_baggage,
        is_child=is_child,
        is_senior=is_senior,
        regional_coefficient=settings.DEFAULT_REGIONAL_COEFFICIENT
    )


def main() -> int:
    """Main entry point. Returns the process exit code."""
    configure_logging()
    context = TravelBookingContext()

    show_menu()

    try:
        mode = read_transport_mode()
        context.select_transport(mode)
        request = read_travel_request()
    except InvalidRequestError as e:
        print(f"Invalid input data: {e}")
        return 1
    except InputError as e:
        print(f"Input error: {e}")
        return 1
    except EOFError:
        print("Input error: unexpected end of input")
        return 1

    result = context.compute(request)
    if not math.isfinite(result):
        print("Calculation error: cost is out of range")
        return 1

    logger.debug("Calculated %s for %s", result, mode.name.lower())

    print(f"Total cost: {result:.2f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
