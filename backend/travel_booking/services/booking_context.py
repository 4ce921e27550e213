"""Calculation context holding the currently selected pricing policy."""

import logging
from typing import Optional, Union

from travel_booking.exceptions import NoPolicySelectedError
from travel_booking.models import TransportMode, TravelRequest
from travel_booking.services.pricing import PricingPolicyInterface, get_pricing_policy

logger = logging.getLogger(__name__)


class TravelBookingContext:
    """
    Dispatches cost calculation to the selected pricing policy.

    One context per session (or per API request). Not meant to be shared
    between concurrent callers.
    """

    def __init__(self, policy: Optional[PricingPolicyInterface] = None):
        self._policy = policy

    @property
    def selected_policy(self) -> Optional[PricingPolicyInterface]:
        return self._policy

    @property
    def has_policy(self) -> bool:
        return self._policy is not None

    def select_policy(self, policy: PricingPolicyInterface) -> None:
        """Replace the currently selected policy."""
        logger.debug("Selected pricing policy %r", policy)
        self._policy = policy

    def select_transport(self, mode: Union[TransportMode, int]) -> None:
        """
        Select the pricing policy for a transport mode.

        Raises:
            ValueError: if the mode is unknown; the selection is left unchanged
        """
        self.select_policy(get_pricing_policy(mode))

    def compute(self, request: TravelRequest) -> float:
        """
        Calculate the cost of a request with the selected policy.

        Raises:
            NoPolicySelectedError: if no policy has been selected yet
        """
        if self._policy is None:
            raise NoPolicySelectedError()

        cost = self._policy.calculate_cost(request)
        logger.debug("Computed cost %s with %r", cost, self._policy)
        return cost
