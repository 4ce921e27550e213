"""Pricing policies, one per transport mode."""

from abc import ABC, abstractmethod
from typing import Dict, List, Protocol, Union, runtime_checkable

from travel_booking.models import ServiceClass, TransportMode, TravelRequest


@runtime_checkable
class PricingPolicyInterface(Protocol):
    """
    Interface for cost calculation.
    Every transport pricing policy must follow this contract.
    """

    def calculate_cost(self, request: TravelRequest) -> float:
        """Calculate the cost of a single travel request."""
        ...


class BasePricingPolicy(ABC):
    """
    Abstract base class for pricing policies.

    Costs are built in a fixed order: base rate, class adjustment and
    flat surcharges (``base_cost``), then passenger scaling, regional
    scaling, and finally the discount chain (``apply_discount``).
    Discounts compound on the already-scaled total.
    """

    name: str = ""

    @abstractmethod
    def base_cost(self, request: TravelRequest) -> float:
        """Per-passenger cost before scaling and discounts."""
        pass

    @abstractmethod
    def apply_discount(self, total: float, request: TravelRequest) -> float:
        """Apply the discount chain to the scaled total."""
        pass

    def calculate_cost(self, request: TravelRequest) -> float:
        """
        Calculate the cost of a single travel request.

        Args:
            request: Validated travel request

        Returns:
            Unrounded cost
        """
        total = self.base_cost(request)
        total *= request.passengers
        total *= request.regional_coefficient
        return self.apply_discount(total, request)

    def __repr__(self):
        return f"<{self.__class__.__name__}>"


class PlaneCostPolicy(BasePricingPolicy):
    """Plane pricing: business multiplier, baggage fee, age and group discounts."""

    name = "plane"

    RATE_PER_DISTANCE = 0.5
    BUSINESS_MULTIPLIER = 1.8
    BAGGAGE_FEE = 50.0
    CHILD_DISCOUNT = 0.7
    SENIOR_DISCOUNT = 0.8
    GROUP_DISCOUNT = 0.9
    GROUP_MIN_PASSENGERS = 5

    def base_cost(self, request: TravelRequest) -> float:
        base = request.distance * self.RATE_PER_DISTANCE

        if request.service_class == ServiceClass.BUSINESS:
            base *= self.BUSINESS_MULTIPLIER

        # Flat fee goes on after the class multiplier, before passenger scaling
        if request.has_baggage:
            base += self.BAGGAGE_FEE

        return base

    def apply_discount(self, total: float, request: TravelRequest) -> float:
        # Child and senior are not exclusive; both may apply
        if request.is_child:
            total *= self.CHILD_DISCOUNT
        if request.is_senior:
            total *= self.SENIOR_DISCOUNT
        if request.passengers >= self.GROUP_MIN_PASSENGERS:
            total *= self.GROUP_DISCOUNT
        return total


class TrainCostPolicy(BasePricingPolicy):
    """Train pricing: business multiplier and age discounts."""

    name = "train"

    RATE_PER_DISTANCE = 0.3
    BUSINESS_MULTIPLIER = 1.5
    CHILD_DISCOUNT = 0.8
    SENIOR_DISCOUNT = 0.85

    def base_cost(self, request: TravelRequest) -> float:
        base = request.distance * self.RATE_PER_DISTANCE
        if request.service_class == ServiceClass.BUSINESS:
            base *= self.BUSINESS_MULTIPLIER
        return base

    def apply_discount(self, total: float, request: TravelRequest) -> float:
        if request.is_child:
            total *= self.CHILD_DISCOUNT
        if request.is_senior:
            total *= self.SENIOR_DISCOUNT
        return total


class BusCostPolicy(BasePricingPolicy):
    """Bus pricing: flat rate with a large-group discount."""

    name = "bus"

    RATE_PER_DISTANCE = 0.2
    GROUP_DISCOUNT = 0.85
    GROUP_MIN_PASSENGERS = 10

    def base_cost(self, request: TravelRequest) -> float:
        return request.distance * self.RATE_PER_DISTANCE

    def apply_discount(self, total: float, request: TravelRequest) -> float:
        if request.passengers >= self.GROUP_MIN_PASSENGERS:
            total *= self.GROUP_DISCOUNT
        return total


# Policies are stateless, so one shared instance per mode is enough
_POLICIES: Dict[TransportMode, BasePricingPolicy] = {
    TransportMode.PLANE: PlaneCostPolicy(),
    TransportMode.TRAIN: TrainCostPolicy(),
    TransportMode.BUS: BusCostPolicy(),
}


def get_pricing_policy(mode: Union[TransportMode, int]) -> PricingPolicyInterface:
    """
    Get the pricing policy for a transport mode.

    Args:
        mode: TransportMode or its menu number (1-3)

    Returns:
        Shared policy instance implementing PricingPolicyInterface

    Raises:
        ValueError: if the mode is not a known transport mode
    """
    return _POLICIES[TransportMode(mode)]


def available_transport_modes() -> List[dict]:
    """List the transport modes in menu order."""
    return [
        {"id": int(mode), "name": policy.name}
        for mode, policy in sorted(_POLICIES.items())
    ]
