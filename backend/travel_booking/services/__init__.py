"""Services package for the travel booking calculator."""

from .pricing import (
    get_pricing_policy,
    available_transport_modes,
    PricingPolicyInterface,
    BasePricingPolicy,
    PlaneCostPolicy,
    TrainCostPolicy,
    BusCostPolicy
)
from .booking_context import TravelBookingContext

__all__ = [
    'get_pricing_policy',
    'available_transport_modes',
    'PricingPolicyInterface',
    'BasePricingPolicy',
    'PlaneCostPolicy',
    'TrainCostPolicy',
    'BusCostPolicy',
    'TravelBookingContext'
]
