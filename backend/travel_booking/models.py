"""Models for the travel booking cost calculator."""

from enum import Enum, IntEnum

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from travel_booking.exceptions import InvalidRequestError


def _default_regional_coefficient() -> float:
    from travel_booking.config import settings
    return settings.DEFAULT_REGIONAL_COEFFICIENT


class ServiceClass(str, Enum):
    """Cabin / carriage class of the booking."""
    ECONOMY = "economy"
    BUSINESS = "business"


class TransportMode(IntEnum):
    """Transport variants, numbered as in the booking menu."""
    PLANE = 1
    TRAIN = 2
    BUS = 3


class TravelRequest(BaseModel):
    """
    One booking request. Immutable once constructed.

    Construction fails if distance or passengers is not a positive finite
    number, so an invalid request never exists. Use ``create`` to get
    InvalidRequestError; calling the model directly raises pydantic's
    ValidationError instead.
    """
    model_config = ConfigDict(frozen=True)

    distance: float = Field(..., gt=0, allow_inf_nan=False, description="Trip length")
    passengers: int = Field(..., gt=0, description="Number of travellers")
    service_class: ServiceClass = Field(ServiceClass.ECONOMY, description="Service class")
    has_baggage: bool = Field(False, description="Checked baggage surcharge applies")
    is_child: bool = Field(False, description="Child discount applies")
    is_senior: bool = Field(False, description="Senior discount applies")
    regional_coefficient: float = Field(
        default_factory=_default_regional_coefficient,
        gt=0,
        allow_inf_nan=False,
        description="Multiplicative regional pricing adjustment"
    )

    @classmethod
    def create(cls, **fields) -> "TravelRequest":
        """
        Build a validated request.

        Raises:
            InvalidRequestError: if any field is invalid. No partial
                request is returned.
        """
        try:
            return cls(**fields)
        except ValidationError as e:
            bad_fields = [
                ".".join(str(part) for part in error["loc"])
                for error in e.errors()
            ]
            raise InvalidRequestError(
                f"Invalid travel request: {', '.join(bad_fields)}",
                fields=bad_fields
            ) from e


class CostQuoteRequest(BaseModel):
    """Request model for a single cost calculation."""
    transport_mode: TransportMode = Field(..., description="1 - plane, 2 - train, 3 - bus")
    request: TravelRequest


class CostQuoteResponse(BaseModel):
    """Response model for a single cost calculation."""
    transport_mode: TransportMode
    cost: float = Field(..., description="Cost as computed by the pricing policy")
    rounded_cost: float = Field(..., description="Cost rounded to 2 decimals for display")
    regional_coefficient: float = Field(..., description="Regional coefficient that was applied")
