"""API endpoints for travel cost calculation."""

import logging
import math

from fastapi import APIRouter, HTTPException, Depends

from travel_booking.config import settings
from travel_booking.models import CostQuoteRequest, CostQuoteResponse
from travel_booking.services import TravelBookingContext, available_transport_modes

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Cost Calculation"])


def get_booking_context() -> TravelBookingContext:
    """
    Dependency injection for the calculation context.
    Each request gets its own context, so selections never leak between callers.
    """
    return TravelBookingContext()


@router.post("/calculate-cost", response_model=CostQuoteResponse)
async def calculate_cost(
    quote: CostQuoteRequest,
    context: TravelBookingContext = Depends(get_booking_context)
) -> CostQuoteResponse:
    """
    Calculate the cost of one booking.

    Args:
        quote: Transport mode and travel request
        context: Injected calculation context

    Returns:
        CostQuoteResponse with the raw and rounded cost

    Raises:
        HTTPException: If the calculation fails
    """
    try:
        context.select_transport(quote.transport_mode)
        cost = context.compute(quote.request)
        if not math.isfinite(cost):
            raise ValueError("Calculated cost is out of range; check distance and passengers")
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("Cost calculation failed")
        raise HTTPException(status_code=500, detail=f"Internal error: {str(e)}")

    return CostQuoteResponse(
        transport_mode=quote.transport_mode,
        cost=cost,
        rounded_cost=round(cost, 2),
        regional_coefficient=quote.request.regional_coefficient
    )


@router.get("/transport-modes")
async def get_transport_modes():
    """
    List the available transport modes.

    Returns:
        Menu of transport modes and the default regional coefficient
    """
    return {
        "transport_modes": available_transport_modes(),
        "default_regional_coefficient": settings.DEFAULT_REGIONAL_COEFFICIENT
    }


@router.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": settings.API_TITLE
    }
