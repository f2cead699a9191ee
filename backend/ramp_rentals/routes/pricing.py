"""
Pricing and quote routes.

Provides:
- POST /pricing/calculate  – standalone calculator (address or distance)
- POST /quotes/calculate   – price a configuration for an inquiry
- POST /quotes             – save a quote and mark the inquiry quoted
"""
import logging

from fastapi import APIRouter, HTTPException, Depends

from ramp_rentals.container import get_pricing_service, get_quote_service
from ramp_rentals.core.auth import get_current_user
from ramp_rentals.core.exceptions import InquiryNotFoundError
from ramp_rentals.schemas.quotes import (
    PricingBreakdown,
    PricingCalculatorRequest,
    QuoteCalculateRequest,
    QuoteCalculationResponse,
    QuoteCreate,
    QuoteResponse,
)
from ramp_rentals.services.pricing_service import PricingService
from ramp_rentals.services.quote_service import QuoteService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["pricing"])


@router.post("/pricing/calculate", response_model=PricingBreakdown)
async def calculate_pricing(
    request: PricingCalculatorRequest,
    service: PricingService = Depends(get_pricing_service),
):
    """Price a ramp configuration without tying it to an inquiry."""
    result, resolution = await service.price(
        request.ramp_config(), address=request.address, distance=request.distance
    )
    return PricingBreakdown.build(result, resolution)


@router.post("/quotes/calculate", response_model=QuoteCalculationResponse)
async def calculate_quote(
    request: QuoteCalculateRequest,
    service: QuoteService = Depends(get_quote_service),
):
    """Price a configuration for delivery to the inquiry's address."""
    try:
        return await service.calculate_quote(
            request.inquiry_id, request.ramp_config, distance=request.distance
        )
    except InquiryNotFoundError:
        raise HTTPException(status_code=404, detail="Inquiry not found")


@router.post("/quotes", response_model=QuoteResponse, status_code=201)
async def save_quote(
    request: QuoteCreate,
    current_user: dict = Depends(get_current_user),
    service: QuoteService = Depends(get_quote_service),
):
    """Persist a calculated quote."""
    try:
        saved = await service.save_quote(request)
    except InquiryNotFoundError:
        raise HTTPException(status_code=404, detail="Inquiry not found")
    logger.info(f"Quote saved for inquiry {request.inquiry_id} by {current_user['user_id']}")
    return QuoteResponse(**saved)
