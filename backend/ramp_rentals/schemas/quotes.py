"""
Pricing and quote schemas — calculator requests, breakdowns and saved quotes.
"""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, model_validator

from ramp_rentals.core.constants.pricing import MAX_DISTANCE_MILES
from ramp_rentals.pricing.calculator import calculate_upfront_total
from ramp_rentals.pricing.formatting import format_currency
from ramp_rentals.pricing.models import (
    DistanceResolution,
    PlatformItem,
    PricingResult,
    RampConfiguration,
    RampSection,
)


class PricingCalculatorRequest(BaseModel):
    """
    Standalone calculator input.

    An explicit distance wins over the address; one of the two is required.
    """
    platforms: List[PlatformItem] = Field(default_factory=list)
    ramps: List[RampSection] = Field(default_factory=list)
    address: Optional[str] = Field(
        None, min_length=1, description="Address is required for distance calculation"
    )
    distance: Optional[float] = Field(
        None,
        ge=0,
        le=MAX_DISTANCE_MILES,
        allow_inf_nan=False,
        description="Known distance in miles",
    )

    @model_validator(mode="after")
    def require_address_or_distance(self) -> "PricingCalculatorRequest":
        if self.distance is None and not (self.address and self.address.strip()):
            raise ValueError("Either 'address' or 'distance' is required")
        return self

    def ramp_config(self) -> RampConfiguration:
        return RampConfiguration(platforms=self.platforms, ramps=self.ramps)


class PricingBreakdown(BaseModel):
    """Fee breakdown in cents plus display strings."""
    delivery_fee: int
    install_fee: int
    monthly_rate: int
    upfront_total: int
    surcharge: int
    distance: Optional[float] = None
    distance_source: Optional[str] = None
    distance_fallback_reason: Optional[str] = None
    formatted: Dict[str, str] = {}

    @classmethod
    def build(
        cls, result: PricingResult, resolution: Optional[DistanceResolution] = None
    ) -> "PricingBreakdown":
        amounts = {
            "delivery_fee": result.delivery_fee,
            "install_fee": result.install_fee,
            "monthly_rate": result.monthly_rate,
            "upfront_total": result.upfront_total,
            "surcharge": result.surcharge,
        }
        return cls(
            **amounts,
            distance=result.distance,
            distance_source=resolution.source if resolution else None,
            distance_fallback_reason=resolution.reason if resolution else None,
            formatted={k: format_currency(v) for k, v in amounts.items()},
        )


class QuoteCalculateRequest(BaseModel):
    inquiry_id: int = Field(..., gt=0)
    ramp_config: RampConfiguration
    distance: Optional[float] = Field(None, ge=0, le=MAX_DISTANCE_MILES, allow_inf_nan=False)


class QuoteCalculationResponse(PricingBreakdown):
    inquiry_id: int
    ramp_config: RampConfiguration


class QuoteCreate(BaseModel):
    """Calculated figures the staff member chose to keep."""
    inquiry_id: int = Field(..., gt=0)
    delivery_fee: int = Field(..., ge=0)
    install_fee: int = Field(..., ge=0)
    monthly_rate: int = Field(..., ge=0)
    upfront_total: int = Field(..., ge=0)
    surcharge: int = Field(0, ge=0)
    ramp_config: RampConfiguration

    @model_validator(mode="after")
    def check_upfront_total(self) -> "QuoteCreate":
        expected = calculate_upfront_total(
            self.delivery_fee, self.install_fee, self.monthly_rate, self.surcharge
        )
        if self.upfront_total != expected:
            raise ValueError(
                f"upfront_total must equal delivery + install + monthly + surcharge ({expected})"
            )
        return self


class QuoteResponse(BaseModel):
    id: int
    inquiry_id: int
    delivery_fee: int
    install_fee: int
    monthly_rate: int
    upfront_total: int
    surcharge: Optional[int] = 0
    ramp_config: Dict[str, Any]
    created_at: Optional[str] = None
