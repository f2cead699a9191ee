"""
Pricing models — ramp configuration, tariff, distance resolution and result.

All models are frozen: built once per calculation and never mutated.
"""
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from ramp_rentals.core.constants import pricing as tariff_defaults

PlatformSize = Literal["4x4", "5x5", "6x6", "8x8"]
DistanceSource = Literal["service", "fallback"]


class PlatformItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    size: PlatformSize
    quantity: int = Field(ge=1)


class RampSection(BaseModel):
    model_config = ConfigDict(frozen=True)

    length: float = Field(gt=0, description="Section length in feet")
    quantity: int = Field(ge=1)


class RampConfiguration(BaseModel):
    """Platforms and ramp sections making up one rental."""
    model_config = ConfigDict(frozen=True)

    platforms: List[PlatformItem] = Field(default_factory=list)
    ramps: List[RampSection] = Field(default_factory=list)

    @property
    def platform_count(self) -> int:
        return sum(p.quantity for p in self.platforms)

    @property
    def ramp_section_count(self) -> int:
        return sum(r.quantity for r in self.ramps)

    @property
    def total_ramp_feet(self) -> float:
        return sum(r.length * r.quantity for r in self.ramps)


class Tariff(BaseModel):
    """
    Rate card used by the fee calculators.

    Amounts are in dollars. Pass a different instance to the calculators to
    price against alternate rates; the standard tariff is never modified.
    """
    model_config = ConfigDict(frozen=True)

    delivery_per_mile: float = tariff_defaults.DELIVERY_PER_MILE
    delivery_minimum: float = tariff_defaults.DELIVERY_MINIMUM
    install_base: float = tariff_defaults.INSTALL_BASE
    install_per_platform: float = tariff_defaults.INSTALL_PER_PLATFORM
    install_per_ramp_section: float = tariff_defaults.INSTALL_PER_RAMP_SECTION
    monthly_rate_base: float = tariff_defaults.MONTHLY_RATE_BASE
    monthly_rate_per_platform: float = tariff_defaults.MONTHLY_RATE_PER_PLATFORM
    monthly_rate_per_ramp_foot: float = tariff_defaults.MONTHLY_RATE_PER_RAMP_FOOT
    surcharge_threshold_miles: float = tariff_defaults.SURCHARGE_THRESHOLD_MILES
    surcharge_amount: float = tariff_defaults.SURCHARGE_AMOUNT


STANDARD_TARIFF = Tariff()


class DistanceResolution(BaseModel):
    """Distance in miles and whether it came from the service or the fallback."""
    model_config = ConfigDict(frozen=True)

    miles: float
    source: DistanceSource
    reason: Optional[str] = None

    @property
    def is_fallback(self) -> bool:
        return self.source == "fallback"


class PricingResult(BaseModel):
    """Fee breakdown in cents."""
    model_config = ConfigDict(frozen=True)

    delivery_fee: int
    install_fee: int
    monthly_rate: int
    upfront_total: int
    surcharge: int
    distance: Optional[float] = None
