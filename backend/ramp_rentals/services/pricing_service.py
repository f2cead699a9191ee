"""
Pricing service — distance resolution + fee computation.

Pricing service – standalone calculator used by the pricing page and quotes.
"""
import logging
from typing import Optional, Tuple

from ramp_rentals.pricing.calculator import calculate_full_pricing
from ramp_rentals.pricing.models import (
    DistanceResolution,
    PricingResult,
    RampConfiguration,
    STANDARD_TARIFF,
    Tariff,
)
from ramp_rentals.services.distance_service import DistanceResolver


class PricingService:
    def __init__(self, resolver: DistanceResolver, tariff: Tariff = STANDARD_TARIFF) -> None:
        self._resolver = resolver
        self._tariff = tariff
        self._logger = logging.getLogger("pricing_service")

    @property
    def tariff(self) -> Tariff:
        return self._tariff

    async def price(
        self,
        config: RampConfiguration,
        address: Optional[str] = None,
        distance: Optional[float] = None,
    ) -> Tuple[PricingResult, Optional[DistanceResolution]]:
        """
        Price a configuration.

        A caller-supplied distance is used as-is and no lookup happens;
        otherwise the address is resolved (falling back on failure).
        The resolution is None when the distance was supplied.
        """
        resolution = None
        if distance is None:
            if not address:
                raise ValueError("address is required when distance is not supplied")
            resolution = await self._resolver.resolve(address)
            distance = resolution.miles

        result = calculate_full_pricing(config, distance, self._tariff)
        self._logger.info(
            "priced platforms=%s sections=%s distance=%s upfront_total=%s",
            config.platform_count,
            config.ramp_section_count,
            distance,
            result.upfront_total,
        )
        return result, resolution
