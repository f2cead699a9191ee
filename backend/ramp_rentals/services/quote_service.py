"""
Quote service — price an inquiry's ramp configuration and persist quotes.
"""
import logging
from typing import Any, Dict, Optional

from ramp_rentals.core.constants.rentals import INQUIRY_STATUS_QUOTED
from ramp_rentals.core.exceptions import InquiryNotFoundError
from ramp_rentals.db.inquiry_store import InquiryStore
from ramp_rentals.db.quote_store import QuoteStore
from ramp_rentals.pricing.models import RampConfiguration
from ramp_rentals.schemas.quotes import (
    PricingBreakdown,
    QuoteCalculationResponse,
    QuoteCreate,
)
from ramp_rentals.services.pricing_service import PricingService


class QuoteService:
    def __init__(
        self,
        pricing: PricingService,
        inquiry_store: InquiryStore,
        quote_store: QuoteStore,
    ) -> None:
        self._pricing = pricing
        self._inquiry_store = inquiry_store
        self._quote_store = quote_store
        self._logger = logging.getLogger("quote_service")

    async def calculate_quote(
        self,
        inquiry_id: int,
        config: RampConfiguration,
        distance: Optional[float] = None,
    ) -> QuoteCalculationResponse:
        """Price a configuration for delivery to the inquiry's address. Nothing is stored."""
        inquiry = await self._inquiry_store.get_inquiry(inquiry_id)
        if not inquiry:
            raise InquiryNotFoundError(inquiry_id)

        result, resolution = await self._pricing.price(
            config, address=inquiry.get("address"), distance=distance
        )
        breakdown = PricingBreakdown.build(result, resolution)
        return QuoteCalculationResponse(
            **breakdown.model_dump(),
            inquiry_id=inquiry_id,
            ramp_config=config,
        )

    async def save_quote(self, quote: QuoteCreate) -> Dict[str, Any]:
        """Store the quote and mark its inquiry as quoted."""
        inquiry = await self._inquiry_store.get_inquiry(quote.inquiry_id)
        if not inquiry:
            raise InquiryNotFoundError(quote.inquiry_id)

        saved = await self._quote_store.create_quote(quote.model_dump(mode="json"))
        await self._inquiry_store.update_status(quote.inquiry_id, INQUIRY_STATUS_QUOTED)
        return saved
