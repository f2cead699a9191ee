"""
Inquiry service — customer intake lifecycle.
"""
import logging
from typing import Any, Dict, List

from ramp_rentals.core.exceptions import InquiryNotFoundError
from ramp_rentals.db.inquiry_store import InquiryStore
from ramp_rentals.db.quote_store import QuoteStore
from ramp_rentals.schemas.inquiries import InquiryCreate, InquiryUpdate


class InquiryService:
    def __init__(self, inquiry_store: InquiryStore, quote_store: QuoteStore) -> None:
        self._inquiry_store = inquiry_store
        self._quote_store = quote_store
        self._logger = logging.getLogger("inquiry_service")

    async def add_inquiry(self, data: InquiryCreate) -> Dict[str, Any]:
        return await self._inquiry_store.create_inquiry(data.model_dump())

    async def list_inquiries(self, limit: int = 50, offset: int = 0) -> List[Dict[str, Any]]:
        return await self._inquiry_store.list_inquiries(limit=limit, offset=offset)

    async def count_inquiries(self) -> int:
        return await self._inquiry_store.count_inquiries()

    async def get_inquiry(self, inquiry_id: int) -> Dict[str, Any]:
        inquiry = await self._inquiry_store.get_inquiry(inquiry_id)
        if not inquiry:
            raise InquiryNotFoundError(inquiry_id)
        return inquiry

    async def get_inquiry_with_quotes(self, inquiry_id: int) -> Dict[str, Any]:
        inquiry = await self.get_inquiry(inquiry_id)
        quotes = await self._quote_store.list_quotes_for_inquiry(inquiry_id)
        return {"inquiry": inquiry, "quotes": quotes}

    async def update_inquiry(self, inquiry_id: int, data: InquiryUpdate) -> Dict[str, Any]:
        updated = await self._inquiry_store.update_inquiry(inquiry_id, data.model_dump())
        if not updated:
            raise InquiryNotFoundError(inquiry_id)
        return updated

    async def update_status(self, inquiry_id: int, status: str) -> Dict[str, Any]:
        updated = await self._inquiry_store.update_status(inquiry_id, status)
        if not updated:
            raise InquiryNotFoundError(inquiry_id)
        return updated

    async def delete_inquiry(self, inquiry_id: int) -> Dict[str, Any]:
        deleted = await self._inquiry_store.delete_inquiry(inquiry_id)
        if not deleted:
            raise InquiryNotFoundError(inquiry_id)
        self._logger.info("deleted inquiry id=%s", inquiry_id)
        return deleted
