"""
Quote store — persisted pricing calculations per inquiry.
"""

import logging
from typing import Any, Dict, List

from ramp_rentals.core.constants.rentals import QUOTES_TABLE
from ramp_rentals.db.base_store import BaseStore

logger = logging.getLogger("quote_store")


class QuoteStore(BaseStore):
    """CRUD for the quotes table."""

    async def create_quote(self, record: Dict[str, Any]) -> Dict[str, Any]:
        created = await self._insert(QUOTES_TABLE, [record])
        logger.info(
            "saved quote inquiry_id=%s upfront_total=%s",
            record.get("inquiry_id"),
            record.get("upfront_total"),
        )
        return created[0] if created else record

    async def list_quotes_for_inquiry(self, inquiry_id: int) -> List[Dict[str, Any]]:
        return await self._select(
            QUOTES_TABLE, filters={"inquiry_id": inquiry_id}, order_by="created_at", desc=True
        )
