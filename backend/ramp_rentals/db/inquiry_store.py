"""
Inquiry store — customer inquiry CRUD.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List

from ramp_rentals.core.constants.rentals import INQUIRIES_TABLE, INQUIRY_STATUS_NEW
from ramp_rentals.db.base_store import BaseStore

logger = logging.getLogger("inquiry_store")


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class InquiryStore(BaseStore):
    """CRUD for the inquiries table."""

    async def create_inquiry(self, data: Dict[str, Any]) -> Dict[str, Any]:
        row = {**data, "status": INQUIRY_STATUS_NEW}
        created = await self._insert(INQUIRIES_TABLE, [row])
        logger.info("created inquiry id=%s", created[0].get("id") if created else None)
        return created[0] if created else row

    async def get_inquiry(self, inquiry_id: int) -> Dict[str, Any] | None:
        rows = await self._select(INQUIRIES_TABLE, filters={"id": inquiry_id}, limit=1)
        return rows[0] if rows else None

    async def list_inquiries(self, limit: int = 50, offset: int = 0) -> List[Dict[str, Any]]:
        """Inquiries newest first."""
        return await self._select(
            INQUIRIES_TABLE, order_by="created_at", desc=True, limit=limit, offset=offset
        )

    async def count_inquiries(self) -> int:
        return await self._count(INQUIRIES_TABLE)

    async def update_inquiry(
        self, inquiry_id: int, data: Dict[str, Any]
    ) -> Dict[str, Any] | None:
        rows = await self._update(
            INQUIRIES_TABLE, {"id": inquiry_id}, {**data, "updated_at": _now()}
        )
        return rows[0] if rows else None

    async def update_status(self, inquiry_id: int, status: str) -> Dict[str, Any] | None:
        rows = await self._update(
            INQUIRIES_TABLE, {"id": inquiry_id}, {"status": status, "updated_at": _now()}
        )
        if rows:
            logger.info("inquiry id=%s status=%s", inquiry_id, status)
        return rows[0] if rows else None

    async def delete_inquiry(self, inquiry_id: int) -> Dict[str, Any] | None:
        rows = await self._delete(INQUIRIES_TABLE, {"id": inquiry_id})
        return rows[0] if rows else None
