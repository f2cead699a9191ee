"""
Rental store — active rentals joined with their customer inquiry.
"""

from typing import Any, Dict, List

from postgrest.exceptions import APIError

from ramp_rentals.core.constants.rentals import RENTALS_TABLE
from ramp_rentals.db.base_store import BaseStore

# Embeds the owning inquiry through the rentals.inquiry_id foreign key
ACTIVE_RENTAL_COLUMNS = "*, inquiries(name, email)"


class RentalStore(BaseStore):
    """Read access to the rentals table."""

    async def list_active_rentals(self) -> List[Dict[str, Any]]:
        """Rentals without an end date, newest first."""
        try:
            response = (
                self._client.table(RENTALS_TABLE)
                .select(ACTIVE_RENTAL_COLUMNS)
                .is_("end_date", "null")
                .order("created_at", desc=True)
                .execute()
            )
            return response.data or []
        except APIError as e:
            raise self._fail("select from", RENTALS_TABLE, e)
