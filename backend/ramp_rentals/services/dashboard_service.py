"""
Dashboard service — recent inquiries and active rental summaries.
"""
import calendar
from datetime import date, datetime
from typing import Any, Dict, List, Optional

from ramp_rentals.db.inquiry_store import InquiryStore
from ramp_rentals.db.rental_store import RentalStore


def _parse_date(value: Any) -> Optional[date]:
    if not value:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.fromisoformat(str(value).replace("Z", "+00:00")).date()
    except ValueError:
        return None


def add_one_month(start: date) -> date:
    """Same day next month, clamped to the last day of a shorter month."""
    year = start.year + (1 if start.month == 12 else 0)
    month = 1 if start.month == 12 else start.month + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def rental_status_text(rental: Dict[str, Any]) -> str:
    if rental.get("end_date"):
        return "Completed"
    if rental.get("start_date"):
        return "Active"
    return "Pending"


def next_billing_date(start_date: Any) -> Optional[str]:
    start = _parse_date(start_date)
    return add_one_month(start).isoformat() if start else None


def summarize_rental(rental: Dict[str, Any]) -> Dict[str, Any]:
    """Flatten a rental row with its embedded inquiry into a dashboard entry."""
    customer = rental.get("inquiries") or {}
    config = rental.get("ramp_config") if isinstance(rental.get("ramp_config"), dict) else {}
    return {
        "id": rental["id"],
        "inquiry_id": rental["inquiry_id"],
        "quote_id": rental["quote_id"],
        "customer_name": customer.get("name") or "Unknown",
        "customer_email": customer.get("email") or "",
        "start_date": rental.get("start_date"),
        "end_date": rental.get("end_date"),
        "status_text": rental_status_text(rental),
        "next_billing_date": next_billing_date(rental.get("start_date")),
        "platform_count": len(config.get("platforms") or []),
        "ramp_count": len(config.get("ramps") or []),
        "signature_status": rental.get("signature_status"),
        "notes": rental.get("notes"),
        "created_at": rental.get("created_at"),
    }


class DashboardService:
    def __init__(
        self,
        inquiry_store: InquiryStore,
        rental_store: RentalStore,
        recent_limit: int = 10,
    ) -> None:
        self._inquiry_store = inquiry_store
        self._rental_store = rental_store
        self._recent_limit = recent_limit

    async def get_overview(self) -> Dict[str, List[Dict[str, Any]]]:
        recent = await self._inquiry_store.list_inquiries(limit=self._recent_limit)
        rentals = await self._rental_store.list_active_rentals()
        return {
            "recent_inquiries": recent,
            "active_rentals": [summarize_rental(r) for r in rentals],
        }
