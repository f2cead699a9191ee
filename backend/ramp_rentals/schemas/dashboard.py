"""
Dashboard schemas — recent inquiries and active rentals overview.
"""
from typing import List, Optional

from pydantic import BaseModel

from ramp_rentals.schemas.inquiries import InquiryResponse


class ActiveRental(BaseModel):
    id: int
    inquiry_id: int
    quote_id: int
    customer_name: str
    customer_email: str
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    status_text: str
    next_billing_date: Optional[str] = None
    platform_count: int
    ramp_count: int
    signature_status: Optional[str] = None
    notes: Optional[str] = None
    created_at: Optional[str] = None


class DashboardResponse(BaseModel):
    recent_inquiries: List[InquiryResponse]
    active_rentals: List[ActiveRental]
