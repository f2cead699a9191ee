"""
Inquiry schemas — intake form validation and inquiry responses.
"""
import re
from typing import Any, List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

from ramp_rentals.schemas.quotes import QuoteResponse

MobilityAid = Literal["wheelchair", "scooter", "walker", "none", "other"]
InquiryStatus = Literal["new", "quoted", "approved", "rejected"]

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class InquiryCreate(BaseModel):
    """
    Customer intake form.

    Blank optional fields coming from the form are treated as missing.
    """
    name: str = Field(..., min_length=1, description="Name is required")
    email: str
    phone: str = Field(..., min_length=10, description="Phone must be at least 10 digits")
    address: str = Field(..., min_length=1, description="Address is required")
    height: Optional[int] = Field(None, gt=0, description="Rise to cover, in inches")
    mobility_aid: Optional[MobilityAid] = None
    notes: Optional[str] = None

    @field_validator("height", "mobility_aid", "notes", mode="before")
    @classmethod
    def blank_to_none(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        v = v.strip()
        if not _EMAIL_RE.match(v):
            raise ValueError("Invalid email address")
        return v


class InquiryUpdate(InquiryCreate):
    """Full replacement of the intake form fields."""
    pass


class InquiryStatusUpdate(BaseModel):
    status: InquiryStatus


class InquiryResponse(BaseModel):
    id: int
    name: str
    email: str
    phone: str
    address: str
    height: Optional[int] = None
    mobility_aid: Optional[str] = None
    picture_blob_url: Optional[str] = None
    status: Optional[str] = "new"
    notes: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class InquiryListResponse(BaseModel):
    inquiries: List[InquiryResponse]
    total: int


class InquiryDetailResponse(BaseModel):
    inquiry: InquiryResponse
    quotes: List[QuoteResponse] = []
