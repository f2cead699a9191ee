"""
Inquiry routes — customer intake CRUD.

Provides:
- GET    /inquiries               – list inquiries, newest first
- POST   /inquiries               – create inquiry
- GET    /inquiries/{id}          – inquiry with its quotes
- PUT    /inquiries/{id}          – update intake fields
- PATCH  /inquiries/{id}/status   – change status
- DELETE /inquiries/{id}          – delete inquiry
"""
import logging

from fastapi import APIRouter, HTTPException, Query, Depends

from ramp_rentals.container import get_inquiry_service
from ramp_rentals.core.auth import get_current_user
from ramp_rentals.core.exceptions import InquiryNotFoundError
from ramp_rentals.schemas.inquiries import (
    InquiryCreate,
    InquiryDetailResponse,
    InquiryListResponse,
    InquiryResponse,
    InquiryStatusUpdate,
    InquiryUpdate,
)
from ramp_rentals.services.inquiry_service import InquiryService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/inquiries", tags=["inquiries"])


@router.get("", response_model=InquiryListResponse)
async def list_inquiries(
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
    service: InquiryService = Depends(get_inquiry_service),
):
    """List inquiries, newest first. total counts every inquiry, not just this page."""
    inquiries = await service.list_inquiries(limit=limit, offset=offset)
    total = await service.count_inquiries()
    return InquiryListResponse(
        inquiries=[InquiryResponse(**i) for i in inquiries],
        total=total,
    )


@router.post("", response_model=InquiryResponse, status_code=201)
async def add_inquiry(
    request: InquiryCreate,
    current_user: dict = Depends(get_current_user),
    service: InquiryService = Depends(get_inquiry_service),
):
    """Record a new customer inquiry with status 'new'."""
    created = await service.add_inquiry(request)
    logger.info(f"Inquiry created by {current_user['user_id']}: {created.get('id')}")
    return InquiryResponse(**created)


@router.get("/{inquiry_id}", response_model=InquiryDetailResponse)
async def get_inquiry(
    inquiry_id: int,
    service: InquiryService = Depends(get_inquiry_service),
):
    """Get one inquiry and the quotes prepared for it."""
    try:
        detail = await service.get_inquiry_with_quotes(inquiry_id)
    except InquiryNotFoundError:
        raise HTTPException(status_code=404, detail="Inquiry not found")
    return InquiryDetailResponse(**detail)


@router.put("/{inquiry_id}", response_model=InquiryResponse)
async def update_inquiry(
    inquiry_id: int,
    request: InquiryUpdate,
    service: InquiryService = Depends(get_inquiry_service),
):
    """Replace the intake fields of an inquiry."""
    try:
        updated = await service.update_inquiry(inquiry_id, request)
    except InquiryNotFoundError:
        raise HTTPException(status_code=404, detail="Inquiry not found")
    return InquiryResponse(**updated)


@router.patch("/{inquiry_id}/status", response_model=InquiryResponse)
async def update_inquiry_status(
    inquiry_id: int,
    request: InquiryStatusUpdate,
    current_user: dict = Depends(get_current_user),
    service: InquiryService = Depends(get_inquiry_service),
):
    """Move an inquiry through new / quoted / approved / rejected."""
    try:
        updated = await service.update_status(inquiry_id, request.status)
    except InquiryNotFoundError:
        raise HTTPException(status_code=404, detail="Inquiry not found")
    logger.info(f"Inquiry {inquiry_id} set to {request.status} by {current_user['user_id']}")
    return InquiryResponse(**updated)


@router.delete("/{inquiry_id}", response_model=InquiryResponse)
async def delete_inquiry(
    inquiry_id: int,
    current_user: dict = Depends(get_current_user),
    service: InquiryService = Depends(get_inquiry_service),
):
    """Delete an inquiry and return the removed record."""
    try:
        deleted = await service.delete_inquiry(inquiry_id)
    except InquiryNotFoundError:
        raise HTTPException(status_code=404, detail="Inquiry not found")
    logger.info(f"Inquiry {inquiry_id} deleted by {current_user['user_id']}")
    return InquiryResponse(**deleted)
