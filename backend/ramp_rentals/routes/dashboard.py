"""
Dashboard routes — business overview.
"""
from fastapi import APIRouter, Depends

from ramp_rentals.container import get_dashboard_service
from ramp_rentals.schemas.dashboard import ActiveRental, DashboardResponse
from ramp_rentals.schemas.inquiries import InquiryResponse
from ramp_rentals.services.dashboard_service import DashboardService

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardResponse)
async def get_dashboard(service: DashboardService = Depends(get_dashboard_service)):
    """Ten most recent inquiries and every rental without an end date."""
    overview = await service.get_overview()
    return DashboardResponse(
        recent_inquiries=[InquiryResponse(**i) for i in overview["recent_inquiries"]],
        active_rentals=[ActiveRental(**r) for r in overview["active_rentals"]],
    )
