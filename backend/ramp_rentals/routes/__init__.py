"""
Route aggregator — mounts all business routers under /api/v1 prefix.

Every /api/v1 route authenticates before its own dependencies are built.
Health is exported separately for main.py to mount at root.
"""
from fastapi import APIRouter, Depends

from ramp_rentals.core.auth import get_current_user
from ramp_rentals.routes.inquiries import router as inquiries_router
from ramp_rentals.routes.pricing import router as pricing_router
from ramp_rentals.routes.dashboard import router as dashboard_router
from ramp_rentals.routes.health import router as health_router

v1_router = APIRouter(prefix="/api/v1", dependencies=[Depends(get_current_user)])

v1_router.include_router(inquiries_router)
v1_router.include_router(pricing_router)
v1_router.include_router(dashboard_router)

__all__ = ["v1_router", "health_router"]
