import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from ramp_rentals.core.config import settings
from ramp_rentals.core.middleware import apply_cors, apply_error_handlers
from ramp_rentals.routes import v1_router, health_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log configuration gaps at startup; nothing to tear down."""
    logger.info("=== Ramp Rentals Backend Starting ===")

    if not settings.google_maps_api_key:
        logger.warning(
            "GOOGLE_MAPS_API_KEY not set, every quote uses the fallback distance of %s miles",
            settings.fallback_distance_miles,
        )
    if not (settings.supabase_url and settings.supabase_service_role_key):
        logger.warning("Supabase credentials not set, data routes will fail")

    logger.info("=== Ramp Rentals Backend Ready ===")

    yield

    logger.info("Shutdown complete")


app = FastAPI(title="Ramp Rentals Backend", lifespan=lifespan)
logging.basicConfig(level=logging.INFO, format="%(levelname)s:%(name)s:%(message)s")

apply_cors(app)
apply_error_handlers(app)

app.include_router(health_router)
app.include_router(v1_router)
