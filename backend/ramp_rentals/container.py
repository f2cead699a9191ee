"""
Lazy DI container — singleton access to clients, stores, and services.

Routes receive these through FastAPI Depends, so tests can swap any of them
with app.dependency_overrides.
"""

from functools import lru_cache

from ramp_rentals.core.config import settings
from ramp_rentals.clients.supabase_client import SupabaseClient
from ramp_rentals.clients.distance_client import DistanceMatrixClient
from ramp_rentals.core.cognito import CognitoTokenVerifier
from ramp_rentals.db.inquiry_store import InquiryStore
from ramp_rentals.db.quote_store import QuoteStore
from ramp_rentals.db.rental_store import RentalStore
from ramp_rentals.services.distance_service import DistanceResolver
from ramp_rentals.services.pricing_service import PricingService
from ramp_rentals.services.quote_service import QuoteService
from ramp_rentals.services.inquiry_service import InquiryService
from ramp_rentals.services.dashboard_service import DashboardService


# -- Clients ---------------------------------------------------------------

@lru_cache(maxsize=1)
def get_supabase_client():
    return SupabaseClient(settings)


@lru_cache(maxsize=1)
def get_distance_client():
    return DistanceMatrixClient(settings)


@lru_cache(maxsize=1)
def get_token_verifier():
    return CognitoTokenVerifier(settings)


# -- DB Stores -------------------------------------------------------------

@lru_cache(maxsize=1)
def get_inquiry_store():
    return InquiryStore(get_supabase_client())


@lru_cache(maxsize=1)
def get_quote_store():
    return QuoteStore(get_supabase_client())


@lru_cache(maxsize=1)
def get_rental_store():
    return RentalStore(get_supabase_client())


# -- Pricing ---------------------------------------------------------------

@lru_cache(maxsize=1)
def get_distance_resolver():
    return DistanceResolver(
        client=get_distance_client(),
        origin_address=settings.business_address,
        fallback_miles=settings.fallback_distance_miles,
    )


@lru_cache(maxsize=1)
def get_pricing_service():
    return PricingService(resolver=get_distance_resolver())


# -- Business Services -----------------------------------------------------

@lru_cache(maxsize=1)
def get_quote_service():
    return QuoteService(
        pricing=get_pricing_service(),
        inquiry_store=get_inquiry_store(),
        quote_store=get_quote_store(),
    )


@lru_cache(maxsize=1)
def get_inquiry_service():
    return InquiryService(inquiry_store=get_inquiry_store(), quote_store=get_quote_store())


@lru_cache(maxsize=1)
def get_dashboard_service():
    return DashboardService(
        inquiry_store=get_inquiry_store(),
        rental_store=get_rental_store(),
        recent_limit=settings.recent_inquiries_limit,
    )
