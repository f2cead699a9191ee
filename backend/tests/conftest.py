"""
Pytest configuration and shared fixtures for ramp rentals tests.

Provides mock clients, stores, services, and sample test data.
"""
import pytest
from unittest.mock import AsyncMock, MagicMock

from ramp_rentals.pricing.models import PlatformItem, RampConfiguration, RampSection


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_settings():
    """Settings object with test defaults (no real credentials)."""
    from ramp_rentals.core.config import Settings
    return Settings(
        supabase_url="https://test.supabase.co",
        supabase_service_role_key="test-supabase-key",
        google_maps_api_key="test-maps-key",
        distance_matrix_url="https://maps.test/distancematrix/json",
        distance_service_timeout=2.0,
        fallback_distance_miles=10.0,
        business_address="1 Depot Rd, Testville, ST 00001",
        cognito_user_pool_id="us-east-1_TestPool",
        cognito_app_client_id="test-client-id",
    )


# ---------------------------------------------------------------------------
# Clients (mocked)
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_supabase_client():
    """Mocked SupabaseClient with a chainable table builder."""
    client = MagicMock()
    mock_table = MagicMock()
    for method in ("select", "insert", "update", "delete", "eq", "is_", "order", "range", "limit"):
        getattr(mock_table, method).return_value = mock_table
    mock_table.execute.return_value = MagicMock(data=[])
    client.client.table.return_value = mock_table
    return client


@pytest.fixture
def mock_distance_client():
    """Mocked DistanceMatrixClient with an API key configured."""
    client = MagicMock()
    client.configured = True
    client.fetch_distance_matrix = AsyncMock(return_value={})
    return client


# ---------------------------------------------------------------------------
# DB Stores (mocked)
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_inquiry_store(sample_inquiry):
    store = MagicMock()
    store.create_inquiry = AsyncMock(return_value=sample_inquiry)
    store.get_inquiry = AsyncMock(return_value=sample_inquiry)
    store.list_inquiries = AsyncMock(return_value=[sample_inquiry])
    store.count_inquiries = AsyncMock(return_value=1)
    store.update_inquiry = AsyncMock(return_value=sample_inquiry)
    store.update_status = AsyncMock(return_value={**sample_inquiry, "status": "quoted"})
    store.delete_inquiry = AsyncMock(return_value=sample_inquiry)
    return store


@pytest.fixture
def mock_quote_store(sample_quote):
    store = MagicMock()
    store.create_quote = AsyncMock(return_value=sample_quote)
    store.list_quotes_for_inquiry = AsyncMock(return_value=[sample_quote])
    return store


@pytest.fixture
def mock_rental_store(sample_rental):
    store = MagicMock()
    store.list_active_rentals = AsyncMock(return_value=[sample_rental])
    return store


# ---------------------------------------------------------------------------
# Sample test data
# ---------------------------------------------------------------------------

@pytest.fixture
def standard_config():
    """One 5x5 platform and one 6 ft ramp section."""
    return RampConfiguration(
        platforms=[PlatformItem(size="5x5", quantity=1)],
        ramps=[RampSection(length=6, quantity=1)],
    )


@pytest.fixture
def sample_inquiry():
    return {
        "id": 7,
        "name": "Dana Whitfield",
        "email": "dana@example.com",
        "phone": "5551234567",
        "address": "42 Elm St, Springfield, ST 12345",
        "height": 24,
        "mobility_aid": "wheelchair",
        "picture_blob_url": None,
        "status": "new",
        "notes": "Side entrance",
        "created_at": "2025-03-01T10:00:00+00:00",
        "updated_at": "2025-03-01T10:00:00+00:00",
    }


@pytest.fixture
def sample_quote():
    return {
        "id": 3,
        "inquiry_id": 7,
        "delivery_fee": 2500,
        "install_fee": 11500,
        "monthly_rate": 15000,
        "upfront_total": 29000,
        "surcharge": 0,
        "ramp_config": {
            "platforms": [{"size": "5x5", "quantity": 1}],
            "ramps": [{"length": 6.0, "quantity": 1}],
        },
        "created_at": "2025-03-02T09:00:00+00:00",
    }


@pytest.fixture
def sample_rental():
    return {
        "id": 11,
        "inquiry_id": 7,
        "quote_id": 3,
        "start_date": "2025-01-31T00:00:00+00:00",
        "end_date": None,
        "ramp_config": {
            "platforms": [{"size": "5x5", "quantity": 1}],
            "ramps": [{"length": 6.0, "quantity": 1}, {"length": 4.0, "quantity": 2}],
        },
        "inventory_items": [101, 102],
        "signature_status": "signed",
        "notes": None,
        "created_at": "2025-01-30T12:00:00+00:00",
        "updated_at": "2025-01-30T12:00:00+00:00",
        "inquiries": {"name": "Dana Whitfield", "email": "dana@example.com"},
    }


@pytest.fixture
def distance_payload():
    """Builder for Distance Matrix style response bodies."""
    def build(text="12.3 mi", status="OK", element_status="OK"):
        return {
            "status": status,
            "origin_addresses": ["1 Depot Rd, Testville, ST 00001"],
            "destination_addresses": ["42 Elm St, Springfield, ST 12345"],
            "rows": [
                {
                    "elements": [
                        {
                            "status": element_status,
                            "distance": {"text": text, "value": 19795},
                            "duration": {"text": "20 mins", "value": 1200},
                        }
                    ]
                }
            ],
        }
    return build
