"""
Integration tests for inquiry routes.

Tests the /api/v1/inquiries CRUD and status endpoints through the FastAPI
test client with stores mocked and the real InquiryService wired in.
"""
import pytest

from fastapi.testclient import TestClient

from ramp_rentals.services.inquiry_service import InquiryService

TEST_USER = {
    "user_id": "test-user-id",
    "email": "test@test.com",
    "username": "testuser",
    "groups": [],
}

NEW_INQUIRY = {
    "name": "Dana Whitfield",
    "email": "dana@example.com",
    "phone": "5551234567",
    "address": "42 Elm St, Springfield, ST 12345",
    "height": 24,
    "mobility_aid": "wheelchair",
    "notes": "Side entrance",
}


@pytest.fixture
def client(mock_inquiry_store, mock_quote_store):
    """Test client with auth overridden and a service backed by mocked stores."""
    from ramp_rentals.main import app
    from ramp_rentals.core.auth import get_current_user
    from ramp_rentals.container import get_inquiry_service

    service = InquiryService(inquiry_store=mock_inquiry_store, quote_store=mock_quote_store)
    app.dependency_overrides[get_current_user] = lambda: TEST_USER
    app.dependency_overrides[get_inquiry_service] = lambda: service
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def unauthenticated_client():
    """No auth override; the service getter fails loudly if it is ever reached."""
    from ramp_rentals.main import app
    from ramp_rentals.container import get_inquiry_service

    def unreachable():
        raise RuntimeError("inquiry service built for an unauthenticated request")

    app.dependency_overrides.clear()
    app.dependency_overrides[get_inquiry_service] = unreachable
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.mark.integration
class TestListInquiries:

    def test_list_returns_inquiries(self, client, mock_inquiry_store):
        response = client.get("/api/v1/inquiries")

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 1
        assert data["inquiries"][0]["id"] == 7
        mock_inquiry_store.list_inquiries.assert_awaited_once_with(limit=50, offset=0)

    def test_list_passes_paging(self, client, mock_inquiry_store):
        client.get("/api/v1/inquiries?limit=5&offset=10")
        mock_inquiry_store.list_inquiries.assert_awaited_once_with(limit=5, offset=10)

    def test_list_rejects_oversized_limit(self, client):
        assert client.get("/api/v1/inquiries?limit=1000").status_code == 422

    def test_list_requires_auth(self, unauthenticated_client):
        response = unauthenticated_client.get("/api/v1/inquiries")
        assert response.status_code in (401, 403)

    def test_delete_requires_auth(self, unauthenticated_client):
        response = unauthenticated_client.delete("/api/v1/inquiries/7")
        assert response.status_code in (401, 403)

    def test_total_counts_all_inquiries(self, client, mock_inquiry_store):
        mock_inquiry_store.count_inquiries.return_value = 42

        data = client.get("/api/v1/inquiries?limit=1").json()

        assert len(data["inquiries"]) == 1
        assert data["total"] == 42


@pytest.mark.integration
class TestCreateInquiry:

    def test_create_returns_201(self, client, mock_inquiry_store):
        response = client.post("/api/v1/inquiries", json=NEW_INQUIRY)

        assert response.status_code == 201
        assert response.json()["status"] == "new"
        stored = mock_inquiry_store.create_inquiry.call_args[0][0]
        assert stored["email"] == "dana@example.com"

    def test_create_rejects_invalid_email(self, client, mock_inquiry_store):
        response = client.post("/api/v1/inquiries", json={**NEW_INQUIRY, "email": "nope"})

        assert response.status_code == 422
        mock_inquiry_store.create_inquiry.assert_not_awaited()

    def test_create_rejects_short_phone(self, client):
        response = client.post("/api/v1/inquiries", json={**NEW_INQUIRY, "phone": "12345"})
        assert response.status_code == 422


@pytest.mark.integration
class TestInquiryDetail:

    def test_get_includes_quotes(self, client):
        response = client.get("/api/v1/inquiries/7")

        assert response.status_code == 200
        data = response.json()
        assert data["inquiry"]["name"] == "Dana Whitfield"
        assert data["quotes"][0]["upfront_total"] == 29000

    def test_get_missing_returns_404(self, client, mock_inquiry_store):
        mock_inquiry_store.get_inquiry.return_value = None

        response = client.get("/api/v1/inquiries/99")

        assert response.status_code == 404
        assert response.json()["detail"] == "Inquiry not found"


@pytest.mark.integration
class TestUpdateInquiry:

    def test_update_returns_record(self, client, mock_inquiry_store):
        response = client.put("/api/v1/inquiries/7", json={**NEW_INQUIRY, "height": 30})

        assert response.status_code == 200
        args = mock_inquiry_store.update_inquiry.call_args[0]
        assert args[0] == 7
        assert args[1]["height"] == 30

    def test_update_missing_returns_404(self, client, mock_inquiry_store):
        mock_inquiry_store.update_inquiry.return_value = None
        assert client.put("/api/v1/inquiries/99", json=NEW_INQUIRY).status_code == 404

    def test_status_update(self, client, mock_inquiry_store):
        response = client.patch("/api/v1/inquiries/7/status", json={"status": "quoted"})

        assert response.status_code == 200
        assert response.json()["status"] == "quoted"
        mock_inquiry_store.update_status.assert_awaited_once_with(7, "quoted")

    def test_status_update_rejects_unknown_status(self, client):
        response = client.patch("/api/v1/inquiries/7/status", json={"status": "archived"})
        assert response.status_code == 422


@pytest.mark.integration
class TestDeleteInquiry:

    def test_delete_returns_record(self, client):
        response = client.delete("/api/v1/inquiries/7")
        assert response.status_code == 200
        assert response.json()["id"] == 7

    def test_delete_missing_returns_404(self, client, mock_inquiry_store):
        mock_inquiry_store.delete_inquiry.return_value = None
        assert client.delete("/api/v1/inquiries/99").status_code == 404
