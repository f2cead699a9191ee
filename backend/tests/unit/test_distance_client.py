"""
Unit tests for DistanceMatrixClient — single GET to the Distance Matrix API.

Tests cover:
- Request parameters (origin, destination, imperial units, key)
- Timeout passed to httpx
- Missing API key
- Non-200 responses, invalid JSON, timeouts and transport errors
"""
import pytest
from unittest.mock import AsyncMock, MagicMock, patch

import httpx

from ramp_rentals.clients.distance_client import DistanceMatrixClient
from ramp_rentals.core.exceptions import ConnectionTimeoutError, ExternalAPIError


@pytest.fixture
def client(mock_settings):
    return DistanceMatrixClient(mock_settings)


def _patched_http(mock_http):
    patcher = patch("ramp_rentals.clients.distance_client.httpx.AsyncClient")
    MockAsyncClient = patcher.start()
    mock_ctx = AsyncMock()
    mock_ctx.__aenter__.return_value = mock_http
    MockAsyncClient.return_value = mock_ctx
    return patcher, MockAsyncClient


@pytest.mark.unit
class TestDistanceMatrixClientInit:

    def test_configured_with_key(self, client):
        assert client.configured is True

    def test_not_configured_without_key(self, mock_settings):
        mock_settings.google_maps_api_key = None
        assert DistanceMatrixClient(mock_settings).configured is False


@pytest.mark.unit
class TestFetchDistanceMatrix:

    @pytest.mark.asyncio
    async def test_returns_json_on_success(self, client, distance_payload):
        mock_response = MagicMock()
        mock_response.status_code = 200
        mock_response.json.return_value = distance_payload()

        mock_http = AsyncMock()
        mock_http.get.return_value = mock_response

        patcher, MockAsyncClient = _patched_http(mock_http)
        try:
            body = await client.fetch_distance_matrix("1 Depot Rd", "42 Elm St")
        finally:
            patcher.stop()

        assert body["status"] == "OK"
        call_args = mock_http.get.call_args
        assert call_args[0][0] == "https://maps.test/distancematrix/json"
        assert call_args[1]["params"] == {
            "origins": "1 Depot Rd",
            "destinations": "42 Elm St",
            "units": "imperial",
            "key": "test-maps-key",
        }
        assert MockAsyncClient.call_args[1]["timeout"] == 2.0

    @pytest.mark.asyncio
    async def test_raises_without_api_key(self, mock_settings):
        mock_settings.google_maps_api_key = ""
        with pytest.raises(ExternalAPIError) as exc_info:
            await DistanceMatrixClient(mock_settings).fetch_distance_matrix("a", "b")
        assert "GOOGLE_MAPS_API_KEY" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_raises_on_non_200(self, client):
        mock_response = MagicMock()
        mock_response.status_code = 403
        mock_response.text = "REQUEST_DENIED"

        mock_http = AsyncMock()
        mock_http.get.return_value = mock_response

        patcher, _ = _patched_http(mock_http)
        try:
            with pytest.raises(ExternalAPIError) as exc_info:
                await client.fetch_distance_matrix("a", "b")
        finally:
            patcher.stop()
        assert exc_info.value.status_code == 403

    @pytest.mark.asyncio
    async def test_raises_on_invalid_json(self, client):
        mock_response = MagicMock()
        mock_response.status_code = 200
        mock_response.json.side_effect = ValueError("Expecting value")

        mock_http = AsyncMock()
        mock_http.get.return_value = mock_response

        patcher, _ = _patched_http(mock_http)
        try:
            with pytest.raises(ExternalAPIError):
                await client.fetch_distance_matrix("a", "b")
        finally:
            patcher.stop()

    @pytest.mark.asyncio
    async def test_timeout_raises_connection_timeout(self, client):
        mock_http = AsyncMock()
        mock_http.get.side_effect = httpx.ReadTimeout("timed out")

        patcher, _ = _patched_http(mock_http)
        try:
            with pytest.raises(ConnectionTimeoutError):
                await client.fetch_distance_matrix("a", "b")
        finally:
            patcher.stop()

    @pytest.mark.asyncio
    async def test_transport_error_raises_connection_timeout(self, client):
        mock_http = AsyncMock()
        mock_http.get.side_effect = httpx.ConnectError("connection refused")

        patcher, _ = _patched_http(mock_http)
        try:
            with pytest.raises(ConnectionTimeoutError):
                await client.fetch_distance_matrix("a", "b")
        finally:
            patcher.stop()
