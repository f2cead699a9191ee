"""
Distance Matrix HTTP client — one GET per origin/destination pair.
"""
import logging
from typing import Any, Dict

import httpx

from ramp_rentals.core.config import Settings
from ramp_rentals.core.exceptions import ConnectionTimeoutError, ExternalAPIError

logger = logging.getLogger("distance_client")

SERVICE_NAME = "Distance Matrix"


class DistanceMatrixClient:
    def __init__(self, settings: Settings) -> None:
        self._url = settings.distance_matrix_url
        self._api_key = settings.google_maps_api_key
        self._timeout = settings.distance_service_timeout

    @property
    def configured(self) -> bool:
        return bool(self._api_key)

    async def fetch_distance_matrix(self, origin: str, destination: str) -> Dict[str, Any]:
        """
        Fetch the raw Distance Matrix response for a single pair.

        Raises:
            ExternalAPIError: missing key, non-200 response or non-JSON body
            ConnectionTimeoutError: the request timed out or could not connect
        """
        if not self._api_key:
            raise ExternalAPIError(SERVICE_NAME, "GOOGLE_MAPS_API_KEY is not configured")

        params = {
            "origins": origin,
            "destinations": destination,
            "units": "imperial",
            "key": self._api_key,
        }

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                resp = await client.get(self._url, params=params)
        except httpx.TimeoutException as e:
            raise ConnectionTimeoutError(
                f"{SERVICE_NAME} timed out after {self._timeout}s: {e}"
            ) from e
        except httpx.HTTPError as e:
            raise ConnectionTimeoutError(f"{SERVICE_NAME} request failed: {e}") from e

        if resp.status_code != 200:
            raise ExternalAPIError(SERVICE_NAME, resp.text, status_code=resp.status_code)

        try:
            return resp.json()
        except ValueError as e:
            raise ExternalAPIError(SERVICE_NAME, f"invalid JSON body: {e}") from e
