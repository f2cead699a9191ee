"""
Distance service — resolves delivery distance with a fixed fallback.

Pricing never blocks on the distance service: any failure resolves to the
configured fallback distance, and the returned DistanceResolution records
which path was taken.
"""
import logging
from typing import Any, Dict, Optional

from ramp_rentals.clients.distance_client import DistanceMatrixClient
from ramp_rentals.core.exceptions import RetryableError
from ramp_rentals.pricing.formatting import parse_distance_text
from ramp_rentals.pricing.models import DistanceResolution

REASON_MISSING_API_KEY = "missing_api_key"
REASON_REQUEST_FAILED = "request_failed"
REASON_SERVICE_STATUS = "service_status"
REASON_UNPARSEABLE = "unparseable_distance"


def extract_distance_text(payload: Dict[str, Any]) -> Optional[str]:
    """Return rows[0].elements[0].distance.text when both statuses are OK."""
    if not isinstance(payload, dict) or payload.get("status") != "OK":
        return None
    try:
        element = payload["rows"][0]["elements"][0]
        if element.get("status") != "OK":
            return None
        text = element["distance"]["text"]
    except (KeyError, IndexError, TypeError, AttributeError):
        return None
    return text if isinstance(text, str) else None


class DistanceResolver:
    def __init__(
        self,
        client: DistanceMatrixClient,
        origin_address: str,
        fallback_miles: float,
    ) -> None:
        self._client = client
        self._origin = origin_address
        self._fallback_miles = fallback_miles
        self._logger = logging.getLogger("distance_service")

    def _fallback(self, reason: str) -> DistanceResolution:
        return DistanceResolution(miles=self._fallback_miles, source="fallback", reason=reason)

    async def resolve(self, destination: str) -> DistanceResolution:
        """Resolve miles from the business address to destination."""
        if not self._client.configured:
            self._logger.warning(
                "distance api key not configured, using fallback miles=%s", self._fallback_miles
            )
            return self._fallback(REASON_MISSING_API_KEY)

        try:
            payload = await self._client.fetch_distance_matrix(self._origin, destination)
        except RetryableError as e:
            self._logger.warning("distance lookup failed destination=%s error=%s", destination, e)
            return self._fallback(REASON_REQUEST_FAILED)

        text = extract_distance_text(payload)
        if text is None:
            self._logger.warning(
                "distance service returned non-OK status=%s destination=%s",
                payload.get("status") if isinstance(payload, dict) else None,
                destination,
            )
            return self._fallback(REASON_SERVICE_STATUS)

        miles = parse_distance_text(text)
        if miles is None:
            self._logger.warning("could not parse distance text=%r", text)
            return self._fallback(REASON_UNPARSEABLE)

        self._logger.info("resolved distance destination=%s miles=%s", destination, miles)
        return DistanceResolution(miles=miles, source="service")
