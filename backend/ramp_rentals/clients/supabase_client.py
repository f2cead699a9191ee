"""
Supabase access — one supabase-py client per process, created on first use.
"""
import logging
from urllib.parse import urlparse

from supabase import create_client, Client

from ramp_rentals.core.config import Settings

logger = logging.getLogger("supabase_client")


class SupabaseClient:
    def __init__(self, settings: Settings) -> None:
        if not (settings.supabase_url and settings.supabase_service_role_key):
            raise RuntimeError(
                "SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY must be set for Supabase access"
            )
        self._url = settings.supabase_url
        self._service_key = settings.supabase_service_role_key
        self._client: Client | None = None

    @property
    def client(self) -> Client:
        """The shared client; stores call .table(...) on it."""
        if self._client is None:
            self._client = create_client(self._url, self._service_key)
            logger.info("supabase client ready project=%s", urlparse(self._url).hostname)
        return self._client
