"""
Staff access tokens — verification against the Cognito user pool's JWKS.

The pool's signing keys are held per verifier, indexed by kid, and refreshed
once the cache TTL has passed. A failed refresh keeps serving the old keys.
"""
import logging
import time
from typing import Any, Dict

import httpx
from jose import jwt, JWTError

from ramp_rentals.core.config import Settings

logger = logging.getLogger(__name__)

JWKS_CACHE_TTL = 3600  # seconds
JWKS_FETCH_TIMEOUT = 10.0


class CognitoTokenVerifier:
    def __init__(self, settings: Settings, cache_ttl: float = JWKS_CACHE_TTL) -> None:
        self._issuer = settings.cognito_issuer
        self._jwks_url = settings.cognito_jwks_url
        self._client_id = settings.cognito_app_client_id
        self._cache_ttl = cache_ttl
        self._keys: Dict[str, Dict[str, Any]] = {}
        self._fetched_at: float | None = None

    async def _fetch_jwks(self) -> Dict[str, Any]:
        async with httpx.AsyncClient(timeout=JWKS_FETCH_TIMEOUT) as client:
            response = await client.get(self._jwks_url)
            response.raise_for_status()
            return response.json()

    async def signing_keys(self) -> Dict[str, Dict[str, Any]]:
        """Signing keys by kid; raises httpx.HTTPError only when none are cached."""
        fresh = (
            self._fetched_at is not None
            and time.monotonic() - self._fetched_at < self._cache_ttl
        )
        if self._keys and fresh:
            return self._keys

        try:
            body = await self._fetch_jwks()
        except httpx.HTTPError as e:
            if not self._keys:
                raise
            logger.warning("jwks refresh failed, serving %d cached keys: %s", len(self._keys), e)
            return self._keys

        self._keys = {k["kid"]: k for k in body.get("keys", []) if k.get("kid")}
        self._fetched_at = time.monotonic()
        logger.info("loaded %d cognito signing keys", len(self._keys))
        return self._keys

    async def verify(self, token: str) -> Dict[str, Any]:
        """
        Verify an access token and return the staff identity it carries.

        Raises:
            JWTError: bad signature, expired, wrong issuer/client or not an access token
            httpx.HTTPError: the key set could not be loaded at all
        """
        kid = jwt.get_unverified_header(token).get("kid")
        key = (await self.signing_keys()).get(kid)
        if key is None:
            raise JWTError(f"No signing key for kid {kid!r}")

        claims = jwt.decode(
            token,
            key,
            algorithms=["RS256"],
            issuer=self._issuer,
            # Access tokens carry client_id instead of aud
            options={"verify_aud": False},
        )

        if claims.get("token_use") != "access":
            raise JWTError(f"Expected an access token, got {claims.get('token_use')!r}")
        if self._client_id and claims.get("client_id") != self._client_id:
            raise JWTError("Token was issued to a different app client")
        if not claims.get("sub"):
            raise JWTError("Token has no subject")

        return {
            "user_id": claims["sub"],
            "username": claims.get("username"),
            "groups": claims.get("cognito:groups", []),
        }
