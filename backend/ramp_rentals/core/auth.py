"""
Authentication — Cognito bearer token dependency for staff-only routes.

Every /api/v1 route depends on get_current_user; only /health is public.
"""
import logging

import httpx
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError

from ramp_rentals.container import get_token_verifier
from ramp_rentals.core.cognito import CognitoTokenVerifier

logger = logging.getLogger(__name__)
security = HTTPBearer()


def _unauthorized(message: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail={"code": "UNAUTHORIZED", "message": message},
    )


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    verifier: CognitoTokenVerifier = Depends(get_token_verifier),
) -> dict:
    """Validate the Cognito access token and return the staff member's identity."""
    try:
        user = await verifier.verify(credentials.credentials)
    except JWTError as e:
        logger.warning(f"Authentication failed - JWT error: {str(e)}")
        raise _unauthorized(f"Invalid or expired token: {str(e)}")
    except httpx.HTTPError as e:
        logger.error(f"Authentication failed - JWKS unavailable: {str(e)}")
        raise _unauthorized("Authentication failed")

    logger.debug(f"Authentication successful - user_id: {user['user_id']}")
    return user
