import os
from typing import Optional
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel

from ramp_rentals.core.constants.pricing import (
    DEFAULT_BUSINESS_ADDRESS,
    FALLBACK_DISTANCE_MILES,
)


load_dotenv()


class Settings(BaseModel):
    # AWS Cognito settings (staff sign-in)
    cognito_region: str = os.getenv("COGNITO_REGION", "us-east-1")
    cognito_user_pool_id: Optional[str] = os.getenv("COGNITO_USER_POOL_ID")
    cognito_app_client_id: Optional[str] = os.getenv("COGNITO_APP_CLIENT_ID")

    @property
    def cognito_issuer(self) -> str:
        """Get the Cognito issuer URL."""
        return f"https://cognito-idp.{self.cognito_region}.amazonaws.com/{self.cognito_user_pool_id}"

    @property
    def cognito_jwks_url(self) -> str:
        """Get the Cognito JWKS URL for token verification."""
        return f"{self.cognito_issuer}/.well-known/jwks.json"

    # Supabase
    supabase_url: str | None = os.getenv("SUPABASE_URL")
    supabase_service_role_key: str | None = os.getenv("SUPABASE_SERVICE_ROLE_KEY")

    # Google Distance Matrix
    google_maps_api_key: str | None = os.getenv("GOOGLE_MAPS_API_KEY")
    distance_matrix_url: str = os.getenv(
        "DISTANCE_MATRIX_URL",
        "https://maps.googleapis.com/maps/api/distancematrix/json",
    )
    distance_service_timeout: float = float(os.getenv("DISTANCE_SERVICE_TIMEOUT", "5.0"))
    fallback_distance_miles: float = float(
        os.getenv("FALLBACK_DISTANCE_MILES", str(FALLBACK_DISTANCE_MILES))
    )

    # Origin for every delivery
    business_address: str = os.getenv("BUSINESS_ADDRESS", DEFAULT_BUSINESS_ADDRESS)

    # Dashboard
    recent_inquiries_limit: int = int(os.getenv("RECENT_INQUIRIES_LIMIT", "10"))

    # Staff frontend origins, comma separated
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = Settings()
