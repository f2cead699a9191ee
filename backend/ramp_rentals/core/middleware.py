"""
HTTP middleware and handlers — CORS for the staff frontend, JSON-safe 422s.
"""
import math
from typing import Any, List

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ramp_rentals.core.config import settings


def parse_origins(raw: str) -> List[str]:
    """Comma-separated CORS_ORIGINS value to a list; empty means any origin."""
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or ["*"]


def apply_cors(app: FastAPI, origins: str | None = None) -> None:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_origins(settings.cors_origins if origins is None else origins),
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type"],
    )


def json_safe(value: Any) -> Any:
    """Replace inf/nan floats (which JSON cannot carry) with their string form."""
    if isinstance(value, float) and not math.isfinite(value):
        return str(value)
    if isinstance(value, dict):
        return {k: json_safe(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [json_safe(v) for v in value]
    return value


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Rejected bodies may echo Infinity/NaN back in "input"
    return JSONResponse(
        status_code=422,
        content={"detail": json_safe(jsonable_encoder(exc.errors()))},
    )


def apply_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_error_handler)
