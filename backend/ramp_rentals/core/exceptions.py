"""
Custom exception hierarchy for the ramp rentals backend.

Exceptions are categorized as:
- RetryableError: transient failures talking to an outside service
- NonRetryableError: the request refers to something that is not there

Nothing in the pricing path retries; the distance resolver treats every
RetryableError from the distance client as a reason to use the fallback distance.
"""


class RampRentalsException(Exception):
    """Base exception for the ramp rentals backend."""
    pass


# ============================================
# RETRYABLE ERRORS - transient failures
# ============================================
class RetryableError(RampRentalsException):
    """Base class for transient errors (timeouts, service unavailable)."""
    pass


class ExternalAPIError(RetryableError):
    """Error response or unreadable body from an external API (Distance Matrix)."""
    def __init__(self, service: str, message: str, status_code: int = None):
        self.service = service
        self.status_code = status_code
        super().__init__(f"{service} API error: {message}")


class ConnectionTimeoutError(RetryableError):
    """Connection or timeout error - typically transient."""
    pass


# ============================================
# NON-RETRYABLE ERRORS
# ============================================
class NonRetryableError(RampRentalsException):
    """Base class for permanent errors."""
    pass


class InquiryNotFoundError(NonRetryableError):
    """Inquiry does not exist."""
    def __init__(self, inquiry_id: int):
        self.inquiry_id = inquiry_id
        super().__init__(f"Inquiry {inquiry_id} not found")
