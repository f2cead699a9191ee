"""
Constants package — re-exports from domain-specific modules.

Usage:
    from ramp_rentals.core.constants.pricing import DELIVERY_PER_MILE
    # or import everything:
    from ramp_rentals.core.constants import pricing, rentals
"""

from ramp_rentals.core.constants import pricing, rentals
from ramp_rentals.core.constants.pricing import (
    CENTS_PER_DOLLAR,
    FALLBACK_DISTANCE_MILES,
    MAX_DISTANCE_MILES,
    DEFAULT_BUSINESS_ADDRESS,
)
from ramp_rentals.core.constants.rentals import (
    INQUIRY_STATUS_NEW,
    INQUIRY_STATUS_QUOTED,
    INQUIRIES_TABLE,
    QUOTES_TABLE,
    RENTALS_TABLE,
)

__all__ = [
    "pricing",
    "rentals",
    "CENTS_PER_DOLLAR",
    "FALLBACK_DISTANCE_MILES",
    "MAX_DISTANCE_MILES",
    "DEFAULT_BUSINESS_ADDRESS",
    "INQUIRY_STATUS_NEW",
    "INQUIRY_STATUS_QUOTED",
    "INQUIRIES_TABLE",
    "QUOTES_TABLE",
    "RENTALS_TABLE",
]
