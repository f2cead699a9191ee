"""
Display helpers — cents to currency strings, distance text to miles.
"""
import math
import re
from typing import Optional

from ramp_rentals.core.constants.pricing import CENTS_PER_DOLLAR, FEET_PER_MILE

_NON_NUMERIC = re.compile(r"[^\d.]")


def format_currency(amount_in_cents: int) -> str:
    """Format cents as US dollars, e.g. 2550 -> "$25.50", -500 -> "-$5.00"."""
    sign = "-" if amount_in_cents < 0 else ""
    return f"{sign}${abs(amount_in_cents) / CENTS_PER_DOLLAR:,.2f}"


def parse_distance_text(text: Optional[str]) -> Optional[float]:
    """
    Parse a Distance Matrix display string into miles.

    "12.3 mi" -> 12.3, "1,234 mi" -> 1234.0, "800 ft" -> 0.1515...
    Returns None when nothing finite can be read.
    """
    if not text:
        return None

    cleaned = _NON_NUMERIC.sub("", text.replace(",", ""))
    if not cleaned:
        return None
    try:
        value = float(cleaned)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None

    if text.strip().lower().endswith("ft"):
        return value / FEET_PER_MILE
    return value
