"""
Unit tests for core constants — tariff defaults reproduce the published rates.
"""
import pytest

from ramp_rentals.core.constants import (
    INQUIRY_STATUS_NEW,
    INQUIRY_STATUS_QUOTED,
    MAX_DISTANCE_MILES,
    pricing,
)
from ramp_rentals.pricing.models import STANDARD_TARIFF

pytestmark = pytest.mark.unit


class TestTariffDefaults:

    def test_standard_tariff_uses_constants(self):
        assert STANDARD_TARIFF.delivery_per_mile == pricing.DELIVERY_PER_MILE
        assert STANDARD_TARIFF.surcharge_threshold_miles == pricing.SURCHARGE_THRESHOLD_MILES

    def test_published_rates(self):
        assert pricing.DELIVERY_MINIMUM == 25.0
        assert pricing.INSTALL_BASE == 75.0
        assert pricing.MONTHLY_RATE_BASE == 100.0
        assert pricing.SURCHARGE_AMOUNT == 25.0
        assert pricing.FALLBACK_DISTANCE_MILES == 10.0

    def test_distance_ceiling_above_fallback_and_threshold(self):
        assert MAX_DISTANCE_MILES > pricing.SURCHARGE_THRESHOLD_MILES
        assert MAX_DISTANCE_MILES > pricing.FALLBACK_DISTANCE_MILES


class TestInquiryStatuses:

    def test_lifecycle_states(self):
        assert INQUIRY_STATUS_NEW == "new"
        assert INQUIRY_STATUS_QUOTED == "quoted"
