"""
Fee calculators — delivery, install, monthly rate, surcharge and totals.

Pure functions: same inputs, same cents. Distance is not validated here;
request schemas reject negative distances before they reach this module.
"""
import math

from ramp_rentals.core.constants.pricing import CENTS_PER_DOLLAR
from ramp_rentals.pricing.models import (
    PricingResult,
    RampConfiguration,
    STANDARD_TARIFF,
    Tariff,
)


def to_cents(dollars: float) -> int:
    """Convert dollars to integer cents, rounding halves up (2.5 -> 3)."""
    return int(math.floor(dollars * CENTS_PER_DOLLAR + 0.5))


def calculate_delivery_fee(distance_miles: float, tariff: Tariff = STANDARD_TARIFF) -> int:
    fee = max(distance_miles * tariff.delivery_per_mile, tariff.delivery_minimum)
    return to_cents(fee)


def calculate_install_fee(config: RampConfiguration, tariff: Tariff = STANDARD_TARIFF) -> int:
    fee = (
        tariff.install_base
        + config.platform_count * tariff.install_per_platform
        + config.ramp_section_count * tariff.install_per_ramp_section
    )
    return to_cents(fee)


def calculate_monthly_rate(config: RampConfiguration, tariff: Tariff = STANDARD_TARIFF) -> int:
    rate = (
        tariff.monthly_rate_base
        + config.platform_count * tariff.monthly_rate_per_platform
        + config.total_ramp_feet * tariff.monthly_rate_per_ramp_foot
    )
    return to_cents(rate)


def calculate_surcharge(distance_miles: float, tariff: Tariff = STANDARD_TARIFF) -> int:
    if distance_miles > tariff.surcharge_threshold_miles:
        return to_cents(tariff.surcharge_amount)
    return 0


def calculate_upfront_total(
    delivery_fee: int, install_fee: int, monthly_rate: int, surcharge: int
) -> int:
    """First month is collected up front together with the one-off fees."""
    return delivery_fee + install_fee + monthly_rate + surcharge


def calculate_full_pricing(
    config: RampConfiguration,
    distance_miles: float,
    tariff: Tariff = STANDARD_TARIFF,
) -> PricingResult:
    """Price a ramp configuration delivered over the given distance."""
    delivery_fee = calculate_delivery_fee(distance_miles, tariff)
    install_fee = calculate_install_fee(config, tariff)
    monthly_rate = calculate_monthly_rate(config, tariff)
    surcharge = calculate_surcharge(distance_miles, tariff)

    return PricingResult(
        delivery_fee=delivery_fee,
        install_fee=install_fee,
        monthly_rate=monthly_rate,
        upfront_total=calculate_upfront_total(delivery_fee, install_fee, monthly_rate, surcharge),
        surcharge=surcharge,
        distance=distance_miles,
    )
