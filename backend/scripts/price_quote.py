"""
Price a ramp configuration from the command line.

Usage:
    # Known distance, no lookup
    python -m scripts.price_quote --platform 5x5:1 --ramp 6:1 --distance 10

    # Resolve distance from the business address (needs GOOGLE_MAPS_API_KEY)
    python -m scripts.price_quote --platform 5x5:2 --ramp 8:2 --ramp 4:1 \
        --address "42 Elm St, Springfield"
"""

import argparse
import asyncio
import logging
import math
from typing import List, Tuple, get_args

from ramp_rentals.container import get_pricing_service
from ramp_rentals.core.constants.pricing import MAX_DISTANCE_MILES
from ramp_rentals.pricing.formatting import format_currency
from ramp_rentals.pricing.models import PlatformItem, PlatformSize, RampConfiguration, RampSection

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def _split_pair(value: str) -> Tuple[str, int]:
    head, _, qty = value.partition(":")
    return head, int(qty) if qty else 1


def parse_platform(value: str) -> PlatformItem:
    """'5x5:2' -> two 5x5 platforms; quantity defaults to 1."""
    size, quantity = _split_pair(value)
    return PlatformItem(size=size, quantity=quantity)


def parse_ramp(value: str) -> RampSection:
    """'6:2' -> two 6 ft sections; quantity defaults to 1."""
    length, quantity = _split_pair(value)
    return RampSection(length=float(length), quantity=quantity)


def parse_distance(value: str) -> float:
    """Miles between 0 and MAX_DISTANCE_MILES; rejects inf and nan."""
    try:
        miles = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}")
    if not math.isfinite(miles) or not 0 <= miles <= MAX_DISTANCE_MILES:
        raise argparse.ArgumentTypeError(
            f"distance must be between 0 and {MAX_DISTANCE_MILES:g} miles"
        )
    return miles


def build_config(platforms: List[str], ramps: List[str]) -> RampConfiguration:
    return RampConfiguration(
        platforms=[parse_platform(p) for p in platforms],
        ramps=[parse_ramp(r) for r in ramps],
    )


async def run(args: argparse.Namespace) -> None:
    config = build_config(args.platform, args.ramp)
    service = get_pricing_service()
    result, resolution = await service.price(config, address=args.address, distance=args.distance)

    if resolution:
        logger.info(f"Distance: {resolution.miles} mi ({resolution.source})")
        if resolution.is_fallback:
            logger.info(f"Fallback reason: {resolution.reason}")
    else:
        logger.info(f"Distance: {result.distance} mi (supplied)")

    logger.info(f"Delivery fee:  {format_currency(result.delivery_fee)}")
    logger.info(f"Install fee:   {format_currency(result.install_fee)}")
    logger.info(f"Monthly rate:  {format_currency(result.monthly_rate)}")
    logger.info(f"Surcharge:     {format_currency(result.surcharge)}")
    logger.info(f"Upfront total: {format_currency(result.upfront_total)}")


def main():
    parser = argparse.ArgumentParser(
        description="Price a wheelchair ramp rental configuration"
    )
    parser.add_argument(
        "--platform",
        action="append",
        default=[],
        help=f"Platform as SIZE[:QTY], SIZE one of {', '.join(get_args(PlatformSize))} (repeatable)"
    )
    parser.add_argument(
        "--ramp",
        action="append",
        default=[],
        help="Ramp section as FEET[:QTY], e.g. 6:2 (repeatable)"
    )
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--address", type=str, help="Delivery address to resolve")
    group.add_argument("--distance", type=parse_distance, help="Known distance in miles")

    args = parser.parse_args()
    asyncio.run(run(args))


if __name__ == "__main__":
    main()
