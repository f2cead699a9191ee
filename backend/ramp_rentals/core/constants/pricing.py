"""
Pricing constants — tariff coefficients and distance defaults.

Every tariff number lives here. When rates change, update ONE file.
Amounts are in dollars; calculators convert to cents.
"""

# Delivery
DELIVERY_PER_MILE: float = 0.50
DELIVERY_MINIMUM: float = 25.0

# Installation
INSTALL_BASE: float = 75.0
INSTALL_PER_PLATFORM: float = 25.0
INSTALL_PER_RAMP_SECTION: float = 15.0

# Monthly rental
MONTHLY_RATE_BASE: float = 100.0
MONTHLY_RATE_PER_PLATFORM: float = 20.0
MONTHLY_RATE_PER_RAMP_FOOT: float = 5.0

# Long-distance surcharge, applied when distance > threshold
SURCHARGE_THRESHOLD_MILES: float = 15.0
SURCHARGE_AMOUNT: float = 25.0

CENTS_PER_DOLLAR: int = 100

# Used whenever the distance service cannot answer
FALLBACK_DISTANCE_MILES: float = 10.0

# Largest delivery distance a caller may supply
MAX_DISTANCE_MILES: float = 1000.0

FEET_PER_MILE: float = 5280.0

DEFAULT_BUSINESS_ADDRESS: str = "123 Business St, Your City, ST 12345"
