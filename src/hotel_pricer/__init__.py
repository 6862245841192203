"""Hotel stay pricing built from concurrent price and availability lookups."""

from .pricing import (
    DEFAULT_TAX_RATES,
    InvalidPricingArgument,
    PricingRequest,
    PricingResponse,
    RegionalTaxTable,
)
from .pricing.orchestrator import PricingOrchestrator
from .services import AvailabilityClient, PriceClient

__all__ = [
    "AvailabilityClient",
    "DEFAULT_TAX_RATES",
    "InvalidPricingArgument",
    "PriceClient",
    "PricingOrchestrator",
    "PricingRequest",
    "PricingResponse",
    "RegionalTaxTable",
]

__version__ = "0.1.0"
