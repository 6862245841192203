"""Pricing domain models and regional tax rates."""

from .models import InvalidPricingArgument, PricingRequest, PricingResponse, validate_stay
from .tax import DEFAULT_REGION, DEFAULT_TAX_RATES, RegionalTaxTable, region_for

__all__ = [
    "DEFAULT_REGION",
    "DEFAULT_TAX_RATES",
    "InvalidPricingArgument",
    "PricingRequest",
    "PricingResponse",
    "RegionalTaxTable",
    "region_for",
    "validate_stay",
]
