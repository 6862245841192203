"""Simulated service clients for price and availability lookups."""

from .availability_client import AvailabilityClient
from .price_client import PriceClient

__all__ = [
    "AvailabilityClient",
    "PriceClient",
]
