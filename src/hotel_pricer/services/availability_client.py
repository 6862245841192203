"""Simulated client for the room availability lookup."""
from __future__ import annotations

import logging
from datetime import date

from hotel_pricer.pricing.models import validate_stay
from hotel_pricer.utils.hashing import int32_abs, int32_mod, stable_hash
from hotel_pricer.utils.latency import simulate_latency

logger = logging.getLogger(__name__)

# hash buckets 0-7 of 10 are available
AVAILABLE_BUCKETS = 8


def mock_availability(hotel_id: str, check_in: date) -> bool:
    bucket = int32_mod(int32_abs(stable_hash(hotel_id + check_in.isoformat())), 10)
    return bucket < AVAILABLE_BUCKETS


class AvailabilityClient:
    """Check whether a hotel has a room for the requested stay."""

    def __init__(self, *, latency_s: float = 0.1) -> None:
        self.latency_s = latency_s

    async def check_availability(self, hotel_id: str, check_in: date, check_out: date) -> bool:
        validate_stay(hotel_id, check_in, check_out, require_currency=False)
        logger.debug("Availability lookup hotel=%s (%s → %s)", hotel_id, check_in, check_out)
        await simulate_latency(self.latency_s)
        available = mock_availability(hotel_id, check_in)
        if not available:
            logger.info("Hotel %s unavailable from %s", hotel_id, check_in)
        return available
