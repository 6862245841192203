"""Simulated client for the base price lookup."""
from __future__ import annotations

import logging
from datetime import date

from hotel_pricer.pricing.models import validate_stay
from hotel_pricer.utils.hashing import int32_mod, stable_hash
from hotel_pricer.utils.latency import simulate_latency

logger = logging.getLogger(__name__)

BASE_NIGHTLY_RATE = 100
HOTEL_RATE_SPREAD = 500


def mock_base_price(hotel_id: str, check_in: date, check_out: date) -> float:
    """Deterministic stay price: a per-hotel nightly rate times the number of nights."""
    nightly = BASE_NIGHTLY_RATE + abs(int32_mod(stable_hash(hotel_id), HOTEL_RATE_SPREAD))
    nights = (check_out - check_in).days
    return float(nightly * nights)


class PriceClient:
    """Fetch the pre-tax price for a stay."""

    def __init__(self, *, latency_s: float = 0.1) -> None:
        self.latency_s = latency_s

    async def fetch_base_price(
        self,
        hotel_id: str,
        check_in: date,
        check_out: date,
        currency: str,
    ) -> float:
        validate_stay(hotel_id, check_in, check_out, currency)
        logger.debug(
            "Price lookup hotel=%s (%s → %s) currency=%s",
            hotel_id,
            check_in,
            check_out,
            currency,
        )
        await simulate_latency(self.latency_s)
        return mock_base_price(hotel_id, check_in, check_out)
