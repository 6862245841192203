"""Combine the price and availability lookups into a single quote."""
from __future__ import annotations

import asyncio
import logging
from datetime import date
from typing import TYPE_CHECKING, Iterable, Optional, Protocol

from hotel_pricer.pricing.models import InvalidPricingArgument, PricingRequest, PricingResponse
from hotel_pricer.pricing.tax import RegionalTaxTable, region_for
from hotel_pricer.services.availability_client import AvailabilityClient
from hotel_pricer.services.price_client import PriceClient

if TYPE_CHECKING:  # pragma: no cover - import for type checking only
    from hotel_pricer.config.settings import Settings

logger = logging.getLogger(__name__)


class PriceLookup(Protocol):
    async def fetch_base_price(
        self, hotel_id: str, check_in: date, check_out: date, currency: str
    ) -> float:
        ...


class AvailabilityLookup(Protocol):
    async def check_availability(self, hotel_id: str, check_in: date, check_out: date) -> bool:
        ...


class PricingOrchestrator:
    """Price hotel stays by running both lookups concurrently.

    The orchestrator keeps no mutable state; the tax table is read-only and
    can be shared between instances.
    """

    def __init__(
        self,
        price_client: Optional[PriceLookup] = None,
        availability_client: Optional[AvailabilityLookup] = None,
        tax_table: Optional[RegionalTaxTable] = None,
    ) -> None:
        self.price_client = price_client if price_client is not None else PriceClient()
        self.availability_client = (
            availability_client if availability_client is not None else AvailabilityClient()
        )
        self.tax_table = tax_table if tax_table is not None else RegionalTaxTable()

    @classmethod
    def from_settings(cls, settings: "Settings") -> "PricingOrchestrator":
        latency_s = settings.lookup_latency_s()
        return cls(
            price_client=PriceClient(latency_s=latency_s),
            availability_client=AvailabilityClient(latency_s=latency_s),
            tax_table=settings.tax_table(),
        )

    async def get_pricing(self, request: Optional[PricingRequest]) -> PricingResponse:
        if request is None:
            logger.warning("Rejected pricing call without a request")
            raise InvalidPricingArgument("PricingRequest must not be None")
        if not isinstance(request, PricingRequest):
            logger.warning("Rejected pricing call with %s", type(request).__name__)
            raise InvalidPricingArgument(
                f"Expected a PricingRequest (got {type(request).__name__})"
            )

        logger.info(
            "Pricing hotel %s (%s → %s) in %s",
            request.hotel_id,
            request.check_in,
            request.check_out,
            request.currency,
        )
        price_task = asyncio.create_task(
            self.price_client.fetch_base_price(
                request.hotel_id,
                request.check_in,
                request.check_out,
                request.currency,
            )
        )
        availability_task = asyncio.create_task(
            self.availability_client.check_availability(
                request.hotel_id,
                request.check_in,
                request.check_out,
            )
        )
        try:
            base_price, available = await asyncio.gather(price_task, availability_task)
        except BaseException:
            for task in (price_task, availability_task):
                task.cancel()
            raise

        if not available:
            return PricingResponse.unavailable(request.hotel_id, request.currency)

        tax_rate = self.tax_table.rate_for_hotel(request.hotel_id)
        response = PricingResponse.priced(request.hotel_id, request.currency, base_price, tax_rate)
        logger.debug(
            "Priced hotel %s: base=%.2f tax=%.2f total=%.2f",
            response.hotel_id,
            response.base_price,
            response.tax,
            response.total_price,
        )
        return response

    async def price_all(self, requests: Iterable[Optional[PricingRequest]]) -> list[PricingResponse]:
        """Price several stays concurrently; results keep the order of ``requests``."""
        tasks = [asyncio.create_task(self.get_pricing(request)) for request in requests]
        try:
            return list(await asyncio.gather(*tasks))
        except BaseException:
            for task in tasks:
                task.cancel()
            raise

    def region_for(self, hotel_id: str) -> str:
        return region_for(hotel_id)

    def tax_rate_for(self, hotel_id: str) -> float:
        return self.tax_table.rate_for_hotel(hotel_id)

    def tax_rates(self) -> dict[str, float]:
        return self.tax_table.as_dict()
