"""Entry point for manual pricing runs."""
from __future__ import annotations

import argparse
import asyncio
import json
import logging
from datetime import date, timedelta
from typing import Optional, Sequence

from hotel_pricer.config.settings import Settings
from hotel_pricer.core.logging import configure_logging
from hotel_pricer.pricing.models import InvalidPricingArgument, PricingRequest
from hotel_pricer.pricing.orchestrator import PricingOrchestrator

DEMO_HOTELS = ("US12345", "EU98765", "JP11111")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Price one or more hotel stays concurrently.")
    parser.add_argument(
        "hotel_ids",
        nargs="*",
        metavar="HOTEL_ID",
        help=f"Hotel identifiers to price (default: {', '.join(DEMO_HOTELS)})",
    )
    parser.add_argument(
        "--check-in",
        type=date.fromisoformat,
        help="Check-in date in ISO format (default: 14 days from today)",
    )
    parser.add_argument("--nights", type=int, help="Length of stay in nights")
    parser.add_argument("--currency", help="Target currency code")
    parser.add_argument("--log-level", help="Override the configured log level")
    return parser


def build_requests(
    hotel_ids: Sequence[str],
    *,
    check_in: date,
    nights: int,
    currency: str,
) -> list[PricingRequest]:
    check_out = check_in + timedelta(days=nights)
    return [
        PricingRequest(hotel_id=hotel_id, check_in=check_in, check_out=check_out, currency=currency)
        for hotel_id in hotel_ids
    ]


async def run(settings: Settings, requests: Sequence[PricingRequest]) -> dict[str, object]:
    orchestrator = PricingOrchestrator.from_settings(settings)
    logging.getLogger(__name__).info("Pricing %s request(s) concurrently", len(requests))
    responses = await orchestrator.price_all(requests)
    return {
        "responses": [response.to_dict() for response in responses],
        "tax_rates": orchestrator.tax_rates(),
    }


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = Settings()

    if args.log_level:
        settings.log_level = args.log_level
    configure_logging(settings.log_level, settings.log_dir)

    check_in = args.check_in or (date.today() + timedelta(days=14))
    nights = args.nights if args.nights is not None else settings.default_nights
    try:
        requests = build_requests(
            args.hotel_ids or DEMO_HOTELS,
            check_in=check_in,
            nights=nights,
            currency=args.currency or settings.default_currency,
        )
    except InvalidPricingArgument as exc:
        parser.error(str(exc))

    result = asyncio.run(run(settings, requests))
    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
