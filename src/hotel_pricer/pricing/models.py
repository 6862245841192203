"""Dataclasses describing pricing requests and responses."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional


class InvalidPricingArgument(ValueError):
    """Raised when a pricing request or lookup receives a malformed argument."""


def _require_text(value: object, name: str) -> None:
    if value is None:
        raise InvalidPricingArgument(f"{name} must not be None")
    if not isinstance(value, str):
        raise InvalidPricingArgument(f"{name} must be a string (got {type(value).__name__})")
    if not value.strip():
        raise InvalidPricingArgument(f"{name} must not be empty")


def _require_date(value: object, name: str) -> None:
    if value is None:
        raise InvalidPricingArgument(f"{name} must not be None")
    if isinstance(value, datetime) or not isinstance(value, date):
        raise InvalidPricingArgument(f"{name} must be a date (got {type(value).__name__})")


def validate_stay(
    hotel_id: object,
    check_in: object,
    check_out: object,
    currency: Optional[object] = None,
    *,
    require_currency: bool = True,
) -> None:
    """Validate the arguments shared by requests and lookups.

    Checks run in a fixed order (hotel id, check-in, check-out, currency, date
    range) and the first failure raises :class:`InvalidPricingArgument`.
    """
    _require_text(hotel_id, "hotel_id")
    _require_date(check_in, "check_in")
    _require_date(check_out, "check_out")
    if require_currency:
        _require_text(currency, "currency")
    if not check_in < check_out:  # type: ignore[operator]
        raise InvalidPricingArgument("check_in must be before check_out")


@dataclass(frozen=True, slots=True)
class PricingRequest:
    """A validated request to price one hotel stay."""

    hotel_id: str
    check_in: date
    check_out: date
    currency: str

    def __post_init__(self) -> None:
        validate_stay(self.hotel_id, self.check_in, self.check_out, self.currency)

    @property
    def nights(self) -> int:
        return (self.check_out - self.check_in).days

    def to_dict(self) -> dict[str, object]:
        return {
            "hotel_id": self.hotel_id,
            "check_in": self.check_in.isoformat(),
            "check_out": self.check_out.isoformat(),
            "nights": self.nights,
            "currency": self.currency,
        }


@dataclass(frozen=True, slots=True)
class PricingResponse:
    """Priced quote for a single hotel stay.

    Unavailable quotes carry zero for every monetary field; available quotes
    always satisfy ``total_price == base_price + tax``.
    """

    hotel_id: str
    available: bool
    base_price: float
    tax: float
    total_price: float
    currency: str

    @classmethod
    def unavailable(cls, hotel_id: str, currency: str) -> "PricingResponse":
        return cls(
            hotel_id=hotel_id,
            available=False,
            base_price=0.0,
            tax=0.0,
            total_price=0.0,
            currency=currency,
        )

    @classmethod
    def priced(
        cls,
        hotel_id: str,
        currency: str,
        base_price: float,
        tax_rate: float,
    ) -> "PricingResponse":
        base = float(base_price)
        tax = base * tax_rate
        return cls(
            hotel_id=hotel_id,
            available=True,
            base_price=base,
            tax=tax,
            total_price=base + tax,
            currency=currency,
        )

    def to_dict(self) -> dict[str, object]:
        return {
            "hotel_id": self.hotel_id,
            "available": self.available,
            "base_price": self.base_price,
            "tax": self.tax,
            "total_price": self.total_price,
            "currency": self.currency,
        }
