"""Regional tax rates keyed by the region prefix of a hotel id."""
from __future__ import annotations

from collections.abc import Iterator, Mapping
from numbers import Real
from types import MappingProxyType
from typing import Optional

DEFAULT_REGION = "DEFAULT"

DEFAULT_TAX_RATES: Mapping[str, float] = MappingProxyType(
    {
        "US": 0.10,
        "EU": 0.20,
        "UK": 0.15,
        "JP": 0.08,
        "CA": 0.12,
        DEFAULT_REGION: 0.05,
    }
)


def region_for(hotel_id: Optional[str]) -> str:
    """Return the upper-cased two-character region prefix of ``hotel_id``."""
    if hotel_id is None or len(hotel_id) < 2:
        return DEFAULT_REGION
    return hotel_id[:2].upper()


class RegionalTaxTable(Mapping[str, float]):
    """Read-only mapping of region code to tax rate with a mandatory fallback."""

    __slots__ = ("_rates",)

    def __init__(self, rates: Optional[Mapping[str, float]] = None) -> None:
        source = DEFAULT_TAX_RATES if rates is None else rates
        normalised: dict[str, float] = {}
        for region, rate in source.items():
            if not isinstance(region, str) or not region.strip():
                raise ValueError("Tax table regions must be non-empty strings")
            if isinstance(rate, bool) or not isinstance(rate, Real):
                raise ValueError(f"Tax rate for region '{region}' must be a number")
            if not 0 <= rate < 1:
                raise ValueError(f"Tax rate for region '{region}' must be within [0, 1) (got {rate})")
            normalised[region.strip().upper()] = float(rate)
        if DEFAULT_REGION not in normalised:
            raise ValueError(f"Tax table must define a '{DEFAULT_REGION}' rate")
        self._rates: Mapping[str, float] = MappingProxyType(normalised)

    def __getitem__(self, region: str) -> float:
        return self._rates[region]

    def __iter__(self) -> Iterator[str]:
        return iter(self._rates)

    def __len__(self) -> int:
        return len(self._rates)

    def __repr__(self) -> str:
        return f"RegionalTaxTable({dict(self._rates)!r})"

    @property
    def default_rate(self) -> float:
        return self._rates[DEFAULT_REGION]

    def rate_for(self, region: str) -> float:
        return self._rates.get(region, self.default_rate)

    def rate_for_hotel(self, hotel_id: str) -> float:
        return self.rate_for(region_for(hotel_id))

    def as_dict(self) -> dict[str, float]:
        return dict(self._rates)
