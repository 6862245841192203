"""Runtime configuration for the pricer.

Relies on pydantic-settings so that environment variables (prefixed with ``PRICER_``)
can override defaults.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from hotel_pricer.pricing.tax import DEFAULT_TAX_RATES, RegionalTaxTable

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Captures runtime configuration for the pricer."""

    log_level: str = Field(default="INFO")
    log_dir: Path = Field(default=Path("data/logs"), description="Directory that receives pricer.log")
    lookup_latency_ms: int = Field(
        default=100, description="Simulated round-trip delay applied to each lookup"
    )
    tax_rates: Dict[str, float] = Field(
        default_factory=lambda: dict(DEFAULT_TAX_RATES),
        description="Region code to tax rate; must include a DEFAULT entry",
    )
    default_currency: str = Field(default="USD", description="Currency used when none is given")
    default_nights: int = Field(default=3, description="Length of stay for demo requests")

    model_config = SettingsConfigDict(
        env_prefix="PRICER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("log_dir", mode="before")
    def _expand_log_dir(cls, value: str | Path) -> Path:
        if isinstance(value, Path):
            return value
        return Path(value).expanduser()

    @field_validator("lookup_latency_ms")
    def _validate_latency(cls, value: int) -> int:
        if value < 0:
            raise ValueError("lookup_latency_ms must not be negative")
        return value

    @field_validator("default_nights")
    def _validate_nights(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("default_nights must be positive")
        return value

    @field_validator("default_currency")
    def _validate_currency(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("default_currency must not be empty")
        return value.strip()

    @field_validator("tax_rates", mode="before")
    def _parse_tax_rates(cls, value: object) -> object:
        if isinstance(value, str):
            try:
                value = json.loads(value)
            except json.JSONDecodeError as exc:  # noqa: TRY003
                raise ValueError("tax_rates must be valid JSON") from exc
        if not isinstance(value, dict):
            raise ValueError("tax_rates must be a mapping of region code to rate")
        return value

    @field_validator("tax_rates")
    def _validate_tax_rates(cls, value: Dict[str, float]) -> Dict[str, float]:
        return RegionalTaxTable(value).as_dict()

    def ensure_directories(self) -> None:
        """Create directories that must exist at runtime."""
        self.log_dir.mkdir(parents=True, exist_ok=True)

    def lookup_latency_s(self) -> float:
        return self.lookup_latency_ms / 1000.0

    def tax_table(self) -> RegionalTaxTable:
        if self.tax_rates != dict(DEFAULT_TAX_RATES):
            logger.info("Using custom tax rates for regions: %s", ", ".join(sorted(self.tax_rates)))
        return RegionalTaxTable(self.tax_rates)
