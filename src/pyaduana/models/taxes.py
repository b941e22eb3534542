"""Import tax models."""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from pyaduana._constants import CO2_RATE, ITBIS_RATE, PLATE_RATE, STICKER_FEE, TARIFF_RATE


class TaxRates(BaseModel):
    """Rates applied to the declared value, plus the flat sticker fee."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    plate: Decimal = Field(default=PLATE_RATE, ge=0)
    co2: Decimal = Field(default=CO2_RATE, ge=0)
    itbis: Decimal = Field(default=ITBIS_RATE, ge=0)
    tariff: Decimal = Field(default=TARIFF_RATE, ge=0)
    sticker: Decimal = Field(default=STICKER_FEE, ge=0)
    """Flat fee (marbete), not scaled by value or currency."""


DEFAULT_RATES = TaxRates()


class TaxBreakdown(BaseModel):
    """Tax line items derived from one declared value.

    All amounts are exact; round only for display.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    declared_value: Decimal
    plate: Decimal
    co2: Decimal
    itbis: Decimal
    tariff: Decimal
    """Gravamen."""
    sticker: Decimal
    """Marbete."""
    total_taxes: Decimal
    """``tariff + itbis + co2``."""
    total_general: Decimal
    """``declared_value + total_taxes + plate``; the sticker is not included."""
