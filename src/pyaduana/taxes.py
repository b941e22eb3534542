"""Import tax calculation.

Every line item is a fixed fraction of the vehicle's declared USD value,
except the sticker (marbete), which is a flat fee.  Arithmetic is exact
``Decimal``: the working precision grows with the operands, and rounding to
cents is left to :mod:`pyaduana.currency` at display time, so
``total_general == 1.58 * value`` holds exactly for any accepted value.
Declared values above ``MAX_AMOUNT`` are rejected.
"""

from __future__ import annotations

from decimal import Decimal, localcontext
from typing import Any

from pyaduana._constants import MAX_AMOUNT
from pyaduana.exceptions import InvalidDeclaredValueError
from pyaduana.models.taxes import DEFAULT_RATES, TaxBreakdown, TaxRates
from pyaduana.models.vehicle import Vehicle
from pyaduana.normalize import exact_precision, safe_decimal


def validate_declared_value(value: Any) -> Decimal:
    """Return *value* as a Decimal tax base.

    Raises :class:`InvalidDeclaredValueError` for missing, non-numeric,
    non-finite, negative or too large values.  Zero is accepted.
    """
    parsed = safe_decimal(value)
    if parsed is None:
        raise InvalidDeclaredValueError(f"declared value must be a finite number, got {value!r}")
    if parsed < 0:
        raise InvalidDeclaredValueError(f"declared value must be >= 0, got {parsed}")
    if parsed > MAX_AMOUNT:
        raise InvalidDeclaredValueError(f"declared value must be <= {MAX_AMOUNT}, got {parsed}")
    return parsed


def calculate_taxes(declared_value: Any, rates: TaxRates = DEFAULT_RATES) -> TaxBreakdown:
    """Compute the tax breakdown for a declared USD value."""
    value = validate_declared_value(declared_value)

    with localcontext(prec=exact_precision(value, rates.plate, rates.co2, rates.itbis, rates.tariff)):
        plate = value * rates.plate
        co2 = value * rates.co2
        itbis = value * rates.itbis
        tariff = value * rates.tariff
        total_taxes = tariff + itbis + co2
        total_general = value + total_taxes + plate

    return TaxBreakdown(
        declared_value=value,
        plate=plate,
        co2=co2,
        itbis=itbis,
        tariff=tariff,
        sticker=rates.sticker,
        total_taxes=total_taxes,
        total_general=total_general,
    )


def calculate_vehicle_taxes(vehicle: Vehicle, rates: TaxRates = DEFAULT_RATES) -> TaxBreakdown:
    """Compute the tax breakdown for *vehicle*'s declared value."""
    return calculate_taxes(vehicle.value, rates)
