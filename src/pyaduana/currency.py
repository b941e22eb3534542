"""Currency conversion and en-US style money formatting."""

from __future__ import annotations

import enum
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any

from pyaduana._constants import CENT, LOCAL_CURRENCY, RATE_UNAVAILABLE_TEXT
from pyaduana.normalize import exact_precision, safe_decimal

_CURRENCY_SYMBOLS: dict[str, str] = {"USD": "$"}
_NUMBER_PRECISION = Decimal("0.001")


class ConversionStatus(enum.Enum):
    """Sentinel returned by :func:`convert` when no usable rate is loaded."""

    UNAVAILABLE = "unavailable"


UNAVAILABLE = ConversionStatus.UNAVAILABLE


def _require_amount(amount: Any) -> Decimal:
    parsed = safe_decimal(amount)
    if parsed is None:
        raise ValueError(f"amount must be a finite number, got {amount!r}")
    return parsed


def convert(amount: Any, rate: Any) -> Decimal | ConversionStatus:
    """Convert a USD *amount* to local currency at *rate* (local units per USD).

    Returns :data:`UNAVAILABLE` instead of a number when the rate is
    unset, zero, negative or not numeric, so an unloaded rate is never
    shown as a real ``0.00`` price.
    """
    parsed_rate = safe_decimal(rate)
    if parsed_rate is None or parsed_rate <= 0:
        return UNAVAILABLE
    parsed_amount = _require_amount(amount)
    with localcontext(prec=exact_precision(parsed_amount, parsed_rate)):
        return parsed_amount * parsed_rate


def round_money(amount: Any) -> Decimal:
    """Round to cents, half away from zero."""
    parsed = _require_amount(amount)
    with localcontext(prec=exact_precision(parsed, places=2)):
        return parsed.quantize(CENT, rounding=ROUND_HALF_UP)


def format_currency(amount: Any, currency: str = "USD") -> str:
    """Format like ``Intl.NumberFormat("en-US", {style: "currency"})``.

    ``format_currency(31600)`` -> ``"$31,600.00"``;
    ``format_currency(1848600, "DOP")`` -> ``"DOP 1,848,600.00"``.
    """
    rounded = round_money(amount)
    code = currency.upper()
    symbol = _CURRENCY_SYMBOLS.get(code, f"{code} ")
    sign = "-" if rounded < 0 else ""
    return f"{sign}{symbol}{rounded.copy_abs():,.2f}"


def format_number(amount: Any) -> str:
    """Plain grouped number with up to three decimals (``20,000``, ``1,234.5``)."""
    parsed = _require_amount(amount)
    with localcontext(prec=exact_precision(parsed, places=3)):
        rounded = parsed.quantize(_NUMBER_PRECISION, rounding=ROUND_HALF_UP)
        integral = rounded == rounded.to_integral_value()
    if integral:
        return f"{rounded:,.0f}"
    return f"{rounded:,.3f}".rstrip("0")


def format_local_price(amount: Any, rate: Any, currency: str = LOCAL_CURRENCY) -> str:
    """Converted, formatted price, or a notice when the rate is unavailable."""
    converted = convert(amount, rate)
    if converted is UNAVAILABLE:
        return RATE_UNAVAILABLE_TEXT
    return format_currency(converted, currency)
