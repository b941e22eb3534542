"""Normalization helpers.

Centralizes defensive parsing of the loosely typed JSON the inventory
service returns, and the working precision for exact money arithmetic.
"""

from __future__ import annotations

from decimal import Decimal, DefaultContext, InvalidOperation
from typing import Any

from pyaduana._constants import MAX_AMOUNT


def safe_decimal(value: Any) -> Decimal | None:
    """Parse *value* as a finite :class:`~decimal.Decimal`, or return ``None``.

    Floats go through ``str`` first so ``58.5`` becomes ``Decimal("58.5")``
    rather than its binary expansion.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, float)):
        result = Decimal(str(value))
    elif isinstance(value, str):
        text = value.strip()
        if not text or text == "--":
            return None
        try:
            result = Decimal(text)
        except InvalidOperation:
            return None
    else:
        return None
    if not result.is_finite():
        return None
    return result


def safe_amount(value: Any) -> Decimal | None:
    """Like :func:`safe_decimal`, but magnitudes above ``MAX_AMOUNT`` become ``None``."""
    parsed = safe_decimal(value)
    if parsed is None or parsed.copy_abs() > MAX_AMOUNT:
        return None
    return parsed


def safe_int(value: Any) -> int | None:
    parsed = safe_amount(value)
    if parsed is None:
        return None
    return int(parsed)


def safe_str(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def exact_precision(*operands: Decimal, places: int = 0) -> int:
    """Context precision under which sums and products of *operands* are exact.

    Leaves room for quantizing the result to *places* decimals and never
    goes below the default 28 digits.
    """
    digits = places + 2
    for operand in operands:
        exponent = int(operand.as_tuple().exponent)
        digits += max(operand.adjusted(), 0) + 1 + max(-exponent, 0)
    return max(digits, DefaultContext.prec)
