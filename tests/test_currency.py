from __future__ import annotations

from decimal import Decimal

import pytest

from pyaduana.currency import (
    UNAVAILABLE,
    convert,
    format_currency,
    format_local_price,
    format_number,
    round_money,
)


def test_convert_multiplies_by_rate() -> None:
    assert convert(100, 58.5) == Decimal("5850")


@pytest.mark.parametrize("rate", [0, "0", None, -1, "", "n/a", float("nan")])
def test_convert_without_usable_rate_is_unavailable(rate: object) -> None:
    result = convert(100, rate)

    assert result is UNAVAILABLE
    assert result != 0


def test_convert_rejects_non_numeric_amount() -> None:
    with pytest.raises(ValueError):
        convert("lots", 58.5)


def test_format_currency_usd() -> None:
    assert format_currency(31600) == "$31,600.00"
    assert format_currency(Decimal("0.005")) == "$0.01"
    assert format_currency(-5) == "-$5.00"


def test_format_currency_other_code() -> None:
    assert format_currency(Decimal("1848600"), "DOP") == "DOP 1,848,600.00"
    assert format_currency(10, "eur") == "EUR 10.00"


def test_round_money_half_up() -> None:
    assert round_money("2.345") == Decimal("2.35")
    assert round_money("-2.345") == Decimal("-2.35")


def test_format_number() -> None:
    assert format_number(20000) == "20,000"
    assert format_number("1234.5") == "1,234.5"
    assert format_number("0.12345") == "0.123"


def test_format_local_price() -> None:
    assert format_local_price(31600, Decimal("58.5")) == "DOP 1,848,600.00"
    assert format_local_price(31600, 0) == "Exchange rate unavailable"
    assert format_local_price(31600, None, "EUR") == "Exchange rate unavailable"


def test_very_large_amounts_format_without_losing_cents() -> None:
    assert format_currency(Decimal("1e27")) == "$1" + ",000" * 9 + ".00"
    assert format_number("1e27") == "1" + ",000" * 9
    assert round_money("123456789012345678901234567.895") == Decimal("123456789012345678901234567.90")
    assert convert(Decimal("1e27"), Decimal("58.5")) == Decimal("5.85e28")
