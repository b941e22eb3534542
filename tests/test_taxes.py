from __future__ import annotations

from decimal import Decimal, localcontext

import pytest

from pyaduana.exceptions import InvalidDeclaredValueError
from pyaduana.models.taxes import TaxRates
from pyaduana.models.vehicle import Vehicle
from pyaduana.taxes import calculate_taxes, calculate_vehicle_taxes, validate_declared_value


def test_corolla_breakdown() -> None:
    taxes = calculate_taxes(20000)

    assert taxes.plate == Decimal("3400")
    assert taxes.co2 == Decimal("600")
    assert taxes.itbis == Decimal("3600")
    assert taxes.tariff == Decimal("4000")
    assert taxes.sticker == Decimal("3000")
    assert taxes.total_taxes == Decimal("8200")
    assert taxes.total_general == Decimal("31600")


@pytest.mark.parametrize("value", ["0", "1", "0.01", "18500.50", "12345.67", "999999.99", "0.333"])
def test_totals_are_exact_multiples_of_declared_value(value: str) -> None:
    declared = Decimal(value)
    taxes = calculate_taxes(declared)

    assert taxes.total_taxes == Decimal("0.41") * declared
    assert taxes.total_general == Decimal("1.58") * declared
    assert taxes.total_general == declared + taxes.tariff + taxes.itbis + taxes.co2 + taxes.plate


@pytest.mark.parametrize("value", [0, 1, 20000, 10**9])
def test_sticker_is_flat(value: int) -> None:
    assert calculate_taxes(value).sticker == Decimal("3000")


def test_zero_value_is_accepted() -> None:
    taxes = calculate_taxes(0)

    assert taxes.total_taxes == 0
    assert taxes.total_general == 0
    assert taxes.sticker == Decimal("3000")


def test_float_input_does_not_leak_binary_error() -> None:
    taxes = calculate_taxes(0.1)

    assert taxes.declared_value == Decimal("0.1")
    assert taxes.plate == Decimal("0.017")


def test_very_large_declared_value_is_exact() -> None:
    taxes = calculate_taxes("1e27")

    assert taxes.plate == Decimal("1.7e26")
    assert taxes.total_taxes == Decimal("4.1e26")
    assert taxes.total_general == Decimal("1.58e27")


def test_large_declared_value_with_cents_keeps_every_digit() -> None:
    declared = Decimal("123456789012345678901234567.89")

    taxes = calculate_taxes(declared)

    with localcontext(prec=60):
        expected = Decimal("1.58") * declared
        parts = declared + taxes.tariff + taxes.itbis + taxes.co2 + taxes.plate
    assert taxes.total_general == expected
    assert taxes.total_general == parts


def test_declared_value_above_limit_rejected() -> None:
    with pytest.raises(InvalidDeclaredValueError):
        calculate_taxes("1e31")


@pytest.mark.parametrize("value", [-1, "-0.01", float("nan"), float("inf"), None, "abc", True, [20000]])
def test_invalid_declared_values_rejected(value: object) -> None:
    with pytest.raises(InvalidDeclaredValueError):
        calculate_taxes(value)


def test_invalid_declared_value_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        validate_declared_value(-5)


def test_custom_rates() -> None:
    taxes = calculate_taxes(1000, TaxRates(co2=Decimal("0.01")))

    assert taxes.co2 == Decimal("10")
    assert taxes.total_taxes == Decimal("390")


def test_vehicle_taxes_use_declared_value() -> None:
    vehicle = Vehicle.model_validate({"Marca": "Toyota", "Modelo": "Corolla", "Valor": "20000"})

    assert calculate_vehicle_taxes(vehicle).total_general == Decimal("31600")


def test_vehicle_without_value_is_rejected() -> None:
    vehicle = Vehicle.model_validate({"Marca": "Toyota", "Modelo": "Corolla"})

    with pytest.raises(InvalidDeclaredValueError):
        calculate_vehicle_taxes(vehicle)
