from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import pytest


def _row(marca: str, modelo: str, year: int, valor: Any, pais: str, specs: str = "") -> dict[str, Any]:
    return {
        "Marca": marca,
        "Modelo": modelo,
        "Año": year,
        "Valor": valor,
        "Pais": pais,
        "Especificaciones": specs,
    }


@dataclass
class FakeInventory:
    """In-memory stand-in for the inventory service, implementing ``Transport``."""

    rows: list[dict[str, Any]] = field(
        default_factory=lambda: [
            _row("Toyota", "Corolla", 2020, 20000, "USA", "1.8L sedan"),
            _row("Honda", "Civic", 2019, "18500.50", "Japan", "2.0L"),
            _row("Toyota", "Hilux", 2022, 35000, "Japan", "4x4 diesel"),
        ]
    )
    rate: Any = 58.5
    vehicles_success: bool = True
    rate_success: bool = True
    calls: list[tuple[str, dict[str, str]]] = field(default_factory=list)

    async def get_json(self, endpoint: str, params: Mapping[str, str] | None = None) -> Any:
        query = dict(params or {})
        self.calls.append((endpoint, query))
        if endpoint == "/vehicles":
            if not self.vehicles_success:
                return {"success": False, "message": "database offline"}
            return {"success": True, "data": [row for row in self.rows if self._matches(row, query)]}
        if endpoint == "/exchange-rate":
            if not self.rate_success:
                return {"success": False}
            return {"success": True, "rate": self.rate}
        raise AssertionError(f"unexpected endpoint {endpoint}")

    @staticmethod
    def _matches(row: dict[str, Any], query: dict[str, str]) -> bool:
        brand = query.get("brand", "").lower()
        model = query.get("model", "").lower()
        year = query.get("year", "")
        if brand and brand not in str(row["Marca"]).lower():
            return False
        if model and model not in str(row["Modelo"]).lower():
            return False
        return not (year and str(row["Año"]) != year)

    def calls_to(self, endpoint: str) -> list[dict[str, str]]:
        return [query for called, query in self.calls if called == endpoint]


@pytest.fixture
def inventory() -> FakeInventory:
    return FakeInventory()


@pytest.fixture
def make_row():
    return _row
