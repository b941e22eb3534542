"""The vehicle tax page: filters, selectable table and tax result cards."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from pyaduana._constants import LOCAL_CURRENCY
from pyaduana.client import AduanaClient
from pyaduana.currency import format_currency, format_local_price, format_number
from pyaduana.exceptions import InvalidDeclaredValueError
from pyaduana.models.filters import VehicleFilters
from pyaduana.models.taxes import DEFAULT_RATES, TaxBreakdown, TaxRates
from pyaduana.models.vehicle import Vehicle
from pyaduana.state.controller import FetchKind, FilterFetchController
from pyaduana.state.selection import SelectionTracker
from pyaduana.taxes import calculate_vehicle_taxes

_logger = logging.getLogger(__name__)

_VALUE_UNAVAILABLE_TEXT = "Declared value unavailable"


@dataclass(frozen=True, slots=True)
class VehicleResult:
    """Tax results for one selected vehicle.

    ``breakdown`` is ``None`` when the vehicle has no usable declared value.
    """

    vehicle: Vehicle
    breakdown: TaxBreakdown | None
    local_price: str


@dataclass(frozen=True, slots=True)
class PageView:
    filters: VehicleFilters
    rows: tuple[Vehicle, ...]
    selected_keys: frozenset[str]
    results: tuple[VehicleResult, ...]
    exchange_rate: Decimal | None
    local_currency: str = LOCAL_CURRENCY

    @property
    def selected_count(self) -> int:
        return len(self.selected_keys)


def build_results(
    vehicles: Iterable[Vehicle],
    exchange_rate: Decimal | None,
    *,
    local_currency: str = LOCAL_CURRENCY,
    rates: TaxRates = DEFAULT_RATES,
) -> tuple[VehicleResult, ...]:
    """Compute a result card for each vehicle, recomputed on every call."""
    results: list[VehicleResult] = []
    for vehicle in vehicles:
        try:
            breakdown = calculate_vehicle_taxes(vehicle, rates)
        except InvalidDeclaredValueError as exc:
            _logger.debug("No tax breakdown for row %s: %s", vehicle.key, exc)
            results.append(VehicleResult(vehicle=vehicle, breakdown=None, local_price=_VALUE_UNAVAILABLE_TEXT))
            continue
        local_price = format_local_price(breakdown.total_general, exchange_rate, local_currency)
        results.append(VehicleResult(vehicle=vehicle, breakdown=breakdown, local_price=local_price))
    return tuple(results)


class VehicleTaxPage:
    """Wires the filter/fetch controller to the selection tracker.

    Usage::

        async with AduanaClient(config) as client:
            page = VehicleTaxPage(client)
            await page.load()
            page.select([page.rows[0].key])
            print(render_text(page.view()))
    """

    def __init__(
        self,
        client: AduanaClient,
        *,
        filters: VehicleFilters | None = None,
        local_currency: str | None = None,
        rates: TaxRates = DEFAULT_RATES,
    ) -> None:
        self.controller = FilterFetchController(client, filters)
        self.selection = SelectionTracker()
        self._local_currency = local_currency or client.config.local_currency
        self._rates = rates
        self.controller.add_listener(self._on_fetch)

    def _on_fetch(self, kind: FetchKind) -> None:
        if kind == FetchKind.VEHICLES:
            self.selection.update_rows(self.controller.vehicles)

    @property
    def rows(self) -> tuple[Vehicle, ...]:
        return self.selection.rows

    async def load(self) -> None:
        await self.controller.refresh()

    async def set_filters(self, **changes: Any) -> bool:
        return await self.controller.set_filters(**changes)

    def select(self, keys: Iterable[str]) -> None:
        self.selection.select(keys)

    def toggle(self, key: str) -> bool:
        return self.selection.toggle(key)

    def select_all(self) -> None:
        self.selection.select_all()

    def clear_selection(self) -> None:
        self.selection.clear()

    def view(self) -> PageView:
        rate = self.controller.exchange_rate
        return PageView(
            filters=self.controller.filters,
            rows=self.selection.rows,
            selected_keys=self.selection.selected_keys,
            results=build_results(
                self.selection.selected_vehicles,
                rate,
                local_currency=self._local_currency,
                rates=self._rates,
            ),
            exchange_rate=rate,
            local_currency=self._local_currency,
        )


# ----------------------------------------------------------------------
# Text rendering
# ----------------------------------------------------------------------

_TABLE_HEADERS: tuple[str, ...] = ("", "#", "Key", "Brand", "Model", "Year", "Value (USD)", "Country", "Specifications")


def _table_lines(view: PageView) -> list[str]:
    body: list[tuple[str, ...]] = []
    for vehicle in view.rows:
        body.append(
            (
                "[x]" if vehicle.key in view.selected_keys else "[ ]",
                str(vehicle.index),
                vehicle.key,
                vehicle.brand,
                vehicle.model,
                "" if vehicle.year is None else str(vehicle.year),
                "" if vehicle.value is None else format_number(vehicle.value),
                vehicle.country,
                vehicle.specifications,
            )
        )
    widths = [len(header) for header in _TABLE_HEADERS]
    for row in body:
        widths = [max(width, len(cell)) for width, cell in zip(widths, row, strict=True)]

    def _line(cells: tuple[str, ...]) -> str:
        return "  ".join(cell.ljust(width) for cell, width in zip(cells, widths, strict=True)).rstrip()

    lines = [_line(_TABLE_HEADERS), _line(tuple("-" * width for width in widths))]
    lines.extend(_line(row) for row in body)
    if not body:
        lines.append("No vehicles")
    return lines


def _result_lines(result: VehicleResult, local_currency: str) -> list[str]:
    lines = [result.vehicle.label]
    breakdown = result.breakdown
    if breakdown is None:
        lines.append(f"  {result.local_price}")
        return lines
    fields = (
        ("Vehicle value", format_currency(breakdown.declared_value)),
        ("Tariff", format_currency(breakdown.tariff)),
        ("ITBIS", format_currency(breakdown.itbis)),
        ("CO2", format_currency(breakdown.co2)),
        ("Plate", format_currency(breakdown.plate)),
        ("Sticker", format_number(breakdown.sticker)),
        ("Total taxes", format_currency(breakdown.total_taxes)),
        ("Total general (value and taxes)", format_currency(breakdown.total_general)),
        (f"Price in {local_currency}", result.local_price),
    )
    label_width = max(len(label) for label, _ in fields) + 1
    lines.extend(f"  {(label + ':').ljust(label_width)} {value}" for label, value in fields)
    return lines


def render_text(view: PageView) -> str:
    """Render the page for a terminal."""
    filters = view.filters
    filter_line = "Filters: " + "  ".join(
        f"{name}={value if value.strip() else '-'}"
        for name, value in (("brand", filters.brand), ("model", filters.model), ("year", filters.year))
    )
    if view.exchange_rate is None:
        rate_line = "Exchange rate: unavailable"
    else:
        rate_line = f"Exchange rate: {format_number(view.exchange_rate)} {view.local_currency}/USD"

    lines = [filter_line, rate_line, ""]
    lines.extend(_table_lines(view))
    if view.selected_count:
        lines.extend(["", f"Selected vehicles: {view.selected_count}"])
    if view.results:
        lines.extend(["", "Tax results", "==========="])
        for result in view.results:
            lines.extend(_result_lines(result, view.local_currency))
            lines.append("")
    return "\n".join(lines).rstrip() + "\n"
