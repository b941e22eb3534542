"""Filter form and data fetching.

Every filter change triggers two independent requests: the filtered
vehicle list and the (filter-independent) exchange rate.  Each request
is tagged with a generation number; when a newer request of the same
kind has been issued, an older response is discarded on arrival, so a
slow early response can never overwrite a later one.

Fetch failures are logged and leave the current state untouched.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from decimal import Decimal
from enum import StrEnum
from typing import Any

from pyaduana.client import AduanaClient
from pyaduana.exceptions import AduanaError
from pyaduana.models.filters import VehicleFilters
from pyaduana.models.vehicle import Vehicle

_logger = logging.getLogger(__name__)


class FetchKind(StrEnum):
    VEHICLES = "vehicles"
    EXCHANGE_RATE = "exchange_rate"


Listener = Callable[[FetchKind], None]


class FilterFetchController:
    """Owns the filter state and the data fetched for it."""

    def __init__(self, client: AduanaClient, filters: VehicleFilters | None = None) -> None:
        self._client = client
        self._filters = filters or VehicleFilters()
        self._vehicles: tuple[Vehicle, ...] = ()
        self._exchange_rate: Decimal | None = None
        self._generations: dict[FetchKind, int] = {kind: 0 for kind in FetchKind}
        self._listeners: list[Listener] = []
        self._tasks: set[asyncio.Task[None]] = set()
        self.last_errors: dict[FetchKind, AduanaError] = {}
        """Most recent failure per request kind; cleared by the next success."""

    @property
    def filters(self) -> VehicleFilters:
        return self._filters

    @property
    def vehicles(self) -> tuple[Vehicle, ...]:
        return self._vehicles

    @property
    def exchange_rate(self) -> Decimal | None:
        """Local-currency-per-USD rate, ``None`` until one has loaded."""
        return self._exchange_rate

    def add_listener(self, listener: Listener) -> Callable[[], None]:
        """Register *listener*; returns a callable that unregisters it."""
        self._listeners.append(listener)

        def _remove() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _remove

    # ------------------------------------------------------------------
    # Filter changes
    # ------------------------------------------------------------------

    def _apply_filter_changes(self, changes: dict[str, Any]) -> bool:
        updated = VehicleFilters.model_validate({**self._filters.model_dump(), **changes})
        if updated == self._filters:
            return False
        self._filters = updated
        return True

    async def set_filters(self, **changes: Any) -> bool:
        """Update filter fields and refetch.

        Returns ``False`` (and does not refetch) when nothing changed.
        Unknown field names raise ``pydantic.ValidationError``.
        """
        if not self._apply_filter_changes(changes):
            return False
        await self.refresh()
        return True

    async def set_filter(self, name: str, value: str) -> bool:
        return await self.set_filters(**{name: value})

    def schedule_filters(self, **changes: Any) -> asyncio.Task[None] | None:
        """Fire-and-forget variant of :meth:`set_filters`."""
        if not self._apply_filter_changes(changes):
            return None
        return self.schedule_refresh()

    # ------------------------------------------------------------------
    # Fetching
    # ------------------------------------------------------------------

    async def refresh(self) -> None:
        """Fetch the vehicle list and the exchange rate concurrently."""
        await asyncio.gather(self._load_vehicles(), self._load_exchange_rate())

    def schedule_refresh(self) -> asyncio.Task[None]:
        """Start :meth:`refresh` in the background and return its task."""
        task = asyncio.get_running_loop().create_task(self.refresh())
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def wait_idle(self) -> None:
        """Wait for every background refresh started so far."""
        while self._tasks:
            await asyncio.gather(*self._tasks, return_exceptions=True)

    async def aclose(self) -> None:
        """Cancel background refreshes still in flight."""
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        self._tasks.clear()

    def _next_generation(self, kind: FetchKind) -> int:
        self._generations[kind] += 1
        return self._generations[kind]

    def _is_current(self, kind: FetchKind, generation: int) -> bool:
        if generation == self._generations[kind]:
            return True
        _logger.debug(
            "Discarding superseded %s response (generation %d, latest %d)",
            kind,
            generation,
            self._generations[kind],
        )
        return False

    async def _load_vehicles(self) -> None:
        generation = self._next_generation(FetchKind.VEHICLES)
        try:
            vehicles = await self._client.get_vehicles(self._filters)
        except AduanaError as exc:
            _logger.warning("Vehicle list request failed: %s", exc)
            if self._is_current(FetchKind.VEHICLES, generation):
                self.last_errors[FetchKind.VEHICLES] = exc
            return
        if not self._is_current(FetchKind.VEHICLES, generation):
            return
        self._vehicles = tuple(vehicles)
        self.last_errors.pop(FetchKind.VEHICLES, None)
        self._notify(FetchKind.VEHICLES)

    async def _load_exchange_rate(self) -> None:
        generation = self._next_generation(FetchKind.EXCHANGE_RATE)
        try:
            rate = await self._client.get_exchange_rate()
        except AduanaError as exc:
            _logger.warning("Exchange rate request failed: %s", exc)
            if self._is_current(FetchKind.EXCHANGE_RATE, generation):
                self.last_errors[FetchKind.EXCHANGE_RATE] = exc
            return
        if not self._is_current(FetchKind.EXCHANGE_RATE, generation):
            return
        self._exchange_rate = rate
        self.last_errors.pop(FetchKind.EXCHANGE_RATE, None)
        self._notify(FetchKind.EXCHANGE_RATE)

    def _notify(self, kind: FetchKind) -> None:
        for listener in list(self._listeners):
            try:
                listener(kind)
            except Exception:
                _logger.debug("Listener failed for %s update", kind, exc_info=True)
