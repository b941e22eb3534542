"""Row selection over the current vehicle snapshot."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from pyaduana.models.vehicle import Vehicle

_logger = logging.getLogger(__name__)


class SelectionTracker:
    """Tracks selected row keys and derives the selected vehicles.

    Selected vehicles are always read from the current snapshot, never
    cached, so a re-fetch cannot leave stale records selected.
    """

    def __init__(self, vehicles: Iterable[Vehicle] = ()) -> None:
        self._rows: tuple[Vehicle, ...] = tuple(vehicles)
        self._keys: set[str] = set()

    @property
    def rows(self) -> tuple[Vehicle, ...]:
        return self._rows

    @property
    def selected_keys(self) -> frozenset[str]:
        return frozenset(self._keys)

    @property
    def selected_vehicles(self) -> list[Vehicle]:
        """Selected vehicles in snapshot order."""
        return [vehicle for vehicle in self._rows if vehicle.key in self._keys]

    @property
    def count(self) -> int:
        return len(self._keys)

    def _known_keys(self) -> set[str]:
        return {vehicle.key for vehicle in self._rows}

    def select(self, keys: Iterable[str]) -> None:
        """Replace the selection with *keys*; keys not in the snapshot are ignored."""
        requested = set(keys)
        known = self._known_keys()
        ignored = requested - known
        if ignored:
            _logger.debug("Ignoring unknown row keys: %s", sorted(ignored))
        self._keys = requested & known

    def toggle(self, key: str) -> bool:
        """Flip *key*'s selection and return whether it is now selected."""
        if key in self._keys:
            self._keys.discard(key)
            return False
        if key not in self._known_keys():
            _logger.debug("Ignoring unknown row key: %s", key)
            return False
        self._keys.add(key)
        return True

    def select_all(self) -> None:
        self._keys = self._known_keys()

    def clear(self) -> None:
        self._keys.clear()

    def update_rows(self, vehicles: Iterable[Vehicle]) -> None:
        """Swap in a new snapshot, keeping only selections that still exist."""
        self._rows = tuple(vehicles)
        known = self._known_keys()
        dropped = self._keys - known
        if dropped:
            _logger.debug("Dropping %d selected rows no longer present", len(dropped))
        self._keys &= known
