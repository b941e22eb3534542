"""Vehicle list endpoint: ``GET /vehicles``."""

from __future__ import annotations

import hashlib
from typing import Any

from pydantic import ValidationError

from pyaduana._api._common import require_success
from pyaduana._constants import VEHICLES_ENDPOINT
from pyaduana._transport import Transport
from pyaduana.config import AduanaConfig
from pyaduana.exceptions import AduanaPayloadError
from pyaduana.models.filters import VehicleFilters
from pyaduana.models.vehicle import Vehicle

# Backend identifier fields, in order of preference.
_ID_FIELDS: tuple[str, ...] = ("id", "_id", "Id", "ID")

# Fields assigned by the parser, never taken from the payload.
_RESERVED_FIELDS: frozenset[str] = frozenset({"key", "index", "raw"})


def _fingerprint(vehicle: Vehicle) -> str:
    parts = (
        vehicle.brand,
        vehicle.model,
        "" if vehicle.year is None else str(vehicle.year),
        "" if vehicle.value is None else str(vehicle.value.normalize()),
        vehicle.country,
        vehicle.specifications,
    )
    return hashlib.sha1("\x1f".join(parts).encode("utf-8")).hexdigest()[:12]


def _base_key(item: dict[str, Any], vehicle: Vehicle) -> str:
    for field_name in _ID_FIELDS:
        value = item.get(field_name)
        if value not in (None, ""):
            return str(value)
    return _fingerprint(vehicle)


def build_vehicle_query(config: AduanaConfig, filters: VehicleFilters) -> dict[str, str]:
    """Query parameters for the list request (blank filters omitted)."""
    return filters.to_query(config.filter_params)


def parse_vehicle_list(body: Any) -> list[Vehicle]:
    """Parse a ``{success, data: [...]}`` body into vehicles.

    Each vehicle gets a ``key`` that does not depend on its position: the
    backend id when present, otherwise a fingerprint of its fields.  Exact
    duplicates are told apart by an occurrence suffix (``~1``, ``~2``...).

    Raises
    ------
    AduanaApiError
        If ``success`` is false.
    AduanaPayloadError
        If ``data`` is not a list or contains non-object rows.
    """
    result = require_success(body, endpoint=VEHICLES_ENDPOINT)
    data = result.get("data")
    if data is None:
        return []
    if not isinstance(data, list):
        raise AduanaPayloadError(
            f"{VEHICLES_ENDPOINT} 'data' is {type(data).__name__}, expected a list",
            endpoint=VEHICLES_ENDPOINT,
        )

    seen: dict[str, int] = {}
    vehicles: list[Vehicle] = []
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise AduanaPayloadError(
                f"{VEHICLES_ENDPOINT} row {index} is {type(item).__name__}, expected an object",
                endpoint=VEHICLES_ENDPOINT,
            )
        row = {name: value for name, value in item.items() if name not in _RESERVED_FIELDS}
        try:
            vehicle = Vehicle.model_validate({**row, "raw": item})
        except ValidationError as exc:
            raise AduanaPayloadError(
                f"{VEHICLES_ENDPOINT} row {index} is invalid: {exc}",
                endpoint=VEHICLES_ENDPOINT,
            ) from exc
        base = _base_key(item, vehicle)
        occurrence = seen.get(base, 0)
        seen[base] = occurrence + 1
        key = base if occurrence == 0 else f"{base}~{occurrence}"
        vehicles.append(vehicle.model_copy(update={"key": key, "index": index}))
    return vehicles


async def fetch_vehicle_list(
    config: AduanaConfig,
    transport: Transport,
    filters: VehicleFilters,
) -> list[Vehicle]:
    """Fetch and parse the vehicle list for *filters*."""
    body = await transport.get_json(VEHICLES_ENDPOINT, build_vehicle_query(config, filters))
    return parse_vehicle_list(body)
