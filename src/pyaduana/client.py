"""High-level async client for the vehicle inventory service."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any

import aiohttp

from pyaduana._api.exchange_rate import fetch_exchange_rate
from pyaduana._api.vehicles import fetch_vehicle_list
from pyaduana._transport import HttpTransport, Transport
from pyaduana.config import AduanaConfig
from pyaduana.exceptions import AduanaError
from pyaduana.models.filters import VehicleFilters
from pyaduana.models.vehicle import Vehicle

_logger = logging.getLogger(__name__)


class AduanaClient:
    """Async client for the vehicle inventory service.

    Usage::

        async with AduanaClient(config) as client:
            vehicles = await client.get_vehicles(VehicleFilters(brand="Toyota"))
            rate = await client.get_exchange_rate()

    A custom *transport* bypasses aiohttp entirely (useful for tests).
    """

    def __init__(
        self,
        config: AduanaConfig | None = None,
        *,
        session: aiohttp.ClientSession | None = None,
        transport: Transport | None = None,
    ) -> None:
        self._config = config or AduanaConfig()
        self._external_session = session is not None
        self._http_session = session
        self._transport: Transport | None = transport
        self._owns_transport = transport is None

    @property
    def config(self) -> AduanaConfig:
        return self._config

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> AduanaClient:
        if self._owns_transport:
            if self._http_session is None:
                self._http_session = aiohttp.ClientSession()
            self._transport = HttpTransport(self._config, self._http_session)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
        if self._owns_transport:
            self._transport = None

    def _require_transport(self) -> Transport:
        if self._transport is None:
            raise AduanaError("Client not initialized. Use 'async with AduanaClient(...) as client:'")
        return self._transport

    # ------------------------------------------------------------------
    # Read endpoints
    # ------------------------------------------------------------------

    async def get_vehicles(self, filters: VehicleFilters | None = None) -> list[Vehicle]:
        """Fetch vehicles matching *filters* (all vehicles when omitted)."""
        transport = self._require_transport()
        vehicles = await fetch_vehicle_list(self._config, transport, filters or VehicleFilters())
        _logger.debug("Fetched %d vehicles", len(vehicles))
        return vehicles

    async def get_exchange_rate(self) -> Decimal:
        """Fetch the current local-currency-per-USD exchange rate."""
        transport = self._require_transport()
        return await fetch_exchange_rate(transport)
