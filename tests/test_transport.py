from __future__ import annotations

import asyncio
from decimal import Decimal

import aiohttp
import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from pyaduana._transport import HttpTransport
from pyaduana.client import AduanaClient
from pyaduana.config import AduanaConfig
from pyaduana.exceptions import AduanaError, AduanaTransportError
from pyaduana.models.filters import VehicleFilters


def _config(server: TestServer, **overrides: object) -> AduanaConfig:
    return AduanaConfig(base_url=str(server.make_url("/")), **overrides)  # type: ignore[arg-type]


def _app(received: list[dict[str, str]]) -> web.Application:
    async def vehicles(request: web.Request) -> web.Response:
        received.append(dict(request.query))
        return web.json_response(
            {
                "success": True,
                "data": [
                    {
                        "Marca": "Toyota",
                        "Modelo": "Corolla",
                        "Año": 2020,
                        "Valor": "20000",
                        "Pais": "USA",
                        "Especificaciones": "1.8L",
                    }
                ],
            }
        )

    async def exchange_rate(_request: web.Request) -> web.Response:
        return web.json_response({"success": True, "rate": 58.5})

    async def broken(_request: web.Request) -> web.Response:
        return web.Response(status=500, text="internal error")

    async def not_json(_request: web.Request) -> web.Response:
        return web.Response(text="<html>maintenance</html>")

    async def bad_utf8(_request: web.Request) -> web.Response:
        return web.Response(body=b'{"success": true, "data": ["\xff"]}', content_type="application/json")

    async def slow(_request: web.Request) -> web.Response:
        await asyncio.sleep(0.5)
        return web.json_response({"success": True})

    app = web.Application()
    app.router.add_get("/vehicles", vehicles)
    app.router.add_get("/exchange-rate", exchange_rate)
    app.router.add_get("/broken", broken)
    app.router.add_get("/not-json", not_json)
    app.router.add_get("/bad-utf8", bad_utf8)
    app.router.add_get("/slow", slow)
    return app


@pytest.mark.asyncio
async def test_client_over_http() -> None:
    received: list[dict[str, str]] = []
    async with TestServer(_app(received)) as server:
        async with AduanaClient(_config(server)) as client:
            vehicles = await client.get_vehicles(VehicleFilters(brand="Toyota", year=""))
            rate = await client.get_exchange_rate()

    assert received == [{"brand": "Toyota"}]
    assert [v.model for v in vehicles] == ["Corolla"]
    assert vehicles[0].value == Decimal("20000")
    assert rate == Decimal("58.5")


@pytest.mark.asyncio
async def test_non_200_raises_transport_error() -> None:
    async with TestServer(_app([])) as server:
        async with aiohttp.ClientSession() as http:
            transport = HttpTransport(_config(server), http)
            with pytest.raises(AduanaTransportError) as exc_info:
                await transport.get_json("/broken")

    assert exc_info.value.status_code == 500
    assert exc_info.value.endpoint == "/broken"


@pytest.mark.asyncio
async def test_invalid_json_raises_transport_error() -> None:
    async with TestServer(_app([])) as server:
        async with aiohttp.ClientSession() as http:
            transport = HttpTransport(_config(server), http)
            with pytest.raises(AduanaTransportError, match="Invalid JSON"):
                await transport.get_json("/not-json")


@pytest.mark.asyncio
async def test_invalid_utf8_raises_transport_error() -> None:
    async with TestServer(_app([])) as server:
        async with aiohttp.ClientSession() as http:
            transport = HttpTransport(_config(server), http)
            with pytest.raises(AduanaTransportError, match="UTF-8") as exc_info:
                await transport.get_json("/bad-utf8")

    assert exc_info.value.endpoint == "/bad-utf8"


@pytest.mark.asyncio
async def test_timeout_raises_transport_error() -> None:
    async with TestServer(_app([])) as server:
        async with aiohttp.ClientSession() as http:
            transport = HttpTransport(_config(server, request_timeout=0.05), http)
            with pytest.raises(AduanaTransportError):
                await transport.get_json("/slow")


@pytest.mark.asyncio
async def test_external_session_is_not_closed() -> None:
    async with TestServer(_app([])) as server:
        async with aiohttp.ClientSession() as http:
            async with AduanaClient(_config(server), session=http) as client:
                await client.get_exchange_rate()
            assert not http.closed


@pytest.mark.asyncio
async def test_client_requires_context_manager() -> None:
    client = AduanaClient()

    with pytest.raises(AduanaError, match="not initialized"):
        await client.get_vehicles()
