"""HTTP transport for the inventory service."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, Protocol

import aiohttp

from pyaduana.config import AduanaConfig
from pyaduana.exceptions import AduanaTransportError

_logger = logging.getLogger(__name__)


def _preview(body: bytes) -> str:
    return body[:200].decode("utf-8", errors="replace")


class Transport(Protocol):
    """Structural transport interface used by endpoint modules.

    Tests pass plain objects implementing ``get_json``; production code
    uses :class:`HttpTransport`.
    """

    async def get_json(self, endpoint: str, params: Mapping[str, str] | None = None) -> Any:
        ...


class HttpTransport:
    """JSON-over-HTTP transport backed by an :class:`aiohttp.ClientSession`."""

    def __init__(self, config: AduanaConfig, http_session: aiohttp.ClientSession) -> None:
        self._config = config
        self._http = http_session
        self._timeout = aiohttp.ClientTimeout(total=config.request_timeout or None)

    async def get_json(self, endpoint: str, params: Mapping[str, str] | None = None) -> Any:
        """GET ``base_url + endpoint`` and return the decoded JSON body."""
        url = f"{self._config.base_url}{endpoint}"
        headers: dict[str, str] = {
            "accept": "application/json",
            "user-agent": self._config.user_agent,
        }
        query = dict(params or {})

        _logger.debug("GET %s params=%s", url, query)

        try:
            async with self._http.get(url, params=query, headers=headers, timeout=self._timeout) as resp:
                body = await resp.read()
                if resp.status != 200:
                    raise AduanaTransportError(
                        f"HTTP {resp.status} from {endpoint}: {_preview(body)}",
                        status_code=resp.status,
                        endpoint=endpoint,
                    )
        except AduanaTransportError:
            raise
        except TimeoutError as exc:
            raise AduanaTransportError(
                f"Request to {endpoint} timed out after {self._config.request_timeout}s",
                endpoint=endpoint,
            ) from exc
        except aiohttp.ClientError as exc:
            raise AduanaTransportError(
                f"Request to {endpoint} failed: {exc}",
                endpoint=endpoint,
            ) from exc

        try:
            return json.loads(body.decode("utf-8"))
        except UnicodeDecodeError as exc:
            raise AduanaTransportError(
                f"Invalid UTF-8 body from {endpoint}: {_preview(body)}",
                endpoint=endpoint,
            ) from exc
        except json.JSONDecodeError as exc:
            raise AduanaTransportError(
                f"Invalid JSON from {endpoint}: {_preview(body)}",
                endpoint=endpoint,
            ) from exc
