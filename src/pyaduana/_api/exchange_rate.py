"""Exchange rate endpoint: ``GET /exchange-rate``."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from pyaduana._api._common import require_success
from pyaduana._constants import EXCHANGE_RATE_ENDPOINT
from pyaduana._transport import Transport
from pyaduana.exceptions import AduanaPayloadError
from pyaduana.models.exchange_rate import ExchangeRate


def parse_exchange_rate(body: Any) -> Decimal:
    """Parse a ``{success, rate}`` body into a positive rate.

    Raises
    ------
    AduanaApiError
        If ``success`` is false.
    AduanaPayloadError
        If ``rate`` is missing, not numeric, zero or negative.
    """
    result = ExchangeRate.model_validate(require_success(body, endpoint=EXCHANGE_RATE_ENDPOINT))
    if not result.usable or result.rate is None:
        raise AduanaPayloadError(
            f"{EXCHANGE_RATE_ENDPOINT} returned no valid rate: {result.raw.get('rate')!r}",
            endpoint=EXCHANGE_RATE_ENDPOINT,
        )
    return result.rate


async def fetch_exchange_rate(transport: Transport) -> Decimal:
    """Fetch the current local-currency-per-USD rate."""
    body = await transport.get_json(EXCHANGE_RATE_ENDPOINT)
    return parse_exchange_rate(body)
