"""Internal constants shared across the library."""

from decimal import Decimal

BASE_URL = "http://localhost:3000"
USER_AGENT = "pyaduana"
LOCAL_CURRENCY = "DOP"
DEFAULT_REQUEST_TIMEOUT = 10.0

VEHICLES_ENDPOINT = "/vehicles"
EXCHANGE_RATE_ENDPOINT = "/exchange-rate"

# Query parameter names for (brand, model, year) filters.
DEFAULT_FILTER_PARAMS: tuple[str, str, str] = ("brand", "model", "year")

# ------------------------------------------------------------------
# Import tax rates (fraction of the declared USD value)
# ------------------------------------------------------------------

PLATE_RATE = Decimal("0.17")
CO2_RATE = Decimal("0.03")
ITBIS_RATE = Decimal("0.18")
TARIFF_RATE = Decimal("0.20")
STICKER_FEE = Decimal("3000")

CENT = Decimal("0.01")
MAX_AMOUNT = Decimal("1e30")
"""Largest magnitude accepted for wire amounts, rates and declared values."""

RATE_UNAVAILABLE_TEXT = "Exchange rate unavailable"
