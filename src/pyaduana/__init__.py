"""pyaduana - Async client and import-tax calculator for a vehicle inventory service."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyaduana")
except PackageNotFoundError:
    __version__ = "0+local"
from pyaduana.client import AduanaClient
from pyaduana.config import AduanaConfig
from pyaduana.currency import (
    UNAVAILABLE,
    ConversionStatus,
    convert,
    format_currency,
    format_local_price,
    format_number,
    round_money,
)
from pyaduana.exceptions import (
    AduanaApiError,
    AduanaConfigError,
    AduanaError,
    AduanaPayloadError,
    AduanaTransportError,
    InvalidDeclaredValueError,
)
from pyaduana.models import (
    DEFAULT_RATES,
    ExchangeRate,
    TaxBreakdown,
    TaxRates,
    Vehicle,
    VehicleFilters,
)
from pyaduana.page import PageView, VehicleResult, VehicleTaxPage, build_results, render_text
from pyaduana.state.controller import FetchKind, FilterFetchController
from pyaduana.state.selection import SelectionTracker
from pyaduana.taxes import calculate_taxes, calculate_vehicle_taxes, validate_declared_value

__all__ = [
    "__version__",
    "AduanaApiError",
    "AduanaClient",
    "AduanaConfig",
    "AduanaConfigError",
    "AduanaError",
    "AduanaPayloadError",
    "AduanaTransportError",
    "ConversionStatus",
    "DEFAULT_RATES",
    "ExchangeRate",
    "FetchKind",
    "FilterFetchController",
    "InvalidDeclaredValueError",
    "PageView",
    "SelectionTracker",
    "TaxBreakdown",
    "TaxRates",
    "UNAVAILABLE",
    "Vehicle",
    "VehicleFilters",
    "VehicleResult",
    "VehicleTaxPage",
    "build_results",
    "calculate_taxes",
    "calculate_vehicle_taxes",
    "convert",
    "format_currency",
    "format_local_price",
    "format_number",
    "render_text",
    "round_money",
    "validate_declared_value",
]
