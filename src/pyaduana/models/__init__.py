"""Data models for the inventory service and the tax calculator."""

from pyaduana.models.exchange_rate import ExchangeRate
from pyaduana.models.filters import VehicleFilters
from pyaduana.models.taxes import DEFAULT_RATES, TaxBreakdown, TaxRates
from pyaduana.models.vehicle import Vehicle

__all__ = [
    "DEFAULT_RATES",
    "ExchangeRate",
    "TaxBreakdown",
    "TaxRates",
    "Vehicle",
    "VehicleFilters",
]
