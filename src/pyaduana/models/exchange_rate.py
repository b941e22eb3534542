"""Exchange rate model."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from pyaduana.normalize import safe_amount


class ExchangeRate(BaseModel):
    """Body of the ``/exchange-rate`` endpoint.

    ``rate`` is expressed in local-currency units per USD.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    success: bool = False
    rate: Decimal | None = None
    raw: dict[str, Any] = Field(default_factory=dict)

    @property
    def usable(self) -> bool:
        """Whether the rate can be used for conversion."""
        return self.success and self.rate is not None and self.rate > 0

    @model_validator(mode="before")
    @classmethod
    def _ensure_raw(cls, values: Any) -> Any:
        if not isinstance(values, dict):
            return values
        merged = dict(values)
        merged.setdefault("raw", values)
        return merged

    @field_validator("success", mode="before")
    @classmethod
    def _coerce_success(cls, value: Any) -> bool:
        return bool(value)

    @field_validator("rate", mode="before")
    @classmethod
    def _coerce_rate(cls, value: Any) -> Decimal | None:
        return safe_amount(value)
