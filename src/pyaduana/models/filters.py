"""Vehicle list filter state."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from pyaduana._constants import DEFAULT_FILTER_PARAMS


class VehicleFilters(BaseModel):
    """Three free-text predicates, combined conjunctively by the service.

    Values are kept exactly as typed; only blank values are dropped from
    the query.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    brand: str = ""
    model: str = ""
    year: str = ""

    @field_validator("brand", "model", "year", mode="before")
    @classmethod
    def _coerce_str(cls, value: Any) -> str:
        if value is None:
            return ""
        return str(value)

    @property
    def is_empty(self) -> bool:
        return not self.to_query()

    def to_query(self, param_names: tuple[str, str, str] = DEFAULT_FILTER_PARAMS) -> dict[str, str]:
        """Build query parameters, omitting blank fields."""
        values = (self.brand, self.model, self.year)
        return {name: value for name, value in zip(param_names, values, strict=True) if value.strip()}
