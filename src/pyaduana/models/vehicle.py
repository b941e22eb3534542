"""Vehicle model."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

from pyaduana.normalize import safe_amount, safe_int, safe_str


class Vehicle(BaseModel):
    """A vehicle row from the ``/vehicles`` inventory endpoint.

    The service sends Spanish keys (``Marca``, ``Modelo``, ``Año``,
    ``Valor``, ``Pais``, ``Especificaciones``); snake_case English
    names are accepted as well.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    key: str = ""
    """Row identifier, stable across re-fetches (see ``_api.vehicles``)."""
    index: int = 0
    """Position of the row in the snapshot it was fetched with."""
    brand: str = Field(default="", validation_alias=AliasChoices("Marca", "brand"))
    """Manufacturer (e.g. ``"Toyota"``)."""
    model: str = Field(default="", validation_alias=AliasChoices("Modelo", "model"))
    """Model name (e.g. ``"Corolla"``)."""
    year: int | None = Field(default=None, validation_alias=AliasChoices("Año", "year"))
    """Model year."""
    value: Decimal | None = Field(default=None, validation_alias=AliasChoices("Valor", "value"))
    """Declared value in USD, the tax base.  ``None`` when absent or unparseable."""
    country: str = Field(default="", validation_alias=AliasChoices("Pais", "country"))
    """Country of origin."""
    specifications: str = Field(
        default="",
        validation_alias=AliasChoices("Especificaciones", "specifications"),
    )
    """Free-text specification string."""

    raw: dict[str, Any] = Field(default_factory=dict)
    """Original row dict as received."""

    @property
    def label(self) -> str:
        """Card heading, e.g. ``"Toyota Corolla (2020) USA"``."""
        year = f" ({self.year})" if self.year is not None else ""
        country = f" {self.country}" if self.country else ""
        return f"{self.brand} {self.model}{year}{country}".strip()

    @model_validator(mode="before")
    @classmethod
    def _ensure_raw(cls, values: Any) -> Any:
        if not isinstance(values, dict):
            return values
        merged = dict(values)
        merged.setdefault("raw", values)
        return merged

    @field_validator("brand", "model", "country", "specifications", mode="before")
    @classmethod
    def _coerce_str(cls, value: Any) -> str:
        return safe_str(value)

    @field_validator("year", mode="before")
    @classmethod
    def _coerce_year(cls, value: Any) -> int | None:
        return safe_int(value)

    @field_validator("value", mode="before")
    @classmethod
    def _coerce_value(cls, value: Any) -> Decimal | None:
        return safe_amount(value)
