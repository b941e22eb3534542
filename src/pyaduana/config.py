"""Client configuration for pyaduana."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pyaduana._constants import (
    BASE_URL,
    DEFAULT_FILTER_PARAMS,
    DEFAULT_REQUEST_TIMEOUT,
    LOCAL_CURRENCY,
    USER_AGENT,
)
from pyaduana.exceptions import AduanaConfigError


def _env_float(name: str, value: str) -> float:
    try:
        return float(value)
    except ValueError as exc:
        raise AduanaConfigError(f"{name} must be a number, got {value!r}") from exc


def _parse_filter_params(value: str) -> tuple[str, str, str]:
    names = tuple(part.strip() for part in value.split(","))
    if len(names) != 3 or not all(names):
        raise AduanaConfigError(f"ADUANA_FILTER_PARAMS must name exactly three parameters, got {value!r}")
    return names  # type: ignore[return-value]


@dataclasses.dataclass(frozen=True)
class AduanaConfig:
    """Client configuration.

    Parameters
    ----------
    base_url : str
        Inventory service base URL, without trailing slash.
    request_timeout : float
        Total timeout in seconds for a single request.  ``0`` disables it.
    local_currency : str
        ISO code of the currency prices are converted to.
    filter_params : tuple[str, str, str]
        Query parameter names used for the brand, model and year filters.
    user_agent : str
        User-Agent header sent with every request.
    """

    base_url: str = BASE_URL
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    local_currency: str = LOCAL_CURRENCY
    filter_params: tuple[str, str, str] = DEFAULT_FILTER_PARAMS
    user_agent: str = USER_AGENT

    def __post_init__(self) -> None:
        if not self.base_url:
            raise AduanaConfigError("base_url must be non-empty")
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))
        if self.request_timeout < 0:
            raise AduanaConfigError(f"request_timeout must be >= 0, got {self.request_timeout}")
        currency = self.local_currency.strip().upper()
        if len(currency) != 3 or not currency.isalpha():
            raise AduanaConfigError(f"local_currency must be a 3-letter code, got {self.local_currency!r}")
        object.__setattr__(self, "local_currency", currency)
        if len(self.filter_params) != 3 or not all(self.filter_params):
            raise AduanaConfigError("filter_params must name exactly three parameters")

    @classmethod
    def from_env(cls, **overrides: Any) -> AduanaConfig:
        """Create configuration from ``ADUANA_*`` environment variables.

        Explicit keyword arguments override environment values.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        _ENV_STR_MAP = {
            "ADUANA_BASE_URL": "base_url",
            "ADUANA_LOCAL_CURRENCY": "local_currency",
            "ADUANA_USER_AGENT": "user_agent",
        }
        for env_key, field_name in _ENV_STR_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        timeout_env = env.get("ADUANA_REQUEST_TIMEOUT")
        if timeout_env is not None and "request_timeout" not in overrides:
            config_kwargs["request_timeout"] = _env_float("ADUANA_REQUEST_TIMEOUT", timeout_env)

        params_env = env.get("ADUANA_FILTER_PARAMS")
        if params_env is not None and "filter_params" not in overrides:
            config_kwargs["filter_params"] = _parse_filter_params(params_env)

        config_kwargs.update(overrides)
        return cls(**config_kwargs)
