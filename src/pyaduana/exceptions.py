"""Custom exception hierarchy for pyaduana."""

from __future__ import annotations


class AduanaError(Exception):
    """Base exception for all pyaduana errors."""


class AduanaConfigError(AduanaError):
    """Invalid or missing configuration."""


class AduanaTransportError(AduanaError):
    """HTTP-level failure (network, timeout, non-200, invalid JSON)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        endpoint: str = "",
    ) -> None:
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(message)


class AduanaApiError(AduanaError):
    """Service answered with ``success: false``."""

    def __init__(self, message: str, *, endpoint: str = "") -> None:
        self.endpoint = endpoint
        super().__init__(message)


class AduanaPayloadError(AduanaApiError):
    """Service answered successfully but the payload has the wrong shape.

    Examples: ``data`` is not a list, a row is not an object, or the
    exchange-rate body carries no numeric ``rate``.
    """


class InvalidDeclaredValueError(AduanaError, ValueError):
    """Declared value cannot be used as a tax base (negative, NaN, non-numeric)."""
