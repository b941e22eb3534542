"""Shared helpers for endpoint modules.

It is internal to pyaduana and may change at any time.
"""

from __future__ import annotations

from typing import Any

from pyaduana.exceptions import AduanaApiError, AduanaPayloadError


def require_success(body: Any, *, endpoint: str) -> dict[str, Any]:
    """Return *body* if it is an object with a truthy ``success`` flag.

    Raises
    ------
    AduanaPayloadError
        If the body is not a JSON object.
    AduanaApiError
        If ``success`` is missing or false.
    """
    if not isinstance(body, dict):
        raise AduanaPayloadError(
            f"{endpoint} returned {type(body).__name__}, expected an object",
            endpoint=endpoint,
        )
    if not body.get("success"):
        message = body.get("message") or body.get("error") or ""
        suffix = f": {message}" if message else ""
        raise AduanaApiError(f"{endpoint} returned success=false{suffix}", endpoint=endpoint)
    return body
