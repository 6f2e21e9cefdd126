"""Helpers for safe debug logging.

Telemetry payloads can carry rider/driver personal data and auth material
alongside the position fields.  Rejected payloads pass through
:func:`redact_for_log` before they reach DEBUG logs.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

_SENSITIVE_KEYS: frozenset[str] = frozenset(
    {
        "token",
        "accesstoken",
        "refreshtoken",
        "idtoken",
        "authorization",
        "email",
        "phone",
        "phonenumber",
        "fullname",
    }
)


def _is_sensitive(key: str) -> bool:
    return key.lower().replace("_", "") in _SENSITIVE_KEYS


def redact_for_log(payload: Any, *, max_string: int = 256) -> Any:
    """Return a copy of a telemetry *payload* safe to log.

    Sensitive keys are masked at any nesting level and long strings are
    cut to *max_string* characters.  Telemetry payloads are JSON-shaped, so
    anything that is not a mapping, list or string is returned as is.
    """
    if isinstance(payload, Mapping):
        return {
            str(key): "<redacted>" if _is_sensitive(str(key)) else redact_for_log(value, max_string=max_string)
            for key, value in payload.items()
        }
    if isinstance(payload, list):
        return [redact_for_log(item, max_string=max_string) for item in payload]
    if isinstance(payload, str) and len(payload) > max_string:
        return f"{payload[:max_string]}…<truncated>"
    return payload
