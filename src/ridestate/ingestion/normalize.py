"""Normalization helpers.

Centralizes defensive parsing and placeholder handling for telemetry
payloads.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

# Placeholder strings some producers send for "not available".
_PLACEHOLDERS = frozenset({"", "--", "NaN", "nan", "null"})


def safe_float(value: Any) -> float | None:
    # bool is an int subclass; a True latitude is never meaningful.
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str) and value.strip() in _PLACEHOLDERS:
        return None
    try:
        result = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(result):
        return None
    return result


def safe_str(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    if not text or text in _PLACEHOLDERS:
        return None
    return text


def first_present(data: Mapping[str, Any], keys: tuple[str, ...]) -> Any:
    """Return the value of the first key in *keys* present in *data*."""
    for key in keys:
        if key in data:
            return data[key]
    return None


def opaque_id(value: Any) -> str | None:
    """Return *value* as an identifier string, unchanged, or ``None``.

    Identifiers are compared exactly as sent: no stripping and no
    placeholder filtering.  Only strings and integers are accepted, and a
    string must contain at least one non-whitespace character.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str) and value.strip():
        return value
    return None
