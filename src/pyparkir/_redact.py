"""Redaction for debug logs.

Every poll carries the Antares access key in the ``X-M2M-Origin``
header; request headers and decoded response bodies pass through
:func:`redact_for_log` before they reach a DEBUG record.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

_REDACTED = "<redacted>"

_SENSITIVE_KEYS: frozenset[str] = frozenset({"x-m2m-origin", "api_key", "apikey", "authorization", "token"})


def redact_for_log(value: Any, *, max_string: int = 512) -> Any:
    """Return a copy of a header dict or decoded JSON value safe to log.

    Values under credential-like keys are masked and long strings (a
    ``con`` payload, an HTML error page) are cut to *max_string*.
    """
    if isinstance(value, Mapping):
        return {
            str(key): _REDACTED if str(key).lower() in _SENSITIVE_KEYS else redact_for_log(item, max_string=max_string)
            for key, item in value.items()
        }
    if isinstance(value, list):
        return [redact_for_log(item, max_string=max_string) for item in value]
    if isinstance(value, str) and len(value) > max_string:
        return f"{value[:max_string]}…<truncated>"
    return value
