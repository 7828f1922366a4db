"""Token masking for DEBUG request logs.

Tesla requests carry ``Authorization: Bearer ...`` and LaMetric requests
carry ``X-Access-Token``. Both are masked before headers or JSON bodies
reach the log.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

REDACTED = "<redacted>"

_SENSITIVE_KEYS: frozenset[str] = frozenset(
    {
        "authorization",
        "x-access-token",
        "access_token",
        "refresh_token",
        "token",
    }
)


def redact_for_log(value: Any) -> Any:
    """Return *value* with sensitive header and token keys masked.

    Mappings and lists are copied recursively; anything else is returned as is.
    """
    if isinstance(value, Mapping):
        return {
            key: REDACTED if str(key).lower() in _SENSITIVE_KEYS else redact_for_log(item)
            for key, item in value.items()
        }
    if isinstance(value, (list, tuple)):
        return [redact_for_log(item) for item in value]
    return value
