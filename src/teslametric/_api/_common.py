"""Shared helpers for Tesla owner API endpoint modules.

It is internal to teslametric and may change at any time.
"""

from __future__ import annotations

from typing import Any

from teslametric.config import TeslaMetricConfig
from teslametric.exceptions import TeslaMetricApiError


def build_tesla_headers(config: TeslaMetricConfig) -> dict[str, str]:
    """Headers sent with every Tesla owner API request."""
    return {
        "User-Agent": config.user_agent,
        "Content-Type": "application/json",
        "Authorization": f"Bearer {config.tesla_auth_token}",
    }


def unwrap_response(body: dict[str, Any], *, endpoint: str) -> dict[str, Any]:
    """Return the ``response`` object every Tesla owner API reply is wrapped in."""
    response = body.get("response")
    if not isinstance(response, dict):
        error = body.get("error")
        detail = f": {error}" if error else ""
        raise TeslaMetricApiError(
            f"Missing 'response' object from {endpoint}{detail}",
            endpoint=endpoint,
        )
    return response
