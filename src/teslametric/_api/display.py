"""LaMetric indicator app update endpoint.

Endpoint:
  - POST {lametric_api_base}/com.lametric.{app id}

The endpoint has no acknowledgement protocol: a 2xx status only means the
update was accepted, not that the device rendered it.
"""

from __future__ import annotations

from teslametric._transport import Transport
from teslametric.config import TeslaMetricConfig
from teslametric.models.display import DisplayPayload


def build_lametric_headers(config: TeslaMetricConfig) -> dict[str, str]:
    return {
        "Content-Type": "application/json",
        "X-Access-Token": config.lametric_auth_token,
        "Cache-Control": "no-cache",
    }


async def push_frames(config: TeslaMetricConfig, transport: Transport, payload: DisplayPayload) -> None:
    """POST *payload* to the configured indicator app."""
    await transport.request(
        "POST",
        config.lametric_url,
        headers=build_lametric_headers(config),
        json_body=payload.to_request_body(),
    )
