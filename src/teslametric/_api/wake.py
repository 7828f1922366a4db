"""Wake endpoint.

Endpoint:
  - POST /vehicles/{id}/wake_up
"""

from __future__ import annotations

import logging

from teslametric._api._common import build_tesla_headers, unwrap_response
from teslametric._transport import Transport
from teslametric.config import TeslaMetricConfig
from teslametric.exceptions import TeslaMetricApiError
from teslametric.models.wake import VehicleState

_logger = logging.getLogger(__name__)

_ENDPOINT = "/wake_up"


async def request_wake(config: TeslaMetricConfig, transport: Transport) -> VehicleState:
    """Ask the vehicle to wake up and return the state it reports."""
    body = await transport.request_json(
        "POST",
        f"{config.vehicle_url}{_ENDPOINT}",
        headers=build_tesla_headers(config),
    )
    response = unwrap_response(body, endpoint=_ENDPOINT)
    raw_state = response.get("state")
    if not isinstance(raw_state, str):
        raise TeslaMetricApiError(f"Missing 'state' in {_ENDPOINT} response", endpoint=_ENDPOINT)

    state = VehicleState.from_api(raw_state)
    _logger.debug("Wake response state=%r mapped=%s", raw_state, state.value)
    return state
