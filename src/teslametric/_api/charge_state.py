"""Charge-state endpoint.

Endpoint:
  - GET /vehicles/{id}/data_request/charge_state
"""

from __future__ import annotations

import logging

from pydantic import ValidationError

from teslametric._api._common import build_tesla_headers, unwrap_response
from teslametric._redact import redact_for_log
from teslametric._transport import Transport
from teslametric.config import TeslaMetricConfig
from teslametric.exceptions import TeslaMetricApiError
from teslametric.models.charge import ChargeTelemetry

_logger = logging.getLogger(__name__)

_ENDPOINT = "/data_request/charge_state"


async def fetch_charge_state(config: TeslaMetricConfig, transport: Transport) -> ChargeTelemetry:
    """Fetch the charge snapshot of an online vehicle."""
    body = await transport.request_json(
        "GET",
        f"{config.vehicle_url}{_ENDPOINT}",
        headers=build_tesla_headers(config),
    )
    data = unwrap_response(body, endpoint=_ENDPOINT)
    _logger.debug("Charge state decoded: %s", redact_for_log(data))

    try:
        return ChargeTelemetry.model_validate(data)
    except ValidationError as exc:
        raise TeslaMetricApiError(
            f"Malformed {_ENDPOINT} response: {exc.error_count()} invalid field(s)",
            endpoint=_ENDPOINT,
        ) from exc
