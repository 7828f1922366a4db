"""High-level async client for the Tesla owner API."""

from __future__ import annotations

import logging
from typing import Any

import aiohttp

from teslametric._api.charge_state import fetch_charge_state
from teslametric._api.wake import request_wake
from teslametric._transport import HttpTransport, Transport
from teslametric.config import TeslaMetricConfig
from teslametric.exceptions import TeslaMetricError
from teslametric.models.charge import ChargeTelemetry
from teslametric.models.wake import VehicleState

_logger = logging.getLogger(__name__)


class TeslaClient:
    """Async client for the single vehicle named in the configuration.

    Usage::

        async with TeslaClient(config) as client:
            state = await client.wake_up()
            if state is VehicleState.ONLINE:
                telemetry = await client.get_charge_state()

    An existing ``aiohttp.ClientSession`` may be passed in and is then left
    open on exit. A ready-made ``transport`` bypasses HTTP entirely.
    """

    def __init__(
        self,
        config: TeslaMetricConfig,
        *,
        session: aiohttp.ClientSession | None = None,
        transport: Transport | None = None,
    ) -> None:
        self._config = config
        self._external_session = session is not None
        self._http_session = session
        self._transport: Transport | None = transport
        self._external_transport = transport is not None

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> TeslaClient:
        if self._external_transport:
            return self
        if self._http_session is None:
            self._http_session = aiohttp.ClientSession()
        self._transport = HttpTransport(self._http_session, timeout=self._config.http_timeout)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if self._external_transport:
            return
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
        self._transport = None

    @property
    def config(self) -> TeslaMetricConfig:
        return self._config

    @property
    def transport(self) -> Transport:
        """Transport of the open client, shared with the display publisher."""
        return self._require_transport()

    def _require_transport(self) -> Transport:
        if self._transport is None:
            raise TeslaMetricError("Client not initialized. Use 'async with TeslaClient(...) as client:'")
        return self._transport

    # ------------------------------------------------------------------
    # Endpoints
    # ------------------------------------------------------------------

    async def wake_up(self) -> VehicleState:
        """Send one wake request and return the reported vehicle state."""
        return await request_wake(self._config, self._require_transport())

    async def get_charge_state(self) -> ChargeTelemetry:
        """Fetch the charge snapshot. Only meaningful once the vehicle is online."""
        telemetry = await fetch_charge_state(self._config, self._require_transport())
        _logger.info(
            "Charge state fetched: battery=%s%% range=%s mi rate=%s",
            telemetry.battery_level,
            telemetry.battery_range,
            telemetry.charge_rate,
        )
        return telemetry
