"""One scheduled run: wake, fetch, format, publish."""

from __future__ import annotations

import asyncio
import enum
import logging

from teslametric.client import TeslaClient
from teslametric.formatter import format_telemetry
from teslametric.publisher import DisplayPublisher
from teslametric.wake import WakeController

_logger = logging.getLogger(__name__)


class RunOutcome(enum.Enum):
    """How a single run ended."""

    PUBLISHED = "published"
    """Telemetry was formatted and the push was scheduled."""
    GAVE_UP = "gave_up"
    """The vehicle never came online; nothing was fetched or pushed."""
    SKIPPED = "skipped"
    """A previous run was still in flight."""


class RunOrchestrator:
    """Sequence the components for one trigger.

    Runs never overlap: a trigger arriving while a previous run is still
    inside its wake loop is skipped rather than queued. Wake and fetch
    errors propagate to the caller; publish errors never do.
    """

    def __init__(
        self,
        client: TeslaClient,
        publisher: DisplayPublisher,
        *,
        wake_controller: WakeController | None = None,
    ) -> None:
        self._client = client
        self._publisher = publisher
        self._wake_controller = wake_controller or WakeController.from_client(client)
        self._lock = asyncio.Lock()

    @property
    def in_flight(self) -> bool:
        return self._lock.locked()

    async def run(self) -> RunOutcome:
        if self._lock.locked():
            _logger.warning("Previous run still in progress, skipping this trigger")
            return RunOutcome.SKIPPED

        async with self._lock:
            result = await self._wake_controller.wake()
            if not result.is_online:
                return RunOutcome.GAVE_UP

            config = self._client.config
            telemetry = await self._client.get_charge_state()
            payload = format_telemetry(telemetry, config.formatter_policy, label=config.vehicle_label)
            _logger.debug("Constructed payload: %s", payload.to_request_body())
            self._publisher.publish(payload)
            return RunOutcome.PUBLISHED
