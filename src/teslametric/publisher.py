"""Fire-and-forget push of display payloads to LaMetric."""

from __future__ import annotations

import asyncio
import logging

from teslametric._api.display import push_frames
from teslametric._transport import Transport
from teslametric.config import TeslaMetricConfig
from teslametric.exceptions import TeslaMetricTransportError
from teslametric.models.display import DisplayPayload

_logger = logging.getLogger(__name__)


class DisplayPublisher:
    """Push payloads to the indicator app without waiting for the result.

    :meth:`publish` schedules the POST as a task and returns immediately.
    The caller's correctness never depends on the push completing: a
    transport failure is logged and dropped, and nothing is retried.
    Tasks are referenced until done so they are not garbage collected
    mid-flight; :meth:`drain` waits for them before the HTTP session
    closes.
    """

    def __init__(self, config: TeslaMetricConfig, transport: Transport) -> None:
        self._config = config
        self._transport = transport
        self._pending: set[asyncio.Task[None]] = set()

    @property
    def pending(self) -> int:
        return len(self._pending)

    def publish(self, payload: DisplayPayload) -> asyncio.Task[None]:
        """Schedule *payload* for delivery and return the delivery task."""
        task = asyncio.get_running_loop().create_task(self._push(payload), name="teslametric-publish")
        self._pending.add(task)
        task.add_done_callback(self._on_done)
        return task

    async def drain(self) -> None:
        """Wait for every scheduled push to finish."""
        if self._pending:
            await asyncio.gather(*self._pending, return_exceptions=True)

    async def _push(self, payload: DisplayPayload) -> None:
        try:
            await push_frames(self._config, self._transport, payload)
        except TeslaMetricTransportError as exc:
            _logger.warning("Display update failed: %s", exc)
            return
        _logger.info("Display update sent (%d frames): %s", len(payload.frames), " | ".join(payload.texts))

    def _on_done(self, task: asyncio.Task[None]) -> None:
        self._pending.discard(task)
        if task.cancelled():
            _logger.debug("Display update cancelled")
            return
        exc = task.exception()
        if exc is not None:
            _logger.error("Display update crashed", exc_info=exc)
