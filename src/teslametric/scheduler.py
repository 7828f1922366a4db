"""Cron-style trigger surface around :class:`RunOrchestrator`."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.cron import CronTrigger

from teslametric.client import TeslaClient
from teslametric.config import TeslaMetricConfig
from teslametric.exceptions import TeslaMetricError
from teslametric.publisher import DisplayPublisher
from teslametric.runner import RunOrchestrator, RunOutcome

_logger = logging.getLogger(__name__)

JOB_ID = "teslametric_run"


class TeslaMetricService:
    """Own the HTTP session, the components and the schedule.

    Usage::

        service = TeslaMetricService(TeslaMetricConfig.from_env())
        await service.serve(stop_event)
    """

    def __init__(
        self,
        config: TeslaMetricConfig,
        *,
        scheduler: AsyncIOScheduler | None = None,
        client: TeslaClient | None = None,
    ) -> None:
        self._config = config
        self._scheduler = scheduler
        self._client = client or TeslaClient(config)

    @asynccontextmanager
    async def _components(self) -> AsyncIterator[RunOrchestrator]:
        async with self._client as client:
            publisher = DisplayPublisher(self._config, client.transport)
            try:
                yield RunOrchestrator(client, publisher)
            finally:
                await publisher.drain()

    async def run_once(self) -> RunOutcome:
        """Run a single wake/fetch/publish cycle and wait for the push."""
        async with self._components() as orchestrator:
            return await orchestrator.run()

    async def serve(self, stop: asyncio.Event) -> None:
        """Trigger a run at each configured hour until *stop* is set."""
        async with self._components() as orchestrator:
            scheduler = self._scheduler or AsyncIOScheduler()
            hours = ",".join(str(hour) for hour in sorted(set(self._config.schedule_hours)))
            scheduler.add_job(
                self._trigger,
                CronTrigger(hour=hours, minute=0),
                args=[orchestrator],
                id=JOB_ID,
                max_instances=1,
                coalesce=True,
                replace_existing=True,
            )
            scheduler.start()
            _logger.info("Server started, waiting for scheduled run (hours %s)", hours)
            try:
                await stop.wait()
            finally:
                scheduler.shutdown(wait=False)
                _logger.info("Scheduler stopped")

    @staticmethod
    async def _trigger(orchestrator: RunOrchestrator) -> None:
        # A failed run must not take the schedule down with it.
        try:
            outcome = await orchestrator.run()
        except TeslaMetricError:
            _logger.exception("Scheduled run failed")
            return
        _logger.info("Scheduled run finished: %s", outcome.value)
