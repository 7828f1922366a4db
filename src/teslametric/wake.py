"""Bounded wake loop for a sleeping vehicle."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable

from teslametric.client import TeslaClient
from teslametric.models.wake import VehicleState, WakeOutcome, WakeResult

_logger = logging.getLogger(__name__)


class WakeController:
    """Drive the vehicle to ``online`` with fixed-backoff retries.

    Each attempt sends one wake request. An ``online`` reply ends the loop
    at once; any other state waits ``backoff`` seconds and tries again,
    until ``max_attempts`` requests have been sent. Running out of
    attempts is a normal outcome (:attr:`WakeOutcome.GAVE_UP`), not an
    error. Transport and parse failures propagate unchanged.

    Parameters
    ----------
    client : TeslaClient
        Open client used for the wake requests.
    max_attempts : int
        Upper bound on wake requests per call to :meth:`wake`.
    backoff : float
        Seconds between attempts. Constant; no exponential growth.
    sleep : callable
        Awaitable sleep, ``asyncio.sleep`` unless a test replaces it.
    """

    def __init__(
        self,
        client: TeslaClient,
        *,
        max_attempts: int,
        backoff: float,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1, got {max_attempts}")
        self._client = client
        self._max_attempts = max_attempts
        self._backoff = backoff
        self._sleep = sleep

    @classmethod
    def from_client(cls, client: TeslaClient) -> WakeController:
        """Build a controller with the bounds from the client's configuration."""
        config = client.config
        return cls(client, max_attempts=config.wake_max_attempts, backoff=config.wake_backoff)

    async def wake(self) -> WakeResult:
        state = VehicleState.UNKNOWN
        for attempt in range(1, self._max_attempts + 1):
            _logger.info("Waking vehicle (attempt %d/%d)", attempt, self._max_attempts)
            state = await self._client.wake_up()
            if state is VehicleState.ONLINE:
                _logger.info("Vehicle is online after %d attempt(s)", attempt)
                return WakeResult(outcome=WakeOutcome.ONLINE, attempts=attempt, last_state=state)

            if attempt < self._max_attempts:
                _logger.info("Vehicle is still %s, retrying in %.0fs", state.value, self._backoff)
                await self._sleep(self._backoff)

        _logger.info(
            "Vehicle did not wake up after %d attempts (last state %s); waiting for next run",
            self._max_attempts,
            state.value,
        )
        return WakeResult(outcome=WakeOutcome.GAVE_UP, attempts=self._max_attempts, last_state=state)
