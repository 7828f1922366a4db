"""Wake endpoint state and wake loop outcome."""

from __future__ import annotations

import dataclasses
import enum

from teslametric.models._base import TeslaEnum


class VehicleState(TeslaEnum):
    """Vehicle state as reported by ``response.state`` of the wake endpoint."""

    UNKNOWN = "unknown"
    ASLEEP = "asleep"
    WAKING = "waking"
    ONLINE = "online"

    @classmethod
    def from_api(cls, value: str | None) -> VehicleState:
        """Map a raw API state string; ``offline`` counts as asleep."""
        if value is None:
            return cls.UNKNOWN
        if value.strip().lower() == "offline":
            return cls.ASLEEP
        return cls(value)


class WakeOutcome(enum.Enum):
    """Terminal outcome of one wake loop."""

    ONLINE = "online"
    GAVE_UP = "gave_up"


@dataclasses.dataclass(frozen=True, slots=True)
class WakeResult:
    """Result of :meth:`teslametric.wake.WakeController.wake`.

    ``attempts`` is the number of wake requests issued (1 to
    ``max_attempts``); ``last_state`` is the state seen on the final one.
    """

    outcome: WakeOutcome
    attempts: int
    last_state: VehicleState

    @property
    def is_online(self) -> bool:
        return self.outcome is WakeOutcome.ONLINE
