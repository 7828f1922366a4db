"""Charge-state telemetry model.

Mapped from the ``response`` object of
``/vehicles/{id}/data_request/charge_state``.
"""

from __future__ import annotations

import enum

from pydantic import ConfigDict, Field

from teslametric._constants import NOT_CHARGING_RATE
from teslametric.models._base import TeslaBaseModel


class ChargingRule(enum.Enum):
    """How ``is_charging`` is derived from ``charge_rate``.

    The two rules disagree when ``charge_rate`` is ``0``: ``RATE_POSITIVE``
    treats it as not charging, ``RATE_NOT_SENTINEL`` as charging.
    """

    RATE_POSITIVE = "rate_positive"
    """Charging when ``charge_rate > 0``."""
    RATE_NOT_SENTINEL = "rate_not_sentinel"
    """Charging unless ``charge_rate == -1.0``."""


class ChargeTelemetry(TeslaBaseModel):
    """Charge snapshot of a single vehicle, fetched once per run.

    The original payload is available in ``raw``.
    """

    model_config = ConfigDict(allow_inf_nan=False)

    battery_level: float = Field(ge=0, le=100)
    """State of charge in percent."""
    battery_range: float = Field(ge=0)
    """Rated range in miles."""
    charge_rate: float = NOT_CHARGING_RATE
    """Charge rate in miles of range per hour (``-1.0`` when idle)."""
    charge_miles_added_ideal: float = 0.0
    """Ideal miles added during the current charge session."""
    time_to_full_charge: float = 0.0
    """Hours until the charge limit is reached."""

    def is_charging(self, rule: ChargingRule) -> bool:
        """Whether a charge session is active under *rule*."""
        if rule is ChargingRule.RATE_POSITIVE:
            return self.charge_rate > 0
        return self.charge_rate != NOT_CHARGING_RATE
