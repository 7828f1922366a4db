"""Data models for Tesla API responses and LaMetric payloads."""

from teslametric.models._base import TeslaBaseModel, TeslaEnum
from teslametric.models.charge import ChargeTelemetry, ChargingRule
from teslametric.models.display import DisplayFrame, DisplayPayload, FormatterPolicy
from teslametric.models.wake import VehicleState, WakeOutcome, WakeResult

__all__ = [
    "ChargeTelemetry",
    "ChargingRule",
    "DisplayFrame",
    "DisplayPayload",
    "FormatterPolicy",
    "TeslaBaseModel",
    "TeslaEnum",
    "VehicleState",
    "WakeOutcome",
    "WakeResult",
]
