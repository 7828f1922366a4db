"""teslametric - Push Tesla charge data to a LaMetric Time indicator app."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("teslametric")
except PackageNotFoundError:
    __version__ = "0+local"

from teslametric.client import TeslaClient
from teslametric.config import TeslaMetricConfig
from teslametric.exceptions import (
    TeslaMetricApiError,
    TeslaMetricConfigError,
    TeslaMetricError,
    TeslaMetricTransportError,
)
from teslametric.formatter import format_telemetry
from teslametric.icons import resolve_icon
from teslametric.models import (
    ChargeTelemetry,
    ChargingRule,
    DisplayFrame,
    DisplayPayload,
    FormatterPolicy,
    VehicleState,
    WakeOutcome,
    WakeResult,
)
from teslametric.publisher import DisplayPublisher
from teslametric.runner import RunOrchestrator, RunOutcome
from teslametric.wake import WakeController

__all__ = [
    "__version__",
    "ChargeTelemetry",
    "ChargingRule",
    "DisplayFrame",
    "DisplayPayload",
    "DisplayPublisher",
    "FormatterPolicy",
    "RunOrchestrator",
    "RunOutcome",
    "TeslaClient",
    "TeslaMetricApiError",
    "TeslaMetricConfig",
    "TeslaMetricConfigError",
    "TeslaMetricError",
    "TeslaMetricTransportError",
    "VehicleState",
    "WakeController",
    "WakeOutcome",
    "WakeResult",
    "format_telemetry",
    "resolve_icon",
]
