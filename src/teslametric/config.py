"""Client configuration for teslametric."""

from __future__ import annotations

import dataclasses
import os
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from teslametric._constants import (
    DEFAULT_HTTP_TIMEOUT_S,
    DEFAULT_SCHEDULE_HOURS,
    DEFAULT_VEHICLE_LABEL,
    LAMETRIC_API_BASE,
    LAMETRIC_APP_PREFIX,
    TESLA_API_BASE,
    USER_AGENT,
    WAKE_BACKOFF_S,
    WAKE_MAX_ATTEMPTS,
)
from teslametric.exceptions import TeslaMetricConfigError
from teslametric.models.display import FormatterPolicy

T = TypeVar("T")

#: Environment variables that must be present for the process to start.
REQUIRED_ENV: dict[str, str] = {
    "TESLA_AUTH_TOKEN": "tesla_auth_token",
    "VEHICLE_ID": "vehicle_id",
    "LAMETRIC_AUTH_TOKEN": "lametric_auth_token",
    "LAMETRIC_APP_ID": "lametric_app_id",
}


def _parse_hours(value: str) -> tuple[int, ...]:
    hours = tuple(int(part) for part in value.split(",") if part.strip())
    if not hours:
        raise ValueError("at least one hour is required")
    return hours


def _convert(env_key: str, raw: str, parser: Callable[[str], T]) -> T:
    try:
        return parser(raw)
    except ValueError as exc:
        raise TeslaMetricConfigError(f"{env_key} has an invalid value {raw!r}: {exc}") from exc


@dataclasses.dataclass(frozen=True)
class TeslaMetricConfig:
    """Immutable runtime configuration, built once at startup.

    Parameters
    ----------
    tesla_auth_token : str
        Bearer token for the Tesla owner API.
    vehicle_id : str
        Vehicle id as reported by the Tesla API ``/vehicles`` listing.
    lametric_auth_token : str
        ``X-Access-Token`` of the LaMetric indicator app.
    lametric_app_id : str
        Indicator app id; pushed to ``com.lametric.<app id>``.
    tesla_api_base : str
        Tesla owner API base URL.
    lametric_api_base : str
        LaMetric widget update base URL.
    user_agent : str
        ``User-Agent`` sent to the Tesla API.
    formatter_policy : FormatterPolicy
        Display layout and charging-detection rule.
    vehicle_label : str
        Text of the first display frame.
    wake_max_attempts : int
        Wake requests per run before giving up.
    wake_backoff : float
        Seconds to wait between wake requests.
    schedule_hours : tuple[int, ...]
        Hours of the day at which the scheduler triggers a run.
    http_timeout : float
        Total timeout in seconds for a single HTTP request.
    """

    tesla_auth_token: str = dataclasses.field(repr=False)
    vehicle_id: str
    lametric_auth_token: str = dataclasses.field(repr=False)
    lametric_app_id: str
    tesla_api_base: str = TESLA_API_BASE
    lametric_api_base: str = LAMETRIC_API_BASE
    user_agent: str = USER_AGENT
    formatter_policy: FormatterPolicy = FormatterPolicy.VARIABLE
    vehicle_label: str = DEFAULT_VEHICLE_LABEL
    wake_max_attempts: int = WAKE_MAX_ATTEMPTS
    wake_backoff: float = WAKE_BACKOFF_S
    schedule_hours: tuple[int, ...] = DEFAULT_SCHEDULE_HOURS
    http_timeout: float = DEFAULT_HTTP_TIMEOUT_S

    def __post_init__(self) -> None:
        missing = [name for name in REQUIRED_ENV.values() if not str(getattr(self, name)).strip()]
        if missing:
            raise TeslaMetricConfigError(f"Missing required configuration: {', '.join(missing)}")
        if self.wake_max_attempts < 1:
            raise TeslaMetricConfigError(f"wake_max_attempts must be >= 1, got {self.wake_max_attempts}")
        if self.wake_backoff < 0:
            raise TeslaMetricConfigError(f"wake_backoff must be >= 0, got {self.wake_backoff}")
        if self.http_timeout <= 0:
            raise TeslaMetricConfigError(f"http_timeout must be > 0, got {self.http_timeout}")
        bad_hours = [hour for hour in self.schedule_hours if not 0 <= hour <= 23]
        if bad_hours or not self.schedule_hours:
            raise TeslaMetricConfigError(f"schedule_hours must be within 0-23, got {self.schedule_hours}")

    @property
    def vehicle_url(self) -> str:
        """Base URL of the configured vehicle."""
        return f"{self.tesla_api_base.rstrip('/')}/vehicles/{self.vehicle_id}"

    @property
    def lametric_url(self) -> str:
        """Widget update URL of the configured indicator app."""
        return f"{self.lametric_api_base.rstrip('/')}/{LAMETRIC_APP_PREFIX}{self.lametric_app_id}"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **overrides: Any) -> TeslaMetricConfig:
        """Create configuration from environment variables.

        Reads the four required variables (``TESLA_AUTH_TOKEN``,
        ``VEHICLE_ID``, ``LAMETRIC_AUTH_TOKEN``, ``LAMETRIC_APP_ID``) and
        optional ``TESLAMETRIC_*`` settings. Explicit keyword arguments
        override environment values.

        Raises
        ------
        TeslaMetricConfigError
            If a required value is absent (all missing names are listed)
            or an optional value cannot be parsed.
        """
        env = os.environ if environ is None else environ

        config_kwargs: dict[str, Any] = {}
        missing: list[str] = []
        for env_key, field_name in REQUIRED_ENV.items():
            if field_name in overrides:
                continue
            val = env.get(env_key, "").strip()
            if not val:
                missing.append(env_key)
            else:
                config_kwargs[field_name] = val
        if missing:
            raise TeslaMetricConfigError(f"Missing required environment variables: {', '.join(missing)}")

        _ENV_STR_MAP = {
            "TESLAMETRIC_TESLA_API_BASE": "tesla_api_base",
            "TESLAMETRIC_LAMETRIC_API_BASE": "lametric_api_base",
            "TESLAMETRIC_USER_AGENT": "user_agent",
            "TESLAMETRIC_VEHICLE_LABEL": "vehicle_label",
        }
        for env_key, field_name in _ENV_STR_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        _ENV_PARSED_MAP: dict[str, tuple[str, Callable[[str], Any]]] = {
            "TESLAMETRIC_FORMATTER_POLICY": ("formatter_policy", lambda raw: FormatterPolicy(raw.strip().lower())),
            "TESLAMETRIC_WAKE_MAX_ATTEMPTS": ("wake_max_attempts", int),
            "TESLAMETRIC_WAKE_BACKOFF": ("wake_backoff", float),
            "TESLAMETRIC_SCHEDULE_HOURS": ("schedule_hours", _parse_hours),
            "TESLAMETRIC_HTTP_TIMEOUT": ("http_timeout", float),
        }
        for env_key, (field_name, parser) in _ENV_PARSED_MAP.items():
            val = env.get(env_key)
            if val is not None and field_name not in overrides:
                config_kwargs[field_name] = _convert(env_key, val, parser)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
