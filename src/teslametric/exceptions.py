"""Custom exception hierarchy for teslametric."""

from __future__ import annotations


class TeslaMetricError(Exception):
    """Base exception for all teslametric errors."""


class TeslaMetricConfigError(TeslaMetricError):
    """Invalid or missing configuration."""


class TeslaMetricTransportError(TeslaMetricError):
    """HTTP-level failure (network, timeout, non-2xx, invalid JSON)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        method: str = "",
        url: str = "",
    ) -> None:
        self.status_code = status_code
        self.method = method
        self.url = url
        super().__init__(message)


class TeslaMetricApiError(TeslaMetricError):
    """Well-formed HTTP reply whose body is not what the endpoint promises.

    Raised when the Tesla API answers without a ``response`` object,
    without a ``response.state`` string on wake, or with charge-state
    fields that fail validation.
    """

    def __init__(self, message: str, *, endpoint: str = "") -> None:
        self.endpoint = endpoint
        super().__init__(message)
