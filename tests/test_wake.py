from __future__ import annotations

import pytest

from teslametric.client import TeslaClient
from teslametric.exceptions import TeslaMetricApiError, TeslaMetricTransportError
from teslametric.models.wake import VehicleState, WakeOutcome
from teslametric.wake import WakeController

from _fakes import FakeBackend, make_config


class _RecordingSleep:
    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


def _controller(backend: FakeBackend, sleep: _RecordingSleep, *, max_attempts: int = 6) -> WakeController:
    client = TeslaClient(make_config(), transport=backend)
    return WakeController(client, max_attempts=max_attempts, backoff=30.0, sleep=sleep)


@pytest.mark.asyncio
async def test_online_on_first_attempt_does_not_sleep() -> None:
    backend = FakeBackend(wake_states=["online"])
    sleep = _RecordingSleep()

    result = await _controller(backend, sleep).wake()

    assert result.outcome is WakeOutcome.ONLINE
    assert result.attempts == 1
    assert backend.count("/wake_up") == 1
    assert sleep.delays == []


@pytest.mark.asyncio
@pytest.mark.parametrize("n", [2, 3, 6])
async def test_online_on_nth_attempt_stops_immediately(n: int) -> None:
    backend = FakeBackend(wake_states=["asleep"] * (n - 1) + ["online"])
    sleep = _RecordingSleep()

    result = await _controller(backend, sleep).wake()

    assert result.is_online
    assert result.attempts == n
    assert backend.count("/wake_up") == n
    assert sleep.delays == [30.0] * (n - 1)


@pytest.mark.asyncio
async def test_gives_up_after_max_attempts() -> None:
    backend = FakeBackend(wake_states=["asleep", "waking", "offline"])
    sleep = _RecordingSleep()

    result = await _controller(backend, sleep).wake()

    assert result.outcome is WakeOutcome.GAVE_UP
    assert result.attempts == 6
    assert result.last_state is VehicleState.ASLEEP
    assert backend.count("/wake_up") == 6
    # No pause after the final attempt.
    assert sleep.delays == [30.0] * 5


@pytest.mark.asyncio
async def test_single_attempt_budget() -> None:
    backend = FakeBackend(wake_states=["asleep"])
    sleep = _RecordingSleep()

    result = await _controller(backend, sleep, max_attempts=1).wake()

    assert result.outcome is WakeOutcome.GAVE_UP
    assert backend.count("/wake_up") == 1
    assert sleep.delays == []


@pytest.mark.asyncio
async def test_transport_error_propagates() -> None:
    backend = FakeBackend(wake_error=TeslaMetricTransportError("HTTP 408", status_code=408))
    sleep = _RecordingSleep()

    with pytest.raises(TeslaMetricTransportError):
        await _controller(backend, sleep).wake()
    assert sleep.delays == []


@pytest.mark.asyncio
async def test_missing_state_is_api_error() -> None:
    class _NoStateBackend(FakeBackend):
        async def request_json(self, method, url, *, headers, json_body=None):  # type: ignore[no-untyped-def]
            self.calls.append((method, url))
            return {"response": {"id": 1}}

    with pytest.raises(TeslaMetricApiError, match="state"):
        await _controller(_NoStateBackend(), _RecordingSleep()).wake()


@pytest.mark.asyncio
async def test_error_body_is_api_error() -> None:
    class _ErrorBackend(FakeBackend):
        async def request_json(self, method, url, *, headers, json_body=None):  # type: ignore[no-untyped-def]
            return {"response": None, "error": "vehicle unavailable"}

    with pytest.raises(TeslaMetricApiError, match="vehicle unavailable"):
        await _controller(_ErrorBackend(), _RecordingSleep()).wake()


def test_from_client_uses_config_bounds() -> None:
    client = TeslaClient(make_config(wake_max_attempts=4, wake_backoff=12.0), transport=FakeBackend())
    controller = WakeController.from_client(client)

    assert controller._max_attempts == 4
    assert controller._backoff == 12.0


def test_rejects_empty_budget() -> None:
    client = TeslaClient(make_config(), transport=FakeBackend())
    with pytest.raises(ValueError):
        WakeController(client, max_attempts=0, backoff=1.0)


@pytest.mark.asyncio
async def test_wake_request_headers() -> None:
    backend = FakeBackend()
    await _controller(backend, _RecordingSleep()).wake()

    method, url = backend.calls[0]
    assert method == "POST"
    assert url == "https://owner-api.teslamotors.com/api/1/vehicles/1234567890/wake_up"
    assert backend.headers[0]["Authorization"] == "Bearer tesla-secret-token"
    assert backend.headers[0]["User-Agent"] == "00000"
