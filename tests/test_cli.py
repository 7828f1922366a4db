from __future__ import annotations

from pathlib import Path

import pytest

from teslametric import __main__ as cli
from teslametric.exceptions import TeslaMetricTransportError
from teslametric.runner import RunOutcome

_REQUIRED = {
    "TESLA_AUTH_TOKEN": "tesla-secret-token",
    "VEHICLE_ID": "1234567890",
    "LAMETRIC_AUTH_TOKEN": "lametric-secret-token",
    "LAMETRIC_APP_ID": "abc123",
}


@pytest.fixture
def env_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    for key in _REQUIRED:
        # Record the original value so anything load_dotenv sets is undone.
        monkeypatch.setenv(key, "placeholder")
        monkeypatch.delenv(key)
    path = tmp_path / ".env"
    path.write_text("")
    return path


def test_missing_configuration_exits_before_running(env_file: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    async def fail_run_once(_self: object) -> RunOutcome:
        raise AssertionError("must not run without configuration")

    monkeypatch.setattr("teslametric.scheduler.TeslaMetricService.run_once", fail_run_once)

    assert cli.main(["--once", "--env-file", str(env_file)]) == 2


def test_env_file_is_loaded(env_file: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    env_file.write_text("\n".join(f"{key}={value}" for key, value in _REQUIRED.items()))

    async def fake_run_once(_self: object) -> RunOutcome:
        return RunOutcome.GAVE_UP

    monkeypatch.setattr("teslametric.scheduler.TeslaMetricService.run_once", fake_run_once)

    assert cli.main(["--once", "--env-file", str(env_file)]) == 0


def test_failed_run_exits_non_zero(env_file: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    for key, value in _REQUIRED.items():
        monkeypatch.setenv(key, value)

    async def failing_run_once(_self: object) -> RunOutcome:
        raise TeslaMetricTransportError("HTTP 500", status_code=500)

    monkeypatch.setattr("teslametric.scheduler.TeslaMetricService.run_once", failing_run_once)

    assert cli.main(["--once", "--env-file", str(env_file), "--log-level", "DEBUG"]) == 1
