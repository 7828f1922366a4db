"""Tests for pydantic model parsing with TeslaBaseModel + TeslaEnum."""

from __future__ import annotations

import json
import math

import pytest
from pydantic import ValidationError

from teslametric.models.charge import ChargeTelemetry, ChargingRule
from teslametric.models.display import DisplayFrame, DisplayPayload
from teslametric.models.wake import VehicleState, WakeOutcome, WakeResult

from _fakes import CHARGING_RESPONSE, IDLE_RESPONSE

# ------------------------------------------------------------------
# VehicleState
# ------------------------------------------------------------------


class TestVehicleState:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("online", VehicleState.ONLINE),
            ("ONLINE", VehicleState.ONLINE),
            ("asleep", VehicleState.ASLEEP),
            ("offline", VehicleState.ASLEEP),
            ("waking", VehicleState.WAKING),
            ("updating", VehicleState.UNKNOWN),
            (None, VehicleState.UNKNOWN),
        ],
    )
    def test_from_api(self, raw: str | None, expected: VehicleState) -> None:
        assert VehicleState.from_api(raw) is expected

    def test_unknown_value_falls_back(self) -> None:
        assert VehicleState("driving") is VehicleState.UNKNOWN


def test_wake_result_is_online() -> None:
    assert WakeResult(WakeOutcome.ONLINE, 2, VehicleState.ONLINE).is_online
    assert not WakeResult(WakeOutcome.GAVE_UP, 6, VehicleState.ASLEEP).is_online


# ------------------------------------------------------------------
# ChargeTelemetry
# ------------------------------------------------------------------


class TestChargeTelemetry:
    def test_parses_charge_state(self) -> None:
        telemetry = ChargeTelemetry.model_validate(CHARGING_RESPONSE)

        assert telemetry.battery_level == 60
        assert telemetry.battery_range == pytest.approx(180.2)
        assert telemetry.charge_rate == pytest.approx(22.0)
        assert telemetry.raw["charging_state"] == "Charging"

    def test_nulls_fall_back_to_defaults(self) -> None:
        data = dict(IDLE_RESPONSE, charge_rate=None, time_to_full_charge=math.nan, charge_miles_added_ideal="")
        telemetry = ChargeTelemetry.model_validate(data)

        assert telemetry.charge_rate == -1.0
        assert telemetry.time_to_full_charge == 0.0
        assert telemetry.charge_miles_added_ideal == 0.0
        assert telemetry.raw["charge_rate"] is None

    @pytest.mark.parametrize(
        "data",
        [
            {"battery_range": 100.0},
            {"battery_level": None, "battery_range": 100.0},
            {"battery_level": "full", "battery_range": 100.0},
            {"battery_level": 120, "battery_range": 100.0},
            {"battery_level": 50, "battery_range": -3.0},
        ],
    )
    def test_malformed_records_are_rejected(self, data: dict[str, object]) -> None:
        with pytest.raises(ValidationError):
            ChargeTelemetry.model_validate(data)

    @pytest.mark.parametrize("field", ["battery_range", "charge_rate", "time_to_full_charge"])
    def test_infinite_values_are_rejected(self, field: str) -> None:
        with pytest.raises(ValidationError):
            ChargeTelemetry.model_validate(dict(IDLE_RESPONSE, **{field: math.inf}))

    def test_json_infinity_is_rejected(self) -> None:
        data = json.loads('{"battery_level": 50, "battery_range": Infinity}')
        with pytest.raises(ValidationError):
            ChargeTelemetry.model_validate(data)

    def test_is_frozen(self) -> None:
        telemetry = ChargeTelemetry.model_validate(IDLE_RESPONSE)
        with pytest.raises(ValidationError):
            telemetry.battery_level = 10  # type: ignore[misc]

    @pytest.mark.parametrize(
        ("rate", "positive", "not_sentinel"),
        [(-1.0, False, False), (0.0, False, True), (11.5, True, True)],
    )
    def test_charging_rules(self, rate: float, positive: bool, not_sentinel: bool) -> None:
        telemetry = ChargeTelemetry.model_validate(dict(IDLE_RESPONSE, charge_rate=rate))

        assert telemetry.is_charging(ChargingRule.RATE_POSITIVE) is positive
        assert telemetry.is_charging(ChargingRule.RATE_NOT_SENTINEL) is not_sentinel


# ------------------------------------------------------------------
# DisplayPayload
# ------------------------------------------------------------------


class TestDisplayPayload:
    def test_requires_at_least_one_frame(self) -> None:
        with pytest.raises(ValidationError):
            DisplayPayload(frames=())

    def test_list_input_is_stored_as_tuple(self) -> None:
        payload = DisplayPayload.model_validate({"frames": [{"text": "Hello", "icon": "21585"}]})
        assert isinstance(payload.frames, tuple)

    def test_index_is_serialized_when_set(self) -> None:
        payload = DisplayPayload(
            frames=(
                DisplayFrame(text="Hello", icon="21585", index=0),
                DisplayFrame(text="Again", icon="21585", index=1),
            )
        )
        assert payload.to_request_body() == {
            "frames": [
                {"text": "Hello", "icon": "21585", "index": 0},
                {"text": "Again", "icon": "21585", "index": 1},
            ]
        }

    def test_negative_index_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            DisplayFrame(text="x", icon="i95", index=-1)
