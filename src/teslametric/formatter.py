"""Charge telemetry → LaMetric frames.

Two layouts are supported, selected by :class:`FormatterPolicy`:

``FIXED``
    Always three frames (label, battery, range). Charging is
    ``charge_rate > 0`` and only swaps the battery icon for the charging
    animation.

``VARIABLE``
    The same three frames, followed while charging by miles added,
    charge rate and hours remaining. Charging is ``charge_rate != -1.0``,
    so a rate of ``0`` still counts as charging. The battery icon is the
    tier of the current level.

Formatting is pure: no I/O, and equal input yields equal output.
"""

from __future__ import annotations

import math

from teslametric._constants import DEFAULT_VEHICLE_LABEL, ICON_CHARGE_DETAIL, ICON_RANGE, ICON_VEHICLE
from teslametric.icons import resolve_icon
from teslametric.models.charge import ChargeTelemetry, ChargingRule
from teslametric.models.display import DisplayFrame, DisplayPayload, FormatterPolicy

CHARGING_RULES: dict[FormatterPolicy, ChargingRule] = {
    FormatterPolicy.FIXED: ChargingRule.RATE_POSITIVE,
    FormatterPolicy.VARIABLE: ChargingRule.RATE_NOT_SENTINEL,
}


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for non-negative input."""
    return math.floor(value + 0.5)


def format_telemetry(
    telemetry: ChargeTelemetry,
    policy: FormatterPolicy = FormatterPolicy.VARIABLE,
    *,
    label: str = DEFAULT_VEHICLE_LABEL,
) -> DisplayPayload:
    """Build the display payload for *telemetry* under *policy*."""
    is_charging = telemetry.is_charging(CHARGING_RULES[policy])

    frames = [
        DisplayFrame(text=label, icon=ICON_VEHICLE),
        DisplayFrame(
            text=f"{round_half_up(telemetry.battery_level)}%",
            icon=resolve_icon(
                telemetry.battery_level,
                is_charging,
                animated=policy is FormatterPolicy.FIXED,
            ),
        ),
        DisplayFrame(text=f"{round_half_up(telemetry.battery_range)} mi", icon=ICON_RANGE),
    ]

    if policy is FormatterPolicy.VARIABLE and is_charging:
        frames.extend(
            [
                DisplayFrame(text=f"+{round_half_up(telemetry.charge_miles_added_ideal)} mi", icon=ICON_CHARGE_DETAIL),
                DisplayFrame(text=f"{round_half_up(telemetry.charge_rate)} mph", icon=ICON_CHARGE_DETAIL),
                DisplayFrame(
                    text=f"{round_half_up(telemetry.time_to_full_charge)} hours remaining.",
                    icon=ICON_CHARGE_DETAIL,
                ),
            ]
        )

    return DisplayPayload(frames=tuple(frames))
