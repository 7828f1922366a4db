"""Battery icon selection for the LaMetric battery frame."""

from __future__ import annotations

from teslametric._constants import CHARGING_ICON_BANDS, ICON_BATTERY_IDLE, ICON_CHARGING_ANIMATION

#: Every icon id :func:`resolve_icon` can return.
BATTERY_ICONS: frozenset[str] = frozenset(
    {ICON_BATTERY_IDLE, ICON_CHARGING_ANIMATION, *(icon for _, icon in CHARGING_ICON_BANDS)}
)


def resolve_icon(battery_level: float, is_charging: bool, *, animated: bool = False) -> str:
    """Return the battery frame icon for *battery_level* (0-100).

    Idle vehicles always get the idle battery icon. Charging vehicles get
    the single animation icon when *animated* is set, otherwise the tiered
    icon of the band containing *battery_level*. Levels outside 0-100 fall
    into the first or last band.
    """
    if not is_charging:
        return ICON_BATTERY_IDLE
    if animated:
        return ICON_CHARGING_ANIMATION

    icon = CHARGING_ICON_BANDS[0][1]
    for lower, band_icon in CHARGING_ICON_BANDS:
        if battery_level < lower:
            break
        icon = band_icon
    return icon
