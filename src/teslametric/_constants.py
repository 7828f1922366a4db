"""Internal constants shared across the library."""

TESLA_API_BASE = "https://owner-api.teslamotors.com/api/1"
LAMETRIC_API_BASE = "https://developer.lametric.com/api/v1/dev/widget/update"
LAMETRIC_APP_PREFIX = "com.lametric."
USER_AGENT = "00000"

#: Wake loop bounds. 6 attempts with a fixed 30 s pause keeps a run under
#: roughly two and a half minutes plus network time.
WAKE_MAX_ATTEMPTS = 6
WAKE_BACKOFF_S = 30.0

#: Hours of the day at which the scheduler triggers a run.
DEFAULT_SCHEDULE_HOURS: tuple[int, ...] = (5, 7, 10, 12)

DEFAULT_HTTP_TIMEOUT_S = 30.0
DEFAULT_VEHICLE_LABEL = "Tesla"

#: ``charge_rate`` value the charge-state endpoint reports when no charge
#: session is active.
NOT_CHARGING_RATE = -1.0

# ------------------------------------------------------------------
# LaMetric icon ids
# ------------------------------------------------------------------

ICON_VEHICLE = "i2735"
ICON_RANGE = "16716"
ICON_CHARGE_DETAIL = "i95"
ICON_CHARGING_ANIMATION = "21585"
# Not verified against the LaMetric icon gallery; override if it renders blank.
ICON_BATTERY_IDLE = "i6358"

#: Charging battery icons keyed by the lower bound of their level band.
#: Bands are half-open ``[lower, next lower)``; the last band includes 100.
CHARGING_ICON_BANDS: tuple[tuple[float, str], ...] = (
    (0.0, "i6359"),
    (25.0, "i6360"),
    (50.0, "i6361"),
    (75.0, "i6362"),
    (95.0, "i6363"),
)
