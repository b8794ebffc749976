"""Constants for the Swedish congestion toll."""

DEFAULT_DAILY_CAP = 60
DEFAULT_CURRENCY = "SEK"

LOCAL_TIME_ZONE = "Europe/Stockholm"

EASTER_MIN_YEAR = 1900
EASTER_MAX_YEAR = 2099

MIDSUMMER_ANCHOR = (6, 20)
ALL_HALLOWS_ANCHOR = (10, 31)

SCHEDULE_FILENAME = "fee_schedule.json"
SCHEMA_FILENAME = "fee_schedule.schema.json"
