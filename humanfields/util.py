"""Utility constants and defaults for humanfields.

Time unit constants represent durations in seconds.
These are used throughout the API for consistent time representation.
"""

# Time unit constants (all values in seconds)
SECOND = 1
MINUTE = 60
HOUR = 3600
DAY = 86400
WEEK = 604800
YEAR = 31536000

# (singular label, plural template, seconds per unit), largest unit first.
# Decomposition walks this table in order.
UNITS: tuple[tuple[str, str, int], ...] = (
    ("1 year", ":count years", YEAR),
    ("1 week", ":count weeks", WEEK),
    ("1 day", ":count days", DAY),
    ("1 hour", ":count hours", HOUR),
    ("1 minute", ":count minutes", MINUTE),
    ("1 second", ":count seconds", SECOND),
)

# Defaults
DEFAULT_TZ = "UTC"
DEFAULT_GRANULARITY = 2
DEFAULT_MAX_FRIENDLY_SECONDS = WEEK
DEFAULT_UNFRIENDLY_FORMAT = "j F Y"

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

DAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)
