"""Human-friendly rendering of durations, relative dates and date ranges.

All functions that compare against the current time accept ``now`` and
``tz`` keyword arguments. When ``now`` is omitted the wall clock is read once
per call, so results within a call are always internally consistent.

Example:
    >>> from humanfields import interval, nice_range
    >>> interval(90061)
    '1 day 1 hour'
    >>> nice_range("2020-01-05", "2020-01-20", now="2020-01-01")
    '5th–20th January'
"""

from collections.abc import Callable
from datetime import datetime
from typing import Literal
from zoneinfo import ZoneInfo

from humanfields.instant import Instant, Snapshot, to_timestamp
from humanfields.util import (
    DAY_NAMES,
    DEFAULT_GRANULARITY,
    DEFAULT_MAX_FRIENDLY_SECONDS,
    DEFAULT_TZ,
    DEFAULT_UNFRIENDLY_FORMAT,
    MONTH_NAMES,
    UNITS,
)

RANGE_SEPARATOR = "–"

_MONTH_TOKENS = {
    "full": "F",
    "abbreviated": "M",
}


def ordinal_suffix(number: int) -> str:
    """Return the English ordinal suffix for ``number`` (st, nd, rd or th)."""
    if 11 <= number % 100 <= 13:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")


_TOKENS: dict[str, Callable[[datetime], str]] = {
    "j": lambda dt: str(dt.day),
    "d": lambda dt: f"{dt.day:02d}",
    "S": lambda dt: ordinal_suffix(dt.day),
    "F": lambda dt: MONTH_NAMES[dt.month - 1],
    "M": lambda dt: MONTH_NAMES[dt.month - 1][:3],
    "m": lambda dt: f"{dt.month:02d}",
    "n": lambda dt: str(dt.month),
    "Y": lambda dt: f"{dt.year:04d}",
    "y": lambda dt: f"{dt.year % 100:02d}",
    "N": lambda dt: str(dt.isoweekday()),
    "D": lambda dt: DAY_NAMES[dt.weekday()][:3],
    "l": lambda dt: DAY_NAMES[dt.weekday()],
    "H": lambda dt: f"{dt.hour:02d}",
    "i": lambda dt: f"{dt.minute:02d}",
    "s": lambda dt: f"{dt.second:02d}",
    "c": lambda dt: dt.isoformat(timespec="seconds"),
    "U": lambda dt: str(int(dt.timestamp())),
}


def _render(moment: datetime, fmt: str) -> str:
    out: list[str] = []
    chars = iter(fmt)
    for char in chars:
        if char == "\\":
            # Escaped characters are copied literally
            out.append(next(chars, ""))
        elif char in _TOKENS:
            out.append(_TOKENS[char](moment))
        else:
            out.append(char)
    return "".join(out)


def format_date(instant: Instant, fmt: str, tz: str = DEFAULT_TZ) -> str:
    """
    Render an instant using the date token mini-language.

    Args:
        instant: Timestamp, date string, date/datetime or temporal value
        fmt: Format string. Recognised tokens:
            j/d   day of month (unpadded / two digits)
            S     ordinal suffix for the day (st, nd, rd, th)
            F/M   full / abbreviated month name
            m/n   month number (two digits / unpadded)
            Y/y   four / two digit year
            N     ISO weekday, 1 (Monday) through 7 (Sunday)
            D/l   abbreviated / full weekday name
            H/i/s hours, minutes, seconds (two digits)
            c     ISO 8601 date and time
            U     seconds since the Unix epoch
            Any other character is copied as-is; prefix a token with a
            backslash to emit it literally.
        tz: IANA timezone name the instant is rendered in

    Example:
        >>> format_date(1578182400, "jS F Y")
        '5th January 2020'
    """
    moment = datetime.fromtimestamp(to_timestamp(instant, tz), tz=ZoneInfo(tz))
    return _render(moment, fmt)


def interval(seconds: int, granularity: int = DEFAULT_GRANULARITY) -> str:
    """
    Format a duration with at most ``granularity`` units, largest first.

    Negative durations use their magnitude. Durations under a second, and
    any call with a non-positive granularity, give ``"0 seconds"``.

    Example:
        >>> interval(11040)
        '3 hours 4 minutes'
        >>> interval(90061, granularity=3)
        '1 day 1 hour 1 minute'
    """
    remaining = abs(int(seconds))
    parts: list[str] = []

    for singular, plural, size in UNITS:
        if granularity <= 0:
            break
        if remaining >= size:
            count = remaining // size
            parts.append(
                singular if count == 1 else plural.replace(":count", str(count))
            )
            remaining -= count * size
            granularity -= 1

    return " ".join(parts) if parts else "0 seconds"


def friendly(
    instant: Instant,
    max_friendly_seconds: int = DEFAULT_MAX_FRIENDLY_SECONDS,
    unfriendly_format: str = DEFAULT_UNFRIENDLY_FORMAT,
    *,
    now: Instant | None = None,
    tz: str = DEFAULT_TZ,
) -> str:
    """
    Describe an instant relative to now, such as ``'4 days ago'``.

    Instants older than ``max_friendly_seconds``, and any instant in the
    future, are rendered with ``unfriendly_format`` instead (e.g.
    ``'28 January 2020'``). The current moment gives ``'just now'``.

    Args:
        instant: The instant to describe
        max_friendly_seconds: How far back to use the relative form
        unfriendly_format: Token format for absolute dates (see format_date)
        now: Override for the current time (defaults to the wall clock)
        tz: IANA timezone name for absolute dates and date strings
    """
    snapshot = Snapshot.capture(now, tz)
    timestamp = to_timestamp(instant, tz)
    delta = snapshot.now - timestamp

    if delta > max_friendly_seconds or delta < 0:
        return _render(snapshot.localize(timestamp), unfriendly_format)
    if delta < 1:
        return "just now"
    return f"{interval(delta, 1)} ago"


def nice_range(
    start: Instant,
    end: Instant,
    month_format: Literal["full", "abbreviated"] = "full",
    *,
    now: Instant | None = None,
    tz: str = DEFAULT_TZ,
) -> str:
    """
    Return the shortest unambiguous rendering of a date range.

    Month and year are not repeated when both ends share them, and the year
    is dropped entirely for ranges within the current year (unless the range
    has already ended). Times of day are ignored. Reversed ranges are
    swapped.

    Example:
        >>> nice_range("2019-01-05", "2020-02-20", now="2020-06-01")
        '5th January 2019–20th February 2020'
    """
    if month_format not in _MONTH_TOKENS:
        valid = ", ".join(_MONTH_TOKENS)
        raise ValueError(f"Invalid month_format {month_format!r}. Valid: {valid}")
    month = _MONTH_TOKENS[month_format]

    snapshot = Snapshot.capture(now, tz)
    first, last = sorted((to_timestamp(start, tz), to_timestamp(end, tz)))
    start_dt = snapshot.localize(first)
    end_dt = snapshot.localize(last)
    this_year = snapshot.current().year

    same_day = start_dt.date() == end_dt.date()
    same_month = same_day or (start_dt.year, start_dt.month) == (
        end_dt.year,
        end_dt.month,
    )
    same_year = same_month or start_dt.year == end_dt.year
    current_year = start_dt.year == this_year and end_dt.year == this_year

    # Current-year ranges only show the year once they are over
    past_year = " Y" if last < snapshot.now else ""

    if same_day and current_year:
        return _render(start_dt, f"jS {month}")
    if same_month and current_year:
        return _span(start_dt, "jS", end_dt, f"jS {month}{past_year}")
    if current_year:
        return _span(start_dt, f"jS {month}", end_dt, f"jS {month}{past_year}")
    if same_day:
        return _render(start_dt, f"jS {month} Y")
    if same_month:
        return _span(start_dt, "jS", end_dt, f"jS {month} Y")
    if same_year:
        return _span(start_dt, f"jS {month}", end_dt, f"jS {month} Y")
    return _span(start_dt, f"jS {month} Y", end_dt, f"jS {month} Y")


def _span(start: datetime, start_fmt: str, end: datetime, end_fmt: str) -> str:
    return _render(start, start_fmt) + RANGE_SEPARATOR + _render(end, end_fmt)
