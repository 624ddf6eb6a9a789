"""Normalization of instants to integer epoch seconds.

Every date operation accepts an ``Instant``: an epoch timestamp, a date
string, a native ``date``/``datetime`` or a host object implementing
``TemporalValue``. Each form has its own conversion function; all of them
resolve to an integer number of seconds since the Unix epoch or raise
``InvalidInstant``.
"""

import logging
import math
import re
from dataclasses import dataclass
from datetime import date, datetime, time, timezone
from time import time as current_time
from typing import Protocol, TypeAlias, runtime_checkable
from zoneinfo import ZoneInfo

from dateutil.parser import parse as parse_date

from humanfields.util import DEFAULT_TZ

logger = logging.getLogger(__name__)

# Range representable by datetime, so every timestamp can be formatted later
_MIN_TIMESTAMP = int(datetime(1, 1, 2, tzinfo=timezone.utc).timestamp())
_MAX_TIMESTAMP = int(datetime(9999, 12, 30, tzinfo=timezone.utc).timestamp())

_NUMERIC = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


class InvalidInstant(ValueError):
    """Raised when a value cannot be resolved to an epoch timestamp."""


@runtime_checkable
class TemporalValue(Protocol):
    """Host date type: converts to epoch seconds and formats date tokens."""

    def timestamp(self) -> int: ...

    def format(self, fmt: str) -> str: ...


EpochSeconds: TypeAlias = int | float
DateText: TypeAlias = str
NativeDate: TypeAlias = datetime | date
Instant: TypeAlias = EpochSeconds | DateText | NativeDate | TemporalValue


def from_epoch(value: EpochSeconds) -> int:
    """Floor a numeric timestamp to whole seconds."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInstant(
            f"Epoch timestamp must be an int or float.\n"
            f"Got {type(value).__name__!r}: {value!r}"
        )
    if isinstance(value, float) and not math.isfinite(value):
        raise InvalidInstant(f"Epoch timestamp must be finite, got {value!r}")
    seconds = math.floor(value)
    if not (_MIN_TIMESTAMP <= seconds <= _MAX_TIMESTAMP):
        raise InvalidInstant(
            f"Epoch timestamp {seconds} is outside the supported range "
            f"({_MIN_TIMESTAMP} to {_MAX_TIMESTAMP})"
        )
    return seconds


def from_text(text: DateText, tz: str = DEFAULT_TZ) -> int:
    """Parse a date string.

    Purely numeric strings are read as epoch timestamps. Anything else goes
    through ``dateutil.parser``; strings without an offset are interpreted
    in ``tz``.
    """
    stripped = text.strip()
    if not stripped:
        raise InvalidInstant("Cannot parse an empty date string")

    if _NUMERIC.fullmatch(stripped):
        return from_epoch(float(stripped) if _has_fraction(stripped) else int(stripped))

    try:
        parsed = parse_date(stripped)
    except (ValueError, OverflowError) as exc:
        raise InvalidInstant(
            f"Cannot parse date string {text!r}.\n"
            f"Hint: Use an unambiguous form such as '2025-01-31' or "
            f"'2025-01-31T14:00:00+00:00'"
        ) from exc

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=ZoneInfo(tz))
    logger.debug("Parsed date string %r as %s", text, parsed.isoformat())
    return from_epoch(parsed.timestamp())


def from_native(value: NativeDate, tz: str = DEFAULT_TZ) -> int:
    """Convert a ``datetime`` or ``date``.

    Datetimes must be timezone-aware. Dates resolve to midnight in ``tz``.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            raise InvalidInstant(
                f"Datetime instants must be timezone-aware.\n"
                f"Got naive datetime: {value!r}\n"
                f"Hint: Add timezone info:\n"
                f"  from zoneinfo import ZoneInfo\n"
                f"  dt = datetime(..., tzinfo=ZoneInfo('UTC'))  "
                f"# or 'Europe/London', etc."
            )
        return from_epoch(value.timestamp())
    if isinstance(value, date):
        return from_epoch(
            datetime.combine(value, time.min, tzinfo=ZoneInfo(tz)).timestamp()
        )
    raise InvalidInstant(
        f"Native instant must be a date or datetime.\n"
        f"Got {type(value).__name__!r}: {value!r}"
    )


def to_timestamp(instant: Instant, tz: str = DEFAULT_TZ) -> int:
    """Resolve any supported instant form to integer epoch seconds.

    Raises:
        InvalidInstant: If the value is of an unsupported type or malformed
    """
    if isinstance(instant, (bool, int, float)):
        return from_epoch(instant)
    if isinstance(instant, str):
        return from_text(instant, tz)
    if isinstance(instant, date):
        return from_native(instant, tz)
    if isinstance(instant, TemporalValue):
        return from_epoch(instant.timestamp())
    raise InvalidInstant(
        f"Instant must be int, float, str, date, datetime or a temporal value.\n"
        f"Got {type(instant).__name__!r}: {instant!r}\n"
        f"Examples:\n"
        f"  friendly(1735689600)  # int (Unix seconds)\n"
        f"  friendly('2025-01-01')  # date string\n"
        f"  friendly(datetime(2025, 1, 1, tzinfo=timezone.utc))  "
        f"# timezone-aware datetime"
    )


def _has_fraction(text: str) -> bool:
    return "." in text or "e" in text.lower()


@dataclass(frozen=True, kw_only=True)
class Snapshot:
    """The "now" and timezone a single call works against.

    Captured once at the call boundary so every relative comparison within
    that call agrees on the same moment.
    """

    now: int
    tz: str = DEFAULT_TZ

    def __post_init__(self) -> None:
        # Fail early on unknown zone names
        ZoneInfo(self.tz)

    @classmethod
    def capture(cls, now: Instant | None = None, tz: str = DEFAULT_TZ) -> "Snapshot":
        """Build a snapshot, reading the wall clock only if ``now`` is None."""
        if now is None:
            return cls(now=int(current_time()), tz=tz)
        return cls(now=to_timestamp(now, tz), tz=tz)

    @property
    def zone(self) -> ZoneInfo:
        return ZoneInfo(self.tz)

    def localize(self, timestamp: int) -> datetime:
        """Return ``timestamp`` as an aware datetime in this snapshot's zone."""
        return datetime.fromtimestamp(timestamp, tz=self.zone)

    def current(self) -> datetime:
        return self.localize(self.now)
