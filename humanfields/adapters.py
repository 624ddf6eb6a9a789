"""Thin wrappers exposing the formatters as methods on host values.

A host framework plugs in by providing objects that satisfy
``TemporalValue`` (dates) or ``RenderableText`` (strings). The decorators
only call through to ``humanfields.dates`` and ``humanfields.text``.

Example:
    >>> from humanfields.adapters import DateDecorator, DateValue
    >>> start = DateDecorator(DateValue.of("2020-01-05"))
    >>> start.nice_range("2020-01-20", now="2020-01-01")
    '5th–20th January'
"""

from dataclasses import dataclass
from typing import Literal, Protocol, runtime_checkable

from typing_extensions import override

from humanfields import dates, text
from humanfields.instant import Instant, Snapshot, TemporalValue, from_epoch, to_timestamp
from humanfields.util import (
    DEFAULT_GRANULARITY,
    DEFAULT_MAX_FRIENDLY_SECONDS,
    DEFAULT_TZ,
    DEFAULT_UNFRIENDLY_FORMAT,
)


@runtime_checkable
class RenderableText(Protocol):
    """Host string type: yields its display string, already escaped."""

    def for_template(self) -> str: ...


@dataclass(frozen=True)
class DateValue(TemporalValue):
    """A timestamp bound to a timezone, usable wherever a host date is."""

    epoch: int
    tz: str = DEFAULT_TZ

    def __post_init__(self) -> None:
        # Store whole seconds
        object.__setattr__(self, "epoch", from_epoch(self.epoch))

    @classmethod
    def of(cls, instant: Instant, tz: str = DEFAULT_TZ) -> "DateValue":
        return cls(to_timestamp(instant, tz), tz)

    @override
    def timestamp(self) -> int:
        return self.epoch

    @override
    def format(self, fmt: str) -> str:
        return dates.format_date(self.epoch, fmt, self.tz)


@dataclass(frozen=True)
class PlainText(RenderableText):
    value: str

    @override
    def for_template(self) -> str:
        return self.value


class DateDecorator:
    """Date helpers over any ``TemporalValue``.

    Relative helpers work in ``tz``, which defaults to the owner's own zone
    (its ``tz`` attribute) so they agree with ``owner.format``.
    """

    def __init__(self, owner: TemporalValue, tz: str | None = None):
        self.owner: TemporalValue = owner
        self.tz: str = tz if tz is not None else getattr(owner, "tz", DEFAULT_TZ)

    def day_of_week(self) -> int:
        """ISO 8601 day of the week, 1 (Monday) through 7 (Sunday)."""
        return int(self.owner.format("N"))

    def is_weekend(self) -> bool:
        return self.day_of_week() >= 6

    def iso8601(self) -> str:
        return self.owner.format("c")

    def friendly(
        self,
        max_friendly_seconds: int = DEFAULT_MAX_FRIENDLY_SECONDS,
        unfriendly_format: str = DEFAULT_UNFRIENDLY_FORMAT,
        *,
        now: Instant | None = None,
    ) -> str:
        return dates.friendly(
            self.owner, max_friendly_seconds, unfriendly_format, now=now, tz=self.tz
        )

    def interval(
        self, granularity: int = DEFAULT_GRANULARITY, *, now: Instant | None = None
    ) -> str:
        """Time elapsed between the owner and now."""
        snapshot = Snapshot.capture(now, self.tz)
        return dates.interval(snapshot.now - self.owner.timestamp(), granularity)

    def nice_range(
        self,
        other: Instant,
        month_format: Literal["full", "abbreviated"] = "full",
        *,
        now: Instant | None = None,
    ) -> str:
        return dates.nice_range(self.owner, other, month_format, now=now, tz=self.tz)


class TextDecorator:
    """Text helpers over any ``RenderableText``."""

    def __init__(self, owner: RenderableText):
        self.owner: RenderableText = owner

    def widont(self) -> str:
        return text.widont(self.owner.for_template())

    def title_case(self) -> str:
        return text.title_case(self.owner.for_template())

    def slugged(self) -> str:
        return text.slugged(self.owner.for_template())
