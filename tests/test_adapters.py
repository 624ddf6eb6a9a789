"""Tests for the date and text decorators over host values."""

from datetime import datetime, timezone

import pytest

from humanfields import (
    DateDecorator,
    DateValue,
    InvalidInstant,
    PlainText,
    RenderableText,
    TemporalValue,
    TextDecorator,
    to_timestamp,
)
from humanfields.dates import format_date

SUNDAY = int(datetime(2020, 1, 5, tzinfo=timezone.utc).timestamp())
MONDAY = SUNDAY + 86400
# 23:00 UTC on Sunday is midday Monday in Auckland
SUNDAY_LATE = SUNDAY + 23 * 3600


class HostDate:
    """Stand-in for a framework date field."""

    def __init__(self, epoch: int):
        self.epoch = epoch

    def timestamp(self) -> int:
        return self.epoch

    def format(self, fmt: str) -> str:
        return format_date(self.epoch, fmt)


class HostText:
    def __init__(self, value: str):
        self.value = value

    def for_template(self) -> str:
        return self.value


def test_date_value_satisfies_protocol():
    """Test that DateValue converts and formats like a host date."""
    value = DateValue.of("2020-01-05")
    assert isinstance(value, TemporalValue)
    assert value.timestamp() == SUNDAY
    assert value.format("jS F Y") == "5th January 2020"


def test_date_value_stores_whole_seconds():
    """Test that fractional epochs are floored on construction."""
    assert DateValue(1.5).timestamp() == 1
    assert isinstance(DateValue(1.5).timestamp(), int)
    assert DateValue(-1.5).epoch == -2


def test_date_value_rejects_out_of_range_epoch():
    """Test that DateValue validates its epoch."""
    with pytest.raises(InvalidInstant):
        DateValue(10**20)


def test_duck_typed_host_values_are_instants():
    """Test that any object with the right methods is accepted."""
    assert isinstance(HostDate(SUNDAY), TemporalValue)
    assert to_timestamp(HostDate(SUNDAY)) == SUNDAY
    assert isinstance(HostText("x"), RenderableText)


def test_day_of_week_and_weekend():
    """Test ISO weekday numbers and the weekend check."""
    sunday = DateDecorator(DateValue(SUNDAY))
    monday = DateDecorator(HostDate(MONDAY))
    assert sunday.day_of_week() == 7
    assert sunday.is_weekend()
    assert monday.day_of_week() == 1
    assert not monday.is_weekend()


def test_iso8601():
    """Test the ISO 8601 rendering of the owner."""
    assert DateDecorator(DateValue(SUNDAY)).iso8601() == "2020-01-05T00:00:00+00:00"


def test_friendly_delegates():
    """Test that friendly describes the owner relative to now."""
    decorated = DateDecorator(DateValue(SUNDAY))
    assert decorated.friendly(now=SUNDAY + 7200) == "2 hours ago"
    assert decorated.friendly(now=SUNDAY - 1) == "5 January 2020"


def test_interval_honours_granularity():
    """Test that interval passes its granularity through."""
    decorated = DateDecorator(DateValue(SUNDAY))
    assert decorated.interval(now=SUNDAY + 90061) == "1 day 1 hour"
    assert decorated.interval(3, now=SUNDAY + 90061) == "1 day 1 hour 1 minute"
    # Future owners report the magnitude
    assert decorated.interval(now=SUNDAY - 60) == "1 minute"


def test_nice_range_delegates():
    """Test that nice_range uses the owner as the range start."""
    decorated = DateDecorator(DateValue.of("2020-01-05"))
    assert decorated.nice_range("2020-01-20", now="2020-01-01") == "5th–20th January"
    assert (
        decorated.nice_range(MONDAY, "abbreviated", now="2021-01-01")
        == "5th–6th Jan 2020"
    )


def test_decorator_uses_owner_timezone_by_default():
    """Test that every helper sees the same calendar day as the owner."""
    owner = DateValue(SUNDAY_LATE, tz="Pacific/Auckland")
    decorated = DateDecorator(owner)
    assert decorated.tz == "Pacific/Auckland"
    assert decorated.iso8601() == "2020-01-06T12:00:00+13:00"
    assert decorated.day_of_week() == 1
    assert decorated.friendly(now=SUNDAY_LATE - 60) == owner.format("j F Y")
    assert decorated.friendly(now=SUNDAY_LATE - 60) == "6 January 2020"
    assert decorated.nice_range(SUNDAY_LATE, now=SUNDAY_LATE - 60) == "6th January"


def test_decorator_timezone_override():
    """Test that an explicit tz wins over the owner's zone."""
    decorated = DateDecorator(DateValue(SUNDAY_LATE), tz="Pacific/Auckland")
    assert decorated.friendly(now=SUNDAY_LATE - 60) == "6 January 2020"


def test_decorator_defaults_to_utc_without_owner_zone():
    """Test that owners without a tz attribute are read in UTC."""
    decorated = DateDecorator(HostDate(SUNDAY_LATE))
    assert decorated.tz == "UTC"
    assert decorated.friendly(now=SUNDAY_LATE - 60) == "5 January 2020"


def test_text_decorator_delegates():
    """Test that the text helpers run on the owner's display string."""
    decorated = TextDecorator(PlainText("the lord of the rings"))
    assert decorated.title_case() == "The Lord of the Rings"
    assert decorated.widont() == "the lord of the&nbsp;rings"
    assert decorated.slugged() == "the-lord-of-the-rings"


def test_text_decorator_accepts_host_text():
    """Test that any object with for_template can be decorated."""
    assert TextDecorator(HostText("Hello, World!")).slugged() == "hello-world"
