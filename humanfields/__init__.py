from .adapters import DateDecorator, DateValue, PlainText, RenderableText, TextDecorator
from .dates import format_date, friendly, interval, nice_range, ordinal_suffix
from .instant import Instant, InvalidInstant, Snapshot, TemporalValue, to_timestamp
from .text import slugged, title_case, widont
from .util import DAY, HOUR, MINUTE, SECOND, UNITS, WEEK, YEAR

__all__ = [
    "Instant",
    "InvalidInstant",
    "Snapshot",
    "TemporalValue",
    "to_timestamp",
    "format_date",
    "ordinal_suffix",
    "interval",
    "friendly",
    "nice_range",
    "title_case",
    "widont",
    "slugged",
    "DateValue",
    "PlainText",
    "RenderableText",
    "DateDecorator",
    "TextDecorator",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    "WEEK",
    "YEAR",
    "UNITS",
]
