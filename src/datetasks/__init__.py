"""datetasks - Date parsing, leap years, time spans and clock angles."""

from __future__ import annotations

try:
    from datetasks._version import __version__
except ModuleNotFoundError:  # editable install without VCS metadata
    __version__ = "0.0.0.dev0"

from datetime import tzinfo

from datetasks._calendar import is_leap_year
from datetasks._clock import ClockAngleMode, angle_between_clock_hands
from datetasks._constants import DEFAULT_TZ
from datetasks._errors import (
    DateTaskError,
    InvalidDateFieldError,
    InvalidDateStringError,
    InvalidDateValueError,
    UnknownTimeZoneError,
)
from datetasks._timespan import TimeSpan, split_time_span, time_span_to_string
from datetasks._timestamps import DateLike, format_iso8601, from_epoch_ms, to_epoch_ms
from datetasks.parsing import DateFormat, DateParser, get_parser
from datetasks.parsing.iso8601 import Iso8601Parser
from datetasks.parsing.rfc2822 import Rfc2822Parser

__all__ = [
    "parse",
    "parse_rfc2822",
    "parse_rfc2822_strict",
    "parse_iso8601",
    "parse_iso8601_strict",
    "is_leap_year",
    "time_span_to_string",
    "split_time_span",
    "angle_between_clock_hands",
    "to_epoch_ms",
    "from_epoch_ms",
    "format_iso8601",
    "get_parser",
    "ClockAngleMode",
    "DateFormat",
    "DateLike",
    "DateParser",
    "TimeSpan",
    "DateTaskError",
    "InvalidDateFieldError",
    "InvalidDateStringError",
    "InvalidDateValueError",
    "UnknownTimeZoneError",
]

_rfc2822 = Rfc2822Parser()
_iso8601 = Iso8601Parser()

# Formats tried, in order, when parse() is not told which one to use.
_AUTO_DETECT_ORDER: tuple[DateParser, ...] = (_iso8601, _rfc2822)


def parse_rfc2822(value: str, *, default_tz: tzinfo = DEFAULT_TZ) -> int | None:
    """Parse an RFC 2822 date string into epoch milliseconds.

    Loose variants such as ``"December 17, 1995 03:24:00"`` are accepted.

    Args:
        value: The date string.
        default_tz: Zone applied when the string names none. Defaults to UTC.

    Returns:
        Milliseconds since 1970-01-01T00:00:00Z, or None if ``value`` is not
        a valid date.
    """
    return _rfc2822.parse(value, default_tz=default_tz)


def parse_rfc2822_strict(value: str, *, default_tz: tzinfo = DEFAULT_TZ) -> int:
    """Like parse_rfc2822, but raise instead of returning None.

    Raises:
        DateTaskError: If ``value`` is not a valid RFC 2822 date.
    """
    return _rfc2822.parse_strict(value, default_tz=default_tz)


def parse_iso8601(value: str, *, default_tz: tzinfo = DEFAULT_TZ) -> int | None:
    """Parse an ISO 8601 extended-format string into epoch milliseconds.

    Args:
        value: The date string, e.g. ``"2016-01-19T16:07:37+00:00"``.
        default_tz: Zone applied to date-time strings without an offset.
            Date-only strings are always UTC.

    Returns:
        Milliseconds since 1970-01-01T00:00:00Z, or None if ``value`` is not
        a valid date.
    """
    return _iso8601.parse(value, default_tz=default_tz)


def parse_iso8601_strict(value: str, *, default_tz: tzinfo = DEFAULT_TZ) -> int:
    """Like parse_iso8601, but raise instead of returning None.

    Raises:
        DateTaskError: If ``value`` is not a valid ISO 8601 date.
    """
    return _iso8601.parse_strict(value, default_tz=default_tz)


def parse(
    value: str,
    *,
    date_format: str | None = None,
    default_tz: tzinfo = DEFAULT_TZ,
) -> int | None:
    """Parse a date string into epoch milliseconds.

    Args:
        value: The date string.
        date_format: "rfc2822" or "iso8601". When None, ISO 8601 is tried
            first, then RFC 2822.
        default_tz: Zone applied when the string names none.

    Returns:
        Milliseconds since the epoch, or None if no format accepts ``value``.

    Raises:
        ValueError: If ``date_format`` is not a known format name.
    """
    if date_format is not None:
        return get_parser(date_format).parse(value, default_tz=default_tz)
    for parser in _AUTO_DETECT_ORDER:
        result = parser.parse(value, default_tz=default_tz)
        if result is not None:
            return result
    return None
