"""ISO 8601 extended-format parser.

Accepted forms::

    2016
    2016-01
    2016-01-19
    2016-01-19T16:07
    2016-01-19T16:07:37
    2016-01-19T16:07:37.123
    2016-01-19T16:07:37Z
    2016-01-19T16:07:37+00:00
    +002016-01-19T16:07:37-0530

Date-only strings are UTC. Date-time strings without an offset use the
caller's default zone.
"""

from __future__ import annotations

from datetime import timedelta, timezone, tzinfo

from lark import Lark, Token, Transformer

from datetasks.parsing._base import (
    CalendarDate,
    ClockTime,
    DateFields,
    DateFormat,
    DateParser,
    field_error,
    parse_fixed_width,
)

GRAMMAR = r"""
start: date (_T time offset?)?

date: year (_DASH INT (_DASH INT)?)?

year: INT          -> plain_year
    | sign INT     -> expanded_year

time: INT ":" INT (":" INT (_FRACTION_SEP INT)?)?

offset: _Z              -> utc_offset
      | sign INT (":" INT)?  -> numeric_offset

sign: PLUS     -> plus
    | _DASH    -> minus

_T: "T"i
_Z: "Z"i
_DASH: "-"
_FRACTION_SEP: "." | ","
PLUS: "+"
INT: /[0-9]+/
"""

_parser = Lark(GRAMMAR, parser="earley", lexer="basic")

EXPANDED_YEAR_DIGITS = 6


class _Iso8601Transformer(Transformer):
    def plain_year(self, children: list[Token]) -> int:
        return parse_fixed_width(children[0], 4, "year")

    def expanded_year(self, children: list) -> int:
        sign, digits = children
        return sign * parse_fixed_width(digits, EXPANDED_YEAR_DIGITS, "expanded year")

    def plus(self, children: list) -> int:
        return 1

    def minus(self, children: list) -> int:
        return -1

    def date(self, children: list) -> CalendarDate:
        year = children[0]
        month = parse_fixed_width(children[1], 2, "month") if len(children) > 1 else 1
        day = parse_fixed_width(children[2], 2, "day") if len(children) > 2 else 1
        return CalendarDate(year, month, day)

    def time(self, children: list[Token]) -> ClockTime:
        hour = parse_fixed_width(children[0], 2, "hour")
        minute = parse_fixed_width(children[1], 2, "minute")
        second = parse_fixed_width(children[2], 2, "second") if len(children) > 2 else 0
        millisecond = 0
        if len(children) > 3:
            # Digits past milliseconds are truncated.
            millisecond = int(children[3][:3].ljust(3, "0"))
        if hour > 24 or minute > 59 or second > 59:
            raise field_error(f"time {hour:02d}:{minute:02d}:{second:02d} out of range")
        return ClockTime(hour, minute, second, millisecond)

    def utc_offset(self, children: list) -> timedelta:
        return timedelta(0)

    def numeric_offset(self, children: list) -> timedelta:
        sign, digits = children[0], children[1]
        if len(children) > 2:
            hours = parse_fixed_width(digits, 2, "offset hours")
            minutes = parse_fixed_width(children[2], 2, "offset minutes")
        elif len(digits) == 4:
            hours, minutes = int(digits[:2]), int(digits[2:])
        else:
            hours, minutes = parse_fixed_width(digits, 2, "offset hours"), 0
        if minutes > 59:
            raise field_error(f"offset minutes {minutes} out of range")
        return sign * timedelta(hours=hours, minutes=minutes)

    def start(self, children: list) -> DateFields:
        date = children[0]
        time = children[1] if len(children) > 1 else None
        offset = children[2] if len(children) > 2 else None
        return DateFields(
            date=date,
            time=time or ClockTime(),
            offset=offset,
            has_time=time is not None,
        )


class Iso8601Parser(DateParser):
    """Parser for ISO 8601 extended-format date and date-time strings."""

    name = DateFormat.ISO8601

    @property
    def grammar(self) -> Lark:
        return _parser

    def transform(self, tree) -> DateFields:
        return _Iso8601Transformer().transform(tree)

    def naive_zone(self, fields: DateFields, default_tz: tzinfo) -> tzinfo:
        if not fields.has_time:
            return timezone.utc
        return default_tz
