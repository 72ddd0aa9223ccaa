"""RFC 2822 date-time parser.

Accepts the RFC 2822 section 3.3 syntax, including the obsolete forms from
section 4.3, plus the looser ``Month day, year`` ordering that permissive
date parsers understand::

    Tue, 26 Jan 2016 13:48:02 GMT
    Sun, 17 May 1998 03:00:00 GMT+01
    Thu, 01 Jan 1970 00:00:00 -0500 (EST)
    December 17, 1995 03:24:00
"""

from __future__ import annotations

from datetime import timedelta

from lark import Lark, Token, Transformer

from datetasks._errors import ERR_MSG_UNKNOWN_TIME_ZONE, UnknownTimeZoneError
from datetasks.parsing._base import (
    CalendarDate,
    ClockTime,
    DateFields,
    DateFormat,
    DateParser,
    field_error,
)

GRAMMAR = r"""
start: day_of_week? _date time? zone?

day_of_week: WORD ","?

_date: rfc_date | loose_date
rfc_date: INT WORD INT
loose_date: WORD INT ","? INT

time: INT ":" INT (":" INT)?

zone: SIGN INT          -> numeric_zone
    | WORD (SIGN INT)?  -> named_zone

SIGN: "+" | "-"
WORD: /[A-Za-z]+/
INT: /[0-9]+/
COMMENT: /\([^()]*\)/

%import common.WS
%ignore WS
%ignore COMMENT
"""

_parser = Lark(GRAMMAR, parser="earley", lexer="basic")

MONTHS = (
    "january", "february", "march", "april", "may", "june",
    "july", "august", "september", "october", "november", "december",
)

DAYS_OF_WEEK = (
    "monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday",
)

# Named zones from RFC 2822 section 3.3 and 4.3, in hours east of UTC.
ZONE_OFFSETS: dict[str, int] = {
    "ut": 0, "utc": 0, "gmt": 0, "z": 0,
    "est": -5, "edt": -4,
    "cst": -6, "cdt": -5,
    "mst": -7, "mdt": -6,
    "pst": -8, "pdt": -7,
}

MIN_NAME_PREFIX = 3


def _match_name(word: str, names: tuple[str, ...]) -> int | None:
    """Index of the name that ``word`` spells or abbreviates (3+ letters)."""
    word = word.lower()
    if len(word) < MIN_NAME_PREFIX:
        return None
    for i, name in enumerate(names):
        if name.startswith(word):
            return i
    return None


def _month(word: str) -> int:
    index = _match_name(word, MONTHS)
    if index is None:
        raise field_error(f"unknown month name {word!r}")
    return index + 1


def _year(token: str) -> int:
    year = int(token)
    if len(token) == 2:
        return year + (2000 if year < 50 else 1900)
    if len(token) == 3:
        return year + 1900
    return year


def _two_digit_field(token: str, name: str, upper: int) -> int:
    if len(token) > 2 or int(token) > upper:
        raise field_error(f"{name} {token!r} out of range 0-{upper}")
    return int(token)


def _numeric_offset(sign: str, digits: str) -> timedelta:
    if len(digits) <= 2:
        hours, minutes = int(digits), 0
    elif len(digits) == 4:
        hours, minutes = int(digits[:2]), int(digits[2:])
    else:
        raise field_error(f"zone offset {digits!r} must be hh or hhmm")
    if minutes > 59:
        raise field_error(f"zone offset minutes {minutes} out of range")
    offset = timedelta(hours=hours, minutes=minutes)
    return -offset if sign == "-" else offset


class _Rfc2822Transformer(Transformer):
    def day_of_week(self, children: list[Token]) -> None:
        (word,) = children
        if _match_name(word, DAYS_OF_WEEK) is None:
            raise field_error(f"unknown day name {word!r}")
        return None

    def rfc_date(self, children: list[Token]) -> CalendarDate:
        day, month, year = children
        return CalendarDate(_year(year), _month(month), int(day))

    def loose_date(self, children: list[Token]) -> CalendarDate:
        month, day, year = children
        return CalendarDate(_year(year), _month(month), int(day))

    def time(self, children: list[Token]) -> ClockTime:
        hour = _two_digit_field(children[0], "hour", 23)
        minute = _two_digit_field(children[1], "minute", 59)
        second = _two_digit_field(children[2], "second", 59) if len(children) > 2 else 0
        return ClockTime(hour, minute, second)

    def numeric_zone(self, children: list[Token]) -> timedelta:
        sign, digits = children
        return _numeric_offset(sign, digits)

    def named_zone(self, children: list[Token]) -> timedelta:
        name = children[0].lower()
        if name not in ZONE_OFFSETS:
            raise UnknownTimeZoneError(
                ERR_MSG_UNKNOWN_TIME_ZONE,
                f"unknown zone name {children[0]!r}",
            )
        offset = timedelta(hours=ZONE_OFFSETS[name])
        if len(children) > 1:
            offset += _numeric_offset(children[1], children[2])
        return offset

    def start(self, children: list) -> DateFields:
        date = time = offset = None
        for child in children:
            if isinstance(child, CalendarDate):
                date = child
            elif isinstance(child, ClockTime):
                time = child
            elif isinstance(child, timedelta):
                offset = child
        return DateFields(
            date=date,
            time=time or ClockTime(),
            offset=offset,
            has_time=time is not None,
        )


class Rfc2822Parser(DateParser):
    """Parser for RFC 2822 date-time strings."""

    name = DateFormat.RFC2822

    @property
    def grammar(self) -> Lark:
        return _parser

    def transform(self, tree) -> DateFields:
        return _Rfc2822Transformer().transform(tree)
