"""Base class shared by the grammar-driven date string parsers."""

from __future__ import annotations

import enum
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone, tzinfo

from lark import Lark
from lark.exceptions import LarkError, VisitError

from datetasks._constants import DEFAULT_TZ
from datetasks._errors import (
    ERR_MSG_INVALID_DATE_FIELD,
    ERR_MSG_INVALID_DATE_STRING,
    DateTaskError,
    InvalidDateFieldError,
    InvalidDateStringError,
)
from datetasks._timestamps import to_epoch_ms

logger = logging.getLogger(__name__)


class DateFormat(enum.StrEnum):
    RFC2822 = "rfc2822"
    ISO8601 = "iso8601"


@dataclass(frozen=True)
class CalendarDate:
    year: int
    month: int = 1
    day: int = 1


@dataclass(frozen=True)
class ClockTime:
    hour: int = 0
    minute: int = 0
    second: int = 0
    millisecond: int = 0


@dataclass(frozen=True)
class DateFields:
    """Fields collected from a parsed date string.

    ``offset`` is None when the string names no zone; ``has_time`` tells
    whether a time of day was present.
    """

    date: CalendarDate
    time: ClockTime = ClockTime()
    offset: timedelta | None = None
    has_time: bool = False


def field_error(details: str) -> InvalidDateFieldError:
    return InvalidDateFieldError(ERR_MSG_INVALID_DATE_FIELD, details)


def parse_fixed_width(token: str, width: int, name: str) -> int:
    """Parse a numeric token that must have exactly ``width`` digits."""
    if len(token) != width:
        raise field_error(f"{name} {token!r} must have {width} digits")
    return int(token)


class DateParser(ABC):
    """A date string format backed by a lark grammar.

    Subclasses provide the compiled grammar and a transformer turning its
    parse tree into ``DateFields``. ``parse`` is lenient and returns None on
    failure; ``parse_strict`` raises.
    """

    name: DateFormat

    @property
    @abstractmethod
    def grammar(self) -> Lark: ...

    @abstractmethod
    def transform(self, tree) -> DateFields: ...

    def naive_zone(self, fields: DateFields, default_tz: tzinfo) -> tzinfo:
        """Zone for strings that carry no offset."""
        return default_tz

    def parse_fields(self, value: str) -> DateFields:
        if not isinstance(value, str):
            raise InvalidDateStringError(
                ERR_MSG_INVALID_DATE_STRING,
                f"expected str, got {type(value).__name__}",
            )
        try:
            tree = self.grammar.parse(value.strip())
            return self.transform(tree)
        except VisitError as exc:
            if isinstance(exc.orig_exc, DateTaskError):
                raise exc.orig_exc from exc
            raise InvalidDateStringError(
                ERR_MSG_INVALID_DATE_STRING,
                f"{self.name} transform failed for {value!r}: {exc.orig_exc}",
                wrapped=exc,
            ) from exc
        except LarkError as exc:
            raise InvalidDateStringError(
                ERR_MSG_INVALID_DATE_STRING,
                f"{value!r} is not a valid {self.name} date: {exc}",
                wrapped=exc,
            ) from exc

    def to_datetime(
        self, value: str, *, default_tz: tzinfo = DEFAULT_TZ
    ) -> datetime:
        """Parse ``value`` into an aware datetime.

        Raises:
            InvalidDateStringError: If ``value`` does not match the grammar.
            InvalidDateFieldError: If a field is out of range.
            UnknownTimeZoneError: If a zone name is not recognized.
        """
        fields = self.parse_fields(value)
        d, t = fields.date, fields.time
        end_of_day = t.hour == 24
        if end_of_day and (t.minute or t.second or t.millisecond):
            raise field_error(f"24:00 must not carry minutes or seconds in {value!r}")
        try:
            tz = (
                timezone(fields.offset)
                if fields.offset is not None
                else self.naive_zone(fields, default_tz)
            )
            dt = datetime(
                d.year,
                d.month,
                d.day,
                0 if end_of_day else t.hour,
                t.minute,
                t.second,
                t.millisecond * 1000,
                tzinfo=tz,
            )
            if end_of_day:
                dt += timedelta(days=1)
        except (ValueError, OverflowError) as exc:
            raise InvalidDateFieldError(
                ERR_MSG_INVALID_DATE_FIELD,
                f"{value!r}: {exc}",
                wrapped=exc,
            ) from exc
        return dt

    def parse_strict(self, value: str, *, default_tz: tzinfo = DEFAULT_TZ) -> int:
        """Parse ``value`` into epoch milliseconds, raising on failure."""
        dt = self.to_datetime(value, default_tz=default_tz)
        try:
            return to_epoch_ms(dt)
        except OverflowError as exc:
            # Offsets can push an instant at the calendar edge out of range.
            raise InvalidDateFieldError(
                ERR_MSG_INVALID_DATE_FIELD,
                f"{value!r} falls outside the representable range",
                wrapped=exc,
            ) from exc

    def parse(self, value: str, *, default_tz: tzinfo = DEFAULT_TZ) -> int | None:
        """Parse ``value`` into epoch milliseconds, or None if it is invalid."""
        try:
            return self.parse_strict(value, default_tz=default_tz)
        except DateTaskError as exc:
            logger.debug("rejected %s input: %s", self.name, exc.internal())
            return None
