"""Gregorian calendar predicates."""

from __future__ import annotations

from datetasks._timestamps import DateLike, as_utc_datetime


def is_leap_year_number(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def is_leap_year(date: DateLike) -> bool:
    """Return True if the UTC year of ``date`` is a Gregorian leap year.

    Only the year matters; month and day are ignored.
    """
    return is_leap_year_number(as_utc_datetime(date).year)
