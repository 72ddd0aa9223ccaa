"""Conversions between date values and epoch milliseconds.

Every public operation accepts a ``DateLike``: either a ``datetime`` or an
``int`` count of milliseconds since 1970-01-01T00:00:00Z. Naive datetimes are
taken to be UTC.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from datetasks._constants import EPOCH
from datetasks._errors import ERR_MSG_INVALID_DATE_VALUE, InvalidDateValueError

DateLike = datetime | int

_ONE_MS = timedelta(milliseconds=1)


def as_utc_datetime(value: DateLike) -> datetime:
    """Return ``value`` as an aware UTC datetime."""
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
    return from_epoch_ms(value)


def to_epoch_ms(value: DateLike) -> int:
    """Return the epoch-millisecond count of a date value.

    Sub-millisecond precision is floored away.

    Raises:
        InvalidDateValueError: If ``value`` is neither a datetime nor an int.
    """
    if isinstance(value, datetime):
        return (as_utc_datetime(value) - EPOCH) // _ONE_MS
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    raise InvalidDateValueError(
        ERR_MSG_INVALID_DATE_VALUE,
        f"expected datetime or epoch milliseconds, got {type(value).__name__}",
    )


def from_epoch_ms(ms: int) -> datetime:
    """Return the aware UTC datetime for an epoch-millisecond count.

    Raises:
        InvalidDateValueError: If ``ms`` is not an int or falls outside the
            representable datetime range.
    """
    if not isinstance(ms, int) or isinstance(ms, bool):
        raise InvalidDateValueError(
            ERR_MSG_INVALID_DATE_VALUE,
            f"expected epoch milliseconds, got {type(ms).__name__}",
        )
    try:
        return EPOCH + ms * _ONE_MS
    except OverflowError as exc:
        raise InvalidDateValueError(
            ERR_MSG_INVALID_DATE_VALUE,
            f"epoch milliseconds {ms} out of range",
            wrapped=exc,
        ) from exc


def format_iso8601(value: DateLike) -> str:
    """Format a date value as ``YYYY-MM-DDTHH:mm:ss.sssZ`` in UTC."""
    dt = as_utc_datetime(value)
    return (
        f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d}"
        f"T{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}"
        f".{dt.microsecond // 1000:03d}Z"
    )
