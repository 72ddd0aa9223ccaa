"""Time span decomposition and ``HH:mm:ss.sss`` formatting."""

from __future__ import annotations

from dataclasses import dataclass

from datetasks._constants import (
    MIN_HOUR_FIELD_WIDTH,
    MS_PER_HOUR,
    MS_PER_MINUTE,
    MS_PER_SECOND,
)
from datetasks._timestamps import DateLike, to_epoch_ms


@dataclass(frozen=True)
class TimeSpan:
    """A millisecond duration split into display fields.

    The fields are magnitudes; ``negative`` carries the sign.
    """

    hours: int
    minutes: int
    seconds: int
    milliseconds: int
    negative: bool = False

    @property
    def total_milliseconds(self) -> int:
        total = (
            self.hours * MS_PER_HOUR
            + self.minutes * MS_PER_MINUTE
            + self.seconds * MS_PER_SECOND
            + self.milliseconds
        )
        return -total if self.negative else total

    def __str__(self) -> str:
        sign = "-" if self.negative else ""
        return (
            f"{sign}{self.hours:0{MIN_HOUR_FIELD_WIDTH}d}"
            f":{self.minutes:02d}:{self.seconds:02d}.{self.milliseconds:03d}"
        )


def split_time_span(ms: int) -> TimeSpan:
    """Split a signed millisecond count into hours, minutes, seconds and ms."""
    magnitude = abs(ms)
    hours, rest = divmod(magnitude, MS_PER_HOUR)
    minutes, rest = divmod(rest, MS_PER_MINUTE)
    seconds, milliseconds = divmod(rest, MS_PER_SECOND)
    return TimeSpan(hours, minutes, seconds, milliseconds, negative=ms < 0)


def time_span_to_string(start: DateLike, end: DateLike) -> str:
    """Format ``end - start`` as ``HH:mm:ss.sss``.

    Hours are padded to two digits and may grow wider. A negative span is
    prefixed with ``-``.
    """
    return str(split_time_span(to_epoch_ms(end) - to_epoch_ms(start)))
