"""Angle between the hands of an analog clock."""

from __future__ import annotations

import enum
import math

from datetasks._constants import (
    DEGREES_PER_HOUR_HAND_MINUTE,
    DEGREES_PER_MINUTE_HAND_MINUTE,
    LEGACY_HOUR_SHIFT,
    LEGACY_REFLEX_DIVISOR,
)
from datetasks._timestamps import DateLike, as_utc_datetime


class ClockAngleMode(enum.StrEnum):
    """How the hand angle is derived from the UTC time."""

    TEXTBOOK = "textbook"
    LEGACY = "legacy"


def _raw_angle(hour12: int, minute: int) -> float:
    hour_hand = DEGREES_PER_HOUR_HAND_MINUTE * (60 * hour12 + minute)
    minute_hand = DEGREES_PER_MINUTE_HAND_MINUTE * minute
    return abs(hour_hand - minute_hand)


def _textbook_degrees(hour: int, minute: int) -> float:
    raw = _raw_angle(hour % 12, minute)
    return min(raw, 360 - raw)


def _legacy_degrees(hour: int, minute: int) -> float:
    # Hour is shifted back and wrapped into 0-23; 12 itself is kept.
    shifted = (hour - LEGACY_HOUR_SHIFT) % 24
    if shifted > 12:
        shifted -= 12
    raw = _raw_angle(shifted, minute)
    if raw > 180:
        raw /= LEGACY_REFLEX_DIVISOR
    return raw


def angle_between_clock_hands(
    date: DateLike,
    *,
    mode: ClockAngleMode = ClockAngleMode.TEXTBOOK,
) -> float:
    """Return the angle in radians between the hour and minute hands.

    The UTC hour and minute of ``date`` are placed on a 12-hour dial.
    Seconds are ignored.

    Args:
        date: The time to read.
        mode: ``TEXTBOOK`` returns the smaller of the two angles between the
            hands (0 to pi). ``LEGACY`` reproduces the older behavior: the
            hour is shifted back three hours and reflex angles are divided
            by three.

    Returns:
        The angle in radians.
    """
    dt = as_utc_datetime(date)
    if ClockAngleMode(mode) is ClockAngleMode.LEGACY:
        degrees = _legacy_degrees(dt.hour, dt.minute)
    else:
        degrees = _textbook_degrees(dt.hour, dt.minute)
    return math.pi * degrees / 180
