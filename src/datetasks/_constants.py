"""Unit and calendar constants."""

from datetime import datetime, timezone

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
"""Reference instant for epoch-millisecond values."""

DEFAULT_TZ = timezone.utc
"""Zone applied to date-time strings that carry no offset."""

MIN_HOUR_FIELD_WIDTH = 2
"""Hours in a formatted time span are zero-padded to at least this width."""

DEGREES_PER_HOUR_HAND_MINUTE = 0.5
DEGREES_PER_MINUTE_HAND_MINUTE = 6.0

LEGACY_HOUR_SHIFT = 3
"""Hours subtracted from the UTC hour in legacy clock-angle mode."""

LEGACY_REFLEX_DIVISOR = 3
"""Legacy clock-angle mode divides reflex angles by this instead of reflecting."""
