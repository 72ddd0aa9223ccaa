"""Shared test fixtures."""

from datetime import datetime, timedelta, timezone

import pytest

from datetasks.parsing.iso8601 import Iso8601Parser
from datetasks.parsing.rfc2822 import Rfc2822Parser

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def utc_ms(*args, offset_hours=0):
    """Epoch milliseconds of a wall-clock time at a fixed UTC offset."""
    tz = timezone(timedelta(hours=offset_hours))
    return (datetime(*args, tzinfo=tz) - EPOCH) // timedelta(milliseconds=1)


@pytest.fixture
def rfc2822_parser():
    return Rfc2822Parser()


@pytest.fixture
def iso8601_parser():
    return Iso8601Parser()


@pytest.fixture
def ms():
    return utc_ms
