"""Shared test fixtures."""

from datetime import UTC, datetime

import pytest

from datefield import DateParser, DateService, FixedClock, Formatter, RelativeTimeCalculator


@pytest.fixture
def clock():
    """Clock pinned to the moment most relative-time tests measure from."""
    return FixedClock(datetime(2000, 12, 31, 12, 0, 0, tzinfo=UTC))


@pytest.fixture
def parser():
    return DateParser()


@pytest.fixture
def datetime_parser():
    return DateParser(keep_time=True)


@pytest.fixture
def formatter():
    return Formatter()


@pytest.fixture
def relative(clock):
    return RelativeTimeCalculator(clock)


@pytest.fixture
def dates(clock):
    return DateService(clock=clock)
