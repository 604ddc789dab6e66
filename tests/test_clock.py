"""Tests for the clock implementations."""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from datefield import FixedClock, SystemClock

MOCK_NOW = datetime(2000, 12, 31, 12, 0, 0, tzinfo=UTC)


def test_system_clock_is_utc():
    now = SystemClock().now()
    assert now.tzinfo == UTC
    assert abs(now - datetime.now(UTC)) < timedelta(seconds=5)


def test_fixed_clock_returns_instant():
    clock = FixedClock(MOCK_NOW)
    assert clock.is_mocked
    assert clock.now() == MOCK_NOW


def test_naive_instant_is_utc():
    clock = FixedClock(datetime(2000, 12, 31, 12, 0, 0))
    assert clock.now() == MOCK_NOW


def test_aware_instant_normalized_to_utc():
    clock = FixedClock(datetime(2000, 12, 31, 14, 0, 0, tzinfo=timezone(timedelta(hours=2))))
    assert clock.now() == MOCK_NOW
    assert clock.now().tzinfo == UTC


def test_clear_returns_to_real_time():
    clock = FixedClock(MOCK_NOW)
    clock.clear()
    assert not clock.is_mocked
    assert clock.now().year >= 2024


def test_unmocked_by_default():
    assert not FixedClock().is_mocked


def test_advance():
    clock = FixedClock(MOCK_NOW)
    clock.advance(hours=1, minutes=30)
    assert clock.now() == datetime(2000, 12, 31, 13, 30, tzinfo=UTC)


def test_advance_requires_mock():
    with pytest.raises(RuntimeError):
        FixedClock().advance(seconds=1)


def test_mocked_context_restores_previous_state():
    clock = FixedClock()
    with clock.mocked(MOCK_NOW) as c:
        assert c is clock
        assert clock.now() == MOCK_NOW
    assert not clock.is_mocked

    clock.set(MOCK_NOW)
    with clock.mocked(datetime(1990, 1, 1, tzinfo=UTC)):
        assert clock.now().year == 1990
    assert clock.now() == MOCK_NOW


def test_mocked_context_restores_on_error():
    clock = FixedClock()
    with pytest.raises(KeyError):
        with clock.mocked(MOCK_NOW):
            raise KeyError("boom")
    assert not clock.is_mocked
