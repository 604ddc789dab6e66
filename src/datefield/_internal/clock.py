"""Clock abstraction for testable time-dependent logic."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from datetime import UTC, datetime, timedelta
from typing import Protocol

import structlog

logger = structlog.get_logger()


class Clock(Protocol):
    """Protocol for getting the current time.  Inject a fake in tests."""

    def now(self) -> datetime: ...


class SystemClock:
    """Default clock backed by the real system time."""

    def now(self) -> datetime:
        return datetime.now(UTC)


class FixedClock:
    """Clock that can be pinned to a mock instant and released again.

    While no instant is set the clock reads real time, so a ``FixedClock``
    can be wired in once and toggled between the two states.  Naive
    instants are taken to be UTC.
    """

    def __init__(self, instant: datetime | None = None) -> None:
        self._instant: datetime | None = None
        if instant is not None:
            self.set(instant)

    @property
    def is_mocked(self) -> bool:
        return self._instant is not None

    def now(self) -> datetime:
        if self._instant is None:
            return datetime.now(UTC)
        return self._instant

    def set(self, instant: datetime) -> None:
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=UTC)
        self._instant = instant.astimezone(UTC)
        logger.debug("Clock mocked", instant=self._instant.isoformat())

    def clear(self) -> None:
        """Return to real time."""
        self._instant = None
        logger.debug("Clock mock cleared")

    def advance(self, **kwargs: float) -> None:
        """Move the mocked instant forward by ``timedelta`` keyword arguments."""
        if self._instant is None:
            raise RuntimeError("Cannot advance a clock that is not mocked")
        self._instant += timedelta(**kwargs)

    @contextmanager
    def mocked(self, instant: datetime) -> Iterator[FixedClock]:
        """Pin the clock for the duration of a ``with`` block."""
        previous = self._instant
        self.set(instant)
        try:
            yield self
        finally:
            self._instant = previous
