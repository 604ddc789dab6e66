"""DateValue — the immutable calendar value every component works on."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, date, datetime, time

from datefield.exceptions import FormatError


@dataclass(frozen=True)
class DateValue:
    """A calendar date, optionally with a UTC time of day, or null.

    Attributes:
        calendar_date: The date, or ``None`` for a null value.
        time_of_day:   Naive UTC time, or ``None`` for date-only values.

    A value is either fully null or fully valid.  The Unix epoch is an
    ordinary date here, never a stand-in for "no value".
    """

    calendar_date: date | None = None
    time_of_day: time | None = None

    def __post_init__(self) -> None:
        if self.calendar_date is None and self.time_of_day is not None:
            raise ValueError("A null DateValue cannot carry a time of day")
        if isinstance(self.calendar_date, datetime):
            raise TypeError("calendar_date must be a date, use DateValue.from_datetime()")

    # ── constructors ─────────────────────────────────────────

    @staticmethod
    def null() -> DateValue:
        return DateValue()

    @staticmethod
    def from_datetime(moment: datetime, *, keep_time: bool = True) -> DateValue:
        """Build a value from *moment*, converting aware datetimes to UTC."""
        if moment.tzinfo is not None:
            moment = moment.astimezone(UTC)
        if not keep_time:
            return DateValue(moment.date())
        return DateValue(moment.date(), moment.time().replace(microsecond=0, tzinfo=None))

    # ── state ────────────────────────────────────────────────

    @property
    def is_null(self) -> bool:
        return self.calendar_date is None

    @property
    def has_time(self) -> bool:
        return self.time_of_day is not None

    def as_datetime(self) -> datetime:
        """Return the aware UTC instant; date-only values sit at midnight."""
        if self.calendar_date is None:
            raise FormatError("as_datetime")
        return datetime.combine(self.calendar_date, self.time_of_day or time(0), tzinfo=UTC)

    def timestamp(self) -> int:
        """Seconds since the Unix epoch."""
        return int(self.as_datetime().timestamp())

    def date_only(self) -> DateValue:
        return DateValue(self.calendar_date)

    # ── serialization ────────────────────────────────────────

    def canonical(self) -> str | None:
        """``yyyy-MM-dd`` or ``yyyy-MM-dd HH:mm:ss``; ``None`` when null."""
        if self.calendar_date is None:
            return None
        d = self.calendar_date
        # strftime does not zero-pad years below 1000 on every platform
        text = f"{d.year:04d}-{d.month:02d}-{d.day:02d}"
        if self.time_of_day is not None:
            text += " " + self.time_of_day.strftime("%H:%M:%S")
        return text

    def __str__(self) -> str:
        return self.canonical() or ""
