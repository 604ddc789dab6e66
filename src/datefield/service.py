"""DateService — wires settings, locale and clock into the date components."""

from __future__ import annotations

from typing import Any

from datefield._internal.clock import Clock, SystemClock
from datefield.field import DateField
from datefield.formatter import Formatter
from datefield.parser import DateParser
from datefield.relative import RelativeTimeCalculator
from datefield.settings import DateSettings


class DateService:
    """Entry point for turning raw values into formatted dates.

    Owns one parser, formatter and relative-time calculator, all built
    from the same :class:`DateSettings`.  ``create`` is the only way raw
    input should become a date.

    Parameters:
        settings: Locale, display zone and defaults.  Defaults to
                  ``DateSettings()`` (en_US, UTC, date-only).
        clock:    Time source for relative times.  Defaults to
                  :class:`SystemClock`.
    """

    def __init__(self, settings: DateSettings | None = None, clock: Clock | None = None) -> None:
        self._settings = settings or DateSettings()
        self._clock: Clock = clock or SystemClock()
        locale = self._settings.locale_data
        self.parser = DateParser(keep_time=self._settings.keep_time)
        self.formatter = Formatter(locale, self._settings.zone)
        self.relative = RelativeTimeCalculator(self._clock, locale)

    def create(self, raw: Any) -> DateField:
        """Parse *raw* and bind the result to this service."""
        return DateField(self.parser.parse(raw), self)

    @property
    def settings(self) -> DateSettings:
        return self._settings

    @property
    def clock(self) -> Clock:
        return self._clock
