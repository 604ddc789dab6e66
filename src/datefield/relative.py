"""RelativeTimeCalculator — "2 months ago" / "in 24 hours" strings.

The elapsed time is first expressed in seconds and then promoted up a
fixed ladder of units.  A step is only taken once the count reaches
``ratio * significance``, so a higher significance keeps the result in a
finer unit for longer.  The final count is rounded half up.
"""

from __future__ import annotations

import math
from fractions import Fraction

from datefield._internal.clock import Clock, SystemClock
from datefield.exceptions import FormatError, InvalidArgumentError
from datefield.locale import EN_US, LocaleData
from datefield.value import DateValue

# (unit, ratio to the next coarser unit)
UNIT_LADDER: tuple[tuple[str, int | None], ...] = (
    ("second", 60),
    ("minute", 60),
    ("hour", 24),
    ("day", 30),
    ("month", 12),
    ("year", None),
)

_SECONDS_PER_UNIT = {
    "second": 1,
    "minute": 60,
    "hour": 3600,
    "day": 86400,
    "month": 86400 * 30,
    "year": 86400 * 30 * 12,
}


def round_half_up(amount: Fraction) -> int:
    return math.floor(amount + Fraction(1, 2))


def promote(seconds: Fraction | int, significance: int | float) -> tuple[str, Fraction]:
    """Return the unit and (unrounded) count *seconds* settle on."""
    if significance <= 0:
        raise InvalidArgumentError(str(significance), "significance must be positive")
    amount = abs(Fraction(seconds))
    for unit, ratio in UNIT_LADDER:
        if ratio is None or amount < ratio * significance:
            return unit, amount
        amount /= ratio
    raise AssertionError("unreachable")  # pragma: no cover


class RelativeTimeCalculator:
    """Describes a DateValue relative to the clock's current instant.

    Parameters:
        clock:  Time source.  Inject a :class:`FixedClock` in tests.
        locale: Unit names and ago/in templates.
    """

    def __init__(self, clock: Clock | None = None, locale: LocaleData | None = None) -> None:
        self._clock = clock or SystemClock()
        self.locale = locale or EN_US

    def ago(self, value: DateValue, use_singular_unit: bool = False, significance: int | float = 2) -> str:
        """Render the difference to now, e.g. ``"2 months ago"`` or ``"in 1 day"``.

        ``use_singular_unit`` marks callers that want a single coarse
        bucket; they pair it with a low ``significance`` (usually 1).  The
        calculation itself only depends on ``significance``.
        """
        seconds = self._elapsed(value, "ago")
        difference = self._describe(seconds, significance)
        template = self.locale.future if seconds < 0 else self.locale.ago
        return template.format(difference=difference)

    def time_diff(self, value: DateValue, significance: int | float = 2, include_seconds: bool = True) -> str:
        """The bare difference without direction, e.g. ``"2 months"``."""
        seconds = self._elapsed(value, "time_diff")
        if not include_seconds and abs(seconds) < 60:
            return self.locale.less_than_minute
        return self._describe(seconds, significance)

    def time_diff_in(self, value: DateValue, unit: str) -> str:
        """The difference forced into *unit* (``"days"``, ``"hour"`` …)."""
        key = unit.lower().rstrip("s")
        if key not in _SECONDS_PER_UNIT:
            raise InvalidArgumentError(unit, f"expected one of {', '.join(_SECONDS_PER_UNIT)}")
        seconds = self._elapsed(value, "time_diff_in")
        count = round_half_up(abs(seconds) / _SECONDS_PER_UNIT[key])
        return f"{count} {self.locale.unit_name(key, count)}"

    def is_today(self, value: DateValue) -> bool:
        if value.calendar_date is None:
            raise FormatError("is_today")
        return value.calendar_date == self._clock.now().date()

    def in_past(self, value: DateValue) -> bool:
        return self._elapsed(value, "in_past") > 0

    def in_future(self, value: DateValue) -> bool:
        return self._elapsed(value, "in_future") < 0

    # ── internals ────────────────────────────────────────────

    def _elapsed(self, value: DateValue, operation: str) -> Fraction:
        """Exact seconds from *value* to now; negative for the future."""
        if value.is_null:
            raise FormatError(operation)
        delta = self._clock.now() - value.as_datetime()
        return Fraction(delta.days * 86400 + delta.seconds) + Fraction(delta.microseconds, 1_000_000)

    def _describe(self, seconds: Fraction, significance: int | float) -> str:
        unit, amount = promote(seconds, significance)
        count = round_half_up(amount)
        return f"{count} {self.locale.unit_name(unit, count)}"
