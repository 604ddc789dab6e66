"""DateArithmetic — apply interval expressions like ``"+2 weeks"``.

An expression is one or more ``[+|-]<n> <unit>`` clauses.  Fixed-length
units are added to the UTC instant; months and years move the calendar
and clamp the day to the end of a shorter target month.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import timedelta

import structlog
from dateutil.relativedelta import relativedelta

from datefield.exceptions import InvalidArgumentError
from datefield.value import DateValue

logger = structlog.get_logger()

_CLAUSE_RE = re.compile(r"\s*([+-]?)\s*(\d+)\s*([a-z]+)\s*", re.IGNORECASE)

_FIXED_UNITS: dict[str, timedelta] = {
    "sec": timedelta(seconds=1),
    "second": timedelta(seconds=1),
    "min": timedelta(minutes=1),
    "minute": timedelta(minutes=1),
    "hour": timedelta(hours=1),
    "day": timedelta(days=1),
    "week": timedelta(weeks=1),
    "fortnight": timedelta(weeks=2),
}
_CALENDAR_UNITS: dict[str, int] = {"month": 1, "year": 12}


@dataclass(frozen=True)
class Interval:
    """A parsed interval: whole months plus an exact duration."""

    months: int = 0
    duration: timedelta = timedelta(0)


def _normalize_unit(word: str) -> str:
    unit = word.lower()
    if unit not in _FIXED_UNITS and unit not in _CALENDAR_UNITS and unit.endswith("s"):
        unit = unit[:-1]
    return unit


def parse_interval(expression: str) -> Interval:
    """Parse *expression* into an :class:`Interval`.

    Raises:
        InvalidArgumentError: On unknown units or text outside the grammar.
    """
    months = 0
    duration = timedelta(0)
    pos = 0
    text = expression.strip()
    if not text:
        raise InvalidArgumentError(expression, "empty interval expression")

    while pos < len(text):
        m = _CLAUSE_RE.match(text, pos)
        if not m or m.end() == pos:
            raise InvalidArgumentError(expression, f"cannot read interval near '{text[pos:]}'")
        sign = -1 if m.group(1) == "-" else 1
        amount = sign * int(m.group(2))
        unit = _normalize_unit(m.group(3))

        if unit not in _FIXED_UNITS and unit not in _CALENDAR_UNITS:
            raise InvalidArgumentError(m.group(3), f"unknown interval unit in '{expression}'")
        try:
            if unit in _FIXED_UNITS:
                duration += amount * _FIXED_UNITS[unit]
            else:
                months += amount * _CALENDAR_UNITS[unit]
        except OverflowError as e:
            raise InvalidArgumentError(expression, "result is outside the supported calendar") from e
        pos = m.end()

    return Interval(months=months, duration=duration)


def modify(value: DateValue, expression: str) -> DateValue:
    """Return a new value moved by *expression*; null values stay null."""
    interval = parse_interval(expression)
    if value.calendar_date is None:
        return value

    moment = value.as_datetime()
    try:
        # relativedelta clamps the day to the end of a shorter month
        moment = moment + relativedelta(months=interval.months) + interval.duration
    except (OverflowError, ValueError) as e:
        raise InvalidArgumentError(expression, "result is outside the supported calendar") from e

    logger.debug("Modified date", value=str(value), expression=expression, result=moment.isoformat())
    return DateValue.from_datetime(moment, keep_time=value.has_time)
