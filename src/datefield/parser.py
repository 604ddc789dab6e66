"""DateParser — turns raw input of unknown shape into a DateValue.

Accepted shapes, checked in order:

* the absence family (``None``, ``""``, ``False``, empty list or dict, zero dates)
  which all become a null value;
* integers and integer strings, read as Unix timestamps in UTC;
* year-first ISO dates (``2003-3-4``, ``2003-03-04 13:00:00``);
* day-and-month-first dates with a four digit year last
  (``4.3.2003``, ``04-03-2003``).

Slash dates and two digit years are refused outright: guessing the
month/day order silently is worse than failing.
"""

from __future__ import annotations

import math
import re
from datetime import UTC, date, datetime, time, timedelta
from typing import Any

import structlog

from datefield.exceptions import InvalidArgumentError, InvalidFormatError
from datefield.value import DateValue

logger = structlog.get_logger()

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)

_ZERO_DATE_RE = re.compile(r"0{4}-0{1,2}-0{1,2}(?:[ T]0{1,2}:0{2}(?::0{2})?)?")
_ZERO_SLASH_RE = re.compile(r"0+/0+/0+")
_INTEGER_RE = re.compile(r"[+-]?\d+")

_YEAR_FIRST_RE = re.compile(
    r"(?P<year>\d{4})-(?P<month>\d{1,2})-(?P<day>\d{1,2})"
    r"(?:[ T](?P<hour>\d{1,2}):(?P<minute>\d{2})(?::(?P<second>\d{2})(?:\.\d+)?)?"
    r"\s*(?P<offset>Z|[+-]\d{2}:?\d{2})?)?"
)
_YEAR_LAST_RE = re.compile(r"(?P<day>\d{1,2})(?P<sep>[.-])(?P<month>\d{1,2})(?P=sep)(?P<year>\d{4})")

# Month/day order cannot be told apart in these
_AMBIGUOUS_RES = (
    re.compile(r"\d{1,2}/\d{1,2}/\d{2,4}"),
    re.compile(r"\d{1,2}[-./]\d{1,2}[-./]\d{1,2}"),
)


class DateParser:
    """Normalizes raw values into :class:`DateValue` instances.

    Parameters:
        keep_time: Keep the time of day of the input (a datetime field).
                   When ``False`` the time is validated, then dropped.
    """

    def __init__(self, *, keep_time: bool = False) -> None:
        self.keep_time = keep_time

    def parse(self, raw: Any) -> DateValue:
        if self._is_absent(raw):
            return DateValue.null()

        if isinstance(raw, DateValue):
            return raw if self.keep_time else raw.date_only()
        if isinstance(raw, datetime):
            return DateValue.from_datetime(raw, keep_time=self.keep_time)
        if isinstance(raw, date):
            return DateValue(raw)

        if isinstance(raw, bool):
            raise InvalidArgumentError(repr(raw), "booleans other than False are not dates")
        if isinstance(raw, int):
            return self._from_timestamp(raw, raw)
        if isinstance(raw, float):
            if not math.isfinite(raw):
                raise InvalidFormatError(raw)
            return self._from_timestamp(math.floor(raw), raw)
        if isinstance(raw, str):
            return self._parse_string(raw.strip())

        raise InvalidArgumentError(repr(raw), f"unsupported date value type {type(raw).__name__}")

    # ── internals ────────────────────────────────────────────

    @staticmethod
    def _is_absent(raw: Any) -> bool:
        if raw is None or raw is False:
            return True
        if isinstance(raw, (list, tuple, dict)) and not raw:
            return True
        if isinstance(raw, str):
            text = raw.strip()
            return not text or bool(_ZERO_DATE_RE.fullmatch(text) or _ZERO_SLASH_RE.fullmatch(text))
        return False

    def _from_timestamp(self, seconds: int, raw: Any) -> DateValue:
        try:
            moment = _EPOCH + timedelta(seconds=seconds)
        except OverflowError as e:
            raise InvalidFormatError(raw) from e
        logger.debug("Read date as Unix timestamp", raw=raw, moment=moment.isoformat())
        return DateValue.from_datetime(moment, keep_time=self.keep_time)

    def _parse_string(self, text: str) -> DateValue:
        if _INTEGER_RE.fullmatch(text):
            return self._from_timestamp(int(text), text)

        m = _YEAR_FIRST_RE.fullmatch(text)
        if m:
            return self._build(text, m.group("year"), m.group("month"), m.group("day"), m)

        m = _YEAR_LAST_RE.fullmatch(text)
        if m:
            return self._build(text, m.group("year"), m.group("month"), m.group("day"), None)

        ambiguous = any(r.fullmatch(text) for r in _AMBIGUOUS_RES)
        logger.debug("Rejected date string", raw=text, ambiguous=ambiguous)
        raise InvalidFormatError(text)

    def _build(self, text: str, year: str, month: str, day: str, m: re.Match[str] | None) -> DateValue:
        try:
            d = date(int(year), int(month), int(day))
            if m is None or m.group("hour") is None:
                return DateValue(d)
            t = time(int(m.group("hour")), int(m.group("minute")), int(m.group("second") or 0))
        except ValueError as e:
            raise InvalidFormatError(text) from e

        moment = datetime.combine(d, t, tzinfo=UTC)
        offset = m.group("offset")
        if offset and offset != "Z":
            sign = -1 if offset[0] == "-" else 1
            digits = offset[1:].replace(":", "")
            delta = timedelta(hours=int(digits[:2]), minutes=int(digits[2:]))
            try:
                moment -= sign * delta
            except OverflowError as e:
                raise InvalidFormatError(text) from e
        return DateValue.from_datetime(moment, keep_time=self.keep_time)
