"""Formatter — renders DateValues through a single pattern engine.

Named styles, fixed wire formats and the per-field accessors are all
just patterns fed to :meth:`Formatter.format`.  The engine understands a
subset of the ICU date symbols plus the ``{o}`` token, which is replaced
by the day of month with its ordinal marker ("20th").
"""

from __future__ import annotations

from collections.abc import Iterator
from datetime import UTC, datetime, time, timedelta, tzinfo
from enum import Enum
from typing import NamedTuple

from datefield.exceptions import FormatError, InvalidArgumentError
from datefield.locale import EN_US, LocaleData
from datefield.value import DateValue

ORDINAL_TOKEN = "{o}"

URL_DATE_PATTERN = "yyyy-MM-dd"
RFC3339_PATTERN = "yyyy-MM-dd'T'HH:mm:ssxxx"


class Style(str, Enum):
    """Closed set of named styles; each maps to a locale pattern."""

    NICE = "Nice"
    LONG = "Long"
    FULL = "Full"
    SHORT = "Short"


class _Token(NamedTuple):
    kind: str  # "literal", "field" or "ordinal"
    text: str
    width: int = 0


# Longest run accepted for each pattern letter.
_MAX_WIDTH = {
    "y": 9, "Y": 9, "M": 5, "L": 5, "d": 2, "D": 3, "E": 5,
    "a": 1, "h": 2, "H": 2, "m": 2, "s": 2, "G": 5,
    "x": 3, "X": 3, "Z": 5,
}  # fmt: skip


def tokenize(pattern: str) -> Iterator[_Token]:
    """Split *pattern* into literal text, field runs and ordinal tokens."""
    i, n = 0, len(pattern)
    while i < n:
        if pattern.startswith(ORDINAL_TOKEN, i):
            yield _Token("ordinal", ORDINAL_TOKEN)
            i += len(ORDINAL_TOKEN)
            continue

        ch = pattern[i]
        if ch == "'":
            if pattern.startswith("''", i):
                yield _Token("literal", "'")
                i += 2
                continue
            # quoted run; '' inside stands for a single quote
            i += 1
            buf: list[str] = []
            while i < n:
                if pattern[i] == "'":
                    if pattern.startswith("''", i):
                        buf.append("'")
                        i += 2
                        continue
                    i += 1
                    break
                buf.append(pattern[i])
                i += 1
            yield _Token("literal", "".join(buf))
            continue

        if ch.isascii() and ch.isalpha():
            j = i
            while j < n and pattern[j] == ch:
                j += 1
            yield _Token("field", ch, j - i)
            i = j
            continue

        yield _Token("literal", ch)
        i += 1


def _quote(text: str) -> str:
    return "'" + text.replace("'", "''") + "'" if text else ""


def _offset(moment: datetime, *, colon: bool, zulu: bool, short: bool = False) -> str:
    delta = moment.utcoffset() or timedelta(0)
    if zulu and not delta:
        return "Z"
    total = int(delta.total_seconds()) // 60
    sign = "-" if total < 0 else "+"
    hours, minutes = divmod(abs(total), 60)
    if short and not minutes:
        return f"{sign}{hours:02d}"
    sep = ":" if colon else ""
    return f"{sign}{hours:02d}{sep}{minutes:02d}"


class Formatter:
    """Locale-aware renderer for :class:`DateValue`.

    Parameters:
        locale:   Locale tables used for names, styles and ordinals.
                  Defaults to ``en_US``.
        timezone: Display zone.  Datetime values are converted from UTC
                  into it; date-only values keep their calendar day.
    """

    def __init__(self, locale: LocaleData | None = None, timezone: tzinfo | None = None) -> None:
        self.locale = locale or EN_US
        self.timezone = timezone or UTC

    # ── entry point ──────────────────────────────────────────

    def format(self, value: DateValue, style_or_pattern: Style | str = Style.NICE) -> str:
        """Render *value* with a named style or a custom pattern."""
        style = self._as_style(style_or_pattern)
        if style is None:
            return self._render(self._localize(value, "format"), str(style_or_pattern))
        return self._format_style(value, style, "format")

    def nice(self, value: DateValue) -> str:
        return self._format_style(value, Style.NICE, "nice")

    def long(self, value: DateValue) -> str:
        return self._format_style(value, Style.LONG, "long")

    def full(self, value: DateValue) -> str:
        return self._format_style(value, Style.FULL, "full")

    def short(self, value: DateValue) -> str:
        return self._format_style(value, Style.SHORT, "short")

    def _format_style(self, value: DateValue, style: Style, operation: str) -> str:
        moment = self._localize(value, operation)
        pattern = self.locale.styles[style.value]
        if value.has_time:
            pattern += _quote(self.locale.datetime_join) + self.locale.time_pattern
        return self._render(moment, pattern)

    # ── fixed formats ────────────────────────────────────────

    def url_date(self, value: DateValue) -> str:
        """Machine sortable ``yyyy-MM-dd``."""
        return self._render(self._localize(value, "url_date"), URL_DATE_PATTERN)

    def rfc3339(self, value: DateValue) -> str:
        """``yyyy-MM-ddTHH:mm:ss±HH:mm``, offset always included."""
        return self._render(self._localize(value, "rfc3339"), RFC3339_PATTERN)

    # ── single-field accessors ───────────────────────────────

    def year(self, value: DateValue) -> str:
        return self._render(self._localize(value, "year"), "y")

    def month(self, value: DateValue) -> str:
        return self._render(self._localize(value, "month"), "MMMM")

    def short_month(self, value: DateValue) -> str:
        return self._render(self._localize(value, "short_month"), "MMM")

    def day_of_week(self, value: DateValue) -> str:
        return self._render(self._localize(value, "day_of_week"), "EEEE")

    def day_of_month(self, value: DateValue, with_ordinal: bool = False) -> str:
        pattern = ORDINAL_TOKEN if with_ordinal else "d"
        return self._render(self._localize(value, "day_of_month"), pattern)

    def time(self, value: DateValue) -> str:
        return self._render(self._localize(value, "time"), self.locale.time_pattern)

    def time12(self, value: DateValue) -> str:
        return self._render(self._localize(value, "time12"), "h:mm a")

    def time24(self, value: DateValue) -> str:
        return self._render(self._localize(value, "time24"), "HH:mm")

    def range_string(self, value: DateValue, other: DateValue, use_ordinal: bool = False) -> str:
        """Render two dates as a compact range, e.g. ``10 - 20 Oct 2000``.

        The shared month and year are only printed once.  Ranges that
        cross a month print both months; ranges that cross a year print
        both dates in full.
        """
        start = self._localize(value, "range_string")
        end = self._localize(other, "range_string")
        day = ORDINAL_TOKEN if use_ordinal else "d"

        if start.year != end.year:
            return f"{self._render(start, f'{day} MMM y')} - {self._render(end, f'{day} MMM y')}"
        if start.month != end.month:
            return f"{self._render(start, f'{day} MMM')} - {self._render(end, f'{day} MMM y')}"
        return f"{self._render(start, day)} - {self._render(end, f'{day} MMM y')}"

    # ── internals ────────────────────────────────────────────

    @staticmethod
    def _as_style(style_or_pattern: Style | str) -> Style | None:
        if isinstance(style_or_pattern, Style):
            return style_or_pattern
        try:
            return Style(style_or_pattern)
        except ValueError:
            return None

    def _localize(self, value: DateValue, operation: str) -> datetime:
        if value.calendar_date is None:
            raise FormatError(operation)
        if value.time_of_day is None:
            return datetime.combine(value.calendar_date, time(0), tzinfo=self.timezone)
        return value.as_datetime().astimezone(self.timezone)

    def _render(self, moment: datetime, pattern: str) -> str:
        parts: list[str] = []
        for token in tokenize(pattern):
            if token.kind == "literal":
                parts.append(token.text)
            elif token.kind == "ordinal":
                parts.append(self.locale.ordinal_for(moment.day))
            else:
                parts.append(self._field(moment, token.text, token.width))
        return "".join(parts)

    def _field(self, moment: datetime, letter: str, width: int) -> str:
        if letter not in _MAX_WIDTH or width > _MAX_WIDTH[letter]:
            raise InvalidArgumentError(letter * width, "unsupported pattern symbol")

        loc = self.locale
        if letter in "yY":
            if width == 2:
                return f"{moment.year % 100:02d}"
            return f"{moment.year:0{width}d}"
        if letter in "ML":
            if width <= 2:
                return f"{moment.month:0{width}d}"
            if width == 3:
                return loc.months_short[moment.month - 1]
            name = loc.months[moment.month - 1]
            return name if width == 4 else name[0]
        if letter == "d":
            return f"{moment.day:0{width}d}"
        if letter == "D":
            return f"{moment.timetuple().tm_yday:0{width}d}"
        if letter == "E":
            name = loc.weekdays[moment.weekday()]
            if width <= 3:
                return loc.weekdays_short[moment.weekday()]
            return name if width == 4 else name[0]
        if letter == "a":
            return loc.am_pm[0] if moment.hour < 12 else loc.am_pm[1]
        if letter == "h":
            return f"{(moment.hour % 12) or 12:0{width}d}"
        if letter == "H":
            return f"{moment.hour:0{width}d}"
        if letter == "m":
            return f"{moment.minute:0{width}d}"
        if letter == "s":
            return f"{moment.second:0{width}d}"
        if letter == "G":
            return loc.eras[1]
        if letter == "x":
            return _offset(moment, colon=width == 3, zulu=False, short=width == 1)
        if letter == "X":
            return _offset(moment, colon=width == 3, zulu=True, short=width == 1)
        # Z, ZZ, ZZZ: basic offset; ZZZZ: GMT prefixed; ZZZZZ: extended
        if width == 4:
            return "GMT" + _offset(moment, colon=True, zulu=False)
        if width == 5:
            return _offset(moment, colon=True, zulu=True)
        return _offset(moment, colon=False, zulu=False)
