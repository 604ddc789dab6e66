"""DateField — a parsed value bound to the service that formats it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from datefield.arithmetic import modify
from datefield.formatter import Style
from datefield.value import DateValue

if TYPE_CHECKING:
    from datefield.service import DateService


@dataclass(frozen=True)
class DateField:
    """Opaque date handed to templates and form renderers.

    Every accessor delegates to the owning service's formatter or
    relative-time calculator.  Accessors raise
    :class:`~datefield.exceptions.FormatError` on null values, so check
    :attr:`is_null` first.
    """

    value: DateValue
    service: DateService

    @property
    def is_null(self) -> bool:
        return self.value.is_null

    def get_value(self) -> str | None:
        """Canonical string, as persisted by storage layers."""
        return self.value.canonical()

    def __str__(self) -> str:
        return str(self.value)

    # ── styles and patterns ──────────────────────────────────

    def format(self, style_or_pattern: Style | str) -> str:
        return self.service.formatter.format(self.value, style_or_pattern)

    def nice(self) -> str:
        return self.service.formatter.nice(self.value)

    def long(self) -> str:
        return self.service.formatter.long(self.value)

    def full(self) -> str:
        return self.service.formatter.full(self.value)

    def short(self) -> str:
        return self.service.formatter.short(self.value)

    def url_date(self) -> str:
        return self.service.formatter.url_date(self.value)

    def rfc3339(self) -> str:
        return self.service.formatter.rfc3339(self.value)

    # ── fields ───────────────────────────────────────────────

    def year(self) -> str:
        return self.service.formatter.year(self.value)

    def month(self) -> str:
        return self.service.formatter.month(self.value)

    def short_month(self) -> str:
        return self.service.formatter.short_month(self.value)

    def day_of_week(self) -> str:
        return self.service.formatter.day_of_week(self.value)

    def day_of_month(self, with_ordinal: bool = False) -> str:
        return self.service.formatter.day_of_month(self.value, with_ordinal)

    def time(self) -> str:
        return self.service.formatter.time(self.value)

    def time12(self) -> str:
        return self.service.formatter.time12(self.value)

    def time24(self) -> str:
        return self.service.formatter.time24(self.value)

    def range_string(self, other: DateField, use_ordinal: bool = False) -> str:
        return self.service.formatter.range_string(self.value, other.value, use_ordinal)

    # ── relative time ────────────────────────────────────────

    def ago(self, use_singular_unit: bool = False, significance: int | float | None = None) -> str:
        if significance is None:
            significance = self.service.settings.significance
        return self.service.relative.ago(self.value, use_singular_unit, significance)

    def time_diff(self, significance: int | float | None = None, include_seconds: bool = True) -> str:
        if significance is None:
            significance = self.service.settings.significance
        return self.service.relative.time_diff(self.value, significance, include_seconds)

    def time_diff_in(self, unit: str) -> str:
        return self.service.relative.time_diff_in(self.value, unit)

    def is_today(self) -> bool:
        return self.service.relative.is_today(self.value)

    def in_past(self) -> bool:
        return self.service.relative.in_past(self.value)

    def in_future(self) -> bool:
        return self.service.relative.in_future(self.value)

    # ── arithmetic ───────────────────────────────────────────

    def modify(self, expression: str) -> DateField:
        """Return a new field moved by *expression* (``"+1 day"``)."""
        return DateField(modify(self.value, expression), self.service)
