"""Locale tables — month/weekday names, style patterns and phrasing rules.

Only a handful of locales ship with the package.  Anything else can be
added at runtime with :func:`register_locale`.
"""

from __future__ import annotations

import warnings
from typing import Literal

import structlog
from pydantic import BaseModel, ConfigDict, Field, field_validator

from datefield.exceptions import InvalidArgumentError

logger = structlog.get_logger()

OrdinalRule = Literal["english", "period"]
STYLE_NAMES = frozenset({"Nice", "Long", "Full", "Short"})


class LocaleData(BaseModel):
    """Names and patterns for a single processing locale.

    Attributes:
        code:           Locale identifier (``"en_US"``).
        months:         Full month names, January first.
        months_short:   Abbreviated month names.
        weekdays:       Full weekday names, Monday first.
        weekdays_short: Abbreviated weekday names.
        am_pm:          Day-period markers for 12-hour clocks.
        styles:         Pattern for each named style (``Nice``, ``Long``, …).
        time_pattern:   Pattern appended to styles for values with a time.
        datetime_join:  Text placed between the date and time parts.
        ordinal:        Ordinal rule used by the ``{o}`` token.
        units:          Singular and plural unit names keyed by unit.
        ago:            Template for past differences.
        future:         Template for future differences.
        less_than_minute: Phrase used when seconds are not shown.
        eras:           Era names, BC first.
    """

    model_config = ConfigDict(frozen=True)

    code: str
    months: list[str]
    months_short: list[str]
    weekdays: list[str]
    weekdays_short: list[str]
    am_pm: tuple[str, str] = ("AM", "PM")
    styles: dict[str, str]
    time_pattern: str = "HH:mm"
    datetime_join: str = " "
    ordinal: OrdinalRule = "english"
    units: dict[str, tuple[str, str]]
    ago: str = "{difference} ago"
    future: str = "in {difference}"
    less_than_minute: str = "less than a minute"
    eras: tuple[str, str] = Field(default=("BC", "AD"))

    @field_validator("months", "months_short")
    @classmethod
    def _twelve_months(cls, v: list[str]) -> list[str]:
        if len(v) != 12:
            raise ValueError(f"expected 12 month names, got {len(v)}")
        return v

    @field_validator("weekdays", "weekdays_short")
    @classmethod
    def _seven_days(cls, v: list[str]) -> list[str]:
        if len(v) != 7:
            raise ValueError(f"expected 7 weekday names, got {len(v)}")
        return v

    @field_validator("styles")
    @classmethod
    def _all_styles(cls, v: dict[str, str]) -> dict[str, str]:
        missing = STYLE_NAMES - v.keys()
        if missing:
            raise ValueError(f"missing style patterns: {sorted(missing)}")
        return v

    @field_validator("units")
    @classmethod
    def _all_units(cls, v: dict[str, tuple[str, str]]) -> dict[str, tuple[str, str]]:
        missing = {"second", "minute", "hour", "day", "month", "year"} - v.keys()
        if missing:
            raise ValueError(f"missing unit names: {sorted(missing)}")
        return v

    # ── helpers ──────────────────────────────────────────────

    def ordinal_for(self, day: int) -> str:
        """Render *day* with this locale's ordinal marker."""
        if self.ordinal == "period":
            return f"{day}."
        if 11 <= day % 100 <= 13:
            suffix = "th"
        else:
            suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
        return f"{day}{suffix}"

    def unit_name(self, unit: str, count: int) -> str:
        singular, plural = self.units[unit]
        return singular if count == 1 else plural


_ENGLISH_UNITS = {
    "second": ("second", "seconds"),
    "minute": ("minute", "minutes"),
    "hour": ("hour", "hours"),
    "day": ("day", "days"),
    "month": ("month", "months"),
    "year": ("year", "years"),
}

_ENGLISH_MONTHS = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]  # fmt: skip

_ENGLISH_WEEKDAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]

EN_US = LocaleData(
    code="en_US",
    months=_ENGLISH_MONTHS,
    months_short=[m[:3] for m in _ENGLISH_MONTHS],
    weekdays=_ENGLISH_WEEKDAYS,
    weekdays_short=[d[:3] for d in _ENGLISH_WEEKDAYS],
    styles={
        "Nice": "MMM d, y",
        "Long": "MMMM d, y",
        "Full": "EEEE, MMMM d, y",
        "Short": "M/d/yy",
    },
    time_pattern="h:mm a",
    datetime_join=", ",
    units=_ENGLISH_UNITS,
)

EN_GB = LocaleData(
    code="en_GB",
    months=_ENGLISH_MONTHS,
    months_short=[m[:3] for m in _ENGLISH_MONTHS],
    weekdays=_ENGLISH_WEEKDAYS,
    weekdays_short=[d[:3] for d in _ENGLISH_WEEKDAYS],
    am_pm=("am", "pm"),
    styles={
        "Nice": "d MMM y",
        "Long": "d MMMM y",
        "Full": "EEEE, d MMMM y",
        "Short": "dd/MM/y",
    },
    time_pattern="HH:mm",
    datetime_join=", ",
    units=_ENGLISH_UNITS,
)

DE_DE = LocaleData(
    code="de_DE",
    months=[
        "Januar", "Februar", "März", "April", "Mai", "Juni",
        "Juli", "August", "September", "Oktober", "November", "Dezember",
    ],  # fmt: skip
    months_short=[
        "Jan.", "Feb.", "März", "Apr.", "Mai", "Juni",
        "Juli", "Aug.", "Sept.", "Okt.", "Nov.", "Dez.",
    ],  # fmt: skip
    weekdays=["Montag", "Dienstag", "Mittwoch", "Donnerstag", "Freitag", "Samstag", "Sonntag"],
    weekdays_short=["Mo.", "Di.", "Mi.", "Do.", "Fr.", "Sa.", "So."],
    am_pm=("AM", "PM"),
    styles={
        "Nice": "dd.MM.y",
        "Long": "d. MMMM y",
        "Full": "EEEE, d. MMMM y",
        "Short": "dd.MM.yy",
    },
    time_pattern="HH:mm",
    datetime_join=", ",
    ordinal="period",
    units={
        "second": ("Sekunde", "Sekunden"),
        "minute": ("Minute", "Minuten"),
        "hour": ("Stunde", "Stunden"),
        "day": ("Tag", "Tagen"),
        "month": ("Monat", "Monaten"),
        "year": ("Jahr", "Jahren"),
    },
    ago="vor {difference}",
    future="in {difference}",
    less_than_minute="weniger als einer Minute",
    eras=("v. Chr.", "n. Chr."),
)

_registry: dict[str, LocaleData] = {loc.code: loc for loc in (EN_US, EN_GB, DE_DE)}


def register_locale(locale: LocaleData) -> None:
    """Make *locale* available to :func:`get_locale` under its ``code``."""
    if locale.code in _registry:
        warnings.warn(
            f"Locale '{locale.code}' is already registered and will be replaced",
            UserWarning,
            stacklevel=2,
        )
    _registry[locale.code] = locale
    logger.info("Registered locale", code=locale.code)


def get_locale(code: str) -> LocaleData:
    """Look up a registered locale.  ``en-US`` and ``en_US`` are equivalent."""
    locale = _registry.get(code.replace("-", "_"))
    if locale is None:
        raise InvalidArgumentError(code, f"unknown locale (available: {', '.join(available_locales())})")
    return locale


def available_locales() -> list[str]:
    return sorted(_registry)
