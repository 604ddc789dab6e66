"""datefield — parse, format and compare calendar dates.

Raw values of any shape go in through :meth:`DateService.create` and come
out as immutable dates that render under locale patterns, move by
interval expressions and describe themselves relative to a clock.
"""

from datefield._internal.clock import Clock, FixedClock, SystemClock
from datefield.arithmetic import modify, parse_interval
from datefield.exceptions import (
    DateFieldError,
    FormatError,
    InvalidArgumentError,
    InvalidFormatError,
)
from datefield.field import DateField
from datefield.formatter import Formatter, Style
from datefield.locale import LocaleData, get_locale, register_locale
from datefield.parser import DateParser
from datefield.relative import RelativeTimeCalculator
from datefield.service import DateService
from datefield.settings import DateSettings
from datefield.value import DateValue

__all__ = [
    "Clock",
    "DateField",
    "DateFieldError",
    "DateParser",
    "DateService",
    "DateSettings",
    "DateValue",
    "FixedClock",
    "FormatError",
    "Formatter",
    "InvalidArgumentError",
    "InvalidFormatError",
    "LocaleData",
    "RelativeTimeCalculator",
    "Style",
    "SystemClock",
    "get_locale",
    "modify",
    "parse_interval",
    "register_locale",
]
