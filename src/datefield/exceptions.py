"""Custom exceptions for the datefield package."""

from __future__ import annotations

from typing import Any

UNAMBIGUOUS_FORM = "y-MM-dd"


class DateFieldError(Exception):
    """Base exception for all date-related errors."""


class InvalidFormatError(DateFieldError, ValueError):
    """Raised when a raw date string is ambiguous or cannot be read."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"Invalid date: '{value}'. Use {UNAMBIGUOUS_FORM} to prevent this error.")


class FormatError(DateFieldError):
    """Raised when a null date is formatted or compared against the clock."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"Cannot run '{operation}' on a null date value")


class InvalidArgumentError(DateFieldError, ValueError):
    """Raised when an operation receives an argument it does not understand."""

    def __init__(self, argument: str, detail: str = "") -> None:
        self.argument = argument
        msg = f"Invalid argument '{argument}'"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)
