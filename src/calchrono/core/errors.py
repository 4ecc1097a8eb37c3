from __future__ import annotations

from typing import Any, Optional


class CalendricalError(Exception):
    """Base error."""


class DuplicateFieldError(CalendricalError, ValueError):
    """Raised when a field set would hold the same rule twice."""

    def __init__(self, rule: Any):
        super().__init__(f"Duplicate rules are not allowed: {rule}")
        self.rule = rule


class FieldNotFoundError(CalendricalError, LookupError):
    """Raised when a rule has no stored value and derivation was not requested."""

    def __init__(self, rule: Any):
        super().__init__(f"Rule not found: {rule}")
        self.rule = rule

    def __str__(self) -> str:
        return self.args[0]


class InvalidFieldValueError(CalendricalError, ValueError):
    """Raised when a value lies outside the legal range of its rule."""

    def __init__(self, rule: Any, value: int, message: Optional[str] = None):
        super().__init__(message or f"Invalid value for {rule}: {value}")
        self.rule = rule
        self.value = value


class UnsupportedFieldError(CalendricalError):
    """Raised when a date accessor is handed a field outside the closed set it dispatches on."""

    def __init__(self, rule: Any):
        super().__init__(f"Unsupported field: {rule}")
        self.rule = rule


class DateRangeExceededError(CalendricalError):
    """Raised when arithmetic or conversion leaves the representable date range."""


class UnknownChronologyError(CalendricalError, KeyError):
    """Raised when a chronology name is not registered."""

    def __str__(self) -> str:
        return self.args[0]
