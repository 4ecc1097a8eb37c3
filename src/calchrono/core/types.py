from __future__ import annotations
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Optional

from .errors import InvalidFieldValueError


@dataclass(frozen=True)
class PeriodUnit:
    """A unit of time, ranked by its estimated length in seconds."""
    name: str
    seconds: int

    def __str__(self) -> str:
        return self.name


_SECONDS_PER_DAY = 86400
_SECONDS_PER_YEAR = 31556952  # 365.2425 days

DAYS = PeriodUnit("Days", _SECONDS_PER_DAY)
WEEKS = PeriodUnit("Weeks", 7 * _SECONDS_PER_DAY)
MONTHS = PeriodUnit("Months", _SECONDS_PER_YEAR // 12)
QUARTERS = PeriodUnit("Quarters", _SECONDS_PER_YEAR // 4)
YEARS = PeriodUnit("Years", _SECONDS_PER_YEAR)
ERAS = PeriodUnit("Eras", _SECONDS_PER_YEAR * 1_000_000_000)
FOREVER = PeriodUnit("Forever", 2**63 - 1)


@dataclass(frozen=True)
class ValueRange:
    """
    Legal range of a field. The maximum may vary with context,
    e.g. day-of-month is 1 - 28/31.
    """
    minimum: int
    largest_minimum: int
    smallest_maximum: int
    maximum: int

    def __post_init__(self) -> None:
        if self.minimum > self.largest_minimum:
            raise ValueError("minimum must not exceed largest_minimum")
        if self.smallest_maximum > self.maximum:
            raise ValueError("smallest_maximum must not exceed maximum")
        if self.largest_minimum > self.maximum:
            raise ValueError("largest_minimum must not exceed maximum")

    @classmethod
    def of(cls, minimum: int, maximum: int, smallest_maximum: Optional[int] = None) -> "ValueRange":
        if smallest_maximum is None:
            smallest_maximum = maximum
        return cls(minimum, minimum, smallest_maximum, maximum)

    @property
    def is_fixed(self) -> bool:
        return self.minimum == self.largest_minimum and self.smallest_maximum == self.maximum

    @property
    def size(self) -> int:
        return self.maximum - self.minimum + 1

    def is_valid_value(self, value: int) -> bool:
        return self.minimum <= value <= self.maximum

    def check_valid_value(self, value: int, rule: Any) -> int:
        if not self.is_valid_value(value):
            raise InvalidFieldValueError(
                rule, value, f"Invalid value for {rule} (valid values {self}): {value}"
            )
        return value

    def __str__(self) -> str:
        lo = str(self.minimum)
        if self.minimum != self.largest_minimum:
            lo += f"/{self.largest_minimum}"
        hi = str(self.maximum)
        if self.smallest_maximum != self.maximum:
            hi = f"{self.smallest_maximum}/{self.maximum}"
        return f"{lo} - {hi}"


@dataclass(frozen=True)
class Era:
    """
    Era of one chronology, compared by value.

    The era in force at epoch day 0 (1970-01-01 ISO) has value 1,
    later eras higher values and earlier eras lower ones.
    """
    chronology: str
    value: int
    name: str

    def __str__(self) -> str:
        return self.name


class DayOfWeek(IntEnum):
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7
