from __future__ import annotations
from typing import Any, Optional, Tuple

from ..core.types import (
    DAYS, WEEKS, MONTHS, QUARTERS, YEARS, ERAS, FOREVER,
    DayOfWeek, ValueRange,
)
from .base import DerivedRule, FieldRule


class _DayOfWeekRule(FieldRule):
    def reify(self, value: int) -> Any:
        # Convention: 1=Mon..7=Sun (ISO-like), shared by every built-in chronology.
        if self.is_valid_value(value):
            return DayOfWeek(value)
        return value


DAY_OF_WEEK = _DayOfWeekRule("DayOfWeek", DAYS, WEEKS, ValueRange.of(1, 7))
DAY_OF_MONTH = FieldRule("DayOfMonth", DAYS, MONTHS, ValueRange.of(1, 31, smallest_maximum=5))
DAY_OF_YEAR = FieldRule("DayOfYear", DAYS, YEARS, ValueRange.of(1, 366, smallest_maximum=365))
MONTH_OF_YEAR = FieldRule("MonthOfYear", MONTHS, YEARS, ValueRange.of(1, 13, smallest_maximum=12))
YEAR_OF_ERA = FieldRule("YearOfEra", YEARS, ERAS, ValueRange.of(1, 1_000_000_000))
PROLEPTIC_YEAR = FieldRule("ProlepticYear", YEARS, FOREVER, ValueRange.of(-999_999_999, 999_999_999))
ERA = FieldRule("Era", ERAS, FOREVER, ValueRange.of(-999, 999))

# The closed set every calendar date answers directly.
CHRONO_FIELDS: Tuple[FieldRule, ...] = (
    DAY_OF_WEEK,
    DAY_OF_MONTH,
    DAY_OF_YEAR,
    MONTH_OF_YEAR,
    YEAR_OF_ERA,
    PROLEPTIC_YEAR,
    ERA,
)


def _quarter_of_year(month: int) -> Optional[int]:
    # quarters are only defined on twelve-month years
    if not 1 <= month <= 12:
        return None
    return (month - 1) // 3 + 1


def _month_of_quarter(month: int) -> Optional[int]:
    if not 1 <= month <= 12:
        return None
    return (month - 1) % 3 + 1


def _aligned_week(day: int) -> Optional[int]:
    if day < 1:
        return None
    return (day - 1) // 7 + 1


QUARTER_OF_YEAR = DerivedRule(
    "QuarterOfYear", QUARTERS, YEARS, ValueRange.of(1, 4), MONTH_OF_YEAR, _quarter_of_year
)
MONTH_OF_QUARTER = DerivedRule(
    "MonthOfQuarter", MONTHS, QUARTERS, ValueRange.of(1, 3), MONTH_OF_YEAR, _month_of_quarter
)
ALIGNED_WEEK_OF_MONTH = DerivedRule(
    "AlignedWeekOfMonth", WEEKS, MONTHS, ValueRange.of(1, 5), DAY_OF_MONTH, _aligned_week
)
ALIGNED_WEEK_OF_YEAR = DerivedRule(
    "AlignedWeekOfYear", WEEKS, YEARS, ValueRange.of(1, 53), DAY_OF_YEAR, _aligned_week
)
