"""
calchrono.chronologies.coptic
-----------------------------
The Coptic calendar: twelve months of 30 days and a thirteenth month of
5 days, 6 in leap years. Every fourth year is leap, those with year % 4 == 3.

Coptic 0001-01-01 (AM) is 0284-08-29 (ISO). 1970-01-01 (ISO) is 1686-04-23 AM.
"""

from __future__ import annotations

from typing import Tuple

from ..core.types import Era, ValueRange
from .interfaces import Chronology

BEFORE_AM = Era("Coptic", 0, "BEFORE_AM")
AM = Era("Coptic", 1, "AM")

# Days from Coptic 0001-01-01 to epoch day 0.
EPOCH_DAY_DIFFERENCE = 615558


class CopticChronology(Chronology):
    name = "Coptic"
    eras = (BEFORE_AM, AM)
    months_per_year = 13
    min_year = -999_998
    max_year = 999_999
    day_of_month_range = ValueRange.of(1, 30, smallest_maximum=5)
    day_of_year_range = ValueRange.of(1, 366, smallest_maximum=365)

    def is_leap_year(self, year: int) -> bool:
        return year % 4 == 3

    def month_length(self, year: int, month: int) -> int:
        if month == 13:
            return 6 if self.is_leap_year(year) else 5
        return 30

    def year_length(self, year: int) -> int:
        return 366 if self.is_leap_year(year) else 365

    def day_of_year(self, year: int, month: int, day: int) -> int:
        return 30 * (month - 1) + day

    def to_epoch_day(self, year: int, month: int, day: int) -> int:
        days = (year - 1) * 365 + year // 4 + self.day_of_year(year, month, day) - 1
        return days - EPOCH_DAY_DIFFERENCE

    def from_epoch_day(self, epoch_day: int) -> Tuple[int, int, int]:
        days = epoch_day + EPOCH_DAY_DIFFERENCE
        year = (days * 4 + 1463) // 1461
        doy0 = days - ((year - 1) * 365 + year // 4)
        return year, doy0 // 30 + 1, doy0 % 30 + 1


COPTIC = CopticChronology()
