"""
calchrono.chronologies.iso
--------------------------
The ISO-8601 calendar: proleptic Gregorian with eras BCE (0) and CE (1).
Proleptic year 0 is 1 BCE.
"""

from __future__ import annotations

from typing import Tuple

from ..core.time import (
    epoch_day_to_gregorian,
    gregorian_month_length,
    gregorian_to_epoch_day,
    is_gregorian_leap,
)
from ..core.types import Era, ValueRange
from .interfaces import Chronology

BCE = Era("ISO", 0, "BCE")
CE = Era("ISO", 1, "CE")


class IsoChronology(Chronology):
    name = "ISO"
    eras = (BCE, CE)
    months_per_year = 12
    min_year = -999_999_999
    max_year = 999_999_999
    day_of_month_range = ValueRange.of(1, 31, smallest_maximum=28)
    day_of_year_range = ValueRange.of(1, 366, smallest_maximum=365)

    def is_leap_year(self, year: int) -> bool:
        return is_gregorian_leap(year)

    def month_length(self, year: int, month: int) -> int:
        return gregorian_month_length(year, month)

    def year_length(self, year: int) -> int:
        return 366 if is_gregorian_leap(year) else 365

    def to_epoch_day(self, year: int, month: int, day: int) -> int:
        return gregorian_to_epoch_day(year, month, day)

    def from_epoch_day(self, epoch_day: int) -> Tuple[int, int, int]:
        return epoch_day_to_gregorian(epoch_day)


ISO = IsoChronology()
