"""
calchrono.chronologies.japanese
-------------------------------
The Japanese imperial calendar: Gregorian months and days, with years
counted from the start of each reign.

Eras are numbered so that Showa, in force on 1970-01-01, is 1.
Dates before Meiji 1 (1868-01-01) are not supported.
"""

from __future__ import annotations

from typing import Tuple

from ..core.errors import InvalidFieldValueError
from ..core.time import (
    epoch_day_to_gregorian,
    gregorian_month_length,
    gregorian_to_epoch_day,
    is_gregorian_leap,
)
from ..core.types import Era, ValueRange
from ..rules.standard import ERA
from .interfaces import Chronology

MEIJI = Era("Japanese", -1, "Meiji")
TAISHO = Era("Japanese", 0, "Taisho")
SHOWA = Era("Japanese", 1, "Showa")
HEISEI = Era("Japanese", 2, "Heisei")
REIWA = Era("Japanese", 3, "Reiwa")

# (era, first day as ISO year, month, day), in chronological order
_ERA_STARTS: Tuple[Tuple[Era, Tuple[int, int, int]], ...] = (
    (MEIJI, (1868, 1, 1)),
    (TAISHO, (1912, 7, 30)),
    (SHOWA, (1926, 12, 25)),
    (HEISEI, (1989, 1, 8)),
    (REIWA, (2019, 5, 1)),
)


class JapaneseChronology(Chronology):
    name = "Japanese"
    eras = tuple(era for era, _ in _ERA_STARTS)
    months_per_year = 12
    min_year = 1868
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

    # ---------------------------------------------------------
    # Reigns
    # ---------------------------------------------------------

    def _start(self, era: Era) -> Tuple[int, int, int]:
        for candidate, start in _ERA_STARTS:
            if candidate == era:
                return start
        raise InvalidFieldValueError(ERA, era.value, f"Era {era} does not belong to {self.name}")

    def era_for(self, year: int, month: int, day: int) -> Era:
        current = _ERA_STARTS[0][0]
        for era, start in _ERA_STARTS:
            if (year, month, day) < start:
                break
            current = era
        return current

    def year_of_era(self, year: int, month: int, day: int) -> int:
        era = self.era_for(year, month, day)
        return year - self._start(era)[0] + 1

    def proleptic_year(self, era: Era, year_of_era: int) -> int:
        return self._start(era)[0] + year_of_era - 1

    def year_of_era_range(self, era: Era) -> ValueRange:
        first_year = self._start(era)[0]
        later = [start for e, start in _ERA_STARTS if e.value == era.value + 1]
        last_year = later[0][0] if later else self.max_year
        return ValueRange.of(1, last_year - first_year + 1)


JAPANESE = JapaneseChronology()
