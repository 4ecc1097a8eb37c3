# tests/conftest.py

import pytest

from calchrono.core.types import Era, ValueRange
from calchrono.chronologies.interfaces import Chronology


class ThirtyChronology(Chronology):
    """Twelve months of thirty days, no leap years. Year 1 starts on 1970-01-01."""
    name = "Thirty"
    eras = (Era("Thirty", 0, "BT"), Era("Thirty", 1, "T"))
    months_per_year = 12
    min_year = -1000
    max_year = 1000
    day_of_month_range = ValueRange.of(1, 30)
    day_of_year_range = ValueRange.of(1, 360)

    def is_leap_year(self, year):
        return False

    def month_length(self, year, month):
        return 30

    def to_epoch_day(self, year, month, day):
        return (year - 1) * 360 + (month - 1) * 30 + day - 1

    def from_epoch_day(self, epoch_day):
        year0, doy0 = divmod(epoch_day, 360)
        return year0 + 1, doy0 // 30 + 1, doy0 % 30 + 1


@pytest.fixture
def thirty():
    return ThirtyChronology()
