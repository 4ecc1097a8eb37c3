"""
calchrono.chronologies.interfaces
---------------------------------
The contract between a calendar system and the generic date built on it.

A Chronology supplies a handful of primitives: leap years, month lengths,
the era table and the mapping to and from the epoch day. Everything else
(field access, clamped arithmetic, conversion between calendar systems)
is provided once, by ChronoDate.

Standard Reference Frame:
Epoch day 0 is 1970-01-01 in the ISO calendar, for every chronology.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Optional, Protocol, Tuple

from ..core.errors import DateRangeExceededError, InvalidFieldValueError
from ..core.types import Era, ValueRange
from ..rules.base import FieldRule
from ..rules.standard import (
    DAY_OF_WEEK, DAY_OF_MONTH, DAY_OF_YEAR, MONTH_OF_YEAR,
    YEAR_OF_ERA, PROLEPTIC_YEAR, ERA,
)

if TYPE_CHECKING:
    from .date import AbstractCalendarDate, ChronoDate


class Calendrical(Protocol):
    """Anything that can say what its value is for a rule."""

    def query(self, rule: FieldRule) -> Optional[int]:
        """The value for the rule, or None if it cannot be supplied."""
        ...


class Chronology(ABC):
    """
    A calendar system.

    Subclasses set `name`, `eras`, `months_per_year`, `min_year`, `max_year`
    and the two day ranges, and implement the four abstract primitives.
    The default era handling covers calendars with one dividing epoch and
    two eras numbered 0 (before) and 1 (after); calendars with several
    reigns override `era_for`, `year_of_era`, `proleptic_year` and
    `year_of_era_range`.
    """

    name: str
    eras: Tuple[Era, ...]
    months_per_year: int = 12
    min_year: int
    max_year: int
    day_of_month_range: ValueRange
    day_of_year_range: ValueRange

    # ---------------------------------------------------------
    # 1. Primitives
    # ---------------------------------------------------------

    @abstractmethod
    def is_leap_year(self, year: int) -> bool:
        """A leap year must be longer than a non-leap year."""

    @abstractmethod
    def month_length(self, year: int, month: int) -> int:
        ...

    @abstractmethod
    def to_epoch_day(self, year: int, month: int, day: int) -> int:
        ...

    @abstractmethod
    def from_epoch_day(self, epoch_day: int) -> Tuple[int, int, int]:
        """Inverse of to_epoch_day, as (proleptic year, month, day)."""

    # ---------------------------------------------------------
    # 2. Derived calendar arithmetic
    # ---------------------------------------------------------

    def year_length(self, year: int) -> int:
        return sum(self.month_length(year, m) for m in range(1, self.months_per_year + 1))

    def day_of_year(self, year: int, month: int, day: int) -> int:
        return self.to_epoch_day(year, month, day) - self.to_epoch_day(year, 1, 1) + 1

    def day_of_week(self, epoch_day: int) -> int:
        # 1=Mon..7=Sun; epoch day 0 was a Thursday
        return (epoch_day + 3) % 7 + 1

    @property
    def min_epoch_day(self) -> int:
        return self.to_epoch_day(self.min_year, 1, 1)

    @property
    def max_epoch_day(self) -> int:
        last = self.months_per_year
        return self.to_epoch_day(self.max_year, last, self.month_length(self.max_year, last))

    # ---------------------------------------------------------
    # 3. Eras
    # ---------------------------------------------------------

    def era_of(self, value: int) -> Era:
        """The era registered under an integer code."""
        for era in self.eras:
            if era.value == value:
                return era
        raise InvalidFieldValueError(ERA, value, f"Invalid era for {self.name}: {value}")

    def check_era(self, era: Era) -> Era:
        if era not in self.eras:
            raise InvalidFieldValueError(ERA, era.value, f"Era {era} does not belong to {self.name}")
        return era

    def era_for(self, year: int, month: int, day: int) -> Era:
        return self.eras[1] if year >= 1 else self.eras[0]

    def year_of_era(self, year: int, month: int, day: int) -> int:
        return year if year >= 1 else 1 - year

    def proleptic_year(self, era: Era, year_of_era: int) -> int:
        self.check_era(era)
        return year_of_era if era.value == 1 else 1 - year_of_era

    def year_of_era_range(self, era: Era) -> ValueRange:
        self.check_era(era)
        if era.value == 1:
            return ValueRange.of(1, self.max_year)
        return ValueRange.of(1, 1 - self.min_year)

    # ---------------------------------------------------------
    # 4. Ranges and validation
    # ---------------------------------------------------------

    def range(self, field: FieldRule) -> ValueRange:
        """Range of the field anywhere in this calendar system."""
        if field is DAY_OF_WEEK:
            return ValueRange.of(1, 7)
        if field is DAY_OF_MONTH:
            return self.day_of_month_range
        if field is DAY_OF_YEAR:
            return self.day_of_year_range
        if field is MONTH_OF_YEAR:
            return ValueRange.of(1, self.months_per_year)
        if field is YEAR_OF_ERA:
            return ValueRange.of(1, max(self.year_of_era_range(e).maximum for e in self.eras))
        if field is PROLEPTIC_YEAR:
            return ValueRange.of(self.min_year, self.max_year)
        if field is ERA:
            return ValueRange.of(self.eras[0].value, self.eras[-1].value)
        return field.value_range()

    def check_year(self, year: int) -> int:
        if not self.min_year <= year <= self.max_year:
            raise DateRangeExceededError(
                f"Year {year} is outside the supported range of {self.name}: {self.min_year} to {self.max_year}"
            )
        return year

    def check_date(self, year: int, month: int, day: int) -> None:
        self.check_year(year)
        ValueRange.of(1, self.months_per_year).check_valid_value(month, MONTH_OF_YEAR)
        ValueRange.of(1, self.month_length(year, month)).check_valid_value(day, DAY_OF_MONTH)
        epoch_day = self.to_epoch_day(year, month, day)
        if not self.min_epoch_day <= epoch_day <= self.max_epoch_day:
            raise DateRangeExceededError(f"Date {year}-{month}-{day} is outside the supported range of {self.name}")

    # ---------------------------------------------------------
    # 5. Factories
    # ---------------------------------------------------------

    def date(self, year: int, month: int, day: int) -> "ChronoDate":
        from .date import ChronoDate

        return ChronoDate(self, year, month, day)

    def date_era(self, era: Any, year_of_era: int, month: int, day: int) -> "ChronoDate":
        if not isinstance(era, Era):
            era = self.era_of(era)
        self.year_of_era_range(era).check_valid_value(year_of_era, YEAR_OF_ERA)
        return self.date(self.proleptic_year(era, year_of_era), month, day)

    def date_year_day(self, year: int, day_of_year: int) -> "ChronoDate":
        self.check_year(year)
        ValueRange.of(1, self.year_length(year)).check_valid_value(day_of_year, DAY_OF_YEAR)
        return self.date_from_epoch_day(self.to_epoch_day(year, 1, 1) + day_of_year - 1)

    def date_from_epoch_day(self, epoch_day: int) -> "ChronoDate":
        if not self.min_epoch_day <= epoch_day <= self.max_epoch_day:
            raise DateRangeExceededError(
                f"Epoch day {epoch_day} is outside the supported range of {self.name}"
            )
        y, m, d = self.from_epoch_day(epoch_day)
        return self.date(y, m, d)

    def date_from(self, other: "AbstractCalendarDate") -> "ChronoDate":
        """The same day, expressed in this calendar system."""
        return self.date_from_epoch_day(other.to_epoch_day())

    # ---------------------------------------------------------
    # Value semantics
    # ---------------------------------------------------------

    def info(self) -> dict:
        return {
            "name": self.name,
            "eras": [{"value": e.value, "name": e.name} for e in self.eras],
            "months_per_year": self.months_per_year,
            "min_year": self.min_year,
            "max_year": self.max_year,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Chronology):
            return NotImplemented
        return type(self) is type(other) and self.name == other.name

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.name))

    def __repr__(self) -> str:
        return self.name
