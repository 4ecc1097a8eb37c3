"""
calchrono.chronologies.date
---------------------------
Calendar dates, independent of the calendar system.

AbstractCalendarDate fixes the contract every date honours and implements
the behaviour that only needs the primitives: field dispatch, leap years,
conversion to the ISO calendar and the canonical string form.
ChronoDate is the concrete date; it takes every primitive from the
Chronology it is given, so calendar systems never subclass each other.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date as _pydate
from typing import TYPE_CHECKING, Optional

from ..core.errors import InvalidFieldValueError, UnsupportedFieldError
from ..core.time import epoch_day_to_pydate
from ..core.types import Era, ValueRange
from ..rules.base import FieldRule
from ..rules.standard import (
    CHRONO_FIELDS,
    DAY_OF_WEEK, DAY_OF_MONTH, DAY_OF_YEAR, MONTH_OF_YEAR,
    YEAR_OF_ERA, PROLEPTIC_YEAR, ERA,
)

if TYPE_CHECKING:
    from .interfaces import Chronology


class AbstractCalendarDate(ABC):
    """
    A date in some calendar system.

    Dates are values: immutable, equal when their fields are equal, and
    only comparable across calendar systems through the epoch day.
    """

    # ---------------------------------------------------------
    # 1. Primitives
    # ---------------------------------------------------------

    @property
    @abstractmethod
    def chronology(self) -> "Chronology":
        ...

    @property
    @abstractmethod
    def era(self) -> Era:
        """
        The largest division of the time-line.
        The era in force on 1970-01-01 (ISO) has value 1.
        """

    @property
    @abstractmethod
    def year_of_era(self) -> int:
        """Count of years within the era, always positive."""

    @property
    @abstractmethod
    def proleptic_year(self) -> int:
        """Single year number increasing with time; may be zero or negative."""

    @property
    @abstractmethod
    def month_of_year(self) -> int:
        ...

    @property
    @abstractmethod
    def day_of_month(self) -> int:
        ...

    @property
    @abstractmethod
    def day_of_year(self) -> int:
        ...

    @property
    @abstractmethod
    def day_of_week_value(self) -> int:
        ...

    @abstractmethod
    def to_epoch_day(self) -> int:
        ...

    @abstractmethod
    def with_field(self, field: FieldRule, value: int) -> "AbstractCalendarDate":
        """
        Copy with one field changed.
        A day-of-month past the end of the resulting month becomes its last day.
        """

    @abstractmethod
    def plus_years(self, years: int) -> "AbstractCalendarDate":
        ...

    @abstractmethod
    def plus_months(self, months: int) -> "AbstractCalendarDate":
        ...

    @abstractmethod
    def plus_weeks(self, weeks: int) -> "AbstractCalendarDate":
        ...

    @abstractmethod
    def plus_days(self, days: int) -> "AbstractCalendarDate":
        ...

    # ---------------------------------------------------------
    # 2. Field access
    # ---------------------------------------------------------

    def get(self, field: FieldRule) -> int:
        if field is DAY_OF_WEEK:
            return self.day_of_week_value
        if field is DAY_OF_MONTH:
            return self.day_of_month
        if field is DAY_OF_YEAR:
            return self.day_of_year
        if field is MONTH_OF_YEAR:
            return self.month_of_year
        if field is YEAR_OF_ERA:
            return self.year_of_era
        if field is PROLEPTIC_YEAR:
            return self.proleptic_year
        if field is ERA:
            return self.era.value
        raise UnsupportedFieldError(field)

    def query(self, rule: FieldRule) -> Optional[int]:
        if rule in CHRONO_FIELDS:
            return self.get(rule)
        return rule.derive(self)

    def range(self, field: FieldRule) -> ValueRange:
        return self.chronology.range(field)

    def is_leap_year(self) -> bool:
        return self.chronology.is_leap_year(self.proleptic_year)

    # ---------------------------------------------------------
    # 3. Interoperability
    # ---------------------------------------------------------

    def to_canonical_date(self) -> "ChronoDate":
        """The same day in the ISO calendar."""
        from .iso import ISO

        return ISO.date_from_epoch_day(self.to_epoch_day())

    def to_pydate(self) -> _pydate:
        return epoch_day_to_pydate(self.to_epoch_day())

    def is_before(self, other: "AbstractCalendarDate") -> bool:
        return self.to_epoch_day() < other.to_epoch_day()

    def is_after(self, other: "AbstractCalendarDate") -> bool:
        return self.to_epoch_day() > other.to_epoch_day()

    def is_same_day(self, other: "AbstractCalendarDate") -> bool:
        return self.to_epoch_day() == other.to_epoch_day()

    def __str__(self) -> str:
        # e.g. 2012CE-03-04 (ISO); the era carries the side of the epoch
        return (
            f"{abs(self.year_of_era):04d}{self.era}"
            f"-{self.month_of_year:02d}-{self.day_of_month:02d}"
            f" ({self.chronology.name})"
        )


@dataclass(frozen=True, repr=False)
class ChronoDate(AbstractCalendarDate):
    """A date held as (chronology, proleptic year, month, day)."""
    chrono: "Chronology"
    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        self.chrono.check_date(self.year, self.month, self.day)

    # ---------------------------------------------------------
    # Primitives from the chronology
    # ---------------------------------------------------------

    @property
    def chronology(self) -> "Chronology":
        return self.chrono

    @property
    def era(self) -> Era:
        return self.chrono.era_for(self.year, self.month, self.day)

    @property
    def year_of_era(self) -> int:
        return self.chrono.year_of_era(self.year, self.month, self.day)

    @property
    def proleptic_year(self) -> int:
        return self.year

    @property
    def month_of_year(self) -> int:
        return self.month

    @property
    def day_of_month(self) -> int:
        return self.day

    @property
    def day_of_year(self) -> int:
        return self.chrono.day_of_year(self.year, self.month, self.day)

    @property
    def day_of_week_value(self) -> int:
        return self.chrono.day_of_week(self.to_epoch_day())

    def to_epoch_day(self) -> int:
        return self.chrono.to_epoch_day(self.year, self.month, self.day)

    def length_of_month(self) -> int:
        return self.chrono.month_length(self.year, self.month)

    def length_of_year(self) -> int:
        return self.chrono.year_length(self.year)

    def range(self, field: FieldRule) -> ValueRange:
        if field is DAY_OF_MONTH:
            return ValueRange.of(1, self.length_of_month())
        if field is DAY_OF_YEAR:
            return ValueRange.of(1, self.length_of_year())
        if field is YEAR_OF_ERA:
            return self.chrono.year_of_era_range(self.era)
        return self.chrono.range(field)

    # ---------------------------------------------------------
    # Adjustment
    # ---------------------------------------------------------

    def _resolve_previous_valid(self, year: int, month: int, day: int) -> "ChronoDate":
        self.chrono.check_year(year)
        day = min(day, self.chrono.month_length(year, month))
        return ChronoDate(self.chrono, year, month, day)

    def with_field(self, field: FieldRule, value: int) -> "ChronoDate":
        if field not in CHRONO_FIELDS:
            raise UnsupportedFieldError(field)
        self.chrono.range(field).check_valid_value(value, field)
        if self.get(field) == value:
            return self

        if field is DAY_OF_WEEK:
            return self.plus_days(value - self.day_of_week_value)
        if field is DAY_OF_MONTH:
            return self._resolve_previous_valid(self.year, self.month, value)
        if field is DAY_OF_YEAR:
            self.range(DAY_OF_YEAR).check_valid_value(value, field)
            return self.chrono.date_year_day(self.year, value)
        if field is MONTH_OF_YEAR:
            return self._resolve_previous_valid(self.year, value, self.day)
        if field is YEAR_OF_ERA:
            era = self.era
            self.range(YEAR_OF_ERA).check_valid_value(value, field)
            year = self.chrono.proleptic_year(era, value)
            return self._within_era(self._resolve_previous_valid(year, self.month, self.day), era, field, value)
        if field is PROLEPTIC_YEAR:
            return self._resolve_previous_valid(value, self.month, self.day)
        # ERA: keep the year-of-era, move to the other era
        era = self.chrono.era_of(value)
        self.chrono.year_of_era_range(era).check_valid_value(self.year_of_era, YEAR_OF_ERA)
        year = self.chrono.proleptic_year(era, self.year_of_era)
        return self._within_era(self._resolve_previous_valid(year, self.month, self.day), era, field, value)

    def _within_era(self, date: "ChronoDate", era: Era, field: FieldRule, value: int) -> "ChronoDate":
        # the era may begin part-way through a year, e.g. Heisei 1 on 1989-01-08
        if date.era != era:
            raise InvalidFieldValueError(
                field, value, f"Invalid value for {field}: {value} ({date!r} is not in era {era})"
            )
        return date

    def plus_years(self, years: int) -> "ChronoDate":
        if years == 0:
            return self
        return self._resolve_previous_valid(self.year + years, self.month, self.day)

    def plus_months(self, months: int) -> "ChronoDate":
        if months == 0:
            return self
        per_year = self.chrono.months_per_year
        year, month0 = divmod(self.year * per_year + (self.month - 1) + months, per_year)
        return self._resolve_previous_valid(year, month0 + 1, self.day)

    def plus_weeks(self, weeks: int) -> "ChronoDate":
        return self.plus_days(weeks * 7)

    def plus_days(self, days: int) -> "ChronoDate":
        if days == 0:
            return self
        return self.chrono.date_from_epoch_day(self.to_epoch_day() + days)

    def __repr__(self) -> str:
        return f"ChronoDate({self.chrono.name}, {self.year}, {self.month}, {self.day})"
