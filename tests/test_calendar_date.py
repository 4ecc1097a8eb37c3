# tests/test_calendar_date.py

import dataclasses
from datetime import date

import pytest
from hypothesis import given, strategies as st

from calchrono.core.errors import (
    DateRangeExceededError,
    InvalidFieldValueError,
    UnsupportedFieldError,
)
from calchrono.core.types import ValueRange
from calchrono.chronologies.coptic import COPTIC
from calchrono.chronologies.date import AbstractCalendarDate, ChronoDate
from calchrono.chronologies.iso import BCE, CE, ISO
from calchrono.chronologies.japanese import JAPANESE
from calchrono.rules.standard import (
    CHRONO_FIELDS,
    DAY_OF_WEEK, DAY_OF_MONTH, DAY_OF_YEAR, MONTH_OF_YEAR,
    YEAR_OF_ERA, PROLEPTIC_YEAR, ERA,
    QUARTER_OF_YEAR, ALIGNED_WEEK_OF_MONTH,
)

CHRONOLOGIES = [ISO, COPTIC, JAPANESE]


def test_field_access():
    d = ISO.date(2012, 3, 4)
    assert isinstance(d, AbstractCalendarDate)
    assert d.get(DAY_OF_WEEK) == 7
    assert d.get(DAY_OF_MONTH) == 4
    assert d.get(DAY_OF_YEAR) == 64
    assert d.get(MONTH_OF_YEAR) == 3
    assert d.get(YEAR_OF_ERA) == 2012
    assert d.get(PROLEPTIC_YEAR) == 2012
    assert d.get(ERA) == 1
    assert d.era is CE
    assert d.chronology is ISO


def test_field_access_outside_closed_set():
    d = ISO.date(2012, 3, 4)
    with pytest.raises(UnsupportedFieldError) as exc:
        d.get(QUARTER_OF_YEAR)
    assert exc.value.rule is QUARTER_OF_YEAR
    # the query capability derives instead
    assert d.query(QUARTER_OF_YEAR) == 1
    assert d.query(ALIGNED_WEEK_OF_MONTH) == 1
    assert d.query(MONTH_OF_YEAR) == 3


def test_bce_years():
    d = ISO.date(-43, 3, 15)
    assert d.era is BCE
    assert d.year_of_era == 44
    assert d.proleptic_year == -43
    assert ISO.date(0, 1, 1).year_of_era == 1


def test_str():
    assert str(ISO.date(2012, 3, 4)) == "2012CE-03-04 (ISO)"
    assert str(ISO.date(0, 1, 1)) == "0001BCE-01-01 (ISO)"
    assert str(ISO.date(-43, 3, 15)) == "0044BCE-03-15 (ISO)"
    assert str(ISO.date(12345, 1, 1)) == "12345CE-01-01 (ISO)"
    assert repr(ISO.date(2012, 3, 4)) == "ChronoDate(ISO, 2012, 3, 4)"


def test_value_semantics():
    d = ISO.date(2012, 3, 4)
    assert d == ChronoDate(ISO, 2012, 3, 4)
    assert hash(d) == hash(ISO.date(2012, 3, 4))
    assert d != JAPANESE.date(2012, 3, 4)
    assert d.is_same_day(JAPANESE.date(2012, 3, 4))
    assert d.is_before(ISO.date(2012, 3, 5))
    assert d.is_after(COPTIC.date_from(ISO.date(2012, 3, 3)))
    with pytest.raises(dataclasses.FrozenInstanceError):
        d.day = 5


def test_invalid_dates():
    with pytest.raises(InvalidFieldValueError) as exc:
        ISO.date(2011, 2, 29)
    assert exc.value.rule is DAY_OF_MONTH
    with pytest.raises(InvalidFieldValueError) as exc:
        ISO.date(2011, 13, 1)
    assert exc.value.rule is MONTH_OF_YEAR
    with pytest.raises(InvalidFieldValueError):
        ISO.date(2011, 4, 0)
    with pytest.raises(DateRangeExceededError):
        ISO.date(1_000_000_000, 1, 1)


def test_range_limits():
    last = ISO.date(999_999_999, 12, 31)
    first = ISO.date(-999_999_999, 1, 1)
    with pytest.raises(DateRangeExceededError):
        last.plus_days(1)
    with pytest.raises(DateRangeExceededError):
        last.plus_months(1)
    with pytest.raises(DateRangeExceededError):
        first.plus_days(-1)
    with pytest.raises(DateRangeExceededError):
        first.plus_years(-1)
    with pytest.raises(DateRangeExceededError):
        ISO.date_from_epoch_day(last.to_epoch_day() + 1)


def test_contextual_ranges():
    assert ISO.date(2011, 2, 1).range(DAY_OF_MONTH) == ValueRange.of(1, 28)
    assert ISO.date(2012, 2, 1).range(DAY_OF_MONTH) == ValueRange.of(1, 29)
    assert ISO.date(2011, 4, 1).range(DAY_OF_YEAR) == ValueRange.of(1, 365)
    assert ISO.date(2011, 4, 1).range(MONTH_OF_YEAR) == ValueRange.of(1, 12)
    assert ISO.date(-5, 4, 1).range(YEAR_OF_ERA) == ValueRange.of(1, 1_000_000_000)
    assert ISO.date(2012, 2, 1).length_of_month() == 29
    assert ISO.date(2012, 2, 1).length_of_year() == 366
    assert ISO.date(2012, 2, 1).is_leap_year()
    assert not ISO.date(2011, 2, 1).is_leap_year()


def test_plus_months_clamps_to_month_end():
    assert ISO.date(2011, 1, 31).plus_months(1) == ISO.date(2011, 2, 28)
    assert ISO.date(2012, 1, 31).plus_months(1) == ISO.date(2012, 2, 29)
    assert ISO.date(2012, 3, 31).plus_months(-1) == ISO.date(2012, 2, 29)
    assert ISO.date(2012, 3, 31).plus_months(-14) == ISO.date(2011, 1, 31)
    assert ISO.date(2012, 3, 31).plus_months(21) == ISO.date(2013, 12, 31)
    assert ISO.date(0, 1, 15).plus_months(-1) == ISO.date(-1, 12, 15)


def test_plus_years_clamps_leap_day():
    assert ISO.date(2012, 2, 29).plus_years(1) == ISO.date(2013, 2, 28)
    assert ISO.date(2012, 2, 29).plus_years(4) == ISO.date(2016, 2, 29)
    assert ISO.date(2012, 2, 29).plus_years(-2012) == ISO.date(0, 2, 29)


def test_plus_days_and_weeks():
    d = ISO.date(2011, 12, 30)
    assert d.plus_days(0) is d
    assert d.plus_days(3) == ISO.date(2012, 1, 2)
    assert d.plus_weeks(-1) == ISO.date(2011, 12, 23)
    assert d.plus_days(365 * 4 + 1) == ISO.date(2015, 12, 30)


def test_with_field():
    d = ISO.date(2012, 3, 4)
    assert d.with_field(DAY_OF_MONTH, 4) is d
    assert d.with_field(DAY_OF_MONTH, 31) == ISO.date(2012, 3, 31)
    assert d.with_field(MONTH_OF_YEAR, 2) == ISO.date(2012, 2, 4)
    assert d.with_field(DAY_OF_YEAR, 1) == ISO.date(2012, 1, 1)
    assert d.with_field(DAY_OF_YEAR, 366) == ISO.date(2012, 12, 31)
    assert d.with_field(PROLEPTIC_YEAR, -5) == ISO.date(-5, 3, 4)
    assert d.with_field(YEAR_OF_ERA, 1999) == ISO.date(1999, 3, 4)
    assert d.with_field(ERA, 0) == ISO.date(-2011, 3, 4)
    assert ISO.date(-2011, 3, 4).with_field(ERA, 1) == d


def test_with_field_clamps_day_of_month():
    assert ISO.date(2011, 2, 10).with_field(DAY_OF_MONTH, 31) == ISO.date(2011, 2, 28)
    assert ISO.date(2012, 3, 31).with_field(MONTH_OF_YEAR, 2) == ISO.date(2012, 2, 29)
    assert ISO.date(2012, 2, 29).with_field(PROLEPTIC_YEAR, 2011) == ISO.date(2011, 2, 28)


def test_with_field_day_of_week():
    thursday = ISO.date(1970, 1, 1)
    assert thursday.get(DAY_OF_WEEK) == 4
    assert thursday.with_field(DAY_OF_WEEK, 1) == ISO.date(1969, 12, 29)
    assert thursday.with_field(DAY_OF_WEEK, 7) == ISO.date(1970, 1, 4)


def test_with_field_rejects_invalid_values():
    d = ISO.date(2011, 3, 4)
    with pytest.raises(InvalidFieldValueError):
        d.with_field(DAY_OF_MONTH, 32)
    with pytest.raises(InvalidFieldValueError):
        d.with_field(MONTH_OF_YEAR, 13)
    with pytest.raises(InvalidFieldValueError):
        d.with_field(DAY_OF_YEAR, 366)
    with pytest.raises(InvalidFieldValueError):
        d.with_field(DAY_OF_WEEK, 0)
    with pytest.raises(InvalidFieldValueError):
        d.with_field(ERA, 2)
    with pytest.raises(UnsupportedFieldError):
        d.with_field(QUARTER_OF_YEAR, 1)


def test_interoperability():
    d = COPTIC.date(1728, 6, 25)
    assert d.to_canonical_date() == ISO.date(2012, 3, 4)
    assert d.to_pydate() == date(2012, 3, 4)
    assert ISO.date_from(d) == ISO.date(2012, 3, 4)
    assert COPTIC.date_from(JAPANESE.date(2012, 3, 4)) == d


def test_plug_in_chronology(thirty):
    d = thirty.date(1, 1, 1)
    assert d.to_epoch_day() == 0
    assert d.to_canonical_date() == ISO.date(1970, 1, 1)
    assert d.get(DAY_OF_WEEK) == 4
    assert str(d) == "0001T-01-01 (Thirty)"
    assert d.plus_months(13) == thirty.date(2, 2, 1)
    assert d.plus_days(-1) == thirty.date(0, 12, 30)
    assert str(d.plus_days(-1)) == "0001BT-12-30 (Thirty)"
    assert d.with_field(DAY_OF_YEAR, 360) == thirty.date(1, 12, 30)
    assert d.length_of_year() == 360
    with pytest.raises(InvalidFieldValueError):
        d.with_field(DAY_OF_MONTH, 31)
    with pytest.raises(DateRangeExceededError):
        thirty.date(1000, 12, 30).plus_days(1)


_epoch_days = st.integers(min_value=-30_000, max_value=1_000_000)


@given(epoch_day=_epoch_days, chrono=st.sampled_from(CHRONOLOGIES))
def test_epoch_day_roundtrip(epoch_day, chrono):
    d = chrono.date_from_epoch_day(epoch_day)
    assert d.to_epoch_day() == epoch_day
    assert ISO.date_from(d).to_epoch_day() == epoch_day
    assert d.get(DAY_OF_WEEK) == ISO.date_from(d).get(DAY_OF_WEEK)


@given(epoch_day=_epoch_days, chrono=st.sampled_from(CHRONOLOGIES), field=st.sampled_from(CHRONO_FIELDS))
def test_with_field_of_current_value_is_identity(epoch_day, chrono, field):
    d = chrono.date_from_epoch_day(epoch_day)
    assert d.with_field(field, d.get(field)) == d


@given(epoch_day=_epoch_days, chrono=st.sampled_from(CHRONOLOGIES))
def test_fields_advance_with_time(epoch_day, chrono):
    d = chrono.date_from_epoch_day(epoch_day)
    nxt = d.plus_days(1)
    assert nxt.get(ERA) >= d.get(ERA)
    assert (nxt.proleptic_year, nxt.day_of_year) > (d.proleptic_year, d.day_of_year)
    assert nxt.get(DAY_OF_WEEK) == d.get(DAY_OF_WEEK) % 7 + 1


@given(epoch_day=_epoch_days, months=st.integers(-2400, 2400))
def test_plus_months_agrees_with_month_count(epoch_day, months):
    d = ISO.date_from_epoch_day(epoch_day)
    out = d.plus_months(months)
    assert out.year * 12 + out.month == d.year * 12 + d.month + months
    assert out.day == min(d.day, out.length_of_month())


def test_with_field_year_of_era_uses_the_era_range():
    ce = ISO.date(2012, 3, 4)
    with pytest.raises(InvalidFieldValueError) as exc:
        ce.with_field(YEAR_OF_ERA, 1_000_000_000)
    assert exc.value.rule is YEAR_OF_ERA
    bce = ISO.date(-5, 3, 4)
    assert bce.with_field(YEAR_OF_ERA, 1_000_000_000) == ISO.date(-999_999_999, 3, 4)
    with pytest.raises(InvalidFieldValueError):
        ISO.date(-999_999_999, 3, 4).with_field(ERA, 1)
