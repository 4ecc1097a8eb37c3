from __future__ import annotations
from datetime import date
from typing import Tuple

from .errors import DateRangeExceededError

# Julian Day Number of 1970-01-01, the epoch day 0 of every chronology.
JDN_UNIX_EPOCH = 2440588

# datetime.date.toordinal() of 1970-01-01
_ORDINAL_UNIX_EPOCH = 719163


def ymd_to_jdn(y: int, m: int, day: int) -> int:
    """Proleptic Gregorian date to Julian Day Number (any year, floor division)."""
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    jdn = day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045
    return jdn


def jdn_to_ymd(jdn: int) -> Tuple[int, int, int]:
    """Fliegel-Van Flandern inverse of ymd_to_jdn."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return year, month, day


def gregorian_to_epoch_day(y: int, m: int, day: int) -> int:
    return ymd_to_jdn(y, m, day) - JDN_UNIX_EPOCH


def epoch_day_to_gregorian(epoch_day: int) -> Tuple[int, int, int]:
    return jdn_to_ymd(epoch_day + JDN_UNIX_EPOCH)


def is_gregorian_leap(y: int) -> bool:
    return y % 4 == 0 and (y % 100 != 0 or y % 400 == 0)


def epoch_day_to_pydate(epoch_day: int) -> date:
    """Epoch day to datetime.date; only years 1..9999 are representable."""
    ordinal = epoch_day + _ORDINAL_UNIX_EPOCH
    if not (date.min.toordinal() <= ordinal <= date.max.toordinal()):
        raise DateRangeExceededError(
            f"Epoch day {epoch_day} is outside the range of datetime.date"
        )
    return date.fromordinal(ordinal)


def pydate_to_epoch_day(d: date) -> int:
    return d.toordinal() - _ORDINAL_UNIX_EPOCH


_MONTH_LENGTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def gregorian_month_length(y: int, m: int) -> int:
    if m == 2 and is_gregorian_leap(y):
        return 29
    return _MONTH_LENGTHS[m - 1]
