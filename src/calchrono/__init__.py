"""calchrono public API.

Keep this surface small: users should mostly interact with names re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    DEFAULT_CHRONOLOGY,
    list_chronologies,
    get_chronology,
    chronology_info,
    register_chronology,
    date_of,
    from_epoch_day,
    from_pydate,
    convert,
    fields_of,
)
from .core.errors import (
    CalendricalError,
    DuplicateFieldError,
    FieldNotFoundError,
    InvalidFieldValueError,
    UnsupportedFieldError,
    DateRangeExceededError,
    UnknownChronologyError,
)
from .core.field_set import FieldValueSet
from .core.types import DayOfWeek, Era, PeriodUnit, ValueRange
from .rules.base import DateTimeField, DerivedRule, FieldRule
from .rules.registry import rule_for_name
from .rules.standard import (
    CHRONO_FIELDS,
    DAY_OF_WEEK,
    DAY_OF_MONTH,
    DAY_OF_YEAR,
    MONTH_OF_YEAR,
    YEAR_OF_ERA,
    PROLEPTIC_YEAR,
    ERA,
    QUARTER_OF_YEAR,
    MONTH_OF_QUARTER,
    ALIGNED_WEEK_OF_MONTH,
    ALIGNED_WEEK_OF_YEAR,
)
from .chronologies.interfaces import Calendrical, Chronology
from .chronologies.date import AbstractCalendarDate, ChronoDate
from .chronologies.iso import ISO
from .chronologies.coptic import COPTIC
from .chronologies.japanese import JAPANESE

__all__ = [
    "DEFAULT_CHRONOLOGY",
    "list_chronologies",
    "get_chronology",
    "chronology_info",
    "register_chronology",
    "date_of",
    "from_epoch_day",
    "from_pydate",
    "convert",
    "fields_of",
    "CalendricalError",
    "DuplicateFieldError",
    "FieldNotFoundError",
    "InvalidFieldValueError",
    "UnsupportedFieldError",
    "DateRangeExceededError",
    "UnknownChronologyError",
    "FieldValueSet",
    "DayOfWeek",
    "Era",
    "PeriodUnit",
    "ValueRange",
    "DateTimeField",
    "DerivedRule",
    "FieldRule",
    "rule_for_name",
    "CHRONO_FIELDS",
    "DAY_OF_WEEK",
    "DAY_OF_MONTH",
    "DAY_OF_YEAR",
    "MONTH_OF_YEAR",
    "YEAR_OF_ERA",
    "PROLEPTIC_YEAR",
    "ERA",
    "QUARTER_OF_YEAR",
    "MONTH_OF_QUARTER",
    "ALIGNED_WEEK_OF_MONTH",
    "ALIGNED_WEEK_OF_YEAR",
    "Calendrical",
    "Chronology",
    "AbstractCalendarDate",
    "ChronoDate",
    "ISO",
    "COPTIC",
    "JAPANESE",
]
