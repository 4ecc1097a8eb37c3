from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, List, Optional, Sequence, Union

from .core.engine import ChronologyRegistry
from .core.field_set import FieldValueSet
from .core.time import pydate_to_epoch_day
from .chronologies.date import AbstractCalendarDate, ChronoDate
from .chronologies.interfaces import Chronology
from .rules.base import DateTimeField, FieldRule
from .rules.standard import CHRONO_FIELDS

logger = logging.getLogger(__name__)

DEFAULT_CHRONOLOGY = "ISO"
_registry: Optional[ChronologyRegistry] = None

ChronologyRef = Union[str, Chronology]


def set_registry(reg: ChronologyRegistry) -> None:
    global _registry
    _registry = reg


def _reg() -> ChronologyRegistry:
    if _registry is None:
        raise RuntimeError("Chronology registry not initialized")
    return _registry


def _resolve(chronology: ChronologyRef) -> Chronology:
    if isinstance(chronology, Chronology):
        return chronology
    return _reg().get(chronology)


def list_chronologies() -> List[str]:
    return _reg().list()


def get_chronology(name: str) -> Chronology:
    return _reg().get(name)


def chronology_info(name: str) -> Dict[str, Any]:
    return _reg().get(name).info()


def register_chronology(chronology: Chronology, *, overwrite: bool = False) -> None:
    _reg().register(chronology, overwrite=overwrite)


# ============================================================
# Dates
# ============================================================

def date_of(year: int, month: int, day: int, *, chronology: ChronologyRef = DEFAULT_CHRONOLOGY) -> ChronoDate:
    return _resolve(chronology).date(year, month, day)


def from_epoch_day(epoch_day: int, *, chronology: ChronologyRef = DEFAULT_CHRONOLOGY) -> ChronoDate:
    return _resolve(chronology).date_from_epoch_day(epoch_day)


def from_pydate(d: date, *, chronology: ChronologyRef = DEFAULT_CHRONOLOGY) -> ChronoDate:
    return from_epoch_day(pydate_to_epoch_day(d), chronology=chronology)


def convert(d: AbstractCalendarDate, target: ChronologyRef) -> ChronoDate:
    """The same day in another calendar system, matched on the epoch day."""
    chrono = _resolve(target)
    out = chrono.date_from(d)
    logger.debug("Converted %s to %s", d, out)
    return out


def fields_of(d: AbstractCalendarDate, rules: Sequence[FieldRule] = CHRONO_FIELDS) -> FieldValueSet:
    """Snapshot of the values the date can supply for the given rules."""
    fields: List[DateTimeField] = []
    for rule in rules:
        value = d.query(rule)
        if value is not None:
            fields.append(DateTimeField(rule, value))
    return FieldValueSet.of_many(fields)
