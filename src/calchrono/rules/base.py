"""
calchrono.rules.base
--------------------
Field rules and the (rule, value) pair built on them.

A rule knows its name, the unit it counts in (base unit) and the unit it
wraps within (range unit). The pair of units ranks rules by coarseness,
which gives the canonical ordering used by field sets.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering
from typing import TYPE_CHECKING, Any, Callable, Optional, Tuple

from ..core.types import PeriodUnit, ValueRange
from .registry import register_rule, rule_for_name

if TYPE_CHECKING:
    from ..chronologies.date import AbstractCalendarDate
    from ..chronologies.interfaces import Calendrical


@total_ordering
class FieldRule:
    """
    One kind of date field, e.g. month-of-year.

    Subclasses override `derive` to compute the value from other fields,
    and `reify` to convert the raw int into a richer result type.
    Rules compare by identity and sort by `ordering_key`.
    """

    def __init__(
        self,
        name: str,
        base_unit: PeriodUnit,
        range_unit: PeriodUnit,
        value_range: ValueRange,
    ):
        self.name = name
        self.base_unit = base_unit
        self.range_unit = range_unit
        self._range = value_range
        register_rule(self)

    # ---------------------------------------------------------
    # Ranges and validation
    # ---------------------------------------------------------

    def value_range(self) -> ValueRange:
        """The outer range, valid whatever the context."""
        return self._range

    def range_in(self, calendrical: "Calendrical") -> ValueRange:
        """Range refined by context; a date knows its month length, a field set does not."""
        from ..chronologies.date import AbstractCalendarDate

        if isinstance(calendrical, AbstractCalendarDate):
            return calendrical.range(self)
        return self._range

    def is_valid_value(self, value: int) -> bool:
        return self._range.is_valid_value(value)

    def check_value(self, value: int) -> int:
        return self._range.check_valid_value(value, self)

    # ---------------------------------------------------------
    # Access through the Calendrical capability
    # ---------------------------------------------------------

    def get_value(self, calendrical: "Calendrical") -> Optional[int]:
        return calendrical.query(self)

    def derive(self, calendrical: "Calendrical") -> Optional[int]:
        """Value computed from other fields of the calendrical, None if impossible."""
        return None

    def reify(self, value: int) -> Any:
        return value

    def set(self, date: "AbstractCalendarDate", value: int) -> "AbstractCalendarDate":
        return date.with_field(self, value)

    def roll(self, date: "AbstractCalendarDate", amount: int) -> "AbstractCalendarDate":
        """Add `amount` to the field, wrapping within the date's range for it."""
        rng = self.range_in(date)
        current = date.get(self)
        rolled = rng.minimum + (current - rng.minimum + amount) % rng.size
        return date.with_field(self, rolled)

    def field(self, value: int) -> "DateTimeField":
        return DateTimeField(self, value)

    # ---------------------------------------------------------
    # Ordering
    # ---------------------------------------------------------

    @property
    def ordering_key(self) -> Tuple[int, int, str]:
        # coarser base unit first, then coarser range unit, then name
        return (-self.base_unit.seconds, -self.range_unit.seconds, self.name)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, FieldRule):
            return NotImplemented
        return self.ordering_key < other.ordering_key

    def __eq__(self, other: object) -> bool:
        return self is other

    def __hash__(self) -> int:
        return id(self)

    def __reduce__(self):
        return (rule_for_name, (self.name,))

    def __repr__(self) -> str:
        return self.name


class DerivedRule(FieldRule):
    """A rule whose value follows from a single source rule."""

    def __init__(
        self,
        name: str,
        base_unit: PeriodUnit,
        range_unit: PeriodUnit,
        value_range: ValueRange,
        source: FieldRule,
        fn: Callable[[int], Optional[int]],
    ):
        self.source = source
        self._fn = fn
        super().__init__(name, base_unit, range_unit, value_range)

    def derive(self, calendrical: "Calendrical") -> Optional[int]:
        value = calendrical.query(self.source)
        if value is None:
            return None
        return self._fn(value)


@total_ordering
@dataclass(frozen=True)
class DateTimeField:
    """
    A rule paired with a value, like 'MonthOfYear 12'.
    The value is not checked against the rule until asked.
    """
    rule: FieldRule
    value: int

    @property
    def sort_key(self) -> Tuple[Tuple[int, int, str], int]:
        return (self.rule.ordering_key, self.value)

    def is_valid(self) -> bool:
        return self.rule.is_valid_value(self.value)

    def valid_value(self) -> int:
        return self.rule.check_value(self.value)

    def with_value(self, value: int) -> "DateTimeField":
        if value == self.value:
            return self
        return DateTimeField(self.rule, value)

    def matches(self, calendrical: "Calendrical") -> bool:
        """Strict: the calendrical must expose the same value for the rule."""
        return self.rule.get_value(calendrical) == self.value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DateTimeField):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __str__(self) -> str:
        return f"{self.rule.name} {self.value}"
