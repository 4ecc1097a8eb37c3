"""
calchrono.core.field_set
------------------------
An immutable set of field-value constraints.

Together the fields restrict the dates that match. 'DayOfMonth 13' with
'DayOfWeek 5' matches only Friday the thirteenth. Values are not cross
validated, so 'MonthOfYear 2' with 'DayOfMonth 31' is a legal set that no
date will ever match.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable, Iterator, List, Optional, Tuple

from .errors import DuplicateFieldError, FieldNotFoundError
from ..rules.base import DateTimeField, FieldRule

if TYPE_CHECKING:
    from ..chronologies.interfaces import Calendrical


def _canonical(fields: Iterable[DateTimeField]) -> Tuple[DateTimeField, ...]:
    return tuple(sorted(fields, key=lambda f: f.sort_key))


def _restore(fields: Tuple[DateTimeField, ...]) -> "FieldValueSet":
    return FieldValueSet.of_many(fields)


class FieldValueSet:
    """
    Deduplicated set of DateTimeField kept in canonical order,
    coarsest unit first ('MonthOfYear' before 'DayOfMonth').

    Build instances with `of`, `of_field`, `of_fields` and `of_many`;
    calling the class directly is the same as `of_many`. The empty set is
    the single shared `FieldValueSet.EMPTY`; every operation that would
    produce an empty set returns it.
    """

    __slots__ = ("_fields",)

    EMPTY: "FieldValueSet"

    def __new__(cls, fields: Iterable[DateTimeField] = ()) -> "FieldValueSet":
        return cls.of_many(fields)

    @classmethod
    def _create(cls, fields: Tuple[DateTimeField, ...]) -> "FieldValueSet":
        # fields must already be canonical and unique per rule
        instance = object.__new__(cls)
        object.__setattr__(instance, "_fields", fields)
        return instance

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    # ---------------------------------------------------------
    # Factories
    # ---------------------------------------------------------

    @classmethod
    def of(cls, rule: FieldRule, value: int, *more: Any) -> "FieldValueSet":
        """
        Set from alternating rules and values,
        e.g. of(MONTH_OF_YEAR, 12, DAY_OF_MONTH, 3).
        """
        if not more:
            return cls.of_field(DateTimeField(rule, value))
        if len(more) % 2:
            raise TypeError("of() takes rules and values in pairs")
        pairs = (rule, value) + more
        return cls.of_many(DateTimeField(r, v) for r, v in zip(pairs[::2], pairs[1::2]))

    @classmethod
    def of_field(cls, field: DateTimeField) -> "FieldValueSet":
        if not isinstance(field, DateTimeField):
            raise TypeError(f"Expected DateTimeField, got {type(field).__name__}")
        return cls._create((field,))

    @classmethod
    def of_fields(cls, *fields: DateTimeField) -> "FieldValueSet":
        return cls.of_many(fields)

    @classmethod
    def of_many(cls, fields: Iterable[DateTimeField]) -> "FieldValueSet":
        """
        Set from any iterable of fields.
        Raises DuplicateFieldError if a rule appears more than once.
        """
        seen = set()
        created: List[DateTimeField] = []
        for field in fields:
            if not isinstance(field, DateTimeField):
                raise TypeError(f"Expected DateTimeField, got {type(field).__name__}")
            if field.rule in seen:
                raise DuplicateFieldError(field.rule)
            seen.add(field.rule)
            created.append(field)
        if not created:
            return cls.EMPTY
        return cls._create(_canonical(created))

    # ---------------------------------------------------------
    # Collection protocol
    # ---------------------------------------------------------

    def __len__(self) -> int:
        return len(self._fields)

    def __iter__(self) -> Iterator[DateTimeField]:
        return iter(self._fields)

    def __contains__(self, rule: object) -> bool:
        return any(f.rule is rule for f in self._fields)

    def size(self) -> int:
        return len(self._fields)

    def contains(self, rule: Optional[FieldRule]) -> bool:
        return rule in self

    # ---------------------------------------------------------
    # Lookup
    # ---------------------------------------------------------

    def get(self, rule: FieldRule) -> Optional[DateTimeField]:
        """The stored field for the rule. No derivation is attempted."""
        for field in self._fields:
            if field.rule is rule:
                return field
        return None

    def get_value(self, rule: FieldRule) -> int:
        field = self.get(rule)
        if field is None:
            raise FieldNotFoundError(rule)
        return field.value

    def get_valid_value(self, rule: FieldRule) -> int:
        return rule.check_value(self.get_value(rule))

    def query(self, rule: FieldRule) -> Optional[int]:
        field = self.get(rule)
        if field is not None:
            return field.value
        return rule.derive(self)

    def derive(self, rule: FieldRule) -> Any:
        """
        Value for the rule in the rule's result type.

        A stored field wins; otherwise the rule derives itself from the
        other fields, e.g. QuarterOfYear from MonthOfYear. None if neither works.
        """
        value = self.query(rule)
        if value is None:
            return None
        return rule.reify(value)

    # ---------------------------------------------------------
    # Derived sets
    # ---------------------------------------------------------

    def with_field(self, field: DateTimeField) -> "FieldValueSet":
        """Copy with the field added, or its rule's value replaced."""
        if not isinstance(field, DateTimeField):
            raise TypeError(f"Expected DateTimeField, got {type(field).__name__}")
        for i, existing in enumerate(self._fields):
            if existing.rule is field.rule:
                if existing.value == field.value:
                    return self
                fields = list(self._fields)
                fields[i] = field
                return FieldValueSet._create(tuple(fields))
        return FieldValueSet._create(_canonical(self._fields + (field,)))

    def with_value(self, rule: FieldRule, value: int) -> "FieldValueSet":
        return self.with_field(DateTimeField(rule, value))

    def with_all(self, fields: Iterable[DateTimeField]) -> "FieldValueSet":
        """Merge in several fields; a later value for a rule replaces an earlier one."""
        result = self
        for field in fields:
            result = result.with_field(field)
        return result

    def without(self, rule: FieldRule) -> "FieldValueSet":
        remaining = tuple(f for f in self._fields if f.rule is not rule)
        if len(remaining) == len(self._fields):
            return self
        if not remaining:
            return FieldValueSet.EMPTY
        return FieldValueSet._create(remaining)

    def roll(self, rule: FieldRule, amount: int) -> "FieldValueSet":
        """
        Roll a stored value around the rule's outer range,
        e.g. adding 3 to 'DayOfWeek 6' gives 'DayOfWeek 2'.
        """
        value = self.get_valid_value(rule)
        rng = rule.value_range()
        rolled = rng.minimum + (value - rng.minimum + amount) % rng.size
        return self.with_value(rule, rolled)

    # ---------------------------------------------------------
    # Matching
    # ---------------------------------------------------------

    def matches(self, calendrical: "Calendrical") -> bool:
        """
        True unless the calendrical exposes a different value for a stored rule.
        A rule the calendrical cannot answer counts as a match.
        """
        for field in self._fields:
            value = field.rule.get_value(calendrical)
            if value is not None and value != field.value:
                return False
        return True

    # ---------------------------------------------------------
    # Value semantics
    # ---------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if isinstance(other, FieldValueSet):
            return self._fields == other._fields
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._fields)

    def __reduce__(self):
        return (_restore, (self._fields,))

    def __str__(self) -> str:
        return "[" + ", ".join(str(f) for f in self._fields) + "]"

    def __repr__(self) -> str:
        return f"FieldValueSet({self})"


FieldValueSet.EMPTY = FieldValueSet._create(())
