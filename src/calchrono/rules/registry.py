from __future__ import annotations
import logging
from typing import TYPE_CHECKING, Dict, List

from ..core.errors import CalendricalError

if TYPE_CHECKING:
    from .base import FieldRule

logger = logging.getLogger(__name__)

_REGISTRY: Dict[str, "FieldRule"] = {}


def register_rule(rule: "FieldRule") -> None:
    """Make a rule resolvable by name. Names are unique across the process."""
    existing = _REGISTRY.get(rule.name)
    if existing is not None and existing is not rule:
        raise CalendricalError(f"A different rule is already registered as '{rule.name}'")
    _REGISTRY[rule.name] = rule
    logger.debug("Registered field rule %s", rule.name)


def rule_for_name(name: str) -> "FieldRule":
    if name not in _REGISTRY:
        raise KeyError(f"Unknown field rule '{name}'. Available: {sorted(_REGISTRY)}")
    return _REGISTRY[name]


def registered_rules() -> List["FieldRule"]:
    """All registered rules, coarsest first."""
    return sorted(_REGISTRY.values(), key=lambda r: r.ordering_key)
