from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, List

from .errors import UnknownChronologyError

if TYPE_CHECKING:
    from ..chronologies.interfaces import Chronology

logger = logging.getLogger(__name__)


@dataclass
class ChronologyRegistry:
    """Chronologies by name. Lookup ignores case; listing keeps display names."""
    _chronologies: Dict[str, "Chronology"]

    @classmethod
    def from_chronologies(cls, chronologies: Dict[str, "Chronology"]) -> "ChronologyRegistry":
        return cls({name.lower(): chrono for name, chrono in chronologies.items()})

    def get(self, name: str) -> "Chronology":
        key = name.lower()
        if key not in self._chronologies:
            raise UnknownChronologyError(f"Unknown chronology '{name}'. Available: {self.list()}")
        return self._chronologies[key]

    def list(self) -> List[str]:
        return sorted(c.name for c in self._chronologies.values())

    def register(self, chronology: "Chronology", *, overwrite: bool = False) -> None:
        key = chronology.name.lower()
        if (not overwrite) and (key in self._chronologies):
            raise KeyError(f"Chronology '{chronology.name}' already exists. Use overwrite=True to replace.")
        self._chronologies[key] = chronology
        logger.info("Registered chronology %s", chronology.name)
