"""
calchrono.chronologies.catalog
------------------------------
The calendar systems shipped with the package, keyed by display name.
"""

from __future__ import annotations
from typing import Dict

from .coptic import COPTIC
from .interfaces import Chronology
from .iso import ISO
from .japanese import JAPANESE

ALL_CHRONOLOGIES: Dict[str, Chronology] = {
    ISO.name: ISO,
    COPTIC.name: COPTIC,
    JAPANESE.name: JAPANESE,
}
