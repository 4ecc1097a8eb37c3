from __future__ import annotations
from calchrono.core.engine import ChronologyRegistry
from calchrono.chronologies.catalog import ALL_CHRONOLOGIES


def build_registry() -> ChronologyRegistry:
    return ChronologyRegistry.from_chronologies(dict(ALL_CHRONOLOGIES))
