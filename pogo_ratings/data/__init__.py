"""Reference-data registries backing the rating engine lookups."""

from __future__ import annotations

from .registry import (
    MoveRegistry,
    SpeciesRegistry,
    has_stab,
    load_registries,
    normalise_name,
)

__all__ = [
    "MoveRegistry",
    "SpeciesRegistry",
    "has_stab",
    "load_registries",
    "normalise_name",
]
