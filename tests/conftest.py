"""Shared reference data for the rating tests."""

from __future__ import annotations

from typing import Any

import pytest

from pogo_ratings.config import RatingConfig
from pogo_ratings.data import MoveRegistry, SpeciesRegistry, load_registries
from pogo_ratings.engine import RatingEngine


@pytest.fixture
def reference_payload() -> dict[str, Any]:
    return {
        "species": [
            {
                "id": "TESTMON",
                "dex": 900,
                "name": "Testmon",
                "baseAttack": 180,
                "baseDefense": 120,
                "baseStamina": 160,
                "types": ["normal"],
            },
            {
                "id": "DRAGONITE",
                "dex": 149,
                "name": "Dragonite",
                "baseAttack": 250,
                "baseDefense": 212,
                "baseStamina": 182,
                "types": ["Dragon", "Flying"],
            },
        ],
        "moves": [
            {"id": "QUICK_JAB", "name": "Quick Jab", "type": "fighting", "power": 12, "time": 500, "energy": 15},
            {
                "id": "BIG_SLAM",
                "name": "Big Slam",
                "type": "fighting",
                "power": 100,
                "time": 2100,
                "energy": -100,
                "critChance": 0.05,
            },
            {"id": "DRAGON_BREATH", "name": "Dragon Breath", "type": "dragon", "power": 6, "time": 500, "energy": 7},
            {
                "id": "DRAGON_CLAW",
                "name": "Dragon Claw",
                "type": "dragon",
                "power": 35,
                "time": 1500,
                "energy": -33,
                "critChance": 0.25,
            },
            {"id": "STALL", "type": "normal", "power": 0, "time": 500, "energy": 0},
        ],
    }


@pytest.fixture
def registries(reference_payload: dict[str, Any]) -> tuple[SpeciesRegistry, MoveRegistry]:
    return load_registries(reference_payload)


@pytest.fixture
def engine(registries: tuple[SpeciesRegistry, MoveRegistry]) -> RatingEngine:
    species, moves = registries
    return RatingEngine.from_registries(species, moves, config=RatingConfig())
