"""Tests for the species and move metadata registries."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from pogo_ratings.data import MoveRegistry, SpeciesRegistry, has_stab, load_registries, normalise_name
from pogo_ratings.errors import InputValidationError, NotFoundError
from pogo_ratings.models import MoveMeta, SpeciesMeta


def test_species_lookup_aliases(registries: tuple[SpeciesRegistry, MoveRegistry]) -> None:
    species, _ = registries

    entry = species.get("DRAGONITE")
    assert entry.as_tuple() == (250, 212, 182)
    assert entry.types == ("dragon", "flying")
    assert species.get("dragonite") is entry
    assert species.get("149") is entry
    assert species.get(149) is entry
    assert "Dragonite" in species
    assert len(species) == 2


def test_move_lookup_aliases(registries: tuple[SpeciesRegistry, MoveRegistry]) -> None:
    _, moves = registries

    claw = moves.get("Dragon Claw")
    assert claw.move_id == "DRAGON_CLAW"
    assert (claw.power, claw.time, claw.energy, claw.crit_chance) == (35, 1500, -33, 0.25)
    assert moves.get("dragon-claw") is claw
    assert moves.get("STALL").crit_chance == 0.0


def test_unknown_identifiers_raise_not_found(registries: tuple[SpeciesRegistry, MoveRegistry]) -> None:
    species, moves = registries

    with pytest.raises(NotFoundError) as excinfo:
        species.get("Missingno")
    assert excinfo.value.category == "not_found"
    assert excinfo.value.context == {"identifier": "Missingno"}
    with pytest.raises(KeyError):
        moves.get("HYPER_BEAM")
    assert "HYPER_BEAM" not in moves
    assert None not in moves


def test_normalise_name() -> None:
    assert normalise_name("  Dragon Breath ") == "dragon_breath"
    assert normalise_name("DRAGON_BREATH") == "dragon_breath"
    assert normalise_name("dragon--breath") == "dragon_breath"


def test_has_stab_compares_types() -> None:
    dragonite = SpeciesMeta(250, 212, 182, species_id="DRAGONITE", types=("dragon", "flying"))

    assert has_stab(dragonite, MoveMeta(6, 500, 7, type="Dragon"))
    assert has_stab(dragonite, MoveMeta(40, 1000, -33, type="flying"))
    assert not has_stab(dragonite, MoveMeta(10, 1000, 8, type="steel"))
    assert not has_stab(dragonite, MoveMeta(10, 1000, 8))


def test_from_entries_builds_registries() -> None:
    species = SpeciesRegistry.from_entries([SpeciesMeta(1, 2, 3, species_id="PIDGEY")])
    moves = MoveRegistry.from_entries([MoveMeta(5, 500, 6, move_id="TACKLE"), MoveMeta(1, 1, 1)])

    assert species.get("pidgey").base_stamina == 3
    assert len(moves) == 1


def test_load_registries_from_file(tmp_path: Path, reference_payload: dict[str, Any]) -> None:
    path = tmp_path / "gamemaster.json"
    path.write_text(json.dumps(reference_payload), encoding="utf-8")

    species, moves = load_registries(path)

    assert species.get("Testmon").base_attack == 180
    assert moves.get("QUICK_JAB").energy == 15


def test_load_registries_rejects_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(InputValidationError):
        load_registries(path)


def test_load_registries_requires_both_sections() -> None:
    with pytest.raises(InputValidationError):
        load_registries({"species": []})


@pytest.mark.parametrize(
    "move",
    [
        {"type": "normal", "power": 10, "time": 500, "energy": 5},
        {"id": "BAD", "power": -1, "time": 500, "energy": 5},
        {"id": "BAD", "power": 10, "time": 0, "energy": 5},
        {"id": "BAD", "power": 10, "time": 500, "energy": -120},
        {"id": "BAD", "power": 10, "time": 500, "energy": 2.5},
        {"id": "BAD", "power": 10, "time": 500, "energy": 5, "critChance": 1.5},
        {"id": "BAD", "power": "10", "time": 500, "energy": 5},
    ],
)
def test_malformed_moves_are_rejected(move: dict[str, Any]) -> None:
    with pytest.raises(InputValidationError):
        load_registries({"species": [], "moves": [move]})


@pytest.mark.parametrize(
    "entry",
    [
        {"baseAttack": 1, "baseDefense": 1, "baseStamina": 1},
        {"id": "BAD", "baseAttack": -1, "baseDefense": 1, "baseStamina": 1},
        {"id": "BAD", "baseAttack": 1, "baseDefense": 1},
        {"id": "BAD", "baseAttack": True, "baseDefense": 1, "baseStamina": 1},
        {"id": "BAD", "baseAttack": 1, "baseDefense": 1, "baseStamina": 1, "dex": "abc"},
        {"id": "BAD", "baseAttack": 1, "baseDefense": 1, "baseStamina": 1, "types": "dragon"},
    ],
)
def test_malformed_species_are_rejected(entry: dict[str, Any]) -> None:
    with pytest.raises(InputValidationError):
        load_registries({"species": [entry], "moves": []})


def test_numeric_dex_string_is_an_alias() -> None:
    entry = {"id": "LAPRAS", "dex": "131", "baseAttack": 165, "baseDefense": 174, "baseStamina": 277}
    species, _ = load_registries({"species": [entry], "moves": []})

    assert species.get(131).species_id == "LAPRAS"
