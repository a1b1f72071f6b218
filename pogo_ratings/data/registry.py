"""Read-only species and move metadata registries."""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Generic, Iterable, Iterator, TypeVar

from ..errors import InputValidationError, NotFoundError
from ..formulas import MAX_MOVE_ENERGY
from ..models import MoveMeta, SpeciesMeta
from ..observability import get_logger

logger = get_logger("data")

_SEPARATORS = re.compile(r"[\s\-_]+")

MetaT = TypeVar("MetaT", SpeciesMeta, MoveMeta)


def normalise_name(name: str) -> str:
    """Normalise an identifier so ``"Dragon Breath"`` matches ``DRAGON_BREATH``."""

    cleaned = name.strip().lower().replace("’", "'")
    return _SEPARATORS.sub("_", cleaned).strip("_")


class _Registry(Generic[MetaT]):
    kind = "entry"

    def __init__(self, entries: Iterable[tuple[Iterable[str], MetaT]]):
        ordered: list[MetaT] = []
        aliases: dict[str, MetaT] = {}
        for names, entry in entries:
            ordered.append(entry)
            for name in names:
                key = normalise_name(str(name))
                if key:
                    aliases.setdefault(key, entry)
        self._entries = tuple(ordered)
        self._aliases = aliases

    def get(self, identifier: str | int) -> MetaT:
        """Return the metadata for *identifier* or raise :class:`NotFoundError`."""

        entry = self._aliases.get(normalise_name(str(identifier)))
        if entry is None:
            raise NotFoundError(
                f"Unknown {self.kind} identifier: {identifier!r}",
                remediation=f"Check the {self.kind} id against the loaded reference data.",
                context={"identifier": identifier},
            )
        return entry

    def __contains__(self, identifier: object) -> bool:
        if not isinstance(identifier, (str, int)):
            return False
        return normalise_name(str(identifier)) in self._aliases

    def __iter__(self) -> Iterator[MetaT]:
        yield from self._entries

    def __len__(self) -> int:
        return len(self._entries)


class SpeciesRegistry(_Registry[SpeciesMeta]):
    """Species base stats indexed by id, display name, and dex number."""

    kind = "species"

    @classmethod
    def from_entries(cls, entries: Iterable[SpeciesMeta]) -> "SpeciesRegistry":
        return cls(((entry.species_id,), entry) for entry in entries if entry.species_id)


class MoveRegistry(_Registry[MoveMeta]):
    """Move metadata indexed by id and display name."""

    kind = "move"

    @classmethod
    def from_entries(cls, entries: Iterable[MoveMeta]) -> "MoveRegistry":
        return cls(((entry.move_id,), entry) for entry in entries if entry.move_id)


def has_stab(species: SpeciesMeta, move: MoveMeta) -> bool:
    """Return ``True`` when *move* shares a type with *species*."""

    if not move.type:
        return False
    return move.type.lower() in {kind.lower() for kind in species.types}


def _require_number(item: Mapping[str, Any], key: str, kind: str) -> float:
    value = item.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InputValidationError(
            f"{kind} entry field {key!r} must be a number.",
            context={"entry": dict(item)},
        )
    return value


def _parse_species(item: Mapping[str, Any]) -> tuple[list[str], SpeciesMeta]:
    if "id" not in item:
        raise InputValidationError("Species entry is missing 'id'.", context={"entry": dict(item)})
    species_id = str(item["id"])
    stats = [
        _require_number(item, key, "Species")
        for key in ("baseAttack", "baseDefense", "baseStamina")
    ]
    if any(value < 0 for value in stats):
        raise InputValidationError(
            f"Species {species_id!r} has negative base stats.",
            context={"entry": dict(item)},
        )
    types = item.get("types", [])
    if not isinstance(types, list):
        raise InputValidationError(
            f"Species {species_id!r} types must be a list.",
            context={"entry": dict(item)},
        )
    meta = SpeciesMeta(
        base_attack=stats[0],
        base_defense=stats[1],
        base_stamina=stats[2],
        species_id=species_id,
        types=tuple(str(kind).lower() for kind in types),
    )
    names = [species_id]
    if item.get("name"):
        names.append(str(item["name"]))
    if item.get("dex"):
        try:
            names.append(str(int(item["dex"])))
        except (TypeError, ValueError) as exc:
            raise InputValidationError(
                f"Species {species_id!r} has a non-numeric dex number.",
                context={"entry": dict(item)},
            ) from exc
    return names, meta


def _parse_move(item: Mapping[str, Any]) -> tuple[list[str], MoveMeta]:
    if "id" not in item:
        raise InputValidationError("Move entry is missing 'id'.", context={"entry": dict(item)})
    move_id = str(item["id"])
    power = _require_number(item, "power", "Move")
    time = _require_number(item, "time", "Move")
    energy = _require_number(item, "energy", "Move")
    crit_chance = _require_number(item, "critChance", "Move") if "critChance" in item else 0.0
    if power < 0:
        raise InputValidationError(f"Move {move_id!r} has negative power.", context={"entry": dict(item)})
    if time <= 0:
        raise InputValidationError(f"Move {move_id!r} must have a positive time.", context={"entry": dict(item)})
    if int(energy) != energy or abs(energy) > MAX_MOVE_ENERGY:
        raise InputValidationError(
            f"Move {move_id!r} energy must be an integer within ±{MAX_MOVE_ENERGY}.",
            context={"entry": dict(item)},
        )
    if not 0 <= crit_chance <= 1:
        raise InputValidationError(
            f"Move {move_id!r} critChance must lie in [0, 1].",
            context={"entry": dict(item)},
        )
    meta = MoveMeta(
        power=power,
        time=time,
        energy=int(energy),
        crit_chance=float(crit_chance),
        move_id=move_id,
        type=str(item["type"]).lower() if item.get("type") else None,
    )
    names = [move_id]
    if item.get("name"):
        names.append(str(item["name"]))
    return names, meta


def load_registries(
    source: str | Path | Mapping[str, Any],
) -> tuple[SpeciesRegistry, MoveRegistry]:
    """Build species and move registries from a JSON file or decoded payload.

    The payload is an object with ``"species"`` and ``"moves"`` arrays::

        {
          "species": [{"id": "DRAGONITE", "dex": 149, "baseAttack": 250,
                       "baseDefense": 212, "baseStamina": 182,
                       "types": ["dragon", "flying"]}],
          "moves": [{"id": "DRAGON_BREATH", "type": "dragon", "power": 6,
                     "time": 500, "energy": 7, "critChance": 0.05}]
        }

    Raises:
        InputValidationError: If the payload or any entry is malformed.
    """

    if isinstance(source, Mapping):
        data = source
    else:
        path = Path(source)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise InputValidationError(
                f"Reference data at {path} is not valid JSON.",
                context={"path": str(path)},
            ) from exc

    species_data = data.get("species") if isinstance(data, Mapping) else None
    moves_data = data.get("moves") if isinstance(data, Mapping) else None
    if not isinstance(species_data, list) or not isinstance(moves_data, list):
        raise InputValidationError(
            "Reference data must contain 'species' and 'moves' arrays.",
            remediation="Export the game master in the documented shape.",
        )

    species = SpeciesRegistry(_parse_species(item) for item in species_data if isinstance(item, Mapping))
    moves = MoveRegistry(_parse_move(item) for item in moves_data if isinstance(item, Mapping))
    logger.info(
        "reference data loaded",
        extra={"event": "registry_loaded", "species_count": len(species), "move_count": len(moves)},
    )
    return species, moves


__all__ = [
    "MoveRegistry",
    "SpeciesRegistry",
    "has_stab",
    "load_registries",
    "normalise_name",
]
