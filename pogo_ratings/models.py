"""Immutable value types consumed by the rating engine."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import InputValidationError

MAX_IV = 15


@dataclass(frozen=True)
class SpeciesMeta:
    """Base attack, defense, and stamina for a Pokémon species."""

    base_attack: float
    base_defense: float
    base_stamina: float
    species_id: str | None = None
    types: tuple[str, ...] = ()

    def as_tuple(self) -> tuple[float, float, float]:
        """Return ``(attack, defense, stamina)`` for convenience."""

        return self.base_attack, self.base_defense, self.base_stamina


@dataclass(frozen=True)
class MoveMeta:
    """Game metadata for a single move.

    ``time`` is the move duration in milliseconds. ``energy`` is positive for
    fast moves (energy generated per use) and negative for charge moves
    (energy consumed per use).
    """

    power: float
    time: float
    energy: int
    crit_chance: float = 0.0
    move_id: str | None = None
    type: str | None = None


@dataclass(frozen=True)
class Pokemon:
    """An individual Pokémon: species, fast/charge move pair, and IVs."""

    species_id: str
    move1: str
    move2: str
    attack_iv: int = 0
    defense_iv: int = 0
    stamina_iv: int = 0

    def __post_init__(self) -> None:
        for label, value in (
            ("attack_iv", self.attack_iv),
            ("defense_iv", self.defense_iv),
            ("stamina_iv", self.stamina_iv),
        ):
            if not 0 <= value <= MAX_IV:
                raise InputValidationError(
                    f"{label} must lie in [0, {MAX_IV}].",
                    context={"species_id": self.species_id, label: value},
                )

    @property
    def ivs(self) -> tuple[int, int, int]:
        return self.attack_iv, self.defense_iv, self.stamina_iv


__all__ = ["MAX_IV", "SpeciesMeta", "MoveMeta", "Pokemon"]
