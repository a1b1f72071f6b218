"""Core rating formulas for Pokémon IVs, movesets, and gym/duel performance.

Every function here works on plain metadata values (:class:`SpeciesMeta`,
:class:`MoveMeta`) and primitive IVs; resolving identifiers is left to
:mod:`pogo_ratings.engine`.

The weave formulas reproduce the community "post-hotfix full moveset
rankings" spreadsheet cell by cell. Its floor/ceiling placement does not
simplify algebraically, so each step is kept as a separate expression.

Arithmetic follows IEEE-754 semantics: degenerate metadata (zero base stats,
a fast move without energy gain, zero durations) produces ``nan`` or
``inf`` instead of raising. Use :func:`is_rateable` to filter such values.
"""

from __future__ import annotations

import math
from typing import Final

from .models import MAX_IV, MoveMeta, SpeciesMeta

NORMAL_MULTIPLIER: Final = 1.0
STAB_MULTIPLIER: Final = 1.25

# Damage bonus from a critical hit. The game currently applies none.
CRIT_DAMAGE_BONUS: Final = 0

MOVE2_CHARGE_DELAY_MS: Final = 500
MILLISECONDS_FACTOR: Final = 1000
WEAVE_WINDOW_MS: Final = 100_000
WEAVE_LENGTH_SECONDS: Final = 100
MOVE2_ADDITIONAL_DELAY_MS: Final = 2000
MAX_MOVE_ENERGY: Final = 100


def _divide(numerator: float, denominator: float) -> float:
    """Divide like floating-point hardware: ``x / 0`` is ``±inf`` or ``nan``."""

    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _floor(value: float) -> float:
    return math.floor(value) if math.isfinite(value) else value


def _ceil(value: float) -> float:
    return math.ceil(value) if math.isfinite(value) else value


def _round(value: float) -> int | float:
    """Round half up to an ``int``; non-finite values pass through unchanged."""

    if not math.isfinite(value):
        return value
    return math.floor(value + 0.5)


def _max(first: float, second: float) -> float:
    if math.isnan(first) or math.isnan(second):
        return math.nan
    return max(first, second)


def _stab_multiplier(stab: bool) -> float:
    return STAB_MULTIPLIER if stab else NORMAL_MULTIPLIER


def _cp_product(attack: float, defense: float, stamina: float) -> float:
    return attack * math.sqrt(defense) * math.sqrt(stamina)


def is_rateable(value: float) -> bool:
    """Return ``True`` when *value* is a finite rating."""

    return math.isfinite(value)


def iv_rating(
    species: SpeciesMeta,
    attack_iv: int,
    defense_iv: int,
    stamina_iv: int,
    *,
    alternative: bool = False,
) -> float:
    """Rate a Pokémon's IVs on a ``0.0``–``1.0`` scale.

    The simple rating is the IV sum over the maximum possible sum. The
    alternative rating places the Pokémon's CP-like stat product between the
    worst (all zero) and best (all :data:`MAX_IV`) individual of the species,
    so it weights attack more heavily than defense and stamina.

    Returns ``nan`` when the species has no spread between its worst and best
    individual (degenerate base stats).
    """

    if not alternative:
        return _divide(attack_iv + defense_iv + stamina_iv, MAX_IV + MAX_IV + MAX_IV)

    cp_max = _cp_product(
        species.base_attack + MAX_IV,
        species.base_defense + MAX_IV,
        species.base_stamina + MAX_IV,
    )
    cp_min = _cp_product(species.base_attack, species.base_defense, species.base_stamina)
    cp_iv = _cp_product(
        species.base_attack + attack_iv,
        species.base_defense + defense_iv,
        species.base_stamina + stamina_iv,
    )
    return _divide(cp_iv - cp_min, cp_max - cp_min)


def dps_for_move(move: MoveMeta, *, primary: bool, stab: bool = False) -> float:
    """Return the no-weave damage per second of repeatedly using *move*.

    Secondary (charge) moves pay :data:`MOVE2_CHARGE_DELAY_MS` per use.
    """

    move_delay = 0 if primary else MOVE2_CHARGE_DELAY_MS
    dps = _divide(move.power, move.time + move_delay) * MILLISECONDS_FACTOR
    if stab:
        dps = dps * STAB_MULTIPLIER
    return dps


def tankiness(species: SpeciesMeta, defense_iv: int, stamina_iv: int) -> int | float:
    """Return effective stamina times effective defense."""

    return _round(
        (species.base_stamina + stamina_iv) * (species.base_defense + defense_iv)
    )


def weave_energy_ratio(fast: MoveMeta, charge: MoveMeta) -> float:
    """Return how many fast moves pay for one charge move.

    Charge moves costing the full :data:`MAX_MOVE_ENERGY` round up to whole
    fast moves; every other cost keeps the fractional ratio.
    """

    charge_energy = abs(charge.energy)
    ratio = _divide(charge_energy, fast.energy)
    if charge_energy == MAX_MOVE_ENERGY:
        return _ceil(ratio)
    return ratio


def weave_cycle_length(
    fast: MoveMeta, charge: MoveMeta, additional_delay: int = 0
) -> float:
    """Return the duration in milliseconds of one fast-fast-...-charge cycle."""

    return (
        weave_energy_ratio(fast, charge) * (fast.time + additional_delay)
        + charge.time
        + MOVE2_CHARGE_DELAY_MS
    )


def weave_dps(
    fast: MoveMeta,
    charge: MoveMeta,
    *,
    fast_stab: bool = False,
    charge_stab: bool = False,
    additional_delay: int = 0,
) -> float:
    """Return the damage dealt over 100 seconds by weaving *fast* into *charge*.

    The attacker uses the fast move until it has enough energy, fires the
    charge move immediately, and repeats. Leftover time after the last full
    cycle is filled with extra fast moves.

    Despite the name the result is total damage over
    :data:`WEAVE_WINDOW_MS`, not a per-second rate. Callers only compare
    equal-length windows, so the scale does not matter to rankings.

    Args:
        fast: The fast move (generates energy).
        charge: The charge move (consumes energy).
        fast_stab: Whether the fast move gets the same-type attack bonus.
        charge_stab: Whether the charge move gets the same-type attack bonus.
        additional_delay: Extra milliseconds between fast moves: ``0`` for
            gym offense, :data:`MOVE2_ADDITIONAL_DELAY_MS` for AI-controlled
            gym defenders.
    """

    fast_multiplier = _stab_multiplier(fast_stab)
    charge_multiplier = _stab_multiplier(charge_stab)

    energy_ratio = weave_energy_ratio(fast, charge)
    cycle_length = weave_cycle_length(fast, charge, additional_delay)
    fast_time = fast.time + additional_delay

    cycles = _floor(_divide(WEAVE_WINDOW_MS, cycle_length))
    cycle_fast_moves = _ceil(cycles * energy_ratio)
    remaining_time = WEAVE_WINDOW_MS - (
        cycles * (charge.time + MOVE2_CHARGE_DELAY_MS) + cycle_fast_moves * fast_time
    )
    extra_fast_moves = _floor(_divide(remaining_time, fast_time))

    charge_damage = charge.power * charge_multiplier * (
        1 + (CRIT_DAMAGE_BONUS * charge.crit_chance)
    )
    fast_damage = fast.power * fast_multiplier

    return (
        cycles * charge_damage
        + cycle_fast_moves * fast_damage
        + extra_fast_moves * fast_damage
    )


def gym_offense(
    species: SpeciesMeta,
    fast: MoveMeta,
    charge: MoveMeta,
    attack_iv: int,
    *,
    fast_stab: bool = False,
    charge_stab: bool = False,
) -> float:
    """Return the better of no-weave and weave damage over 100 s, scaled by attack."""

    no_weave = dps_for_move(fast, primary=True, stab=fast_stab) * WEAVE_LENGTH_SECONDS
    weave = weave_dps(fast, charge, fast_stab=fast_stab, charge_stab=charge_stab)
    return _max(no_weave, weave) * (species.base_attack + attack_iv)


def gym_defense(
    species: SpeciesMeta,
    fast: MoveMeta,
    charge: MoveMeta,
    attack_iv: int,
    defense_iv: int,
    stamina_iv: int,
    *,
    fast_stab: bool = False,
    charge_stab: bool = False,
) -> int | float:
    """Return gym-defender weave damage scaled by attack and tankiness."""

    weave = weave_dps(
        fast,
        charge,
        fast_stab=fast_stab,
        charge_stab=charge_stab,
        additional_delay=MOVE2_ADDITIONAL_DELAY_MS,
    )
    return _round(
        weave
        * (species.base_attack + attack_iv)
        * tankiness(species, defense_iv, stamina_iv)
    )


def duel_ability(
    species: SpeciesMeta,
    fast: MoveMeta,
    charge: MoveMeta,
    attack_iv: int,
    defense_iv: int,
    stamina_iv: int,
    *,
    fast_stab: bool = False,
    charge_stab: bool = False,
) -> int | float:
    """Return gym offense times tankiness.

    A reasonable measure for players who rarely dodge: they can only keep
    attacking for as long as they stay on positive HP.
    """

    offense = gym_offense(
        species, fast, charge, attack_iv, fast_stab=fast_stab, charge_stab=charge_stab
    )
    return _round(offense * tankiness(species, defense_iv, stamina_iv))


__all__ = [
    "CRIT_DAMAGE_BONUS",
    "MAX_MOVE_ENERGY",
    "MILLISECONDS_FACTOR",
    "MOVE2_ADDITIONAL_DELAY_MS",
    "MOVE2_CHARGE_DELAY_MS",
    "NORMAL_MULTIPLIER",
    "STAB_MULTIPLIER",
    "WEAVE_LENGTH_SECONDS",
    "WEAVE_WINDOW_MS",
    "dps_for_move",
    "duel_ability",
    "gym_defense",
    "gym_offense",
    "is_rateable",
    "iv_rating",
    "tankiness",
    "weave_cycle_length",
    "weave_dps",
    "weave_energy_ratio",
]
