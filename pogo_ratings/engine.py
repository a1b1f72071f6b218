"""Rating engine binding metadata lookups to the rating formulas."""

from __future__ import annotations

import functools
from dataclasses import dataclass, field
from typing import Any, Callable, TypeVar

from . import formulas
from .config import RatingConfig, build_rating_config
from .data.registry import MoveRegistry, SpeciesRegistry, has_stab
from .models import MoveMeta, Pokemon, SpeciesMeta
from .observability import get_logger

logger = get_logger("engine")

SpeciesLookup = Callable[[str], SpeciesMeta]
MoveLookup = Callable[[str], MoveMeta]
StabPredicate = Callable[[str, str], bool]

_F = TypeVar("_F", bound=Callable[..., Any])


def _accepts_pokemon(*fields: str) -> Callable[[_F], _F]:
    """Let a primitive-field method also take a :class:`Pokemon` first.

    When the first argument is a :class:`Pokemon`, the named attributes are
    read from it and passed in its place; remaining arguments follow.
    """

    def decorator(method: _F) -> _F:
        @functools.wraps(method)
        def wrapper(self: "RatingEngine", *args: Any, **kwargs: Any) -> Any:
            if args and isinstance(args[0], Pokemon):
                values = [getattr(args[0], name) for name in fields]
                return method(self, *values, *args[1:], **kwargs)
            return method(self, *args, **kwargs)

        return wrapper  # type: ignore[return-value]

    return decorator


@dataclass(frozen=True)
class PokemonRatings:
    """Every rating for one Pokémon."""

    iv_rating: float
    move1_dps: float
    move2_dps: float
    tankiness: int | float
    weave_offense: float
    weave_defense: float
    gym_offense: float
    gym_defense: int | float
    duel_ability: int | float


@dataclass(frozen=True)
class _MoveSet:
    species: SpeciesMeta
    fast: MoveMeta
    charge: MoveMeta
    fast_stab: bool
    charge_stab: bool


@dataclass(frozen=True)
class RatingEngine:
    """Compute Pokémon ratings from identifiers.

    Every rating accepts either a :class:`Pokemon` as its first argument or
    the primitive fields it is made of, for example::

        engine.duel_ability(pokemon)
        engine.duel_ability("DRAGONITE", "DRAGON_BREATH", "DRAGON_CLAW", 15, 14, 13)

    Metadata is resolved before any arithmetic runs, so an unknown species or
    move surfaces as the lookup's :class:`~pogo_ratings.errors.NotFoundError`.
    Degenerate metadata yields ``nan``/``inf`` rather than an exception; see
    :func:`pogo_ratings.formulas.is_rateable`.
    """

    species_lookup: SpeciesLookup
    move_lookup: MoveLookup
    has_stab: StabPredicate
    config: RatingConfig = field(default_factory=RatingConfig)

    @classmethod
    def from_registries(
        cls,
        species: SpeciesRegistry,
        moves: MoveRegistry,
        config: RatingConfig | None = None,
    ) -> "RatingEngine":
        """Build an engine backed by in-memory registries.

        STAB is decided by comparing the move type with the species types.
        Without an explicit *config* the environment is consulted.
        """

        def stab(species_id: str, move_id: str) -> bool:
            return has_stab(species.get(species_id), moves.get(move_id))

        return cls(
            species_lookup=species.get,
            move_lookup=moves.get,
            has_stab=stab,
            config=config if config is not None else build_rating_config(),
        )

    def _moveset(self, species_id: str, move1: str, move2: str) -> _MoveSet:
        return _MoveSet(
            species=self.species_lookup(species_id),
            fast=self.move_lookup(move1),
            charge=self.move_lookup(move2),
            fast_stab=self.has_stab(species_id, move1),
            charge_stab=self.has_stab(species_id, move2),
        )

    def _checked(self, rating: str, value: Any, species_id: str) -> Any:
        if not formulas.is_rateable(value):
            logger.debug(
                "rating is not finite",
                extra={"event": "unrateable", "rating": rating, "species_id": species_id, "value": value},
            )
        return value

    @_accepts_pokemon("species_id", "attack_iv", "defense_iv", "stamina_iv")
    def iv_rating(
        self, species_id: str, attack_iv: int, defense_iv: int, stamina_iv: int
    ) -> float:
        """Rate IVs with the formula selected by the configuration."""

        species = self.species_lookup(species_id)
        value = formulas.iv_rating(
            species,
            attack_iv,
            defense_iv,
            stamina_iv,
            alternative=self.config.alternative_iv_calculation,
        )
        return self._checked("iv_rating", value, species_id)

    def dps_for_move(
        self,
        subject: Pokemon | str,
        move: str | None = None,
        *,
        primary: bool,
    ) -> float:
        """Return the no-weave DPS of one move.

        Called with a :class:`Pokemon`, *primary* picks ``move1`` or ``move2``.
        Called with a species id, *move* names the move explicitly.
        """

        if isinstance(subject, Pokemon):
            if move is not None:
                raise TypeError("dps_for_move() takes no move when given a Pokemon.")
            species_id = subject.species_id
            move = subject.move1 if primary else subject.move2
        else:
            if move is None:
                raise TypeError("dps_for_move() requires a move when given a species id.")
            species_id = subject
        move_meta = self.move_lookup(move)
        stab = self.has_stab(species_id, move)
        value = formulas.dps_for_move(move_meta, primary=primary, stab=stab)
        return self._checked("dps_for_move", value, species_id)

    @_accepts_pokemon("species_id", "defense_iv", "stamina_iv")
    def tankiness(self, species_id: str, defense_iv: int, stamina_iv: int) -> int | float:
        species = self.species_lookup(species_id)
        value = formulas.tankiness(species, defense_iv, stamina_iv)
        return self._checked("tankiness", value, species_id)

    @_accepts_pokemon("species_id", "move1", "move2")
    def weave_dps(
        self, species_id: str, move1: str, move2: str, additional_delay: int = 0
    ) -> float:
        """Return weave damage over 100 s (see :func:`formulas.weave_dps`)."""

        moveset = self._moveset(species_id, move1, move2)
        value = formulas.weave_dps(
            moveset.fast,
            moveset.charge,
            fast_stab=moveset.fast_stab,
            charge_stab=moveset.charge_stab,
            additional_delay=additional_delay,
        )
        return self._checked("weave_dps", value, species_id)

    @_accepts_pokemon("species_id", "move1", "move2", "attack_iv")
    def gym_offense(self, species_id: str, move1: str, move2: str, attack_iv: int) -> float:
        moveset = self._moveset(species_id, move1, move2)
        value = formulas.gym_offense(
            moveset.species,
            moveset.fast,
            moveset.charge,
            attack_iv,
            fast_stab=moveset.fast_stab,
            charge_stab=moveset.charge_stab,
        )
        return self._checked("gym_offense", value, species_id)

    @_accepts_pokemon("species_id", "move1", "move2", "attack_iv", "defense_iv", "stamina_iv")
    def gym_defense(
        self,
        species_id: str,
        move1: str,
        move2: str,
        attack_iv: int,
        defense_iv: int,
        stamina_iv: int,
    ) -> int | float:
        moveset = self._moveset(species_id, move1, move2)
        value = formulas.gym_defense(
            moveset.species,
            moveset.fast,
            moveset.charge,
            attack_iv,
            defense_iv,
            stamina_iv,
            fast_stab=moveset.fast_stab,
            charge_stab=moveset.charge_stab,
        )
        return self._checked("gym_defense", value, species_id)

    @_accepts_pokemon("species_id", "move1", "move2", "attack_iv", "defense_iv", "stamina_iv")
    def duel_ability(
        self,
        species_id: str,
        move1: str,
        move2: str,
        attack_iv: int,
        defense_iv: int,
        stamina_iv: int,
    ) -> int | float:
        moveset = self._moveset(species_id, move1, move2)
        value = formulas.duel_ability(
            moveset.species,
            moveset.fast,
            moveset.charge,
            attack_iv,
            defense_iv,
            stamina_iv,
            fast_stab=moveset.fast_stab,
            charge_stab=moveset.charge_stab,
        )
        return self._checked("duel_ability", value, species_id)

    def rate(self, pokemon: Pokemon) -> PokemonRatings:
        """Return every rating for *pokemon* at once."""

        return PokemonRatings(
            iv_rating=self.iv_rating(pokemon),
            move1_dps=self.dps_for_move(pokemon, primary=True),
            move2_dps=self.dps_for_move(pokemon, primary=False),
            tankiness=self.tankiness(pokemon),
            weave_offense=self.weave_dps(pokemon, 0),
            weave_defense=self.weave_dps(pokemon, formulas.MOVE2_ADDITIONAL_DELAY_MS),
            gym_offense=self.gym_offense(pokemon),
            gym_defense=self.gym_defense(pokemon),
            duel_ability=self.duel_ability(pokemon),
        )


__all__ = [
    "MoveLookup",
    "PokemonRatings",
    "RatingEngine",
    "SpeciesLookup",
    "StabPredicate",
]
