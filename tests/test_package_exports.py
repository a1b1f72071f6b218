"""Tests covering public package re-exports."""

from __future__ import annotations

import pogo_ratings
from pogo_ratings import (
    RatingEngine,
    duel_ability,
    gym_defense,
    gym_offense,
    iv_rating,
    tankiness,
    weave_dps,
)
from pogo_ratings import engine as engine_module
from pogo_ratings import formulas


def test_formulas_are_reexported() -> None:
    assert iv_rating is formulas.iv_rating
    assert tankiness is formulas.tankiness
    assert weave_dps is formulas.weave_dps
    assert gym_offense is formulas.gym_offense
    assert gym_defense is formulas.gym_defense
    assert duel_ability is formulas.duel_ability


def test_engine_is_reexported() -> None:
    assert RatingEngine is engine_module.RatingEngine


def test_all_names_resolve() -> None:
    for name in pogo_ratings.__all__:
        assert hasattr(pogo_ratings, name), name
    assert isinstance(pogo_ratings.__version__, str)
