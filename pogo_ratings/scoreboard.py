"""Tabulate and rank ratings for a collection of Pokémon."""

from __future__ import annotations

from collections.abc import Sequence

import pandas as pd

from .engine import RatingEngine
from .formulas import is_rateable
from .models import Pokemon

IDENTITY_COLUMNS = (
    "Species",
    "Fast Move",
    "Charge Move",
    "Attack IV",
    "Defense IV",
    "Stamina IV",
)

RATING_COLUMNS = {
    "iv_rating": "IV Rating",
    "move1_dps": "Fast Move DPS",
    "move2_dps": "Charge Move DPS",
    "tankiness": "Tankiness",
    "weave_offense": "Weave Damage (Offense)",
    "weave_defense": "Weave Damage (Defense)",
    "gym_offense": "Gym Offense",
    "gym_defense": "Gym Defense",
    "duel_ability": "Duel Ability",
}


def build_rating_table(engine: RatingEngine, pokemon: Sequence[Pokemon]) -> pd.DataFrame:
    """Return one row per Pokémon with its identity and every rating."""

    rows = []
    for entry in pokemon:
        ratings = engine.rate(entry)
        row: dict[str, object] = dict(
            zip(
                IDENTITY_COLUMNS,
                (entry.species_id, entry.move1, entry.move2, *entry.ivs),
            )
        )
        for attribute, label in RATING_COLUMNS.items():
            row[label] = getattr(ratings, attribute)
        rows.append(row)
    return pd.DataFrame(rows, columns=[*IDENTITY_COLUMNS, *RATING_COLUMNS.values()])


def rank_by(table: pd.DataFrame, column: str = "Duel Ability") -> pd.DataFrame:
    """Sort *table* by *column*, best first, and prepend a ``Rank`` column.

    Rows whose rating is ``nan`` or infinite are unrateable: they keep their
    relative order at the bottom of the table and get no rank.
    Ranking an already ranked table replaces its ``Rank`` and ``Rateable``
    columns.
    """

    table = table.drop(columns=["Rank", "Rateable"], errors="ignore")
    if column not in table.columns:
        raise KeyError(column)

    rateable = table[column].map(lambda value: is_rateable(float(value))).astype(bool)
    ranked = pd.concat(
        [
            table[rateable].sort_values(by=column, ascending=False, kind="stable"),
            table[~rateable],
        ]
    ).reset_index(drop=True)

    rated_count = int(rateable.sum())
    ranks = [index + 1 if index < rated_count else None for index in range(len(ranked))]
    ranked.insert(0, "Rank", pd.array(ranks, dtype="Int64"))
    ranked["Rateable"] = [index < rated_count for index in range(len(ranked))]
    return ranked


__all__ = ["IDENTITY_COLUMNS", "RATING_COLUMNS", "build_rating_table", "rank_by"]
