"""Combat-effectiveness ratings for Pokémon GO movesets and IVs."""

from __future__ import annotations

import re
from importlib import metadata as _metadata
from pathlib import Path

from .config import RatingConfig, build_rating_config
from .data import MoveRegistry, SpeciesRegistry, has_stab, load_registries
from .engine import PokemonRatings, RatingEngine
from .errors import (
    ConfigurationError,
    InputValidationError,
    NotFoundError,
    PogoRatingsError,
)
from .formulas import (
    dps_for_move,
    duel_ability,
    gym_defense,
    gym_offense,
    is_rateable,
    iv_rating,
    tankiness,
    weave_dps,
)
from .models import MAX_IV, MoveMeta, Pokemon, SpeciesMeta
from .observability import configure_logging, get_logger
from .scoreboard import build_rating_table, rank_by


def _read_local_version() -> str:
    """Return the project version from ``pyproject.toml`` when not installed."""

    pyproject = Path(__file__).resolve().parent.parent / "pyproject.toml"
    if pyproject.is_file():
        match = re.search(
            r'^version\s*=\s*"([^"]+)"', pyproject.read_text(), re.MULTILINE
        )
        if match:
            return match.group(1)
    return "0.0.0"


try:
    __version__ = _metadata.version("pogo-ratings")
except _metadata.PackageNotFoundError:
    __version__ = _read_local_version()

__all__ = [
    "MAX_IV",
    "ConfigurationError",
    "InputValidationError",
    "MoveMeta",
    "MoveRegistry",
    "NotFoundError",
    "PogoRatingsError",
    "Pokemon",
    "PokemonRatings",
    "RatingConfig",
    "RatingEngine",
    "SpeciesMeta",
    "SpeciesRegistry",
    "build_rating_config",
    "build_rating_table",
    "configure_logging",
    "dps_for_move",
    "duel_ability",
    "get_logger",
    "gym_defense",
    "gym_offense",
    "has_stab",
    "is_rateable",
    "iv_rating",
    "load_registries",
    "rank_by",
    "tankiness",
    "weave_dps",
    "__version__",
]
