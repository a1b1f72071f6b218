"""Configuration for the rating engine."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from .errors import ConfigurationError

__all__ = ["ALTERNATIVE_IV_ENV", "RatingConfig", "build_rating_config"]

ALTERNATIVE_IV_ENV = "POGO_RATINGS_ALTERNATIVE_IV"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class RatingConfig:
    """Settings that change how ratings are computed."""

    alternative_iv_calculation: bool = False


def _parse_flag(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUTHY:
        return True
    if lowered in _FALSY:
        return False
    raise ConfigurationError(
        f"{name} must be a boolean flag, got {value!r}.",
        remediation=f"Set {name} to one of: 1/0, true/false, yes/no, on/off.",
        context={name: value},
    )


def build_rating_config(
    alternative_iv_calculation: bool | None = None,
    env: Mapping[str, str] | None = None,
) -> RatingConfig:
    """Construct settings by merging explicit arguments and environment variables.

    Explicit arguments win over ``POGO_RATINGS_ALTERNATIVE_IV``.
    """

    env = os.environ if env is None else env
    if alternative_iv_calculation is None:
        raw = env.get(ALTERNATIVE_IV_ENV)
        alternative_iv_calculation = (
            _parse_flag(ALTERNATIVE_IV_ENV, raw) if raw is not None else False
        )
    return RatingConfig(alternative_iv_calculation=alternative_iv_calculation)
