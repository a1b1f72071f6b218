"""Tests for rating configuration."""

from __future__ import annotations

import pytest

from pogo_ratings.config import ALTERNATIVE_IV_ENV, RatingConfig, build_rating_config
from pogo_ratings.errors import ConfigurationError


def test_defaults_to_simple_iv_rating() -> None:
    assert build_rating_config(env={}) == RatingConfig(alternative_iv_calculation=False)


@pytest.mark.parametrize("value", ["1", "true", "YES", " on "])
def test_truthy_environment_values(value: str) -> None:
    config = build_rating_config(env={ALTERNATIVE_IV_ENV: value})

    assert config.alternative_iv_calculation is True


@pytest.mark.parametrize("value", ["0", "false", "No", "off", ""])
def test_falsy_environment_values(value: str) -> None:
    config = build_rating_config(env={ALTERNATIVE_IV_ENV: value})

    assert config.alternative_iv_calculation is False


def test_explicit_argument_wins_over_environment() -> None:
    config = build_rating_config(False, env={ALTERNATIVE_IV_ENV: "1"})

    assert config.alternative_iv_calculation is False


def test_invalid_environment_value_raises() -> None:
    with pytest.raises(ConfigurationError) as excinfo:
        build_rating_config(env={ALTERNATIVE_IV_ENV: "sometimes"})

    assert excinfo.value.category == "configuration_error"
    assert ALTERNATIVE_IV_ENV in excinfo.value.message


def test_reads_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(ALTERNATIVE_IV_ENV, "true")

    assert build_rating_config().alternative_iv_calculation is True
