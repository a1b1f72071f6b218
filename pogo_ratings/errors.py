"""Structured error taxonomy for pogo_ratings."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping

__all__ = [
    "PogoRatingsError",
    "NotFoundError",
    "InputValidationError",
    "ConfigurationError",
    "sanitize_context",
]


_SENSITIVE_KEYS = {
    "account",
    "account_name",
    "trainer_name",
    "username",
    "token",
    "password",
}


def _mask_string(value: str) -> str:
    if len(value) <= 4:
        return "*" * len(value)
    return f"{value[:2]}***{value[-2:]}"


def _sanitize_value(key: str, value: Any) -> Any:
    if isinstance(value, Mapping):
        return sanitize_context(value)
    if isinstance(value, (list, tuple)):
        return [_sanitize_value(key, item) for item in value]
    if key.lower() in _SENSITIVE_KEYS:
        if isinstance(value, str):
            return _mask_string(value)
        return "***"
    return value


def sanitize_context(context: Mapping[str, Any]) -> Dict[str, Any]:
    """Return a copy of *context* with account identifiers masked."""

    return {key: _sanitize_value(key, value) for key, value in context.items()}


@dataclass(eq=False)
class PogoRatingsError(Exception):
    """Base class for structured errors raised by the package."""

    message: str
    remediation: str | None = None
    context: Dict[str, Any] | None = None
    category: str = "internal_error"

    def __post_init__(self) -> None:  # pragma: no cover - trivial
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "category": self.category,
            "message": self.message,
        }
        if self.remediation:
            payload["remediation"] = self.remediation
        if self.context:
            payload["context"] = sanitize_context(self.context)
        return payload


@dataclass(eq=False)
class NotFoundError(PogoRatingsError, KeyError):
    """Raised by metadata lookups for unknown species or move identifiers."""

    category: str = "not_found"


@dataclass(eq=False)
class InputValidationError(PogoRatingsError, ValueError):
    """Raised for malformed reference data or out-of-range Pokémon values."""

    category: str = "input_error"


@dataclass(eq=False)
class ConfigurationError(PogoRatingsError, ValueError):
    category: str = "configuration_error"
