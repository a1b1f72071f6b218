"""Tests for structured logging."""

from __future__ import annotations

import json
import logging

import pytest

from pogo_ratings import observability


def test_formatter_emits_json_with_context() -> None:
    record = logging.LogRecord("pogo_ratings.data", logging.INFO, __file__, 1, "loaded %s", ("data",), None)
    record.event = "registry_loaded"
    record.species_count = 3
    record.username = "trainer"

    payload = json.loads(observability.StructuredLogFormatter().format(record))

    assert payload["message"] == "loaded data"
    assert payload["event"] == "registry_loaded"
    assert payload["level"] == "INFO"
    assert payload["context"] == {"species_count": 3, "username": "tr***er"}


def test_get_logger_names_children() -> None:
    assert observability.get_logger().name == "pogo_ratings"
    assert observability.get_logger("engine").name == "pogo_ratings.engine"


def test_configure_logging_installs_handler_once(monkeypatch: pytest.MonkeyPatch) -> None:
    logger = logging.getLogger("pogo_ratings")
    original_handlers = list(logger.handlers)
    original_level = logger.level
    original_propagate = logger.propagate
    monkeypatch.setattr(observability, "_CONFIGURED", False)
    try:
        observability.configure_logging("DEBUG")
        observability.configure_logging()

        added = [handler for handler in logger.handlers if handler not in original_handlers]
        assert len(added) == 1
        assert isinstance(added[0].formatter, observability.StructuredLogFormatter)
        assert logger.level == logging.DEBUG
    finally:
        logger.handlers[:] = original_handlers
        logger.setLevel(original_level)
        logger.propagate = original_propagate
