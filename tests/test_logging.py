import json
import logging

import pytest
import structlog

from lightbnb.core.logging import setup_logging


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_json_logs_carry_event_and_fields(capsys, restore_logging):
    setup_logging(level="info", json_logs=True)
    structlog.get_logger().info("Property created", property_id=5)

    record = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert record["event"] == "Property created"
    assert record["property_id"] == 5
    assert record["level"] == "info"
    assert "timestamp" in record


def test_level_filters_lower_events(capsys, restore_logging):
    setup_logging(level="WARNING", json_logs=True)
    structlog.get_logger().info("Reservations listed")

    assert "Reservations listed" not in capsys.readouterr().out
