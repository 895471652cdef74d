import json
import logging

import pytest

from hoshi.config import Settings
from hoshi.logging_config import (
    LOGGER_NAMESPACE,
    configure_from_settings,
    configure_logging,
    get_logger,
)


@pytest.fixture
def restore_logging():
    yield
    configure_logging(level="WARNING", colors=False, propagate=True)


def test_json_log_file(tmp_path, restore_logging):
    log_file = tmp_path / "logs" / "hoshi.log"
    namespace = configure_logging(level="INFO", json_output=True, log_file=log_file)

    get_logger("hoshi.test").info("listener_added", event_name="ready", count=2)
    for handler in namespace.handlers:
        handler.flush()

    line = log_file.read_text(encoding="utf-8").strip().splitlines()[-1]
    payload = json.loads(line)
    assert payload["event"] == "listener_added"
    assert payload["event_name"] == "ready"
    assert payload["count"] == 2
    assert payload["level"] == "info"
    assert payload["logger"] == "hoshi.test"
    assert "timestamp" in payload


def test_level_filters_records(tmp_path, restore_logging):
    log_file = tmp_path / "hoshi.log"
    namespace = configure_logging(level="ERROR", json_output=True, log_file=log_file)

    logger = get_logger("hoshi.test")
    logger.warning("dropped")
    logger.error("kept")
    for handler in namespace.handlers:
        handler.flush()

    content = log_file.read_text(encoding="utf-8")
    assert "kept" in content
    assert "dropped" not in content


def test_reconfigure_replaces_handler(restore_logging):
    configure_logging(level="INFO")
    namespace = configure_logging(level="INFO")

    assert len(namespace.handlers) == 1
    assert namespace.propagate is False


def test_configure_from_settings_sets_level(restore_logging):
    namespace = configure_from_settings(Settings(log_level="DEBUG"))

    assert namespace is logging.getLogger(LOGGER_NAMESPACE)
    assert namespace.level == logging.DEBUG


def test_root_logger_is_left_alone(restore_logging):
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level

    configure_logging(level="DEBUG")

    assert root.handlers == handlers
    assert root.level == level
