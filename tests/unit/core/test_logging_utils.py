"""
Unit tests for the logging utilities.
"""

import json
import logging

import pytest
import typer

from panaddr.core.logging_utils import (
    configure_logging,
    log_level_callback,
    log_structured,
)

logger = logging.getLogger("panaddr")


@pytest.fixture(autouse=True)
def restore_logging():
    yield
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()
    configure_logging(level="warning")


def test_json_file_output(tmp_path):
    log_path = tmp_path / "panaddr.json.log"
    configure_logging(level="info", log_file=str(log_path), json_format=True)

    log_structured("Generated 3 directives", "info", zone="DMZ", skipped=0)

    record = json.loads(log_path.read_text().splitlines()[-1])
    assert record["message"] == "Generated 3 directives"
    assert record["level"] == "INFO"
    assert record["zone"] == "DMZ"
    assert record["skipped"] == 0


def test_level_filters_records(tmp_path):
    log_path = tmp_path / "panaddr.log"
    configure_logging(level="warning", log_file=str(log_path), quiet=True)

    log_structured("hidden", "info")
    log_structured("shown", "warning")

    text = log_path.read_text()
    assert "hidden" not in text
    assert "WARNING - shown" in text


def test_quiet_removes_console_handler():
    configure_logging(level="info", quiet=True)
    assert not any(type(handler) is logging.StreamHandler for handler in logger.handlers)


def test_log_level_callback():
    assert log_level_callback(None) is None
    assert log_level_callback("DEBUG") == "debug"
    with pytest.raises(typer.BadParameter):
        log_level_callback("loud")
