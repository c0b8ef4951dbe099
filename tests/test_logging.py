"""Tests for structured logging functionality."""

from __future__ import annotations

import json
import logging
import logging.handlers
import sys

import pytest

from sitesettings.config import BaseConfig
from sitesettings.logging_config import JSONFormatter, get_logger, setup_logging


@pytest.fixture
def config(tmp_path, monkeypatch):
    monkeypatch.setenv("SITESETTINGS_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("SITESETTINGS_DEV_MODE", raising=False)
    cfg = BaseConfig()
    yield cfg
    logger = logging.getLogger("sitesettings")
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()


def _record(**kwargs) -> logging.LogRecord:
    defaults = dict(
        name="sitesettings.test",
        level=logging.INFO,
        pathname="test.py",
        lineno=42,
        msg="Test message",
        args=(),
        exc_info=None,
    )
    defaults.update(kwargs)
    return logging.LogRecord(**defaults)


def test_json_formatter():
    log_data = json.loads(JSONFormatter().format(_record()))

    assert log_data["level"] == "INFO"
    assert log_data["logger"] == "sitesettings.test"
    assert log_data["message"] == "Test message"
    assert log_data["line"] == 42
    assert "timestamp" in log_data
    assert "extra" not in log_data


def test_json_formatter_includes_extra_fields():
    record = _record()
    record.slug = "site_name"

    log_data = json.loads(JSONFormatter().format(record))

    assert log_data["extra"] == {"slug": "site_name"}


def test_json_formatter_with_exception():
    try:
        raise ValueError("Test error")
    except ValueError:
        exc_info = sys.exc_info()

    log_data = json.loads(JSONFormatter().format(_record(level=logging.ERROR, exc_info=exc_info)))

    assert log_data["exception"]["type"] == "ValueError"
    assert "Test error" in log_data["exception"]["message"]
    assert log_data["exception"]["traceback"]


def test_setup_logging_writes_json_file(config, tmp_path):
    logger = setup_logging(config)

    assert logger.name == "sitesettings"
    assert len(logger.handlers) == 2

    get_logger("store").warning("Something odd", extra={"slug": "x"})
    for handler in logger.handlers:
        handler.flush()

    lines = (tmp_path / "logs" / "sitesettings.log").read_text(encoding="utf-8").splitlines()
    entries = [json.loads(line) for line in lines if line.strip()]
    assert entries[0]["message"] == "Logging initialized"
    assert entries[-1]["logger"] == "sitesettings.store"
    assert entries[-1]["extra"] == {"slug": "x"}


@pytest.mark.parametrize("dev_mode", [True, False])
def test_console_level_follows_dev_mode(config, dev_mode):
    config.DEV_MODE = dev_mode

    logger = setup_logging(config)

    console = [
        h
        for h in logger.handlers
        if isinstance(h, logging.StreamHandler) and not isinstance(h, logging.handlers.RotatingFileHandler)
    ]
    assert len(console) == 1
    assert console[0].level == (logging.INFO if dev_mode else logging.WARNING)


def test_get_logger_namespacing():
    assert get_logger("store").name == "sitesettings.store"
    assert get_logger("sitesettings.services.settings_store").name == "sitesettings.services.settings_store"
