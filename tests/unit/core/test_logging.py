"""Tests for structlog configuration."""

from __future__ import annotations

import json

import pytest
import structlog

from catalogd.core.logging import configure_logging
from catalogd.core.models.config import LogConfig


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_structured_output_is_json(self, capsys):
        configure_logging(LogConfig(level="INFO", structured=True))
        structlog.get_logger("test").info("Entity deleted", kind="module")

        line = capsys.readouterr().out.strip().splitlines()[-1]
        record = json.loads(line)
        assert record["event"] == "Entity deleted"
        assert record["kind"] == "module"
        assert record["level"] == "info"
        assert "timestamp" in record

    def test_level_filters_lower_events(self, capsys):
        configure_logging(LogConfig(level="WARNING"))
        logger = structlog.get_logger("test")
        logger.info("hidden")
        logger.warning("shown")

        out = capsys.readouterr().out
        assert "hidden" not in out
        assert "shown" in out

    def test_console_renderer(self, capsys):
        configure_logging(LogConfig(level="DEBUG", structured=False))
        structlog.get_logger("test").debug("console line", id="abc")

        out = capsys.readouterr().out
        assert "console line" in out
        assert "abc" in out

    def test_defaults(self, capsys):
        configure_logging()
        structlog.get_logger("test").debug("not at info")
        assert "not at info" not in capsys.readouterr().out
