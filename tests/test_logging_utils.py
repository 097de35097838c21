"""Tests for operator-facing log formatting."""

import logging
from datetime import datetime

import pytest

from ubuntu_provisioner.logging_utils import STEP, ConsoleFormatter, format_line, log

WHEN = datetime(2024, 3, 1, 9, 5, 7)


class TestFormatLine:
    def test_plain_line(self):
        assert format_line("INFO", "Starting", when=WHEN) == "[2024-03-01 09:05:07] [INFO] Starting"

    def test_warning_renders_as_warn(self):
        assert format_line("WARNING", "flaky", when=WHEN) == "[2024-03-01 09:05:07] [WARN] flaky"

    def test_color_wraps_the_line(self):
        line = format_line("ERROR", "dead", when=WHEN, color=True)
        assert line.startswith("\033[1;31m")
        assert line.endswith("\033[0m")
        assert "[ERROR] dead" in line

    def test_unknown_severity_is_not_colored(self):
        assert format_line("SETUP", "x", when=WHEN, color=True) == "[2024-03-01 09:05:07] [SETUP] x"


class TestConsoleFormatter:
    def test_step_record(self):
        record = logging.LogRecord("t", STEP, __file__, 1, "Installing %s", ("docker",), None)
        record.created = WHEN.timestamp()
        assert ConsoleFormatter().format(record) == "[2024-03-01 09:05:07] [STEP] Installing docker"


class TestLog:
    def test_step_level_is_registered(self):
        assert logging.getLevelName(STEP) == "STEP"

    def test_emits_at_named_severity(self, caplog):
        caplog.set_level(logging.DEBUG)
        log("STEP", "Pulling docker images")
        log("WARN", "slow mirror")
        levels = [(r.levelno, r.getMessage()) for r in caplog.records]
        assert (STEP, "Pulling docker images") in levels
        assert (logging.WARNING, "slow mirror") in levels

    def test_unknown_severity(self):
        with pytest.raises(ValueError):
            log("LOUD", "nope")
