"""Tests for structured logging configuration."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import structlog

from termsearch.infrastructure.logging import configure_logging

if TYPE_CHECKING:
    import pytest


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def teardown_method(self) -> None:
        structlog.reset_defaults()

    def test_warnings_shown_by_default(self, capsys: pytest.CaptureFixture) -> None:
        configure_logging()

        structlog.get_logger("test").warning("something_odd", detail="x")

        err = capsys.readouterr().err
        assert "something_odd" in err

    def test_debug_hidden_by_default(self, capsys: pytest.CaptureFixture) -> None:
        configure_logging()

        structlog.get_logger("test").debug("noisy_detail")

        assert "noisy_detail" not in capsys.readouterr().err

    def test_debug_shown_when_enabled(self, capsys: pytest.CaptureFixture) -> None:
        configure_logging(debug=True)

        structlog.get_logger("test").debug("noisy_detail")

        assert "noisy_detail" in capsys.readouterr().err

    def test_quiet_hides_warnings(self, capsys: pytest.CaptureFixture) -> None:
        configure_logging(quiet=True)

        structlog.get_logger("test").warning("something_odd")

        assert "something_odd" not in capsys.readouterr().err

    def test_json_output(self, capsys: pytest.CaptureFixture) -> None:
        configure_logging(json_logs=True)

        structlog.get_logger("test").warning("config_invalid_json", path="/tmp/x")

        record = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert record["event"] == "config_invalid_json"
        assert record["level"] == "warning"
        assert record["path"] == "/tmp/x"

    def test_logs_do_not_touch_stdout(self, capsys: pytest.CaptureFixture) -> None:
        configure_logging(debug=True)

        structlog.get_logger("test").info("search_complete")

        assert capsys.readouterr().out == ""


class TestBoundLogger:
    """Tests for loggers with bound context."""

    def teardown_method(self) -> None:
        structlog.reset_defaults()

    def test_bound_values_in_record(self, capsys: pytest.CaptureFixture) -> None:
        configure_logging(json_logs=True)

        structlog.get_logger("test").bind(term="apple").warning("bound")

        record = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert record["term"] == "apple"
