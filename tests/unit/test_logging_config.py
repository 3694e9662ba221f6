"""Unit tests for shopsimulator logging configuration."""

from __future__ import annotations

import json
import logging
import os
from logging.handlers import RotatingFileHandler
from unittest import mock

import shopsimulator
from shopsimulator import ConstantValue, SimulationConfig, run_simulation
from shopsimulator.logging_config import LOGGER_NAME, JsonFormatter, _get_level, _get_logger


class TestSilentByDefault:

    def test_simulation_produces_no_log_output(self, capfd):
        """Running a simulation without enabling logging prints nothing to stderr."""
        config = SimulationConfig(num_servers=1, arrival_times=[0.0])
        run_simulation(config, service_time=ConstantValue(1.0), rest_time=ConstantValue(0.0))

        captured = capfd.readouterr()
        assert captured.err == ""

    def test_logger_has_null_handler(self):
        logger = logging.getLogger(LOGGER_NAME)
        assert any(isinstance(h, logging.NullHandler) for h in logger.handlers)


class TestEnableConsoleLogging:

    def test_sets_level(self):
        shopsimulator.enable_console_logging(level="DEBUG")

        assert _get_logger().level == logging.DEBUG

    def test_debug_logs_every_reported_event(self, capfd):
        """At DEBUG the engine logs each rendered event line."""
        shopsimulator.enable_console_logging(level="DEBUG", format="%(message)s")
        config = SimulationConfig(num_servers=1, arrival_times=[0.0])
        run_simulation(config, service_time=ConstantValue(1.0), rest_time=ConstantValue(0.0))

        err = capfd.readouterr().err
        assert "0.000 1 arrives" in err
        assert "1.000 1 done serving by 1" in err
        assert "Simulation finished" in err

    def test_info_hides_event_lines(self, capfd):
        shopsimulator.enable_console_logging(level="INFO", format="%(message)s")
        config = SimulationConfig(num_servers=1, arrival_times=[0.0])
        run_simulation(config, service_time=ConstantValue(1.0), rest_time=ConstantValue(0.0))

        err = capfd.readouterr().err
        assert "Simulation started" in err
        assert "arrives" not in err


class TestEnableFileLogging:

    def test_writes_to_file(self, tmp_path):
        log_file = tmp_path / "nested" / "shop.log"
        handler = shopsimulator.enable_file_logging(log_file, level="INFO", max_bytes=1024, backup_count=2)

        logging.getLogger(f"{LOGGER_NAME}.test").info("file test message")
        handler.flush()

        assert isinstance(handler, RotatingFileHandler)
        assert handler.maxBytes == 1024
        assert "file test message" in log_file.read_text()


class TestEnableJsonLogging:

    def test_outputs_valid_json(self, capfd):
        shopsimulator.enable_json_logging(level="INFO")

        logging.getLogger(f"{LOGGER_NAME}.test").info("json test")

        data = json.loads(capfd.readouterr().err.strip())
        assert data["message"] == "json test"
        assert data["level"] == "INFO"
        assert data["logger"] == f"{LOGGER_NAME}.test"

    def test_formatter_includes_exception(self):
        formatter = JsonFormatter()
        try:
            raise RuntimeError("queue overflow")
        except RuntimeError:
            import sys

            exc_info = sys.exc_info()
        record = logging.LogRecord("shopsimulator.x", logging.ERROR, "x.py", 1, "boom", (), exc_info)

        data = json.loads(formatter.format(record))
        assert "RuntimeError" in data["exception"]


class TestConfigureFromEnv:

    def test_respects_level_env(self):
        with mock.patch.dict(os.environ, {"SHOPSIM_LOGGING": "DEBUG"}, clear=False):
            shopsimulator.configure_from_env()

        assert _get_logger().level == logging.DEBUG

    def test_respects_log_file_env(self, tmp_path):
        log_file = tmp_path / "env.log"
        with mock.patch.dict(os.environ, {"SHOPSIM_LOG_FILE": str(log_file)}, clear=False):
            shopsimulator.configure_from_env()

        assert any(isinstance(h, RotatingFileHandler) for h in _get_logger().handlers)

    def test_does_nothing_without_env(self):
        initial = len(_get_logger().handlers)
        with mock.patch.dict(os.environ, {}, clear=True):
            shopsimulator.configure_from_env()

        assert len(_get_logger().handlers) == initial


class TestLevels:

    def test_set_level(self):
        shopsimulator.set_level("WARNING")
        assert _get_logger().level == logging.WARNING

    def test_get_level_default_for_invalid(self):
        assert _get_level("INVALID") == logging.INFO
        assert _get_level(logging.ERROR) == logging.ERROR

    def test_disable_logging(self, capfd):
        shopsimulator.enable_console_logging(level="DEBUG")
        shopsimulator.disable_logging()

        logging.getLogger(f"{LOGGER_NAME}.test").critical("should not appear")

        assert "should not appear" not in capfd.readouterr().err
        assert all(isinstance(h, logging.NullHandler) for h in _get_logger().handlers)
